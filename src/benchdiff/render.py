"""Rich table output for benchmark diffs."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import TableStyle
from .models import Diff

HEADERS = ("name", "mode", "old score", "new score", "units", "diff")
NUMERIC_COLUMNS = {"old score", "new score", "diff"}

_BOXES = {
    TableStyle.BLANK: None,
    TableStyle.SIMPLE: box.SIMPLE,
    TableStyle.ROUNDED: box.ROUNDED,
    TableStyle.ASCII: box.ASCII,
}


def format_score(value: float) -> str:
    """Shortest plain decimal form of a score: ``100``, ``0.5``, ``10000000000000000``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _diff_style(diff: Diff) -> str:
    if not diff.is_finite:
        return "bold magenta"
    if diff.diff > 0:
        return "green"
    if diff.diff < 0:
        return "red"
    return ""


def build_table(
    diffs: Iterable[Diff],
    precision: int = 5,
    style: TableStyle = TableStyle.BLANK,
) -> Table:
    table = Table(box=_BOXES[TableStyle(style)], show_edge=False, pad_edge=False)
    for header in HEADERS:
        table.add_column(header, justify="right" if header in NUMERIC_COLUMNS else "left")

    for diff in diffs:
        table.add_row(
            diff.name,
            str(diff.mode),
            format_score(diff.old_score),
            format_score(diff.new_score),
            diff.units,
            Text(diff.percent(precision), style=_diff_style(diff)),
        )
    return table


def render_diffs(
    diffs: Iterable[Diff],
    console: Optional[Console] = None,
    precision: int = 5,
    style: TableStyle = TableStyle.BLANK,
) -> None:
    console = console or Console(highlight=False)
    console.print(build_table(diffs, precision=precision, style=style))
