"""CLI entry point for benchdiff."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from benchdiff import __version__
from benchdiff.config import DiffConfig, LogFormat, TableStyle
from benchdiff.differ import ZeroBaselinePolicy, compare_results
from benchdiff.errors import ConfigError
from benchdiff.logging_config import configure_logging
from benchdiff.parser import parse_file
from benchdiff.render import render_diffs
from benchdiff.settings import AppSettings

logger = logging.getLogger(__name__)

SKIPPED_ROWS_NOTICE = (
    "There were some errors found while parsing the benchmark results, "
    "ignoring those rows and continuing"
)


def _load_config(config_path: Optional[str], overrides: Dict[str, Any]) -> DiffConfig:
    base = DiffConfig.from_file(config_path) if config_path else DiffConfig()
    try:
        config = AppSettings().to_runtime_config(base)
        cli_values = {k: v for k, v in overrides.items() if v is not None}
        return DiffConfig.model_validate({**config.model_dump(), **cli_values})
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="benchdiff")
@click.argument("old_file", type=click.Path(dir_okay=False))
@click.argument("new_file", type=click.Path(dir_okay=False))
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False), help="Path to YAML config")
@click.option("--log-level", default=None, help="Log level (overrides config and env)")
@click.option("--log-format", default=None, type=click.Choice([f.value for f in LogFormat]))
@click.option("--precision", default=None, type=click.IntRange(0, 12), help="Decimal places of the diff column")
@click.option(
    "--zero-baseline",
    default=None,
    type=click.Choice([p.value for p in ZeroBaselinePolicy]),
    help="How to report a benchmark whose old score is zero",
)
@click.option("--table-style", default=None, type=click.Choice([s.value for s in TableStyle]))
def main(
    old_file: str,
    new_file: str,
    config_path: Optional[str],
    log_level: Optional[str],
    log_format: Optional[str],
    precision: Optional[int],
    zero_baseline: Optional[str],
    table_style: Optional[str],
) -> None:
    """Compare two benchmark reports, OLD_FILE and NEW_FILE.

    Prints the relative score change of every benchmark present in both.
    """
    config = _load_config(
        config_path,
        {
            "log_level": log_level,
            "log_format": log_format,
            "precision": precision,
            "zero_baseline": zero_baseline,
            "table_style": table_style,
        },
    )
    configure_logging(config.log_level, config.log_format.value)
    logger.debug("Running with %s", config)

    new_results = parse_file(new_file, role="new")
    old_results = parse_file(old_file, role="old")

    if not (old_results.ok and new_results.ok):
        click.echo(SKIPPED_ROWS_NOTICE, err=True)

    diffs = compare_results(old_results.records, new_results.records, config.zero_baseline)
    render_diffs(diffs, precision=config.precision, style=config.table_style)


if __name__ == "__main__":
    main()
