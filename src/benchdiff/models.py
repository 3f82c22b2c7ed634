"""Data models for parsed benchmark reports."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .errors import LineParseError


class ParseFailure(Enum):
    """Why a single report line could not become a Record."""
    INVALID_MODE = "invalid_mode"
    INVALID_FLOAT_VALUE = "invalid_float_value"
    INVALID_INTEGER_VALUE = "invalid_integer_value"
    MISSING_NAME_FIELD = "missing_name_field"
    # Also used for any required field after the name: count, score, error, units.
    MISSING_COUNT_FIELD = "missing_count_field"

    @property
    def description(self) -> str:
        return _FAILURE_DESCRIPTIONS[self]


_FAILURE_DESCRIPTIONS = {
    ParseFailure.INVALID_MODE: "unknown or missing benchmark mode",
    ParseFailure.INVALID_FLOAT_VALUE: "value is not a number",
    ParseFailure.INVALID_INTEGER_VALUE: "count is not an integer",
    ParseFailure.MISSING_NAME_FIELD: "line has no benchmark name",
    ParseFailure.MISSING_COUNT_FIELD: "line is missing a required column",
}


class Mode(str, Enum):
    """Benchmark execution modes, valued by their report token."""
    AVERAGE_TIME = "avgt"
    SAMPLE_TIME = "sample"
    SINGLE_SHOT_TIME = "ss"
    THROUGHPUT = "thrpt"

    @classmethod
    def parse(cls, token: str) -> "Mode":
        """Case-insensitive lookup of a mode token."""
        try:
            return cls(token.lower())
        except ValueError:
            raise LineParseError(ParseFailure.INVALID_MODE, token) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Record:
    """One benchmark measurement parsed from a report line."""

    name: str
    mode: Mode
    count: int
    score: float
    error: float
    units: str

    @property
    def key(self) -> Tuple[str, str]:
        """Identity used to match records across two reports."""
        return (self.name, self.units)


@dataclass(frozen=True)
class Diff:
    """Relative change between a matched old and new record."""

    name: str
    mode: Mode
    old_score: float
    new_score: float
    units: str
    diff: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.diff)

    def percent(self, precision: int = 5) -> str:
        """Signed percentage string, e.g. ``+3.14159%``."""
        if math.isnan(self.diff):
            return "nan%"
        if math.isinf(self.diff):
            return "+inf%" if self.diff > 0 else "-inf%"
        return f"{self.diff * 100.0:+.{precision}f}%"


@dataclass(frozen=True)
class LineFailure:
    """A skipped report line, kept for diagnostics."""

    line_number: int
    text: str
    reason: ParseFailure


@dataclass
class ParseResult:
    """Records parsed from one report plus the lines that were skipped."""

    records: List[Record] = field(default_factory=list)
    failures: List[LineFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failure_count(self) -> int:
        return len(self.failures)
