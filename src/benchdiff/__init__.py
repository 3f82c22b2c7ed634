"""
benchdiff - compare two benchmark reports and show the relative change.
"""

__version__ = "0.1.0"

from .models import Diff, LineFailure, Mode, ParseFailure, ParseResult, Record
from .parser import parse_block, parse_file, parse_line, parse_report
from .differ import ZeroBaselinePolicy, calculate_delta, compare_results

__all__ = [
    "__version__",
    "Diff",
    "LineFailure",
    "Mode",
    "ParseFailure",
    "ParseResult",
    "Record",
    "ZeroBaselinePolicy",
    "calculate_delta",
    "compare_results",
    "parse_block",
    "parse_file",
    "parse_line",
    "parse_report",
]
