"""
Report parsing
~~~~~~~~~~~~~~

Turns the text of a benchmark report into :class:`Record` objects.

A report is made of blocks separated by a blank line. Only the last
block is the results table; anything before it (run parameters, warmup
output, ...) is ignored. The first line of that block is the column
header and is never parsed. Every other line has the columns::

    name  mode  count  score  <skipped>  error  units

A line that does not fit is skipped and recorded as a
:class:`LineFailure`; it never aborts the rest of the report.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, TypeVar, Union

from .errors import LineParseError, ReportReadError
from .models import LineFailure, Mode, ParseFailure, ParseResult, Record

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"

T = TypeVar("T", int, float)


def _require(fields: Iterator[str], failure: ParseFailure) -> str:
    token = next(fields, None)
    if token is None:
        raise LineParseError(failure)
    return token


def _number(token: str, convert: Callable[[str], T], failure: ParseFailure) -> T:
    # int()/float() also take digit separators and non-ASCII digits; reports use neither
    if "_" in token or not token.isascii():
        raise LineParseError(failure, token)
    try:
        return convert(token)
    except ValueError:
        raise LineParseError(failure, token) from None


def parse_line(line: str) -> Record:
    """Parse one data line into a Record.

    Raises :class:`LineParseError` for the first missing or invalid
    column, reading left to right.
    """
    fields = iter(line.split())

    name = _require(fields, ParseFailure.MISSING_NAME_FIELD)
    mode = Mode.parse(_require(fields, ParseFailure.INVALID_MODE))
    count = _number(
        _require(fields, ParseFailure.MISSING_COUNT_FIELD),
        int,
        ParseFailure.INVALID_INTEGER_VALUE,
    )
    score = _number(
        _require(fields, ParseFailure.MISSING_COUNT_FIELD),
        float,
        ParseFailure.INVALID_FLOAT_VALUE,
    )
    # the column between score and error (usually "±") is not used
    next(fields, None)
    error = _number(
        _require(fields, ParseFailure.MISSING_COUNT_FIELD),
        float,
        ParseFailure.INVALID_FLOAT_VALUE,
    )
    units = _require(fields, ParseFailure.MISSING_COUNT_FIELD)

    return Record(name=name, mode=mode, count=count, score=score, error=error, units=units)


def try_parse_line(line: str) -> Union[Record, ParseFailure]:
    """Like :func:`parse_line` but returns the failure instead of raising."""
    try:
        return parse_line(line)
    except LineParseError as exc:
        return exc.failure


def select_last_block(content: str) -> str:
    return content.split(BLOCK_SEPARATOR)[-1]


def _split_lines(block: str) -> List[str]:
    lines = block.split("\n")
    # a trailing newline terminates the last line, it does not start a new one
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_block(block: str) -> ParseResult:
    """Parse every line of a results table except its header line."""
    result = ParseResult()
    for number, line in enumerate(_split_lines(block)):
        if number == 0:
            continue
        outcome = try_parse_line(line)
        if isinstance(outcome, Record):
            result.records.append(outcome)
        else:
            logger.debug("Skipping line %d (%s): %r", number, outcome.description, line)
            result.failures.append(LineFailure(number, line, outcome))
    return result


def parse_report(content: str) -> ParseResult:
    """Parse the last block of a report's text."""
    return parse_block(select_last_block(content))


def parse_file(path: Union[str, Path], role: Optional[str] = None) -> ParseResult:
    """Read a report from disk and parse it.

    ``role`` ("old" or "new") only appears in the error message when the
    file cannot be read.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportReadError(role, path, exc) from exc

    result = parse_report(content)
    logger.info(
        "Parsed %s: %d records, %d skipped lines",
        path, len(result.records), result.failure_count,
    )
    return result
