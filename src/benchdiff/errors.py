"""Error types for benchdiff with friendly, actionable messages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import click

if TYPE_CHECKING:
    from .models import ParseFailure


class BenchDiffError(click.ClickException):
    """Base class for all CLI-visible errors with enhanced formatting."""

    #: Short, actionable suggestion shown after the main message.
    #: Sub-classes set this in __init__.
    hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint

    @property
    def formatted_message(self) -> str:
        """
        Returns the final string that Click writes to stderr.
        Includes:
        * main message (bold red)
        * optional hint on a new line (yellow)
        """
        lines = [click.style(f"Error: {self.message}", fg="red", bold=True)]
        if self.hint:
            lines.append(click.style(self.hint, fg="yellow"))
        return "\n".join(lines)

    # Click calls show to emit the message.
    def show(self, file=None) -> None:
        click.echo(self.formatted_message, err=True, file=file)


class ReportReadError(BenchDiffError):
    """Raised when a benchmark report cannot be read at all."""

    def __init__(self, role: Optional[str], path: Union[str, Path], cause: Exception):
        self.role = role
        self.path = str(path)
        self.cause = cause
        hint = f"Make sure {click.style(self.path, fg='cyan')} exists and is readable UTF-8 text."
        which = f"{role} " if role else ""
        super().__init__(f"Problem parsing {which}benchmarks file: {cause}", hint)


class ZeroBaselineError(BenchDiffError):
    """Raised when a matched old score is zero and the policy forbids it."""

    def __init__(self, name: str, units: str):
        self.name = name
        self.units = units
        hint = (
            f"Use {click.style('--zero-baseline propagate', fg='cyan')} "
            "to report the change as infinite instead."
        )
        super().__init__(
            f"Old score for {click.style(name, fg='magenta')} ({units}) is zero; "
            "relative change is undefined.",
            hint,
        )


class ConfigError(BenchDiffError):
    """Raised when there's a configuration problem."""

    def __init__(self, details: str):
        hint = (
            f"Check the command line flags, the {click.style('BENCHDIFF_*', fg='cyan')} "
            f"environment variables and the file passed with {click.style('--config', fg='cyan')}."
        )
        super().__init__(f"Configuration problem: {details}", hint)


class LineParseError(ValueError):
    """A single report line could not be turned into a record.

    Only ever raised inside the parser; batch parsing converts it into a
    recorded failure and moves on to the next line.
    """

    def __init__(self, failure: "ParseFailure", line: str = ""):
        self.failure = failure
        self.line = line
        super().__init__(f"{failure.description}: {line!r}")
