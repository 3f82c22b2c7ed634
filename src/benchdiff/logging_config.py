"""Logging configuration for benchdiff.

Provides JSON or text logging on stderr so that stdout only carries the
comparison table. Configure via --log-level/--log-format, BENCHDIFF_*
environment variables or the YAML config file.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger


def _build_json_formatter() -> logging.Formatter:
    fields = [
        "asctime",
        "levelname",
        "name",
        "message",
        "module",
        "funcName",
        "lineno",
    ]
    fmt = " ".join([f"%({f})s" for f in fields])
    return jsonlogger.JsonFormatter(fmt=fmt)


def configure_logging(level: str = "WARNING", fmt: str = "text") -> None:
    level_upper = level.upper()
    log_level = getattr(logging, level_upper, logging.WARNING)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Remove previously installed handlers to avoid duplicate logs
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(_build_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
    root.addHandler(handler)
