import logging
import os

import pytest

# ----------------------------------------------------------------------
# Sample reports
# ----------------------------------------------------------------------
OLD_REPORT = """\
# JMH version: 1.37
# VM version: JDK 17.0.8, OpenJDK 64-Bit Server VM
# Benchmark mode: Throughput, ops/time

Result "bench.Parse.small":
  100.000 ±(99.9%) 1.000 ops/s [Average]

Benchmark           Mode  Cnt    Score   Error  Units
bench.Parse.small  thrpt    5  100.000 ± 1.000  ops/s
bench.Parse.large  thrpt    5   40.000 ± 0.500  ops/s
bench.Write.avg     avgt    5    2.000 ± 0.010  ms/op
bench.Gone.only    thrpt    5   10.000 ± 0.100  ops/s
"""

NEW_REPORT = """\
# JMH version: 1.37
# VM version: JDK 17.0.8, OpenJDK 64-Bit Server VM
# Benchmark mode: Throughput, ops/time

Benchmark           Mode  Cnt    Score   Error  Units
bench.Parse.small  thrpt    5  110.000 ± 1.000  ops/s
bench.Parse.large  thrpt    5   30.000 ± 0.500  ops/s
bench.Write.avg     avgt    5    2.000 ± 0.010  ms/op
bench.Added.only   thrpt    5   99.000 ± 0.100  ops/s
"""


@pytest.fixture
def old_report_text():
    return OLD_REPORT


@pytest.fixture
def new_report_text():
    return NEW_REPORT


@pytest.fixture
def write_report(tmp_path):
    """Write report text to a file under tmp_path and return its path."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def report_files(write_report):
    """(old, new) report paths with the sample contents."""
    return write_report("old.txt", OLD_REPORT), write_report("new.txt", NEW_REPORT)


# ----------------------------------------------------------------------
# The CLI reconfigures the root logger; put it back after every test
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep BENCHDIFF_* variables and stray .env files out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("BENCHDIFF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
