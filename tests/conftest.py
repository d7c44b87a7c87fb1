from __future__ import annotations

import io
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from reporter import ConsoleReporter

SAMPLE_TRACK = """\
EP012009,            ANDRES,      3,
20090621, 0000,  , TD, 14.5N, 100.5W,  30, 1006,
20090621, 0600,  , TS, 15.0N, 101.0W,  45, 1003,
20090621, 1200, L, TS, 15.6N, 101.6W,  40, 1004,
EP022008,             BORIS,      2,
20080627, 0000,  , TD, 11.8N, 109.0W,  25, 1007,
20080627, 0600,  , TS, 12.0N, 109.5W,  35, 1005,
CP012009,              LANA,      2,
20090730, 0000,  , HU, 13.0N, 140.0W,  65,  990,
20090730, 0600,  , HU, 13.2N, 141.0W,  80,  980,
"""


def numbered(text: str):
    return list(enumerate(text.splitlines(), start=1))


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TRACK


@pytest.fixture
def track_file(tmp_path: Path) -> Path:
    path = tmp_path / "hurdat2-sample.txt"
    path.write_text(SAMPLE_TRACK, encoding="utf-8")
    return path


@pytest.fixture
def make_reporter():
    def _make(verbosity: int = 0):
        out, err = io.StringIO(), io.StringIO()
        return ConsoleReporter(verbosity, out=out, err=err), out, err
    return _make
