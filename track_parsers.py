'''
Line matchers for the HURDAT2 track format.

Header line:  EP012009,            ANDRES,     23,
Data line:    20090621, 0000,  , TD, 14.5N, 100.5W,  30, 1006,  ...

Only the storm id year, name and line count are taken from a header; only the
date, hour and maximum sustained wind are taken from a data line. Anything
after the wind column is never looked at.
'''
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, Sequence

import config
from core_models import WindSample

DATA_RE = re.compile(
    r"(?P<date>\d{8})\s*,"
    r"\s*(?P<hour>\d{4})\s*,"
    r"\s*[CGILPRSTW]?\s*,"                               # record identifier
    r"\s*(?:TD|TS|HU|EX|SD|SS|LO|WV|DB)?\s*,"            # status of system
    r"\s*[-+]?[0-9]*\.?[0-9]+[NS]\s*,"
    r"\s*[-+]?[0-9]*\.?[0-9]+[EW]\s*,"
    r"\s*(?P<speed>\d+)"
)

_BASIN_RE = re.compile(r"[A-Z]{2}")


@dataclass(frozen=True)
class HeaderLine:
    year: int
    name: str
    data_line_count: int


class HeaderMatcher(Protocol):
    def parse(self, line: str) -> HeaderLine | None:
        ...


class DataLineMatcher(Protocol):
    def parse(self, line: str) -> WindSample | None:
        ...


def build_header_pattern(basins: Sequence[str]) -> re.Pattern[str]:
    if not basins:
        raise ValueError("at least one basin code is required")
    for code in basins:
        if not _BASIN_RE.fullmatch(code):
            raise ValueError(f"basin code must be two uppercase letters: {code!r}")
    alternatives = "|".join(re.escape(code) for code in basins)
    return re.compile(
        rf"(?:{alternatives})\d{{2}}(?P<year>\d{{4}})\s*,"
        r"\s*(?P<name>.*?)\s*,"
        r"\s*(?P<count>\d+)\s*,"
    )


class HeaderParser:
    def __init__(self, basins: Sequence[str] = config.DEFAULT_BASINS) -> None:
        self.basins = tuple(basins)
        self.pattern = build_header_pattern(self.basins)

    def parse(self, line: str) -> HeaderLine | None:
        m = self.pattern.fullmatch(line.strip())
        if m is None:
            return None
        return HeaderLine(
            year=int(m.group("year")),
            name=m.group("name").strip(),
            data_line_count=int(m.group("count")),
        )


class DataLineParser:
    def parse(self, line: str) -> WindSample | None:
        # prefix match: trailing columns are not validated
        m = DATA_RE.match(line)
        if m is None:
            return None
        return WindSample(
            observation_date=m.group("date"),
            observation_hour=m.group("hour"),
            speed_knots=int(m.group("speed")),
        )
