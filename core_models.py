from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

KNOTS_TO_KMH = 1.852


@dataclass
class StormBlock:
    '''one header line and the data lines that follow it'''
    name: str
    declared_year: int
    expected_data_line_count: int
    header_line_number: int
    qualifies: bool = False
    data_lines: List[str] = field(default_factory=list)

    @property
    def collected_count(self) -> int:
        return len(self.data_lines)


@dataclass(frozen=True)
class WindSample:
    observation_date: str            # YYYYMMDD
    observation_hour: str            # HHMM, kept as written
    speed_knots: int

    @property
    def speed_kmh(self) -> float:
        return self.speed_knots * KNOTS_TO_KMH


@dataclass(frozen=True)
class StormSummary:
    name: str
    max_speed_kmh: float
