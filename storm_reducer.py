from __future__ import annotations

from typing import Callable, Optional

from core_models import KNOTS_TO_KMH, StormBlock, StormSummary, WindSample
from track_errors import DataParseError
from track_parsers import DataLineMatcher, DataLineParser

SampleCallback = Callable[[WindSample], None]


class StormReducer:
    """
    Reduces a closed storm block to its peak sustained wind.

    Every data line must parse; the first one that does not raises
    DataParseError with its absolute line number in the track file.
    """
    def __init__(
        self,
        data_parser: DataLineMatcher | None = None,
        on_sample: Optional[SampleCallback] = None,
    ) -> None:
        self.data_parser: DataLineMatcher = data_parser or DataLineParser()
        self.on_sample = on_sample

    def reduce(self, block: StormBlock) -> StormSummary:
        max_knots = 0
        position = 0
        for line in block.data_lines:
            position += 1
            sample = self.data_parser.parse(line)
            if sample is None:
                raise DataParseError(block.header_line_number + position, line)
            if self.on_sample is not None:
                self.on_sample(sample)
            if sample.speed_knots > max_knots:
                max_knots = sample.speed_knots
        return StormSummary(name=block.name, max_speed_kmh=max_knots * KNOTS_TO_KMH)
