'''
One pass over a track file for a single lookup year.

ParseSession owns all run state: the "year found" flag and the summaries
emitted so far. The framer holds the single block in flight.
'''
from __future__ import annotations

from typing import Iterable, List, Tuple

import config
from core_models import StormBlock, StormSummary
from record_framer import RecordFramer
from reporter import ConsoleReporter
from storm_reducer import StormReducer
from track_parsers import DataLineMatcher, DataLineParser, HeaderMatcher, HeaderParser


class ParseSession:
    def __init__(
        self,
        lookup_year: int = config.DEFAULT_YEAR,
        reporter: ConsoleReporter | None = None,
        header_parser: HeaderMatcher | None = None,
        data_parser: DataLineMatcher | None = None,
    ) -> None:
        self.lookup_year = lookup_year
        self.reporter = reporter or ConsoleReporter()
        self.year_found = False
        self.summaries: List[StormSummary] = []
        self.framer = RecordFramer(
            lookup_year,
            header_parser or HeaderParser(),
            on_ignored=self.reporter.storm_ignored,
        )
        self.reducer = StormReducer(
            data_parser or DataLineParser(),
            on_sample=self.reporter.wind_sample,
        )

    def run(self, lines: Iterable[Tuple[int, str]]) -> List[StormSummary]:
        """
        Feed numbered lines through framer and reducer.

        Summaries are reported as each block closes. Parse errors propagate
        immediately; whatever was reported before them stands.
        """
        for line_number, line in lines:
            block = self.framer.feed(line_number, line)
            if block is not None:
                self._reduce(block)

        block = self.framer.finish()
        if block is not None:
            self.reporter.truncated_block(block)
            self._reduce(block)

        if not self.year_found:
            self.reporter.no_results()
        return self.summaries

    def _reduce(self, block: StormBlock) -> None:
        summary = self.reducer.reduce(block)
        self.summaries.append(summary)
        self.year_found = True
        self.reporter.storm_summary(summary)
