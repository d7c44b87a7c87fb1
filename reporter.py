from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import config
from core_models import StormBlock, StormSummary, WindSample
from track_errors import TrackParseError
from track_parsers import HeaderLine


class ConsoleReporter:
    '''Writes results to stdout and diagnostics to stderr, gated by verbosity.'''

    def __init__(
        self,
        verbosity: int = config.DEFAULT_VERBOSITY,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.verbosity = verbosity
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _print(self, text: str) -> None:
        print(text, file=self.out)

    def _diag(self, text: str) -> None:
        print(text, file=self.err)

    def opening_file(self, path: Path) -> None:
        if self.verbosity >= 2:
            self._diag(f"Opening file {path.absolute()}")

    def storm_ignored(self, header: HeaderLine) -> None:
        if self.verbosity >= 1:
            self._print(f"Ignoring hurricane {header.name} of {header.year}.")

    def wind_sample(self, sample: WindSample) -> None:
        if self.verbosity >= 2:
            self._print(
                f"Wind speed at {sample.observation_hour} o'clock was at {sample.speed_kmh:.2f} km/h."
            )

    def storm_summary(self, summary: StormSummary) -> None:
        self._print(f"Hurricane {summary.name} with max speed of {summary.max_speed_kmh:.2f} km/h.")

    def truncated_block(self, block: StormBlock) -> None:
        if self.verbosity >= 1:
            self._diag(
                f"[WARN] Hurricane {block.name} declared {block.expected_data_line_count} data lines "
                f"but the input ended after {block.collected_count}."
            )

    def no_results(self) -> None:
        self._print("No hurricanes found for the requested year.")

    def parse_error(self, exc: TrackParseError) -> None:
        self._diag(f"[ERROR] Parse error while reading a {exc.location} line.")
        self._diag(f"[ERROR] Offending line #{exc.line_number}: {exc.line}")

    def error(self, message: str) -> None:
        self._diag(f"[ERROR] {message}")
