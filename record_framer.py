'''
Splits a track file into storm blocks.

A header declares how many data lines follow it; the framer trusts that count
and never looks for an end-of-block marker. Blocks from other years are still
counted down line by line but their lines are dropped unread.
'''
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from core_models import StormBlock
from track_errors import HeaderParseError
from track_parsers import HeaderLine, HeaderMatcher, HeaderParser

IgnoredCallback = Callable[[HeaderLine], None]


class FramerState(Enum):
    AWAITING_HEADER = "awaiting_header"
    IN_BLOCK = "in_block"


class RecordFramer:
    def __init__(
        self,
        lookup_year: int,
        header_parser: HeaderMatcher | None = None,
        on_ignored: Optional[IgnoredCallback] = None,
    ) -> None:
        self.lookup_year = lookup_year
        self.header_parser: HeaderMatcher = header_parser or HeaderParser()
        self.on_ignored = on_ignored
        self.state = FramerState.AWAITING_HEADER
        self.remaining = 0
        self._block: Optional[StormBlock] = None

    def feed(self, line_number: int, line: str) -> Optional[StormBlock]:
        '''Consume one line; return a qualifying block when this line closes it.'''
        if self.state is FramerState.AWAITING_HEADER:
            return self._open_block(line_number, line)

        block = self._block
        self.remaining -= 1
        if block is not None and block.qualifies:
            block.data_lines.append(line)
        if self.remaining == 0:
            return self._close()
        return None

    def finish(self) -> Optional[StormBlock]:
        '''End of input: hand over a block cut short, if it qualifies.'''
        if self.state is FramerState.IN_BLOCK:
            return self._close()
        return None

    def _open_block(self, line_number: int, line: str) -> Optional[StormBlock]:
        header = self.header_parser.parse(line)
        if header is None:
            raise HeaderParseError(line_number, line)

        qualifies = header.year == self.lookup_year
        if not qualifies and self.on_ignored is not None:
            self.on_ignored(header)

        self._block = StormBlock(
            name=header.name,
            declared_year=header.year,
            expected_data_line_count=header.data_line_count,
            header_line_number=line_number,
            qualifies=qualifies,
        )
        self.remaining = header.data_line_count
        self.state = FramerState.IN_BLOCK
        if self.remaining == 0:
            return self._close()
        return None

    def _close(self) -> Optional[StormBlock]:
        block = self._block
        self._block = None
        self.remaining = 0
        self.state = FramerState.AWAITING_HEADER
        if block is not None and block.qualifies:
            return block
        return None
