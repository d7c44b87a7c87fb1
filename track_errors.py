from __future__ import annotations

from pathlib import Path


class TrackError(Exception):
    '''base class for every error that ends a run'''


class InputUnavailableError(TrackError):
    '''when the track file is missing or cannot be opened'''

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Data file {path} not found.")


class TrackIOError(TrackError):
    '''when reading an already opened track file fails'''

    def __init__(self) -> None:
        super().__init__("I/O error while reading data from datafile.")


class TrackParseError(TrackError):
    def __init__(self, location: str, line_number: int, line: str) -> None:
        self.location = location         # "header" or "data"
        self.line_number = line_number
        self.line = line
        super().__init__(f"Parse error while reading a {location} line (#{line_number}): {line}")


class HeaderParseError(TrackParseError):
    '''when a line expected to be a header does not match the header format'''

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("header", line_number, line)


class DataParseError(TrackParseError):
    '''when a line inside a storm block does not match the data format'''

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("data", line_number, line)
