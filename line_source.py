from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import IO, Iterator, Optional, Tuple, Type

import config
from track_errors import InputUnavailableError, TrackIOError


class TrackFileReader:
    """
    Sequential reader over a track file, yielding (line_number, text) pairs.

    Line numbers are 1-based and the trailing newline is removed. Use it as a
    context manager so the file is closed on every exit path:

        with TrackFileReader(path) as reader:
            for number, line in reader:
                ...
    """
    def __init__(self, path: str | Path, encoding: str = config.DEFAULT_ENCODING) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._handle: Optional[IO[str]] = None

    def open(self) -> None:
        try:
            self._handle = self.path.open("r", encoding=self.encoding)
        except OSError as exc:
            raise InputUnavailableError(self.path.absolute()) from exc

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> TrackFileReader:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        if self._handle is None:
            raise RuntimeError("TrackFileReader is not open")
        line_number = 0
        try:
            for raw in self._handle:
                line_number += 1
                yield line_number, raw.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise TrackIOError() from exc
