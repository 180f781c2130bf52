"""Line-at-a-time reading from any object with a ``read(size)`` method."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

Text = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 5


class LineReader:
    """Read lines from ``source`` in chunks of ``buffer_size``.

    Works with text and binary sources alike; lines keep their trailing
    newline, and a final line without one is returned as it is.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[Text] = None
        self._newline: Text = "\n"

    def _fill(self) -> None:
        while self._pending is None or self._newline not in self._pending:
            chunk = self._source.read(self._buffer_size)
            if not chunk:
                return
            if self._pending is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                self._pending = chunk
            else:
                self._pending += chunk

    def read_line(self) -> Optional[Text]:
        """The next line, or None once the source has nothing more to give."""
        self._fill()
        pending = self._pending
        if not pending:
            return None
        end = pending.find(self._newline)
        if end == -1:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[Text]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line