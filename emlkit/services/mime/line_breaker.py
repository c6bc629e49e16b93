"""Line breaking writer for base64 encoded MIME bodies."""

from typing import BinaryIO, Optional

from .base import NoSinkConfiguredError, SinkWriteError

# RFC 2045 section 6.8: encoded lines must not exceed 76 characters
LINE_WIDTH = 76
LINE_TERMINATOR = b"\r\n"

STAGE_PARTIAL_LINE = "partial-line"
STAGE_EXCESS_SEGMENT = "excess-segment"
STAGE_TERMINATOR = "terminator"


class Base64LineBreaker:
    """
    Byte sink that re-chunks a continuous stream into CRLF terminated lines.

    Bytes are held in a fixed-size line buffer until a full line is
    available, then forwarded to the sink followed by CRLF. Typically used
    as the destination of a base64 encoder so the produced text is wrapped
    as it is generated.

    Not safe for concurrent use; callers must serialize access.
    """

    def __init__(self, sink: Optional[BinaryIO] = None, line_width: int = LINE_WIDTH):
        """
        Initialize line breaker.

        Args:
            sink: Underlying byte destination (anything with a write() method)
            line_width: Characters per output line (default 76)
        """
        if line_width < 1:
            raise ValueError("line_width must be positive")

        self.sink = sink
        self.line_width = line_width
        self._line = bytearray(line_width)
        self._used = 0

    @property
    def buffered(self) -> int:
        """Number of bytes held back waiting for a full line."""
        return self._used

    def write(self, data: bytes) -> int:
        """
        Write data, forwarding every completed line to the sink.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes accepted (always len(data) on success)

        Raises:
            NoSinkConfiguredError: If no sink is configured
            SinkWriteError: If the sink fails; the writer must not be reused

        Notes:
            - Input that does not complete a line is only buffered
            - Each completed line is forwarded as three sink writes:
              buffered prefix, remainder of the line from data, CRLF
        """
        if self.sink is None:
            raise NoSinkConfiguredError("no output sink configured for line breaker")

        data = bytes(data)
        total = len(data)
        offset = 0

        while self._used + (total - offset) >= self.line_width:
            try:
                self.sink.write(bytes(self._line[: self._used]))
            except Exception as e:
                raise SinkWriteError(STAGE_PARTIAL_LINE, e, offset) from e

            excess = self.line_width - self._used
            self._used = 0
            try:
                self.sink.write(data[offset : offset + excess])
            except Exception as e:
                raise SinkWriteError(STAGE_EXCESS_SEGMENT, e, offset) from e
            offset += excess

            try:
                self.sink.write(LINE_TERMINATOR)
            except Exception as e:
                raise SinkWriteError(STAGE_TERMINATOR, e, offset) from e

        remaining = total - offset
        self._line[self._used : self._used + remaining] = data[offset:]
        self._used += remaining
        return total

    def close(self) -> None:
        """
        Flush the buffered remainder as a final line.

        Does nothing when nothing is buffered, so closing twice or closing
        a writer without a sink succeeds. The sink itself is not closed.

        Raises:
            SinkWriteError: If the sink fails
        """
        if self._used == 0:
            return

        try:
            self.sink.write(bytes(self._line[: self._used]))
        except Exception as e:
            raise SinkWriteError(STAGE_PARTIAL_LINE, e) from e
        self._used = 0

        try:
            self.sink.write(LINE_TERMINATOR)
        except Exception as e:
            raise SinkWriteError(STAGE_TERMINATOR, e) from e

    def writable(self) -> bool:
        """Report the writer as writable so it can stand in for a binary stream."""
        return True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
