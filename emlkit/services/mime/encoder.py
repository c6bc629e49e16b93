"""Streaming base64 body encoding."""

import io
from base64 import b64encode
from typing import BinaryIO

from .line_breaker import LINE_WIDTH, Base64LineBreaker


class Base64Encoder:
    """
    Streaming base64 encoder writing encoded text to a sink.

    Input is encoded in whole 3-byte groups as it arrives; the trailing
    group is padded and flushed on close(). The sink is not closed.
    """

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self._pending = b""

    def write(self, data: bytes) -> int:
        """
        Encode the complete 3-byte groups of data and write them to the sink.

        Up to two trailing bytes are held back until more input or close().

        Returns:
            len(data), the number of input bytes accepted
        """
        chunk = self._pending + bytes(data)
        cut = len(chunk) - len(chunk) % 3
        if cut:
            self.sink.write(b64encode(chunk[:cut]))
        self._pending = chunk[cut:]
        return len(data)

    def close(self) -> None:
        """Encode and flush the held-back bytes with padding. The sink stays open."""
        if self._pending:
            self.sink.write(b64encode(self._pending))
            self._pending = b""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def encode_base64_body(data: bytes, line_width: int = LINE_WIDTH) -> bytes:
    """
    Encode data as a MIME base64 body.

    Args:
        data: Raw bytes to encode
        line_width: Characters per output line (default 76)

    Returns:
        Base64 text wrapped into CRLF terminated lines

    Examples:
        >>> encode_base64_body(b"hello")
        b'aGVsbG8=\\r\\n'
    """
    out = io.BytesIO()
    breaker = Base64LineBreaker(out, line_width=line_width)
    encoder = Base64Encoder(breaker)
    encoder.write(data)
    encoder.close()
    breaker.close()
    return out.getvalue()
