"""Exceptions for MIME encoding and EML import."""

from pathlib import Path
from typing import Optional


class MimeError(Exception):
    """Base exception for MIME transform errors."""

    pass


class LineBreakerError(MimeError):
    """Base exception for line breaking errors."""

    pass


class NoSinkConfiguredError(LineBreakerError):
    """Raised when writing to a line breaker that has no output sink."""

    pass


class SinkWriteError(LineBreakerError):
    """
    Raised when the underlying sink fails to accept a write.

    The writer must be discarded afterwards: retrying may replay or
    drop bytes that were already forwarded.

    Attributes:
        stage: Which forward failed ('partial-line', 'excess-segment' or 'terminator')
        cause: The exception raised by the sink
        written: Input bytes of the failing call that reached the sink
    """

    def __init__(self, stage: str, cause: BaseException, written: int = 0):
        super().__init__(f"failed to write {stage} to sink: {cause}")
        self.stage = stage
        self.cause = cause
        self.written = written


class EmlImportError(MimeError):
    """
    Base exception for EML import errors.

    Attributes:
        path: Path of the EML file being imported
        message: The partially populated MailMessage, set by the importer
    """

    def __init__(self, detail: str, path: Optional[Path] = None):
        super().__init__(detail)
        self.path = path
        self.message = None


class OpenFailedError(EmlImportError):
    """Raised when the EML file cannot be opened or read."""

    pass


class HeaderParseError(EmlImportError):
    """Raised when the EML header block cannot be parsed."""

    pass


class AddressParseError(EmlImportError):
    """Raised when an address header holds a malformed address."""

    pass


class DateParseError(EmlImportError):
    """Raised when the Date header is present but malformed."""

    pass


class ContentTypeParseError(EmlImportError):
    """Raised when the Content-Type header is missing or malformed."""

    pass


class BodyDecodeError(EmlImportError):
    """Raised when the body cannot be decoded with its transfer encoding."""

    pass
