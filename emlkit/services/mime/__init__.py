"""MIME body encoding and EML import services."""

from .base import (
    AddressParseError,
    BodyDecodeError,
    ContentTypeParseError,
    DateParseError,
    EmlImportError,
    HeaderParseError,
    LineBreakerError,
    MimeError,
    NoSinkConfiguredError,
    OpenFailedError,
    SinkWriteError,
)
from .eml_importer import EmlImporter, ImportResult, eml_to_message
from .encoder import Base64Encoder, encode_base64_body
from .line_breaker import LINE_TERMINATOR, LINE_WIDTH, Base64LineBreaker

__all__ = [
    "AddressParseError",
    "BodyDecodeError",
    "ContentTypeParseError",
    "DateParseError",
    "EmlImportError",
    "HeaderParseError",
    "LineBreakerError",
    "MimeError",
    "NoSinkConfiguredError",
    "OpenFailedError",
    "SinkWriteError",
    "EmlImporter",
    "ImportResult",
    "eml_to_message",
    "Base64Encoder",
    "encode_base64_body",
    "LINE_TERMINATOR",
    "LINE_WIDTH",
    "Base64LineBreaker",
]
