"""MIME header and body codec helpers."""

import binascii
import codecs
import quopri
import re
from base64 import b64decode
from email import policy
from typing import Dict, Optional, Tuple

FOLDING_PATTERN = re.compile(r"\r?\n[ \t]+")

# An escape cut short by the end of the input
QP_TRUNCATED_ESCAPE = re.compile(rb"=[0-9A-Fa-f][ \t]*(?:\r?\n)?\Z")


def unfold_header(value: str) -> str:
    """
    Unfold a folded RFC 5322 header value.

    Examples:
        >>> unfold_header("Hello\\r\\n World")
        'Hello World'
    """
    if not value:
        return ""
    return FOLDING_PATTERN.sub(" ", value).strip()


def parse_media_type(value: str) -> Tuple[str, Dict[str, str]]:
    """
    Parse a Content-Type header value.

    Args:
        value: Raw header value, e.g. ``"text/plain; charset=utf-8"``

    Returns:
        Tuple of (lower-cased ``type/subtype``, parameters keyed by lower-cased name)

    Raises:
        ValueError: If the value is missing or malformed

    Examples:
        >>> parse_media_type("Text/Plain; Charset=utf-8")
        ('text/plain', {'charset': 'utf-8'})
    """
    if not value or not value.strip():
        raise ValueError("Content-Type is missing")

    header = policy.default.header_factory("Content-Type", value)
    if header.defects:
        raise ValueError(f"Malformed Content-Type {value!r}: {header.defects[0]}")

    return header.content_type, dict(header.params)


def decode_quoted_printable(data: bytes) -> bytes:
    """
    Decode a quoted-printable body.

    An "=" that starts no valid escape is kept as a literal "=".

    Raises:
        ValueError: If the input ends in the middle of an escape
    """
    match = QP_TRUNCATED_ESCAPE.search(data)
    if match:
        raise ValueError(
            f"Truncated quoted-printable escape at offset {match.start()}: "
            f"{data[match.start():match.start() + 2]!r}"
        )
    return quopri.decodestring(data)


def decode_base64(data: bytes) -> bytes:
    """
    Decode a base64 body, ignoring CR and LF line breaks.

    Raises:
        ValueError: If the body holds non-alphabet characters or bad padding
    """
    compact = data.replace(b"\r", b"").replace(b"\n", b"")
    try:
        return b64decode(compact, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 data: {e}") from e


def decode_text(data: bytes, charset: Optional[str] = None) -> str:
    """
    Read decoded body bytes as text in their declared charset.

    Unknown or missing charsets fall back to UTF-8; undecodable bytes
    become U+FFFD.

    Examples:
        >>> decode_text(b"Caf\\xe9", "iso-8859-1")
        'Café'
    """
    if charset:
        try:
            return data.decode(codecs.lookup(charset.strip()).name, errors="replace")
        except LookupError:
            # Unknown charset, or a codec that is not a text encoding
            pass
    return data.decode("utf-8", errors="replace")
