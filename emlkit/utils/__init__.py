"""Utility functions"""

from .address_utils import format_address, parse_address, parse_address_list
from .mime_utils import (
    decode_base64,
    decode_quoted_printable,
    decode_text,
    parse_media_type,
    unfold_header,
)

__all__ = [
    "format_address",
    "parse_address",
    "parse_address_list",
    "decode_base64",
    "decode_quoted_printable",
    "decode_text",
    "parse_media_type",
    "unfold_header",
]
