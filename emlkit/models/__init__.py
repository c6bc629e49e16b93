"""Data models for structured mail messages"""

from .headers import AddrHeader, Charset, COMMON_HEADERS, ContentType, Encoding, Header
from .mail_message import MailMessage, MessagePart

__all__ = [
    "AddrHeader",
    "Charset",
    "COMMON_HEADERS",
    "ContentType",
    "Encoding",
    "Header",
    "MailMessage",
    "MessagePart",
]
