"""Header, encoding and content type enumerations."""

from enum import Enum


class Header(Enum):
    """Generic (non-address) header names."""

    CONTENT_TYPE = "Content-Type"
    CONTENT_TRANSFER_ENCODING = "Content-Transfer-Encoding"
    DATE = "Date"
    IMPORTANCE = "Importance"
    IN_REPLY_TO = "In-Reply-To"
    LIST_UNSUBSCRIBE = "List-Unsubscribe"
    LIST_UNSUBSCRIBE_POST = "List-Unsubscribe-Post"
    MESSAGE_ID = "Message-ID"
    MIME_VERSION = "MIME-Version"
    ORGANIZATION = "Organization"
    PRECEDENCE = "Precedence"
    PRIORITY = "Priority"
    REFERENCES = "References"
    SUBJECT = "Subject"
    USER_AGENT = "User-Agent"
    X_MAILER = "X-Mailer"
    X_MSMAIL_PRIORITY = "X-MSMail-Priority"
    X_PRIORITY = "X-Priority"


class AddrHeader(Enum):
    """Address header roles."""

    FROM = "From"
    TO = "To"
    CC = "Cc"
    BCC = "Bcc"


class Encoding(Enum):
    """Content transfer encoding of a message body."""

    NONE = "8bit"
    QP = "quoted-printable"
    B64 = "base64"


class ContentType(Enum):
    """Media types known to the message model."""

    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    APP_OCTET_STREAM = "application/octet-stream"


class Charset(Enum):
    """Common charset tags."""

    UTF8 = "UTF-8"
    US_ASCII = "US-ASCII"
    ISO_8859_1 = "ISO-8859-1"
    ISO_8859_15 = "ISO-8859-15"
    WINDOWS_1252 = "windows-1252"


# Headers copied verbatim from an imported message
COMMON_HEADERS = (
    Header.CONTENT_TYPE,
    Header.IMPORTANCE,
    Header.IN_REPLY_TO,
    Header.LIST_UNSUBSCRIBE,
    Header.LIST_UNSUBSCRIBE_POST,
    Header.MESSAGE_ID,
    Header.MIME_VERSION,
    Header.ORGANIZATION,
    Header.PRECEDENCE,
    Header.PRIORITY,
    Header.REFERENCES,
    Header.SUBJECT,
    Header.USER_AGENT,
    Header.X_MAILER,
    Header.X_MSMAIL_PRIORITY,
    Header.X_PRIORITY,
)
