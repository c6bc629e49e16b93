"""Structured mail message data model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

from emlkit.utils.address_utils import format_address, parse_address
from .headers import AddrHeader, Charset, ContentType, Encoding, Header


@dataclass
class MessagePart:
    """
    A single body part of a message.

    Attributes:
        content_type: Media type of the part
        content: Decoded body text
        encoding: Transfer encoding the part uses on the wire
        charset: Charset tag of the part
    """

    content_type: ContentType
    content: str
    encoding: Encoding
    charset: str


@dataclass
class MailMessage:
    """
    Structured in-memory representation of a mail message.

    Attributes:
        addr_headers: Canonical address strings per address role
        gen_headers: Raw values of generic headers
        date: Message date
        charset: Charset tag of the message body
        encoding: Transfer encoding of the message body
        mime_version: MIME-Version of the message
        parts: Body parts (at most one is set by the setters)
    """

    addr_headers: Dict[AddrHeader, List[str]] = field(default_factory=dict)
    gen_headers: Dict[Header, List[str]] = field(default_factory=dict)
    date: Optional[datetime] = None
    charset: str = Charset.UTF8.value
    encoding: Encoding = Encoding.QP
    mime_version: str = "1.0"
    parts: List[MessagePart] = field(default_factory=list)

    def set_from(self, address: str) -> None:
        """
        Set the sender address.

        Raises:
            ValueError: If address is not exactly one valid address
        """
        name, addr = parse_address(address)
        self.addr_headers[AddrHeader.FROM] = [format_address(name, addr)]

    def set_to(self, *addresses: str) -> None:
        """Set the To recipients, replacing any previous ones."""
        self._set_addr_header(AddrHeader.TO, addresses)

    def set_cc(self, *addresses: str) -> None:
        """Set the Cc recipients, replacing any previous ones."""
        self._set_addr_header(AddrHeader.CC, addresses)

    def set_bcc(self, *addresses: str) -> None:
        """Set the Bcc recipients, replacing any previous ones."""
        self._set_addr_header(AddrHeader.BCC, addresses)

    def _set_addr_header(self, header: AddrHeader, addresses) -> None:
        # Validate everything before touching the stored list
        canonical = []
        for address in addresses:
            name, addr = parse_address(address)
            canonical.append(format_address(name, addr))
        self.addr_headers[header] = canonical

    def set_date(self) -> None:
        """Set the message date to the current local time."""
        self.date = datetime.now().astimezone()

    def set_date_with_value(self, value: datetime) -> None:
        self.date = value

    def set_gen_header(self, header: Header, *values: str) -> None:
        self.gen_headers[header] = list(values)

    def get_gen_header(self, header: Header) -> List[str]:
        return self.gen_headers.get(header, [])

    def set_charset(self, charset: Union[Charset, str]) -> None:
        self.charset = charset.value if isinstance(charset, Charset) else charset

    def set_encoding(self, encoding: Encoding) -> None:
        self.encoding = encoding

    def set_body_string(self, content_type: ContentType, body: str) -> None:
        """
        Set the message body, replacing any existing parts.

        Args:
            content_type: Media type of the body
            body: Body text
        """
        self.parts = [
            MessagePart(
                content_type=content_type,
                content=body,
                encoding=self.encoding,
                charset=self.charset,
            )
        ]

    def get_from(self) -> List[str]:
        return self.addr_headers.get(AddrHeader.FROM, [])

    def get_to(self) -> List[str]:
        return self.addr_headers.get(AddrHeader.TO, [])

    def get_cc(self) -> List[str]:
        return self.addr_headers.get(AddrHeader.CC, [])

    def get_bcc(self) -> List[str]:
        return self.addr_headers.get(AddrHeader.BCC, [])

    def get_body(self) -> Optional[str]:
        """Return the text of the body part, or None if no body is set."""
        if not self.parts:
            return None
        return self.parts[0].content

    @property
    def subject(self) -> str:
        values = self.get_gen_header(Header.SUBJECT)
        return values[0] if values else ""
