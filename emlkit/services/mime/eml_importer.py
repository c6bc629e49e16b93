"""Import of raw .eml message files into MailMessage objects."""

import re
from dataclasses import dataclass
from email.errors import FirstHeaderLineIsContinuationDefect, MissingHeaderBodySeparatorDefect
from email.message import Message
from email.parser import BytesHeaderParser
from email.policy import compat32
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from emlkit.models import AddrHeader, COMMON_HEADERS, ContentType, Encoding, Header, MailMessage
from emlkit.storage.audit_log import AuditLog
from emlkit.utils.address_utils import format_address, parse_address_list
from emlkit.utils.mime_utils import (
    decode_base64,
    decode_quoted_printable,
    decode_text,
    parse_media_type,
    unfold_header,
)
from .base import (
    AddressParseError,
    BodyDecodeError,
    ContentTypeParseError,
    DateParseError,
    EmlImportError,
    HeaderParseError,
    OpenFailedError,
)

# Defects that mean the header block itself is unusable
FATAL_HEADER_DEFECTS = (MissingHeaderBodySeparatorDefect, FirstHeaderLineIsContinuationDefect)

# First empty line ends the header block
HEADER_BODY_SEPARATOR = re.compile(rb"\r?\n\r?\n")

# Transfer encoding tokens that leave the body untouched
IDENTITY_ENCODINGS = frozenset({"", "7bit", "8bit", "binary"})


def _decode_identity(data: bytes) -> bytes:
    return data


# (media type, transfer encoding) -> body decoder.
# Combinations not listed are skipped without assigning a body.
BODY_DECODERS: Dict[Tuple[str, Encoding], Callable[[bytes], bytes]] = {
    (ContentType.TEXT_PLAIN.value, Encoding.NONE): _decode_identity,
    (ContentType.TEXT_PLAIN.value, Encoding.QP): decode_quoted_printable,
    (ContentType.TEXT_PLAIN.value, Encoding.B64): decode_base64,
}


@dataclass
class ImportResult:
    """
    Result of an EML import.

    The message is always present; on failure it holds every field that
    was set before the error occurred.
    """

    message: MailMessage
    error: Optional[EmlImportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> MailMessage:
        """Return the message, or raise the import error if there was one."""
        if self.error is not None:
            raise self.error
        return self.message


class EmlImporter:
    """
    Turn a raw RFC 5322 message file into a MailMessage.

    The import runs as three stages sharing one MailMessage: read the file,
    extract headers, decode the body. The first failing stage ends the
    import; fields set by earlier stages are kept.
    """

    def __init__(self, audit_log: Optional[AuditLog] = None):
        """
        Initialize importer.

        Args:
            audit_log: Optional audit log receiving one event per import
        """
        self.audit_log = audit_log

    def import_file(self, eml_path: Union[str, Path]) -> ImportResult:
        """
        Import an EML file.

        Args:
            eml_path: Path to the .eml file

        Returns:
            ImportResult with the (possibly partial) message and the first error
        """
        path = Path(eml_path)
        message = MailMessage()

        try:
            headers, body = self.read_eml(path)
            self.parse_headers(headers, message)
            self.parse_body(headers, body, message)
        except EmlImportError as e:
            if e.path is None:
                e.path = path
            e.message = message
            self._log_import(path, message, e)
            return ImportResult(message=message, error=e)

        self._log_import(path, message, None)
        return ImportResult(message=message)

    def read_eml(self, path: Path) -> Tuple[Message, bytes]:
        """
        Read an EML file and split it into its header block and raw body.

        Args:
            path: Path to the .eml file

        Returns:
            Tuple of (parsed headers, raw body bytes)

        Raises:
            OpenFailedError: If the file cannot be read
            HeaderParseError: If the header block is empty or malformed
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise OpenFailedError(f"failed to open EML file {path}: {e}", path) from e

        if not raw.strip():
            raise HeaderParseError(f"EML file {path} is empty", path)

        headers = BytesHeaderParser(policy=compat32).parsebytes(raw)
        for defect in headers.defects:
            if isinstance(defect, FATAL_HEADER_DEFECTS):
                raise HeaderParseError(
                    f"failed to parse EML headers in {path}: {type(defect).__name__}", path
                )

        return headers, _split_body(raw)

    def parse_headers(self, headers: Message, message: MailMessage) -> None:
        """
        Copy address, date and common headers into the message.

        Args:
            headers: Parsed header block
            message: Target message

        Raises:
            AddressParseError: If From/To/Cc/Bcc holds a malformed address
            DateParseError: If the Date header is present but malformed
        """
        sender = _get_header(headers, AddrHeader.FROM.value)
        if sender:
            try:
                message.set_from(sender)
            except ValueError as e:
                raise AddressParseError(f'failed to parse "From:" header: {e}') from e

        recipient_setters = (
            (AddrHeader.TO, message.set_to),
            (AddrHeader.CC, message.set_cc),
            (AddrHeader.BCC, message.set_bcc),
        )
        for header, setter in recipient_setters:
            value = _get_header(headers, header.value)
            if not value:
                continue
            try:
                addresses = [format_address(n, a) for n, a in parse_address_list(value)]
                setter(*addresses)
            except ValueError as e:
                raise AddressParseError(f'failed to parse "{header.value}:" header: {e}') from e

        date_value = _get_header(headers, Header.DATE.value)
        if date_value:
            try:
                message.set_date_with_value(parsedate_to_datetime(date_value))
            except (TypeError, ValueError) as e:
                raise DateParseError(f"failed to parse EML date {date_value!r}: {e}") from e
        else:
            message.set_date()

        for header in COMMON_HEADERS:
            value = _get_header(headers, header.value)
            if value:
                message.set_gen_header(header, value)

    def parse_body(self, headers: Message, body: bytes, message: MailMessage) -> None:
        """
        Decode the body according to its Content-Type and transfer encoding.

        Args:
            headers: Parsed header block
            body: Raw body bytes
            message: Target message

        Raises:
            ContentTypeParseError: If Content-Type is missing or malformed
            BodyDecodeError: If the body does not decode with its transfer encoding

        Notes:
            - Only combinations listed in BODY_DECODERS assign a body
            - Decoded bytes are read as text in the declared charset (UTF-8 if
              absent or unknown); the body bytes themselves are not converted
        """
        content_type = _get_header(headers, Header.CONTENT_TYPE.value)
        try:
            media_type, params = parse_media_type(content_type)
        except ValueError as e:
            raise ContentTypeParseError(f"failed to extract content type: {e}") from e

        if "charset" in params:
            message.set_charset(params["charset"])

        cte = _get_header(headers, Header.CONTENT_TRANSFER_ENCODING.value)
        encoding = _transfer_encoding(cte)
        decoder = BODY_DECODERS.get((media_type, encoding))
        if decoder is None:
            return

        message.set_encoding(encoding)
        try:
            decoded = decoder(body)
        except ValueError as e:
            raise BodyDecodeError(f"failed to read {encoding.value} body: {e}") from e

        message.set_body_string(ContentType(media_type), decode_text(decoded, params.get("charset")))

    def _log_import(
        self, path: Path, message: MailMessage, error: Optional[EmlImportError]
    ) -> None:
        if self.audit_log is None:
            return

        self.audit_log.log_import(
            file_path=path,
            status="failed" if error else "imported",
            error_type=type(error).__name__ if error else None,
            error_details=str(error) if error else None,
            metadata={
                "subject": message.subject,
                "charset": message.charset,
                "has_body": bool(message.parts),
            },
        )


def _split_body(raw: bytes) -> bytes:
    """Return the raw bytes following the header block."""
    if raw.startswith((b"\r\n", b"\n")):
        return raw.split(b"\n", 1)[1]
    match = HEADER_BODY_SEPARATOR.search(raw)
    return raw[match.end() :] if match else b""


def _get_header(headers: Message, name: str) -> str:
    """Return the first value of a header, unfolded, or '' if absent."""
    wanted = name.lower()
    for key, value in headers.raw_items():
        if key.lower() != wanted:
            continue
        # Raw values keep 8-bit header bytes surrogate-escaped; read them as UTF-8
        text = str(value).encode("utf-8", "surrogateescape").decode("utf-8", errors="replace")
        return unfold_header(text)
    return ""


def _transfer_encoding(value: str) -> Optional[Encoding]:
    token = value.strip().lower()
    if token in IDENTITY_ENCODINGS:
        return Encoding.NONE
    for encoding in (Encoding.QP, Encoding.B64):
        if token == encoding.value:
            return encoding
    return None


def eml_to_message(
    eml_path: Union[str, Path], audit_log: Optional[AuditLog] = None
) -> MailMessage:
    """
    Import an EML file and return the message.

    Args:
        eml_path: Path to the .eml file
        audit_log: Optional audit log

    Returns:
        The imported MailMessage

    Raises:
        EmlImportError: On failure; the partial message is available as ``error.message``
    """
    return EmlImporter(audit_log=audit_log).import_file(eml_path).raise_for_error()
