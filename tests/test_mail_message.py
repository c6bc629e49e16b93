"""Tests for the MailMessage model."""

from datetime import datetime, timezone

import pytest

from emlkit.models import AddrHeader, Charset, ContentType, Encoding, Header, MailMessage


class TestMailMessage:
    """Test MailMessage setters."""

    @pytest.fixture
    def message(self):
        return MailMessage()

    def test_defaults(self, message):
        assert message.addr_headers == {}
        assert message.gen_headers == {}
        assert message.date is None
        assert message.charset == "UTF-8"
        assert message.mime_version == "1.0"
        assert message.get_body() is None

    def test_set_from(self, message):
        message.set_from('"Jane Doe" <jane@example.com>')
        assert message.get_from() == ["Jane Doe <jane@example.com>"]

    def test_set_from_invalid_raises_error(self, message):
        with pytest.raises(ValueError):
            message.set_from("invalid")
        assert AddrHeader.FROM not in message.addr_headers

    def test_set_to_replaces_previous(self, message):
        message.set_to("a@example.com", "b@example.com")
        message.set_to("c@example.com")
        assert message.get_to() == ["c@example.com"]

    def test_set_cc_invalid_entry_sets_nothing(self, message):
        """Test one bad address leaves the role untouched."""
        message.set_cc("a@example.com")
        with pytest.raises(ValueError):
            message.set_cc("b@example.com", "broken")
        assert message.get_cc() == ["a@example.com"]

    def test_set_bcc(self, message):
        message.set_bcc("Hidden <h@example.com>")
        assert message.get_bcc() == ["Hidden <h@example.com>"]

    def test_set_date(self, message):
        message.set_date()
        assert message.date is not None
        assert message.date.tzinfo is not None

    def test_set_date_with_value(self, message):
        value = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        message.set_date_with_value(value)
        assert message.date == value

    def test_gen_headers(self, message):
        message.set_gen_header(Header.SUBJECT, "Hello")
        assert message.get_gen_header(Header.SUBJECT) == ["Hello"]
        assert message.subject == "Hello"
        assert message.get_gen_header(Header.ORGANIZATION) == []

    def test_set_charset_accepts_enum_and_string(self, message):
        message.set_charset(Charset.ISO_8859_1)
        assert message.charset == "ISO-8859-1"

        message.set_charset("koi8-r")
        assert message.charset == "koi8-r"

    def test_set_body_string_keeps_single_part(self, message):
        """Test setting the body twice keeps only the last body."""
        message.set_encoding(Encoding.B64)
        message.set_body_string(ContentType.TEXT_PLAIN, "first")
        message.set_body_string(ContentType.TEXT_PLAIN, "second")

        assert len(message.parts) == 1
        assert message.get_body() == "second"
        assert message.parts[0].encoding == Encoding.B64
        assert message.parts[0].charset == "UTF-8"
