"""Tests for utility functions."""

import pytest

from emlkit.utils.address_utils import format_address, parse_address, parse_address_list
from emlkit.utils.mime_utils import (
    decode_base64,
    decode_quoted_printable,
    decode_text,
    parse_media_type,
    unfold_header,
)


class TestParseAddress:
    """Test single address parsing."""

    def test_parse_bare_address(self):
        assert parse_address("test@example.com") == ("", "test@example.com")

    def test_parse_named_address(self):
        assert parse_address("Test User <test@example.com>") == ("Test User", "test@example.com")

    def test_parse_quoted_name(self):
        assert parse_address('"Doe, Jane" <jane@example.com>') == ("Doe, Jane", "jane@example.com")

    def test_parse_empty_raises_error(self):
        with pytest.raises(ValueError):
            parse_address("   ")

    def test_parse_missing_at_raises_error(self):
        with pytest.raises(ValueError):
            parse_address("invalid-format")

    def test_parse_two_addresses_raises_error(self):
        with pytest.raises(ValueError):
            parse_address("a@example.com, b@example.com")


class TestParseAddressList:
    """Test address list parsing."""

    def test_parse_list_keeps_order(self):
        result = parse_address_list("b@example.com, A <a@example.com>")
        assert result == [("", "b@example.com"), ("A", "a@example.com")]

    def test_parse_list_single_entry(self):
        assert parse_address_list("a@example.com") == [("", "a@example.com")]

    def test_parse_list_malformed_entry_raises_error(self):
        with pytest.raises(ValueError):
            parse_address_list("a@example.com, nonsense")

    def test_parse_list_empty_raises_error(self):
        with pytest.raises(ValueError):
            parse_address_list("")

    def test_parse_list_empty_group(self):
        assert parse_address_list("undisclosed-recipients:;") == []

    def test_parse_list_empty_group_beside_address(self):
        result = parse_address_list("a@example.com, undisclosed-recipients:;")
        assert result == [("", "a@example.com")]

    def test_parse_list_quoted_empty_group(self):
        assert parse_address_list('"Undisclosed, recipients": ;') == []


class TestFormatAddress:
    """Test canonical address formatting."""

    def test_format_without_name(self):
        assert format_address("", "a@example.com") == "a@example.com"

    def test_format_with_name(self):
        assert format_address("Jane Doe", "jane@example.com") == "Jane Doe <jane@example.com>"

    def test_format_quotes_special_characters(self):
        assert format_address("Doe, Jane", "jane@example.com") == '"Doe, Jane" <jane@example.com>'


class TestUnfoldHeader:
    """Test header unfolding."""

    def test_unfold_crlf(self):
        assert unfold_header("Hello\r\n World") == "Hello World"

    def test_unfold_lf_and_tab(self):
        assert unfold_header("Hello\n\tWorld") == "Hello World"

    def test_unfold_empty(self):
        assert unfold_header("") == ""


class TestParseMediaType:
    """Test Content-Type parsing."""

    def test_parse_with_charset(self):
        assert parse_media_type("text/plain; charset=utf-8") == ("text/plain", {"charset": "utf-8"})

    def test_parse_lowercases_type_and_param_names(self):
        media_type, params = parse_media_type("Text/PLAIN; CharSet=UTF-8")
        assert media_type == "text/plain"
        assert params == {"charset": "UTF-8"}

    def test_parse_quoted_parameter(self):
        _, params = parse_media_type('multipart/mixed; boundary="a b c"')
        assert params["boundary"] == "a b c"

    def test_parse_without_parameters(self):
        assert parse_media_type("text/html") == ("text/html", {})

    def test_parse_missing_raises_error(self):
        with pytest.raises(ValueError):
            parse_media_type("")

    def test_parse_without_subtype_raises_error(self):
        with pytest.raises(ValueError):
            parse_media_type("garbage")


class TestBodyDecoders:
    """Test quoted-printable and base64 body decoding."""

    def test_decode_quoted_printable(self):
        assert decode_quoted_printable(b"Hello=20World") == b"Hello World"

    def test_decode_quoted_printable_soft_break(self):
        assert decode_quoted_printable(b"Hel=\r\nlo") == b"Hello"

    def test_decode_quoted_printable_lowercase_hex(self):
        assert decode_quoted_printable(b"caf=c3=a9") == "café".encode("utf-8")

    def test_decode_quoted_printable_invalid_escape_kept_literally(self):
        assert decode_quoted_printable(b"bad =G1 escape") == b"bad =G1 escape"

    @pytest.mark.parametrize("data", [b"cut =A", b"cut =A\r\n", b"cut =f \n"])
    def test_decode_quoted_printable_truncated_escape_raises_error(self, data):
        with pytest.raises(ValueError):
            decode_quoted_printable(data)

    def test_decode_base64_with_line_breaks(self):
        assert decode_base64(b"SGVsbG8g\r\nV29ybGQ=\r\n") == b"Hello World"

    def test_decode_base64_invalid_character(self):
        with pytest.raises(ValueError):
            decode_base64(b"SGVs bG8=")

    def test_decode_base64_bad_padding(self):
        with pytest.raises(ValueError):
            decode_base64(b"SGVsbG8")


class TestDecodeText:
    """Test charset-aware text decoding."""

    def test_declared_charset_is_used(self):
        assert decode_text(b"Caf\xe9", "iso-8859-1") == "Café"

    def test_charset_name_is_case_insensitive(self):
        assert decode_text(b"Caf\xe9", " ISO-8859-1 ") == "Café"

    def test_defaults_to_utf8(self):
        assert decode_text("Café".encode("utf-8")) == "Café"

    def test_unknown_charset_falls_back_to_utf8(self):
        assert decode_text("Café".encode("utf-8"), "x-no-such-charset") == "Café"

    def test_non_text_codec_falls_back_to_utf8(self):
        assert decode_text(b"plain", "base64") == "plain"

    def test_undecodable_bytes_are_replaced(self):
        assert decode_text(b"bad \xff", "utf-8") == "bad \ufffd"
