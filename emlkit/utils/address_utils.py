"""Address and address-list parsing utilities."""

import re
from email.utils import formataddr, getaddresses
from typing import List, Tuple

# local@domain, no whitespace, exactly one unquoted @
ADDR_SPEC_PATTERN = re.compile(r"^[^@\s<>,;]+@[^@\s<>,;]+$")

# RFC 5322 group with no members, e.g. "undisclosed-recipients:;"
EMPTY_GROUP_PATTERN = re.compile(r'(?:"[^"]*"|[^:,;<>"@])+:\s*;')
REPEATED_COMMA_PATTERN = re.compile(r",\s*(?=,)")


def _validate_addr_spec(addr: str, raw: str) -> str:
    if not addr or not ADDR_SPEC_PATTERN.match(addr):
        raise ValueError(f"Invalid email address: {raw!r}")
    return addr


def parse_address(value: str) -> Tuple[str, str]:
    """
    Parse a single RFC 5322 address.

    Args:
        value: Raw address string, e.g. ``"Jane Doe <jane@example.com>"``

    Returns:
        Tuple of (display_name, addr_spec)

    Raises:
        ValueError: If value is empty, malformed or holds more than one address

    Examples:
        >>> parse_address("Jane Doe <jane@example.com>")
        ('Jane Doe', 'jane@example.com')
        >>> parse_address("jane@example.com")
        ('', 'jane@example.com')
    """
    if not value or not value.strip():
        raise ValueError("Address is empty")

    pairs = [p for p in getaddresses([value]) if p != ("", "")]
    if len(pairs) != 1:
        raise ValueError(f"Expected a single address, got {len(pairs)}: {value!r}")

    name, addr = pairs[0]
    return name, _validate_addr_spec(addr, value)


def parse_address_list(value: str) -> List[Tuple[str, str]]:
    """
    Parse a comma-separated RFC 5322 address list.

    Groups without members (``"undisclosed-recipients:;"``) contribute no
    address, so a list made only of such groups yields an empty list.

    Args:
        value: Raw header value, e.g. ``"a@example.com, B <b@example.com>"``

    Returns:
        Ordered list of (display_name, addr_spec) tuples

    Raises:
        ValueError: If any entry is malformed or the list holds no address
    """
    if not value or not value.strip():
        raise ValueError("Address list is empty")

    remainder = EMPTY_GROUP_PATTERN.sub("", value)
    if remainder != value:
        remainder = REPEATED_COMMA_PATTERN.sub("", remainder).strip(" \t,")
        if not remainder:
            return []
        value = remainder

    pairs = [p for p in getaddresses([value]) if p != ("", "")]
    if not pairs:
        raise ValueError(f"No address found in list: {value!r}")

    for _, addr in pairs:
        _validate_addr_spec(addr, value)
    return pairs


def format_address(name: str, addr: str) -> str:
    """
    Return the canonical string form of an address.

    Examples:
        >>> format_address("", "jane@example.com")
        'jane@example.com'
        >>> format_address("Jane Doe", "jane@example.com")
        'Jane Doe <jane@example.com>'
    """
    return formataddr((name, addr))
