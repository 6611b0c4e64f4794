"""Parsing utilities for hex-encoded JSON-RPC quantities."""

from datetime import UTC, datetime
import re

from ethrpc.helpers.constants import MAX_QUANTITY, QUANTITY_BITS, WEI_PER_ETHER
from ethrpc.helpers.errors import MalformedHexError


HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def decode_hex(
    hex_value: str, strip_prefix: bool = True, field: str | None = None
) -> int:
    """Decode a hex string to an integer.

    Args:
        hex_value: Hex-encoded string, e.g. "0x1b4"
        strip_prefix: Remove a single leading "0x" before parsing
        field: Optional field name used to tag errors

    Returns:
        int: Decoded value; an empty digit string decodes to 0

    Raises:
        MalformedHexError: If non-hex characters remain or the value does not
            fit in a 256-bit word

    Example:
        >>> decode_hex("0xff")
        255
        >>> decode_hex("ff", strip_prefix=False)
        255
        >>> decode_hex("0x")
        0
    """
    if not isinstance(hex_value, str):
        raise MalformedHexError(repr(hex_value), "expected a string", field)

    digits = hex_value
    if strip_prefix and digits.startswith("0x"):
        digits = digits[2:]

    if not HEX_DIGITS.fullmatch(digits):
        raise MalformedHexError(hex_value, "non-hex characters", field)
    if not digits:
        return 0

    value = int(digits, 16)
    if value > MAX_QUANTITY:
        raise MalformedHexError(
            hex_value, f"exceeds {QUANTITY_BITS}-bit quantity range", field
        )
    return value


def decode_optional_hex(hex_value: str | None, field: str | None = None) -> int | None:
    """Decode a hex quantity that may be absent.

    Example:
        >>> decode_optional_hex(None) is None
        True
        >>> decode_optional_hex("0x10")
        16
    """
    if hex_value is None:
        return None
    return decode_hex(hex_value, field=field)


def encode_hex(value: int) -> str:
    """Encode a non-negative integer as a 0x-prefixed hex quantity.

    Example:
        >>> encode_hex(255)
        '0xff'
        >>> encode_hex(0)
        '0x0'
    """
    if value < 0:
        msg = f"Cannot encode negative quantity: {value}"
        raise ValueError(msg)
    return hex(value)


def wei_to_ether(wei: int) -> int:
    """Convert wei to whole ether, truncating toward zero.

    Sub-ether remainders are dropped, not rounded.

    Example:
        >>> wei_to_ether(1_000_000_000_000_000_000)
        1
        >>> wei_to_ether(999_999_999_999_999_999)
        0
    """
    ether = abs(wei) // WEI_PER_ETHER
    return ether if wei >= 0 else -ether


def timestamp_to_datetime(timestamp: int) -> datetime:
    """Convert a decoded Unix timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp, tz=UTC)


__all__ = [
    "decode_hex",
    "decode_optional_hex",
    "encode_hex",
    "timestamp_to_datetime",
    "wei_to_ether",
]
