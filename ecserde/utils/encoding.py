"""Encoding and decoding utilities for ecserde."""

from ..constants import HEX_PATTERN
from ..exceptions import HexParseError, ValidationError
from ..types.common import HexStr

__all__ = [
    "int_to_hex",
    "hex_to_int",
    "bytes_to_hex",
    "int_to_bytes",
    "bytes_to_int",
]


def int_to_hex(value: int) -> HexStr:
    """
    Convert non-negative integer to canonical hex.

    Canonical hex is lowercase, without ``0x`` prefix and without
    leading zeros. Zero is encoded as ``"0"``.

    Args:
        value: Non-negative integer of any magnitude

    Returns:
        Canonical hex string

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    # bool is an int subclass but never a meaningful scalar
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"Expected integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"Cannot hex-encode negative integer: {value}")
    return HexStr(format(value, "x"))


def hex_to_int(text: str) -> int:
    """
    Parse hex digits into an integer.

    Upper and lower case digits are accepted, as are leading zeros.
    Anything else (prefix, sign, whitespace, ``_`` separators) is rejected,
    unlike ``int(text, 16)``.

    Args:
        text: Hex digits

    Returns:
        Parsed integer

    Raises:
        HexParseError: If text is empty or contains a non-hex character
    """
    if not isinstance(text, str):
        raise HexParseError(
            f"Expected hex string, got {type(text).__name__}",
            data=text,
        )
    if not text:
        raise HexParseError("Empty hex string", data=text)
    if not HEX_PATTERN.fullmatch(text):
        raise HexParseError(f"Invalid hex string: {text!r}", data=text)
    return int(text, 16)


def bytes_to_hex(data: bytes) -> HexStr:
    """Convert bytes to fixed-width hex string."""
    return HexStr(data.hex())


def int_to_bytes(value: int, length: int) -> bytes:
    """Convert integer to big-endian bytes of the given length."""
    return value.to_bytes(length, byteorder="big")


def bytes_to_int(data: bytes) -> int:
    """Convert big-endian bytes to integer."""
    return int.from_bytes(data, byteorder="big")
