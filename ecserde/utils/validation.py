"""Validation utilities for ecserde."""

from typing import Union

from ..constants import (
    HEX_PATTERN,
    SECP256K1_N,
    SECP256K1_P,
    SECRET_KEY_LENGTH,
    UNCOMPRESSED_PREFIX,
    UNCOMPRESSED_PUBLIC_KEY_LENGTH,
)
from ..exceptions import ValidationError

__all__ = [
    "is_valid_hex",
    "is_valid_scalar",
    "is_valid_coordinate",
    "validate_secret_key",
    "validate_public_key",
]


def is_valid_hex(text: str) -> bool:
    """
    Check if text is a non-empty run of hex digits.

    Args:
        text: Text to check

    Returns:
        True if valid, False otherwise
    """
    return isinstance(text, str) and HEX_PATTERN.fullmatch(text) is not None


def is_valid_scalar(value: int) -> bool:
    """Check if value is a usable secp256k1 secret scalar (0 < value < n)."""
    return isinstance(value, int) and 0 < value < SECP256K1_N


def is_valid_coordinate(value: int) -> bool:
    """Check if value is a secp256k1 field element (0 <= value < p)."""
    return isinstance(value, int) and 0 <= value < SECP256K1_P


def _strip_hex(key: str, what: str) -> bytes:
    if key.startswith("0x"):
        key = key[2:]
    if not is_valid_hex(key):
        raise ValidationError(f"{what} must be hexadecimal")
    try:
        return bytes.fromhex(key)
    except ValueError as e:
        raise ValidationError(f"Invalid hex {what.lower()}: {e}") from e


def validate_secret_key(key: Union[str, bytes]) -> bytes:
    """
    Validate secret key and return as bytes.

    Args:
        key: Secret key as hex string or bytes

    Returns:
        Secret key as 32 bytes

    Raises:
        ValidationError: If secret key is invalid
    """
    if isinstance(key, str):
        key = _strip_hex(key, "Secret key")

    if len(key) != SECRET_KEY_LENGTH:
        raise ValidationError(f"Secret key must be {SECRET_KEY_LENGTH} bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise ValidationError("Secret key cannot be zero")
    if key_int >= SECP256K1_N:
        raise ValidationError("Secret key exceeds curve order")

    return key


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate uncompressed public key and return as bytes.

    Only the 65-byte SEC1 form is supported. This checks layout only,
    curve membership is checked by the crypto backend.

    Args:
        key: Public key as hex string or bytes

    Returns:
        Public key bytes

    Raises:
        ValidationError: If public key is invalid
    """
    if isinstance(key, str):
        key = _strip_hex(key, "Public key")

    if len(key) != UNCOMPRESSED_PUBLIC_KEY_LENGTH:
        raise ValidationError(
            f"Public key must be {UNCOMPRESSED_PUBLIC_KEY_LENGTH} bytes, got {len(key)}"
        )
    if key[0] != UNCOMPRESSED_PREFIX:
        raise ValidationError("Uncompressed public key must start with 0x04")

    return key
