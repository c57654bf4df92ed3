"""Common type definitions for ecserde."""

from typing import NamedTuple, NewType, TypedDict

__all__ = [
    "HexStr",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "Point",
    "EncodedPublicKey",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Canonical hexadecimal string (lowercase, no prefix, no padding)."""

# Crypto types
SecretKeyBytes = NewType("SecretKeyBytes", bytes)
"""32-byte big-endian secret scalar."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""65-byte uncompressed SEC1 public key."""


class Point(NamedTuple):
    """Affine curve point. The curve itself is implied by the crypto core."""

    x: int
    y: int


class EncodedPublicKey(TypedDict):
    """Wire form of a public key."""

    x: HexStr
    y: HexStr
