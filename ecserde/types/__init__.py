"""Type definitions for ecserde."""

from ..types.common import (
    HexStr,
    SecretKeyBytes,
    PublicKeyBytes,
    Point,
    EncodedPublicKey,
)

__all__ = [
    "HexStr",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "Point",
    "EncodedPublicKey",
]
