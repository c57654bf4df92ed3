"""Cryptographic core for ecserde."""

from ..crypto.keys import SecretKey, PublicKey
from ..crypto.core import (
    IntegerConverter,
    PointConverter,
    CryptoCore,
    Secp256k1Core,
    get_default_core,
)

__all__ = [
    # Keys
    "SecretKey",
    "PublicKey",

    # Core
    "IntegerConverter",
    "PointConverter",
    "CryptoCore",
    "Secp256k1Core",
    "get_default_core",
]
