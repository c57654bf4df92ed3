"""Constants for ecserde."""

import re
from typing import Final, Tuple

__all__ = [
    "SECP256K1_P",
    "SECP256K1_N",
    "SECRET_KEY_LENGTH",
    "UNCOMPRESSED_PUBLIC_KEY_LENGTH",
    "UNCOMPRESSED_PREFIX",
    "PUBLIC_KEY_FIELDS",
    "HEX_PATTERN",
]

# secp256k1 domain parameters
SECP256K1_P: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
"""Field prime."""

SECP256K1_N: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""Group order."""

# Key sizes
SECRET_KEY_LENGTH: Final = 32
UNCOMPRESSED_PUBLIC_KEY_LENGTH: Final = 65
UNCOMPRESSED_PREFIX: Final = 0x04

# Encoded public key record layout
PUBLIC_KEY_FIELDS: Final[Tuple[str, str]] = ("x", "y")

# Hex digits only: no sign, prefix, separators or whitespace
HEX_PATTERN: Final = re.compile(r"[0-9a-fA-F]+")
