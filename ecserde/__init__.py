"""
ecserde

Canonical text encoding for elliptic-curve keys: secret keys as a hex
scalar, public keys as a record of hex point coordinates. Plugs into
pydantic models through annotated field types.
"""

from .exceptions import (
    EcSerdeError,
    ValidationError,
    CryptoError,
    SerializationError,
    HexParseError,
    UnknownFieldError,
    MissingFieldError,
    KeyConstructionError,
)
from .crypto import SecretKey, PublicKey, Secp256k1Core
from .serde import (
    encode_secret_key,
    decode_secret_key,
    encode_public_key,
    decode_public_key,
    SerdeSecretKey,
    SerdePublicKey,
)
from .types import Point, EncodedPublicKey
from .utils.encoding import int_to_hex, hex_to_int

__version__ = "1.0.0"

__all__ = [
    # Codecs
    "int_to_hex",
    "hex_to_int",
    "encode_secret_key",
    "decode_secret_key",
    "encode_public_key",
    "decode_public_key",
    "SerdeSecretKey",
    "SerdePublicKey",

    # Keys
    "SecretKey",
    "PublicKey",
    "Secp256k1Core",

    # Types
    "Point",
    "EncodedPublicKey",

    # Exceptions
    "EcSerdeError",
    "ValidationError",
    "CryptoError",
    "SerializationError",
    "HexParseError",
    "UnknownFieldError",
    "MissingFieldError",
    "KeyConstructionError",
]
