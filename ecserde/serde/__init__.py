"""Key codecs and their pydantic field types."""

from ..serde.secret_key import encode_secret_key, decode_secret_key
from ..serde.public_key import encode_public_key, decode_public_key
from ..serde.fields import (
    secret_key_field,
    public_key_field,
    SerdeSecretKey,
    SerdePublicKey,
    BaseModel,
)

__all__ = [
    # Codecs
    "encode_secret_key",
    "decode_secret_key",
    "encode_public_key",
    "decode_public_key",

    # Pydantic
    "secret_key_field",
    "public_key_field",
    "SerdeSecretKey",
    "SerdePublicKey",
    "BaseModel",
]
