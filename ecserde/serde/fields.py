"""
Pydantic field types for keys.

Annotating a model field with one of these types attaches the matching
codec to it: the codec's decode function runs as a before-validator when
the model is loaded, its encode function runs as the serializer when the
model is dumped.

Usage:
    from ecserde.serde import BaseModel, SerdePublicKey, SerdeSecretKey

    class Signer(BaseModel):
        sk: SerdeSecretKey
        pk: SerdePublicKey

    Signer.model_validate_json('{"sk": "1e240", "pk": {"x": "...", "y": "..."}}')
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from ..crypto.core import IntegerConverter, PointConverter
from ..crypto.keys import PublicKey, SecretKey
from ..serde.public_key import decode_public_key, encode_public_key
from ..serde.secret_key import decode_secret_key, encode_secret_key

__all__ = [
    "secret_key_field",
    "public_key_field",
    "SerdeSecretKey",
    "SerdePublicKey",
    "BaseModel",
]


def secret_key_field(
    core: Optional[IntegerConverter] = None,
    key_type: type = SecretKey
) -> Any:
    """
    Build an annotated secret key type bound to a core.

    Args:
        core: Integer converter, defaults to secp256k1
        key_type: Class of the keys the core produces

    Returns:
        ``Annotated[key_type, ...]`` usable as a model field type
    """

    def _validate(value: Any) -> Any:
        if isinstance(value, key_type):
            return value
        return decode_secret_key(value, core=core)

    def _serialize(key: Any) -> str:
        return encode_secret_key(key, core=core)

    return Annotated[
        key_type,
        BeforeValidator(_validate),
        PlainSerializer(_serialize, return_type=str),
    ]


def public_key_field(
    core: Optional[PointConverter] = None,
    key_type: type = PublicKey,
    strict: bool = False
) -> Any:
    """
    Build an annotated public key type bound to a core.

    Args:
        core: Point converter, defaults to secp256k1
        key_type: Class of the keys the core produces
        strict: Reject records missing a coordinate

    Returns:
        ``Annotated[key_type, ...]`` usable as a model field type
    """

    def _validate(value: Any) -> Any:
        if isinstance(value, key_type):
            return value
        return decode_public_key(value, core=core, strict=strict)

    def _serialize(key: Any) -> dict:
        return dict(encode_public_key(key, core=core))

    return Annotated[
        key_type,
        BeforeValidator(_validate),
        PlainSerializer(_serialize, return_type=dict),
    ]


SerdeSecretKey = secret_key_field()
SerdePublicKey = public_key_field()


class BaseModel(PydanticBaseModel):
    """
    Project base model for structures carrying keys.

    Key types are not pydantic-native, so arbitrary types are allowed.
    Extra fields are rejected, instances are immutable, and rejected
    input is not echoed in validation errors.
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra='forbid',
        frozen=True,
        hide_input_in_errors=True,
    )

    def json_dumpb(self) -> bytes:
        """Utility method for converting a Model into bytes representation of a JSON."""
        return self.model_dump_json().encode('utf-8')
