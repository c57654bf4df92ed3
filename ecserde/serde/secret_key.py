"""Secret key codec: secret key <-> canonical hex scalar."""

from typing import Any, Optional

from ..crypto.core import IntegerConverter, get_default_core
from ..exceptions import HexParseError, KeyConstructionError
from ..types.common import HexStr
from ..utils.encoding import hex_to_int, int_to_hex

__all__ = ["encode_secret_key", "decode_secret_key"]


def encode_secret_key(key: Any, core: Optional[IntegerConverter] = None) -> HexStr:
    """
    Encode secret key as the canonical hex of its scalar.

    Args:
        key: Secret key understood by the core
        core: Integer converter, defaults to secp256k1

    Returns:
        Canonical hex string, e.g. ``"1e240"`` for scalar 123456
    """
    if core is None:
        core = get_default_core()
    return int_to_hex(core.to_int(key))


def decode_secret_key(text: str, core: Optional[IntegerConverter] = None) -> Any:
    """
    Decode secret key from hex scalar.

    Args:
        text: Hex digits, either case
        core: Integer converter, defaults to secp256k1

    Returns:
        Secret key built by the core

    Raises:
        HexParseError: If text is not hex
        KeyConstructionError: If the core rejects the scalar
    """
    if core is None:
        core = get_default_core()

    try:
        scalar = hex_to_int(text)
    except HexParseError:
        # the rejected text is secret material, keep it out of the error
        raise HexParseError("Secret key is not a valid hex string") from None

    try:
        return core.from_int(scalar)
    except KeyConstructionError:
        raise
    except ValueError as e:
        raise KeyConstructionError(f"Secret key rejected: {e}") from e
