"""Public key codec: public key <-> ``{"x": <hex>, "y": <hex>}``."""

import logging
from collections import abc
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..constants import PUBLIC_KEY_FIELDS
from ..crypto.core import PointConverter, get_default_core
from ..exceptions import (
    HexParseError,
    KeyConstructionError,
    MissingFieldError,
    SerializationError,
    UnknownFieldError,
)
from ..types.common import EncodedPublicKey, Point
from ..utils.encoding import hex_to_int, int_to_hex

__all__ = ["encode_public_key", "decode_public_key"]

logger = logging.getLogger(__name__)

PublicKeyRecord = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def encode_public_key(key: Any, core: Optional[PointConverter] = None) -> EncodedPublicKey:
    """
    Encode public key as a two-field record of hex coordinates.

    Args:
        key: Public key understood by the core
        core: Point converter, defaults to secp256k1

    Returns:
        ``{"x": <hex>, "y": <hex>}``
    """
    if core is None:
        core = get_default_core()
    x, y = core.to_point(key)
    return EncodedPublicKey(x=int_to_hex(x), y=int_to_hex(y))


def _iter_fields(record: PublicKeyRecord) -> Iterator[Tuple[str, Any]]:
    if isinstance(record, abc.Mapping):
        yield from record.items()
        return
    if isinstance(record, (str, bytes)) or not isinstance(record, abc.Iterable):
        raise SerializationError(
            f"Expected public key record, got {type(record).__name__}",
            data=record,
        )
    for item in record:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise SerializationError(
                f"Expected (name, value) pair in public key record, got {item!r}",
                data=item,
            )
        yield item[0], item[1]


def _parse_coordinate(name: str, value: Any) -> int:
    try:
        return hex_to_int(value)
    except HexParseError as e:
        raise HexParseError(
            f"Public key field {name!r}: {e.message}",
            field=name,
            data=value,
        ) from e


def decode_public_key(
    record: PublicKeyRecord,
    core: Optional[PointConverter] = None,
    strict: bool = False
) -> Any:
    """
    Decode public key from a record of hex coordinates.

    Fields may come in any order. A repeated field overwrites the earlier
    value. A missing coordinate defaults to zero and is left for the core
    to reject, unless ``strict`` is set.

    Args:
        record: Mapping, or iterable of (name, value) pairs
        core: Point converter, defaults to secp256k1
        strict: Reject records missing ``x`` or ``y`` instead of
            defaulting them to zero

    Returns:
        Public key built by the core

    Raises:
        SerializationError: If record is not a mapping or pair stream
        UnknownFieldError: If a field other than ``x``/``y`` is present
        HexParseError: If a coordinate is not a hex string
        MissingFieldError: If a coordinate is absent in strict mode
        KeyConstructionError: If the core rejects the point
    """
    if core is None:
        core = get_default_core()

    coords: Dict[str, int] = {}
    for name, value in _iter_fields(record):
        if name not in PUBLIC_KEY_FIELDS:
            raise UnknownFieldError(name)
        if name in coords:
            logger.debug(f"Public key field {name!r} repeated, keeping last value")
        coords[name] = _parse_coordinate(name, value)

    for name in PUBLIC_KEY_FIELDS:
        if name not in coords:
            if strict:
                raise MissingFieldError(name)
            logger.debug(f"Public key field {name!r} missing, defaulting to 0")

    point = Point(x=coords.get("x", 0), y=coords.get("y", 0))

    try:
        return core.from_point(point)
    except KeyConstructionError:
        raise
    except ValueError as e:
        raise KeyConstructionError(f"Public key rejected: {e}", data=point) from e
