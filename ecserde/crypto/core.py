"""
Boundary between the codecs and the cryptographic core.

The codecs never look inside a key. They only ask a core to convert a
secret key to and from its scalar, and a public key to and from its curve
point. Anything implementing these protocols can be plugged in.
"""

from typing import Any, Protocol, runtime_checkable

from ..crypto.keys import PublicKey, SecretKey
from ..types.common import Point

__all__ = [
    "IntegerConverter",
    "PointConverter",
    "CryptoCore",
    "Secp256k1Core",
    "get_default_core",
]


@runtime_checkable
class IntegerConverter(Protocol):
    """Converts secret keys to and from their scalar."""

    def to_int(self, key: Any) -> int:
        ...

    def from_int(self, value: int) -> Any:
        """Build a secret key, raising ValueError if the scalar is unusable."""
        ...


@runtime_checkable
class PointConverter(Protocol):
    """Converts public keys to and from their curve point."""

    def to_point(self, key: Any) -> Point:
        ...

    def from_point(self, point: Point) -> Any:
        """Build a public key, raising ValueError if the point is unusable."""
        ...


@runtime_checkable
class CryptoCore(IntegerConverter, PointConverter, Protocol):
    """Both converters in one object."""
    pass


class Secp256k1Core:
    """secp256k1 core backed by coincurve."""

    __slots__ = ()

    def to_int(self, key: SecretKey) -> int:
        return key.to_int()

    def from_int(self, value: int) -> SecretKey:
        return SecretKey.from_int(value)

    def to_point(self, key: PublicKey) -> Point:
        return key.point

    def from_point(self, point: Point) -> PublicKey:
        return PublicKey.from_point(point)

    def __repr__(self) -> str:
        return "Secp256k1Core()"


_DEFAULT_CORE = Secp256k1Core()


def get_default_core() -> Secp256k1Core:
    """Get the core used when a codec is called without one."""
    return _DEFAULT_CORE
