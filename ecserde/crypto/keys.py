"""Key wrappers for secp256k1."""

from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import SECRET_KEY_LENGTH
from ..exceptions import KeyConstructionError
from ..types.common import HexStr, Point, PublicKeyBytes, SecretKeyBytes
from ..utils.encoding import bytes_to_hex, bytes_to_int, int_to_bytes
from ..utils.validation import (
    is_valid_coordinate,
    is_valid_scalar,
    validate_public_key,
    validate_secret_key,
)

__all__ = ["SecretKey", "PublicKey"]


class SecretKey:
    """
    secp256k1 secret key wrapper.

    Owns a single scalar in the range [1, n). Instances are immutable.
    """

    __slots__ = ("_secret", "_key")

    def __init__(self, key: Union[bytes, str, "SecretKey"]) -> None:
        """
        Initialize secret key.

        Args:
            key: Secret key as 32 bytes, hex string, or another SecretKey

        Raises:
            ValidationError: If key format is invalid
        """
        if isinstance(key, SecretKey):
            self._secret = key._secret
            self._key = key._key
            return

        self._secret = SecretKeyBytes(validate_secret_key(key))
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def from_int(cls, value: int) -> "SecretKey":
        """
        Build secret key from its scalar.

        Args:
            value: Scalar, must satisfy 0 < value < n

        Returns:
            New SecretKey instance

        Raises:
            KeyConstructionError: If scalar is out of range
        """
        if not is_valid_scalar(value):
            # never echo the scalar back, it is secret material
            raise KeyConstructionError("Secret scalar must be in range [1, n) for secp256k1")
        return cls(int_to_bytes(value, SECRET_KEY_LENGTH))

    def to_int(self) -> int:
        """Get the scalar."""
        return bytes_to_int(self._secret)

    @property
    def secret(self) -> SecretKeyBytes:
        """Get secret key as bytes."""
        return self._secret

    def hex(self) -> HexStr:
        """Get secret key as fixed-width (64 digit) hex string."""
        return bytes_to_hex(self._secret)

    def public_key(self) -> "PublicKey":
        """Get corresponding public key."""
        return PublicKey(self._key.public_key.format(compressed=False))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash((SecretKey, self._secret))

    def __repr__(self) -> str:
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        return f"SecretKey({hex_str[:4]}...{hex_str[-4:]})"


class PublicKey:
    """
    secp256k1 public key wrapper.

    Owns an affine curve point. Instances are immutable.
    """

    __slots__ = ("_point", "_key")

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: Uncompressed SEC1 public key as bytes, hex string,
                or another PublicKey

        Raises:
            ValidationError: If key format is invalid
            KeyConstructionError: If the point is not on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._key = key._key
            return

        key_bytes = validate_public_key(key)
        try:
            self._key = SecpPublicKey(key_bytes)
        except ValueError as e:
            raise KeyConstructionError(f"Invalid public key: {e}") from e
        self._point = Point(*self._key.point())

    @classmethod
    def from_point(cls, point: Point) -> "PublicKey":
        """
        Build public key from affine coordinates.

        Args:
            point: Curve point

        Returns:
            New PublicKey instance

        Raises:
            KeyConstructionError: If a coordinate is outside the field
                or the point is not on the curve
        """
        x, y = point
        for name, value in (("x", x), ("y", y)):
            if not is_valid_coordinate(value):
                raise KeyConstructionError(
                    f"Coordinate {name} is not a field element",
                    field=name,
                    data=point,
                )
        try:
            secp_key = SecpPublicKey.from_point(x, y)
        except ValueError as e:
            raise KeyConstructionError(f"Point is not on the curve: {e}", data=point) from e
        return cls(secp_key.format(compressed=False))

    @property
    def point(self) -> Point:
        """Get affine curve point."""
        return self._point

    def format(self) -> PublicKeyBytes:
        """Get public key as 65 uncompressed bytes."""
        return PublicKeyBytes(self._key.format(compressed=False))

    def hex(self) -> HexStr:
        """Get public key as uncompressed hex string."""
        return bytes_to_hex(self.format())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._point == other._point

    def __hash__(self) -> int:
        return hash((PublicKey, self._point))

    def __repr__(self) -> str:
        return f"PublicKey(x={self._point.x:x}, y={self._point.y:x})"
