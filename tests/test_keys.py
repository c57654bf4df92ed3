import pytest

from ecserde.crypto.keys import SecretKey, PublicKey
from ecserde.constants import SECP256K1_N, SECP256K1_P
from ecserde.exceptions import KeyConstructionError, ValidationError
from ecserde.types.common import Point


def test_secret_key_int_roundtrip():
    key = SecretKey.from_int(123456)
    assert key.to_int() == 123456
    assert key.hex() == "0" * 59 + "1e240"
    assert SecretKey(key.secret) == key
    assert SecretKey(key) == key


def test_secret_key_range():
    assert SecretKey.from_int(SECP256K1_N - 1).to_int() == SECP256K1_N - 1
    for bad in [0, -1, SECP256K1_N, 2**256]:
        with pytest.raises(KeyConstructionError):
            SecretKey.from_int(bad)


def test_secret_key_repr_is_masked():
    key = SecretKey("ab" * 32)
    assert repr(key) == "SecretKey(abab...abab)"
    assert key.hex() not in repr(key)


def test_secret_key_public_key():
    # 1 * G
    pub = SecretKey.from_int(1).public_key()
    assert pub.point.x == 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    assert pub.point.y == 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


def test_public_key_from_bytes(pk_bytes, pk_record):
    pub = PublicKey(pk_bytes)
    assert pub.point == Point(int(pk_record["x"], 16), int(pk_record["y"], 16))
    assert pub.format() == pk_bytes
    assert pub.hex() == pk_bytes.hex()
    assert PublicKey(pub) == pub


def test_public_key_from_point(pk_bytes, pk_record):
    point = Point(int(pk_record["x"], 16), int(pk_record["y"], 16))
    assert PublicKey.from_point(point) == PublicKey(pk_bytes)
    assert hash(PublicKey.from_point(point)) == hash(PublicKey(pk_bytes))


def test_public_key_rejects_invalid_points(pk_record):
    x = int(pk_record["x"], 16)
    with pytest.raises(KeyConstructionError):
        PublicKey.from_point(Point(x, 1))
    with pytest.raises(KeyConstructionError) as exc_info:
        PublicKey.from_point(Point(SECP256K1_P, 1))
    assert exc_info.value.field == "x"
    with pytest.raises(KeyConstructionError) as exc_info:
        PublicKey.from_point(Point(x, -1))
    assert exc_info.value.field == "y"


def test_public_key_rejects_compressed(pk_bytes):
    with pytest.raises(ValidationError):
        PublicKey(b"\x02" + pk_bytes[1:33])


def test_keys_are_not_equal_across_types():
    sk = SecretKey.from_int(1)
    assert sk != sk.public_key()
    assert sk != 1
