import pytest

from ecserde.utils import validation as v
from ecserde.constants import SECP256K1_N, SECP256K1_P


def test_hex_validation():
    assert v.is_valid_hex("1e240")
    assert v.is_valid_hex("ABCdef0123")
    assert not v.is_valid_hex("")
    assert not v.is_valid_hex("0x10")
    assert not v.is_valid_hex("10 ")
    assert not v.is_valid_hex(10)


def test_scalar_and_coordinate_ranges():
    assert v.is_valid_scalar(1)
    assert v.is_valid_scalar(SECP256K1_N - 1)
    assert not v.is_valid_scalar(0)
    assert not v.is_valid_scalar(SECP256K1_N)
    assert v.is_valid_coordinate(0)
    assert v.is_valid_coordinate(SECP256K1_P - 1)
    assert not v.is_valid_coordinate(SECP256K1_P)
    assert not v.is_valid_coordinate(-1)


def test_secret_key_validation():
    key = "11" * 32
    assert v.validate_secret_key(key) == bytes.fromhex(key)
    assert v.validate_secret_key("0x" + key) == bytes.fromhex(key)
    with pytest.raises(v.ValidationError):
        v.validate_secret_key("00" * 32)
    with pytest.raises(v.ValidationError):
        v.validate_secret_key(SECP256K1_N.to_bytes(32, "big"))
    with pytest.raises(v.ValidationError):
        v.validate_secret_key("11" * 31)
    with pytest.raises(v.ValidationError):
        v.validate_secret_key("zz" * 32)


def test_public_key_validation(pk_bytes):
    assert v.validate_public_key(pk_bytes) == pk_bytes
    assert v.validate_public_key(pk_bytes.hex()) == pk_bytes
    with pytest.raises(v.ValidationError):
        v.validate_public_key(b"\x02" + pk_bytes[1:33])
    with pytest.raises(v.ValidationError):
        v.validate_public_key(b"\x05" + pk_bytes[1:])
