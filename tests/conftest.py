import pytest

from ecserde.types.common import Point


# secp256k1 point used across the codec tests
PK_X = "363995efa294aff6feef4b9a980a52eae055dc286439791ea25e9c87434a31b3"
PK_Y = "39ec35a27c9590a84d4a1e48d3e56e6f3760c156e3b798c39b33f77b713ce4bc"
PK_UNCOMPRESSED = bytes.fromhex("04" + PK_X + PK_Y)


class FakeSecretKey:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, FakeSecretKey) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


class FakePublicKey:
    def __init__(self, point):
        self.point = point

    def __eq__(self, other):
        return isinstance(other, FakePublicKey) and self.point == other.point

    def __hash__(self):
        return hash(self.point)


class FakeCore:
    """Core without any curve validation."""

    secret_key_type = FakeSecretKey
    public_key_type = FakePublicKey

    def to_int(self, key):
        return key.value

    def from_int(self, value):
        return FakeSecretKey(value)

    def to_point(self, key):
        return key.point

    def from_point(self, point):
        return FakePublicKey(Point(*point))


class RejectingCore(FakeCore):
    """Core that refuses to build any key."""

    def from_int(self, value):
        raise ValueError("scalar rejected by core")

    def from_point(self, point):
        raise ValueError("point rejected by core")


@pytest.fixture
def fake_core():
    return FakeCore()


@pytest.fixture
def rejecting_core():
    return RejectingCore()


@pytest.fixture
def pk_record():
    return {"x": PK_X, "y": PK_Y}


@pytest.fixture
def pk_bytes():
    return PK_UNCOMPRESSED
