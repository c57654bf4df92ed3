"""
ecserde Usage Examples

This file demonstrates encoding keys inside pydantic models and calling
the codecs directly.
"""

import logging

from ecserde import (
    SecretKey,
    SerializationError,
    decode_public_key,
    encode_secret_key,
)
from ecserde.serde import BaseModel, SerdePublicKey, SerdeSecretKey

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class KeyPair(BaseModel):
    sk: SerdeSecretKey
    pk: SerdePublicKey


def model_example():
    """Example 1: Keys as model fields."""
    print("\n=== Model Example ===")

    sk = SecretKey.from_int(123456)
    pair = KeyPair(sk=sk, pk=sk.public_key())

    s = pair.model_dump_json()
    print(f"Serialized: {s}")

    loaded = KeyPair.model_validate_json(s)
    print(f"Round trip equal: {loaded == pair}")


def codec_example():
    """Example 2: Codecs without a model."""
    print("\n=== Codec Example ===")

    print(f"Secret scalar 123456 -> {encode_secret_key(SecretKey.from_int(123456))}")

    try:
        decode_public_key({"x": "1", "w": "2"})
    except SerializationError as e:
        print(f"Rejected record: {e}")

    try:
        # y defaults to 0, which is not on secp256k1
        decode_public_key({"x": "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"})
    except SerializationError as e:
        print(f"Rejected record: {e}")


def main():
    """Run all examples."""
    model_example()
    codec_example()


if __name__ == "__main__":
    main()
