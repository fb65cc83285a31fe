"""Curve25519 key handling for private-box."""

from typing import Tuple, Union

from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from .types import (
    InvalidPublicKeyError,
    InvalidSecretKeyError,
    PUBLIC_KEY_SIZE,
    SECRET_KEY_SIZE,
)

KEY_DERIVATION_SALT = b"private-box-v1-keypair"
KEY_DERIVATION_INFO = b"x25519-key"

PublicKeyLike = Union[bytes, bytearray, memoryview, X25519PublicKey]
SecretKeyLike = Union[bytes, bytearray, memoryview, X25519PrivateKey]


def generate_keypair() -> Tuple[bytes, bytes]:
    """
    Generate a random X25519 key pair.

    Returns:
        Tuple of (secret_key, public_key), 32 raw bytes each
    """
    private_key = X25519PrivateKey.generate()
    return private_key_to_bytes(private_key), public_key_to_bytes(private_key.public_key())


def derive_keys_from_seed(seed: bytes) -> Tuple[bytes, bytes]:
    """
    Derive an X25519 key pair from a 32-byte seed using HKDF-SHA256.

    The salt and info labels are specific to this package, so the result
    does not match libsodium's crypto_box_seed_keypair or any other
    library's seeded keypairs. Use it for reproducible fixtures, not to
    recreate keys made elsewhere.

    Args:
        seed: 32-byte seed

    Returns:
        Tuple of (secret_key, public_key), 32 raw bytes each
    """
    if len(seed) != 32:
        raise ValueError(f"Seed must be 32 bytes, got {len(seed)}")

    hkdf = HKDF(
        algorithm=SHA256(),
        length=32,
        salt=KEY_DERIVATION_SALT,
        info=KEY_DERIVATION_INFO,
    )
    private_key = X25519PrivateKey.from_private_bytes(hkdf.derive(bytes(seed)))
    return private_key_to_bytes(private_key), public_key_to_bytes(private_key.public_key())


def public_key_from_secret(secret_key: SecretKeyLike) -> bytes:
    """Return the raw public key belonging to a secret key."""
    return public_key_to_bytes(private_key_from_bytes(secret_key).public_key())


def scalarmult(secret_key: SecretKeyLike, public_key: PublicKeyLike) -> bytes:
    """
    Perform X25519 key agreement.

    Args:
        secret_key: Our secret key
        public_key: Their public key

    Returns:
        32-byte shared secret

    Raises:
        ValueError: If the public key is a low-order point
    """
    return private_key_from_bytes(secret_key).exchange(public_key_from_bytes(public_key))


def public_key_to_bytes(public_key: X25519PublicKey) -> bytes:
    """Convert X25519 public key to raw bytes."""
    return public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)


def private_key_to_bytes(private_key: X25519PrivateKey) -> bytes:
    """Convert X25519 private key to raw bytes."""
    return private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())


def public_key_from_bytes(data: PublicKeyLike) -> X25519PublicKey:
    """Create X25519 public key from raw bytes."""
    if isinstance(data, X25519PublicKey):
        return data
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidPublicKeyError(f"Public key must be bytes, got {type(data).__name__}")
    if len(data) != PUBLIC_KEY_SIZE:
        raise InvalidPublicKeyError(
            f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(data)}"
        )
    try:
        return X25519PublicKey.from_public_bytes(bytes(data))
    except ValueError as e:
        raise InvalidPublicKeyError(f"Invalid X25519 public key: {e}") from e


def private_key_from_bytes(data: SecretKeyLike) -> X25519PrivateKey:
    """Create X25519 private key from raw bytes."""
    if isinstance(data, X25519PrivateKey):
        return data
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidSecretKeyError(f"Secret key must be bytes, got {type(data).__name__}")
    if len(data) != SECRET_KEY_SIZE:
        raise InvalidSecretKeyError(
            f"Secret key must be {SECRET_KEY_SIZE} bytes, got {len(data)}"
        )
    return X25519PrivateKey.from_private_bytes(bytes(data))
