"""
private-box - Anonymous multi-recipient encryption

Python implementation of the private-box format using Curve25519 +
XSalsa20-Poly1305. Envelopes name up to 7 recipients (by default) without
revealing who they are or how many there are.
"""

import logging

import nacl.bindings

from .keys import (
    generate_keypair,
    public_key_from_secret,
    scalarmult,
)
from .crypto import encrypt, decrypt, expected_size
from .envelope import (
    envelope_size,
    overhead,
    is_private_box,
)
from .config import (
    BoxConfig,
    DEFAULT_CONFIG,
    MatchPolicy,
    OverflowPolicy,
)
from .memory import wipe, secret_buffer
from .types import (
    DEFAULT_MAX_RECIPIENTS,
    RECIPIENT_LIMIT,
    MIN_ENVELOPE_SIZE,
    PrivateBoxError,
    InvalidPublicKeyError,
    InvalidSecretKeyError,
    RecipientLimitError,
    ConfigurationError,
    EncryptionError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def init() -> None:
    """
    Initialise libsodium.

    PyNaCl already does this when it is imported; calling it again is a
    no-op, so this only exists for parity with other private-box libraries.
    """
    nacl.bindings.sodium_init()


__version__ = "0.1.0"

__all__ = [
    "init",
    # Keys
    "generate_keypair",
    "public_key_from_secret",
    "scalarmult",
    # Crypto
    "encrypt",
    "decrypt",
    "expected_size",
    # Envelope
    "envelope_size",
    "overhead",
    "is_private_box",
    # Config
    "BoxConfig",
    "DEFAULT_CONFIG",
    "MatchPolicy",
    "OverflowPolicy",
    # Memory
    "wipe",
    "secret_buffer",
    # Errors
    "PrivateBoxError",
    "InvalidPublicKeyError",
    "InvalidSecretKeyError",
    "RecipientLimitError",
    "ConfigurationError",
    "EncryptionError",
    # Constants
    "DEFAULT_MAX_RECIPIENTS",
    "RECIPIENT_LIMIT",
    "MIN_ENVELOPE_SIZE",
]
