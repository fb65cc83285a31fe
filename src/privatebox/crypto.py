"""Encryption and decryption of private-box envelopes."""

import logging
import os
from typing import List, Optional, Sequence

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from .config import BoxConfig, DEFAULT_CONFIG, MatchPolicy, OverflowPolicy
from .envelope import body_offset, envelope_size, slots, split_header
from .keys import (
    PublicKeyLike,
    SecretKeyLike,
    private_key_from_bytes,
    public_key_from_bytes,
    public_key_to_bytes,
)
from .memory import secret_buffer
from .types import (
    EncryptionError,
    InvalidPublicKeyError,
    KEY_PAYLOAD_SIZE,
    MESSAGE_KEY_SIZE,
    MIN_ENVELOPE_SIZE,
    NONCE_SIZE,
    RecipientLimitError,
    TAG_SIZE,
)

logger = logging.getLogger(__name__)


def encrypt(
    plaintext: bytes,
    recipients: Sequence[PublicKeyLike],
    config: Optional[BoxConfig] = None,
) -> bytes:
    """
    Encrypt a message to a list of recipients.

    Any one of the recipients can open the result with ``decrypt``; nobody
    else learns the plaintext, who the recipients are, or how many there are.

    Args:
        plaintext: Message to encrypt (may be empty)
        recipients: Recipient public keys, 32 raw bytes or X25519PublicKey each
        config: Recipient ceiling and overflow handling

    Returns:
        Envelope bytes, exactly ``56 + 49 * n + len(plaintext) + 16`` long

    Raises:
        InvalidPublicKeyError: If a recipient key is malformed or low-order
        TypeError: If plaintext is not bytes, bytearray or memoryview
        RecipientLimitError: If there are too many recipients and the
            overflow policy is RAISE
    """
    config = config or DEFAULT_CONFIG
    config.validate()

    message = _require_bytes(plaintext, "plaintext")

    recipient_keys = _select_recipients(recipients, config)
    count = len(recipient_keys)
    if count == 0:
        logger.warning("Encrypting to zero recipients; the envelope cannot be opened")

    ephemeral_private = X25519PrivateKey.generate()

    # The ephemeral public key is not secret; it is cleared with the rest
    with secret_buffer(os.urandom(NONCE_SIZE)) as nonce, \
            secret_buffer(os.urandom(MESSAGE_KEY_SIZE)) as message_key, \
            secret_buffer(public_key_to_bytes(ephemeral_private.public_key())) as ephemeral_public, \
            secret_buffer(KEY_PAYLOAD_SIZE) as payload:
        payload[0] = count
        payload[1:] = message_key
        nonce_bytes = bytes(nonce)

        parts = [nonce_bytes, bytes(ephemeral_public)]
        for recipient in recipient_keys:
            parts.append(_seal_slot(payload, nonce_bytes, ephemeral_private, recipient))
        parts.append(_seal(message, nonce_bytes, message_key))
        del ephemeral_private

    result = b"".join(parts)
    logger.debug("Encrypted %d-byte message to %d recipients (%d bytes)", len(message), count, len(result))
    return result


def decrypt(
    envelope: bytes,
    secret_key: SecretKeyLike,
    config: Optional[BoxConfig] = None,
) -> Optional[bytes]:
    """
    Attempt to open an envelope with a secret key.

    Every slot position up to the configured ceiling is tried, whether or
    not an earlier one opened, so the work done does not depend on where
    (or whether) the key matched.

    Args:
        envelope: Envelope bytes
        secret_key: Our secret key, 32 raw bytes or X25519PrivateKey
        config: Recipient ceiling and match policy

    Returns:
        The plaintext, or None if we are not a recipient or the envelope
        is malformed. The two cases are deliberately indistinguishable.

    Raises:
        InvalidSecretKeyError: If the secret key itself is malformed
        TypeError: If envelope is not bytes, bytearray or memoryview
    """
    config = config or DEFAULT_CONFIG
    config.validate()

    my_private = private_key_from_bytes(secret_key)
    data = _require_bytes(envelope, "envelope")

    if len(data) < MIN_ENVELOPE_SIZE:
        logger.debug("Envelope too short: %d bytes (minimum %d)", len(data), MIN_ENVELOPE_SIZE)
        return None

    nonce, ephemeral_public = split_header(data)
    try:
        shared = my_private.exchange(X25519PublicKey.from_public_bytes(ephemeral_public))
    except ValueError:
        logger.debug("Envelope carries a low-order ephemeral key")
        return None

    with secret_buffer(shared) as shared_key, secret_buffer(KEY_PAYLOAD_SIZE) as found:
        del shared
        matched = _open_slots(data, nonce, shared_key, found, config)
        if not matched:
            logger.debug("No slot opened; not a recipient")
            return None

        count = found[0]
        if count == 0 or count > config.max_recipients:
            logger.debug("Opened slot declares %d recipients (max %d)", count, config.max_recipients)
            return None

        offset = body_offset(count)
        if len(data) - offset < TAG_SIZE:
            logger.debug("Envelope too short for %d slots", count)
            return None

        with secret_buffer(memoryview(found)[1:]) as message_key:
            plaintext = _open(data[offset:], nonce, message_key)

    if plaintext is None:
        logger.debug("Message body failed authentication")
    return plaintext


def _require_bytes(value, name: str) -> bytes:
    """Copy a bytes-like argument, refusing anything that merely converts to bytes."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}")
    return bytes(value)


def _select_recipients(recipients: Sequence[PublicKeyLike], config: BoxConfig) -> List[X25519PublicKey]:
    """Validate recipient keys and apply the recipient ceiling."""
    keys = [public_key_from_bytes(recipient) for recipient in recipients]

    if len(keys) > config.max_recipients:
        if config.overflow is OverflowPolicy.RAISE:
            raise RecipientLimitError(len(keys), config.max_recipients)
        logger.warning(
            "Dropping %d of %d recipients (max %d)",
            len(keys) - config.max_recipients,
            len(keys),
            config.max_recipients,
        )
        keys = keys[: config.max_recipients]

    return keys


def _seal_slot(
    payload: bytearray,
    nonce: bytes,
    ephemeral_private: X25519PrivateKey,
    recipient: X25519PublicKey,
) -> bytes:
    """Wrap the count-prefixed message key for one recipient."""
    try:
        shared = ephemeral_private.exchange(recipient)
    except ValueError as e:
        raise InvalidPublicKeyError(f"Recipient public key is a low-order point: {e}") from e

    with secret_buffer(shared) as shared_key:
        del shared
        return _seal(payload, nonce, shared_key)


def _seal(message: bytes, nonce: bytes, key: bytearray) -> bytes:
    """Seal ``message``, returning tag followed by ciphertext."""
    try:
        return SecretBox(bytes(key)).encrypt(bytes(message), nonce).ciphertext
    except CryptoError as e:
        raise EncryptionError(f"Sealing failed: {e}") from e


def _open(ciphertext: bytes, nonce: bytes, key: bytearray) -> Optional[bytes]:
    """Open a sealed value, returning None if authentication fails."""
    try:
        return SecretBox(bytes(key)).decrypt(ciphertext, nonce)
    except CryptoError:
        return None


def _open_slots(
    data: bytes,
    nonce: bytes,
    shared_key: bytearray,
    found: bytearray,
    config: BoxConfig,
) -> bool:
    """
    Trial-open every slot position, copying the winning payload into ``found``.

    Returns:
        True if any slot opened under ``shared_key``
    """
    matched = False
    for _, slot in slots(data, config.max_recipients):
        opened = _open(slot, nonce, shared_key)
        if opened is None:
            continue
        with secret_buffer(opened) as payload:
            del opened
            if not matched or config.match is MatchPolicy.LAST:
                found[:] = payload
                matched = True
    return matched


def expected_size(plaintext_length: int, recipient_count: int, config: Optional[BoxConfig] = None) -> int:
    """Size of the envelope ``encrypt`` produces for the given inputs."""
    config = config or DEFAULT_CONFIG
    return envelope_size(min(recipient_count, config.max_recipients), plaintext_length)
