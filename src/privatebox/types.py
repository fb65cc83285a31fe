"""Type definitions for private-box."""


# Wire layout constants
NONCE_SIZE = 24
PUBLIC_KEY_SIZE = 32
SECRET_KEY_SIZE = 32
MESSAGE_KEY_SIZE = 32
TAG_SIZE = 16
KEY_PAYLOAD_SIZE = 1 + MESSAGE_KEY_SIZE  # recipient count + message key
SLOT_SIZE = KEY_PAYLOAD_SIZE + TAG_SIZE  # 49 bytes
HEADER_SIZE = NONCE_SIZE + PUBLIC_KEY_SIZE  # 56 bytes
MIN_ENVELOPE_SIZE = HEADER_SIZE + SLOT_SIZE + TAG_SIZE  # 121 bytes

# Recipient limits
DEFAULT_MAX_RECIPIENTS = 7
RECIPIENT_LIMIT = 255  # largest count the one-byte prefix can carry


# Exception types
class PrivateBoxError(Exception):
    """Base exception for private-box errors."""
    pass


class InvalidPublicKeyError(PrivateBoxError):
    """Invalid recipient public key format, length or value."""
    pass


class InvalidSecretKeyError(PrivateBoxError):
    """Invalid secret key format or length."""
    pass


class RecipientLimitError(PrivateBoxError):
    """Too many recipients for the configured ceiling."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Too many recipients: {count} (max {limit})")


class ConfigurationError(PrivateBoxError):
    """Invalid box configuration."""
    pass


class EncryptionError(PrivateBoxError):
    """Encryption failed."""
    pass
