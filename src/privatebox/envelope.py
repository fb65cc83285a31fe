"""Byte layout of private-box envelopes."""

from typing import Iterator, Tuple

from .types import (
    DEFAULT_MAX_RECIPIENTS,
    HEADER_SIZE,
    MIN_ENVELOPE_SIZE,
    NONCE_SIZE,
    SLOT_SIZE,
    TAG_SIZE,
)


def slot_offset(index: int) -> int:
    """Offset of the wrapped-key slot at ``index``."""
    return HEADER_SIZE + SLOT_SIZE * index


def body_offset(recipient_count: int) -> int:
    """Offset of the sealed body in an envelope with ``recipient_count`` slots."""
    return slot_offset(recipient_count)


def envelope_size(recipient_count: int, plaintext_length: int) -> int:
    """
    Exact size of an envelope.

    Format:
        [0-23]           nonce (24 bytes)
        [24-55]          ephemeral public key (32 bytes)
        [56-56+49n)      n wrapped-key slots (49 bytes each)
        [56+49n-end)     sealed body (plaintext + 16-byte tag)
    """
    return body_offset(recipient_count) + plaintext_length + TAG_SIZE


def overhead(recipient_count: int) -> int:
    """Bytes an envelope adds on top of the plaintext."""
    return envelope_size(recipient_count, 0)


def split_header(data: bytes) -> Tuple[bytes, bytes]:
    """
    Split the nonce and ephemeral public key off the front of an envelope.

    Args:
        data: Envelope bytes

    Returns:
        Tuple of (nonce, ephemeral_public_key)

    Raises:
        ValueError: If data is shorter than the header
    """
    if len(data) < HEADER_SIZE:
        raise ValueError(f"Data too short: {len(data)} bytes (minimum {HEADER_SIZE})")
    data = bytes(data[:HEADER_SIZE])
    return data[:NONCE_SIZE], data[NONCE_SIZE:HEADER_SIZE]


def slots(data: bytes, max_recipients: int = DEFAULT_MAX_RECIPIENTS) -> Iterator[Tuple[int, bytes]]:
    """
    Yield ``(index, slot)`` for every slot position that fits in ``data``.

    A position only counts if a whole slot lies in front of the minimum
    body tag. Slots carry no recipient marker, so every position is yielded
    whether or not the envelope actually holds that many recipients.
    """
    limit = len(data) - TAG_SIZE
    for index in range(max_recipients):
        offset = slot_offset(index)
        if offset + SLOT_SIZE > limit:
            continue
        yield index, bytes(data[offset : offset + SLOT_SIZE])


def is_private_box(data: bytes) -> bool:
    """
    Check if data is long enough to be a private-box envelope.

    Envelopes are indistinguishable from random bytes, so this is only a
    length check.
    """
    return len(data) >= MIN_ENVELOPE_SIZE
