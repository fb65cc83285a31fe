"""Tests for envelope layout helpers."""

import pytest
from privatebox.crypto import encrypt
from privatebox.envelope import (
    body_offset,
    envelope_size,
    is_private_box,
    overhead,
    slot_offset,
    slots,
    split_header,
)
from privatebox.keys import generate_keypair
from privatebox.types import HEADER_SIZE, MIN_ENVELOPE_SIZE, SLOT_SIZE


class TestLayout:
    """Test offset and size arithmetic."""

    def test_constants(self) -> None:
        """Layout constants match the wire format."""
        assert HEADER_SIZE == 56
        assert SLOT_SIZE == 49
        assert MIN_ENVELOPE_SIZE == 121

    def test_offsets(self) -> None:
        """Slots follow the header back to back."""
        assert slot_offset(0) == 56
        assert slot_offset(1) == 105
        assert slot_offset(6) == 350
        assert body_offset(2) == 154
        assert body_offset(7) == 399

    @pytest.mark.parametrize("count,length,expected", [
        (1, 0, 121),
        (2, 3, 173),
        (7, 0, 415),
        (7, 100, 515),
    ])
    def test_envelope_size(self, count: int, length: int, expected: int) -> None:
        """Envelope size is header + slots + plaintext + tag."""
        assert envelope_size(count, length) == expected

    def test_overhead_range(self) -> None:
        """Overhead runs from 121 bytes (one recipient) to 415 (seven)."""
        assert overhead(1) == 121
        assert overhead(7) == 415


class TestParsing:
    """Test splitting envelopes into parts."""

    def test_split_header(self) -> None:
        """Nonce and ephemeral key are the first 24 and next 32 bytes."""
        data = bytes(range(60))
        nonce, ephemeral_public = split_header(data)

        assert nonce == bytes(range(24))
        assert ephemeral_public == bytes(range(24, 56))

    def test_split_header_too_short(self) -> None:
        """Data shorter than the header is rejected."""
        with pytest.raises(ValueError, match="too short"):
            split_header(bytes(55))

    def test_slots_stop_before_body_tag(self) -> None:
        """Only positions with room for a whole slot plus a tag are yielded."""
        _, public = generate_keypair()
        envelope = encrypt(b"", [public, public])

        indexes = [index for index, _ in slots(envelope)]
        assert indexes == [0, 1]
        assert all(len(slot) == SLOT_SIZE for _, slot in slots(envelope))

    def test_slots_ignore_recipient_count(self) -> None:
        """Long bodies make later positions visible even with one recipient."""
        _, public = generate_keypair()
        envelope = encrypt(bytes(1000), [public])

        assert [index for index, _ in slots(envelope)] == list(range(7))
        assert [index for index, _ in slots(envelope, max_recipients=3)] == [0, 1, 2]

    def test_slot_contents(self) -> None:
        """Each yielded slot is the matching 49-byte window."""
        data = bytes(i % 256 for i in range(400))
        for index, slot in slots(data):
            assert slot == data[slot_offset(index) : slot_offset(index) + SLOT_SIZE]

    def test_is_private_box(self) -> None:
        """Only the length can be checked."""
        assert is_private_box(bytes(MIN_ENVELOPE_SIZE))
        assert not is_private_box(bytes(MIN_ENVELOPE_SIZE - 1))
        assert not is_private_box(b"")
