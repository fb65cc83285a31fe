"""Configuration for building and opening private-box envelopes."""

from dataclasses import dataclass
from enum import Enum

from .types import (
    ConfigurationError,
    DEFAULT_MAX_RECIPIENTS,
    RECIPIENT_LIMIT,
)


class OverflowPolicy(Enum):
    """What to do when more recipients are given than the ceiling allows."""
    TRUNCATE = "truncate"
    RAISE = "raise"


class MatchPolicy(Enum):
    """Which slot wins if more than one opens under the same key."""
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class BoxConfig:
    """
    Configuration shared by the envelope builder and parser.

    Both sides must use the same ``max_recipients``: the parser only scans
    that many slot positions, so an envelope built with a larger ceiling may
    not open under a smaller one. The defaults produce envelopes that are
    byte-compatible with every other private-box implementation.
    """
    max_recipients: int = DEFAULT_MAX_RECIPIENTS
    overflow: OverflowPolicy = OverflowPolicy.TRUNCATE
    match: MatchPolicy = MatchPolicy.FIRST

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        if isinstance(self.max_recipients, bool) or not isinstance(self.max_recipients, int):
            raise ConfigurationError(
                f"max_recipients must be an int, got {type(self.max_recipients).__name__}"
            )
        if not 1 <= self.max_recipients <= RECIPIENT_LIMIT:
            raise ConfigurationError(
                f"max_recipients must be between 1 and {RECIPIENT_LIMIT}, got {self.max_recipients}"
            )
        if not isinstance(self.overflow, OverflowPolicy):
            raise ConfigurationError(f"Unknown overflow policy: {self.overflow!r}")
        if not isinstance(self.match, MatchPolicy):
            raise ConfigurationError(f"Unknown match policy: {self.match!r}")


DEFAULT_CONFIG = BoxConfig()
