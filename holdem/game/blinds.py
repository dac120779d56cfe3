"""Forced bet structure."""
from dataclasses import dataclass

from holdem.game.errors import ConfigurationError


@dataclass(frozen=True)
class Blinds:
    """Small blind, big blind and ante, in chips."""

    small_blind: int = 0
    big_blind: int = 0
    ante: int = 0

    def __post_init__(self) -> None:
        for name in ("small_blind", "big_blind", "ante"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative")

    @property
    def total(self) -> int:
        """Sum of the small blind, big blind and ante."""
        return self.small_blind + self.big_blind + self.ante

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
            "ante": self.ante,
        }
