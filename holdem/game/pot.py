"""Pot accounting."""
from dataclasses import dataclass, field

from holdem.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Pot:
    """Chips moved from players into the middle during a hand."""

    total: int = 0
    _contributions: dict[str, int] = field(default_factory=dict)  # name -> chips put in this hand

    def add_bet(self, name: str, amount: int) -> None:
        """Add chips to the pot.

        Args:
            name: Contributing player's name.
            amount: Chips moved in.
        """
        if amount < 0:
            raise ValueError("Cannot add a negative amount to the pot")
        self._contributions[name] = self._contributions.get(name, 0) + amount
        self.total += amount

    def get_contribution(self, name: str) -> int:
        """Total chips a player has put in this hand (antes included)."""
        return self._contributions.get(name, 0)

    def take(self) -> int:
        """Empty the pot.

        Returns:
            The chips that were in it.
        """
        amount = self.total
        self.reset()
        logger.info(f"Pot of {amount} taken for settlement")
        return amount

    def reset(self) -> None:
        """Reset the pot for a new hand."""
        self.total = 0
        self._contributions = {}

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "contributions": dict(self._contributions),
        }
