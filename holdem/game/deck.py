"""Card supply implementation."""
import random
from enum import Enum
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

from holdem.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Suit(str, Enum):
    """Card suits."""
    DIAMONDS = "d"
    HEARTS = "h"
    CLUBS = "c"
    SPADES = "s"

    def __str__(self) -> str:
        return self.value


class Rank(int, Enum):
    """Card ranks (2-14, where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'Ah', '10s', '2c'.

        Args:
            s: Card string (rank + suit).

        Returns:
            Card instance.
        """
        suit = Suit(s[-1].lower())
        rank_str = s[:-1].upper()

        rank_map = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}
        if rank_str in rank_map:
            rank = Rank(rank_map[rank_str])
        else:
            rank = Rank(int(rank_str))

        return cls(rank=rank, suit=suit)


def standard_cards() -> list[Card]:
    """The canonical 52-card set, ordered by suit then rank."""
    return [
        Card(rank=rank, suit=suit)
        for suit in Suit
        for rank in Rank
    ]


class Deck(Generic[T]):
    """An ordered supply of cards.

    The end of the internal list is the top of the deck, so drawing is a
    plain ``pop()``. Cards returned with :meth:`add` go to the bottom.
    The deck knows nothing about the game; any card type works.
    """

    def __init__(
        self,
        cards: Optional[Iterable[T]] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize a deck.

        Args:
            cards: Cards in bottom-to-top order. Defaults to the canonical
                52-card set in order (unshuffled).
            rng: Random source for shuffling and picking. Defaults to a
                new, unseeded ``random.Random``.
        """
        self._cards: list[T] = list(cards) if cards is not None else standard_cards()
        self._rng = rng or random.Random()

    @classmethod
    def standard(cls, rng: Optional[random.Random] = None) -> "Deck[Card]":
        """Create an ordered canonical 52-card deck."""
        return cls(standard_cards(), rng=rng)

    @classmethod
    def shuffled(cls, times: int = 1, rng: Optional[random.Random] = None) -> "Deck[Card]":
        """Create a canonical deck shuffled ``times`` times."""
        deck = cls.standard(rng=rng)
        for _ in range(times):
            deck.shuffle()
        return deck

    def shuffle(self) -> "Deck[T]":
        """Shuffle the deck in place (Fisher-Yates).

        Returns:
            The deck, for chaining.
        """
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug(f"Shuffled {len(cards)} cards")
        return self

    def draw(self) -> Optional[T]:
        """Draw the top card.

        Returns:
            The card, or None if the deck is empty.
        """
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_many(self, count: int) -> list[T]:
        """Draw up to ``count`` cards from the top of the deck.

        The result is shorter than ``count`` when the deck runs out, so
        callers must check its length.

        Args:
            count: Number of cards to draw.

        Returns:
            The drawn cards, in draw order.
        """
        drawn = []
        for _ in range(count):
            card = self.draw()
            if card is not None:
                drawn.append(card)
        return drawn

    def pick(self) -> Optional[T]:
        """Remove a card from a random position.

        Returns:
            The card, or None if the deck is empty.
        """
        if not self._cards:
            return None
        return self._cards.pop(self._rng.randrange(len(self._cards)))

    def add(self, card: T) -> "Deck[T]":
        """Put a card on the bottom of the deck.

        Returns:
            The deck, for chaining.
        """
        self._cards.insert(0, card)
        return self

    @property
    def cards(self) -> list[T]:
        """Copy of the cards, bottom first."""
        return list(self._cards)

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
