"""Player model."""
from dataclasses import dataclass, field
from typing import Any, Optional

from holdem.game.betting import BettingRound
from holdem.game.errors import ConfigurationError, GameStateError, IllegalAction
from holdem.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Player:
    """A player and their chip stack.

    ``seat`` is assigned by the game the player sits in. Wagering methods
    take the game's current :class:`BettingRound` instead of holding a
    reference to the game.
    """

    name: str
    cards: list[Any] = field(default_factory=list)
    chips: int = 0
    folded: bool = False
    current_bet: int = 0
    seat: Optional[int] = None

    def __post_init__(self) -> None:
        if self.chips < 0:
            raise ConfigurationError(f"{self.name} cannot start with negative chips")

    @property
    def is_active(self) -> bool:
        """Check if player is still in the current hand."""
        return not self.folded and self.seat is not None

    @property
    def is_all_in(self) -> bool:
        """Check if player is in the hand with no chips behind."""
        return self.is_active and self.chips == 0

    def collect_chips(self, amount: int, betting_round: BettingRound) -> int:
        """Move chips from this player into the pot.

        Args:
            amount: Chips requested; capped at the player's stack.
            betting_round: Round whose pot receives the chips.

        Returns:
            Chips actually moved.

        Raises:
            GameStateError: If the player is not seated in a game.
        """
        if self.seat is None:
            raise GameStateError(f"{self.name} is not seated in a game")

        collected = min(amount, self.chips)
        self.chips -= collected
        betting_round.collect(self.name, collected)
        return collected

    def bet(self, amount: int, betting_round: BettingRound) -> int:
        """Put ``amount`` more chips in, going all-in if it covers the stack.

        A bet that lifts this player's contribution above the largest bet
        is a raise.

        Args:
            amount: Chips to add to this round's contribution.
            betting_round: The current betting round.

        Returns:
            Chips actually wagered.

        Raises:
            IllegalAction: If the player is not active, the amount is
                negative, or the bet is below the minimum to continue.
        """
        if not self.is_active:
            raise IllegalAction(f"{self.name} is not active in this hand")
        if amount < 0:
            raise IllegalAction("Bet amount cannot be negative")

        if amount < self.chips:
            min_bet = betting_round.min_to_continue(self)
            if amount < min_bet:
                raise IllegalAction(f"Bet is too small. Min bet for player is {min_bet}.")

        wagered = self.collect_chips(amount, betting_round)
        self.current_bet += wagered
        betting_round.raise_to(self.current_bet)

        if self.chips == 0:
            logger.info(f"{self.name} is all-in for {wagered}")
        return wagered

    def call(self, betting_round: BettingRound) -> int:
        """Match the largest bet, or as much of it as the stack allows.

        Returns:
            Chips actually wagered (0 when already matched).
        """
        if not self.is_active:
            raise IllegalAction(f"{self.name} is not active in this hand")

        shortfall = betting_round.min_to_continue(self)
        if shortfall == 0:
            return 0
        return self.bet(shortfall, betting_round)

    def check(self, betting_round: BettingRound) -> None:
        """Pass without adding chips.

        Raises:
            IllegalAction: If the player is not active or owes chips.
        """
        if not self.is_active:
            raise IllegalAction(f"{self.name} is not active in this hand")

        owed = betting_round.min_to_continue(self)
        if owed > 0:
            raise IllegalAction(f"Cannot check when there's a bet to call. {self.name} owes {owed}.")

    def fold(self) -> None:
        """Fold the hand."""
        if not self.is_active:
            raise IllegalAction(f"{self.name} is not active in this hand")

        self.folded = True
        self.cards = []

    def receive_cards(self, cards: list[Any]) -> None:
        """Receive hole cards.

        Args:
            cards: Cards to receive.
        """
        self.cards = list(cards)

    def win_pot(self, amount: int) -> None:
        """Credit chips paid out by an external settlement.

        Args:
            amount: Amount won.
        """
        if amount < 0:
            raise ValueError("Cannot win a negative amount")
        self.chips += amount

    def reset_for_new_round(self) -> None:
        """Clear the round contribution before the next street."""
        self.current_bet = 0

    def reset_for_new_hand(self) -> list[Any]:
        """Reset player state for a new hand.

        Returns:
            The cards the player was holding, for return to the deck.
        """
        returned = self.cards
        self.cards = []
        self.folded = False
        self.current_bet = 0
        return returned

    def to_dict(self, hide_cards: bool = True) -> dict:
        """Convert to dictionary.

        Args:
            hide_cards: If True, don't include hole cards.

        Returns:
            Player state dictionary.
        """
        data = {
            "name": self.name,
            "seat": self.seat,
            "chips": self.chips,
            "folded": self.folded,
            "all_in": self.is_all_in,
            "current_bet": self.current_bet,
            "has_cards": len(self.cards) > 0,
        }

        if not hide_cards:
            data["cards"] = [str(c) for c in self.cards]

        return data
