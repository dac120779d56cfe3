"""Action vocabulary and betting round context."""
from enum import Enum
from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError

from holdem.game.errors import IllegalAction
from holdem.game.pot import Pot

if TYPE_CHECKING:
    from holdem.game.player import Player


class ActionType(str, Enum):
    """Player action types.

    BET and RAISE are interchangeable: both put ``amount`` more chips in.
    """
    BET = "bet"
    RAISE = "raise"
    CALL = "call"
    CHECK = "check"
    FOLD = "fold"


@dataclass(frozen=True)
class Action:
    """A player's action."""
    type: ActionType
    amount: int = 0

    def __post_init__(self) -> None:
        try:
            action_type = ActionType(self.type)
        except ValueError as exc:
            raise IllegalAction(f"Unknown action type {self.type!r}") from exc
        object.__setattr__(self, "type", action_type)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Action":
        """Validate a raw action mapping such as ``{"type": "bet", "amount": 100}``.

        Raises:
            IllegalAction: If the kind is unknown or the amount is malformed.
        """
        try:
            request = ActionRequest.model_validate(dict(data))
        except ValidationError as exc:
            raise IllegalAction(f"Malformed action {dict(data)!r}: {exc}") from exc
        return request.to_action()


class ActionRequest(BaseModel):
    """Schema for an action arriving from outside the engine."""
    type: ActionType
    amount: Optional[int] = Field(default=None, ge=0)

    def to_action(self) -> Action:
        return Action(type=self.type, amount=self.amount or 0)


class BettingRound:
    """Shared context for one betting round.

    Players read the largest bet from here and deposit chips through it,
    so they never need a reference to the game itself.
    """

    def __init__(self, pot: Pot, largest_bet: int = 0):
        """Initialize betting round.

        Args:
            pot: The hand's pot; collected chips land here.
            largest_bet: Largest round contribution at the start of the
                round (the big blind preflop, otherwise 0).
        """
        self.pot = pot
        self.largest_bet = largest_bet
        self._acted: set[str] = set()

    def min_to_continue(self, player: "Player") -> int:
        """Chips the player must add to match the largest bet."""
        return self.largest_bet - player.current_bet

    def collect(self, name: str, amount: int) -> None:
        """Move chips already taken from a player into the pot."""
        self.pot.add_bet(name, amount)

    def raise_to(self, contribution: int) -> None:
        """Lift the largest bet if a contribution now exceeds it."""
        if contribution > self.largest_bet:
            self.largest_bet = contribution

    def mark_acted(self, name: str) -> None:
        self._acted.add(name)

    def has_acted(self, name: str) -> bool:
        return name in self._acted
