"""Hand lifecycle: street progression on top of the betting round engine."""
from enum import Enum
from typing import Optional

from holdem.game.errors import GameStateError
from holdem.game.poker_game import PokerGame
from holdem.utils.logger import get_logger

logger = get_logger(__name__)


class Street(str, Enum):
    """Hand states."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"    # Board complete, more than one player left
    COMPLETE = "complete"    # Everyone else folded


BOARD_CARDS = {
    Street.FLOP: 3,
    Street.TURN: 1,
    Street.RIVER: 1,
}

NEXT_STREET = {
    Street.PREFLOP: Street.FLOP,
    Street.FLOP: Street.TURN,
    Street.TURN: Street.RIVER,
    Street.RIVER: Street.SHOWDOWN,
}


class Hand:
    """Drives one hand of a game from the deal to the end of the river.

    Betting on each street goes through ``game.act``. Once the street's
    round is over, :meth:`advance` deals the next board cards and reopens
    betting. Deciding who wins at showdown is left to the caller.
    """

    def __init__(self, game: PokerGame):
        self.game = game
        self.street: Optional[Street] = None

    @property
    def is_finished(self) -> bool:
        return self.street in (Street.SHOWDOWN, Street.COMPLETE)

    def start(self) -> Street:
        """Start the game's hand and enter preflop betting."""
        if self.street is not None:
            raise GameStateError("This hand has already started.")

        self.game.start()
        self.street = Street.PREFLOP
        return self.street

    def advance(self) -> Street:
        """Move to the next street once betting on this one is over.

        Returns:
            The new street.

        Raises:
            GameStateError: If the hand has not started, is finished, or
                betting on the current street is still open.
        """
        if self.street is None:
            raise GameStateError("This hand has not started.")
        if self.is_finished:
            raise GameStateError(f"This hand is over ({self.street.value}).")
        if not self.game.round_over():
            raise GameStateError(f"Betting on the {self.street.value} is still open.")

        if len(self.game.active_players) <= 1:
            self.street = Street.COMPLETE
            logger.info("Hand complete, all but one player folded")
            return self.street

        next_street = NEXT_STREET[self.street]
        if next_street in BOARD_CARDS:
            self.game.deal_board(BOARD_CARDS[next_street])

        if next_street != Street.SHOWDOWN:
            self.game.new_betting_round()

        self.street = next_street
        logger.info(f"Advanced to {self.street.value}")
        return self.street

    def run_out(self) -> Street:
        """Advance through every street that needs no betting.

        Used when all remaining players are all-in, so the rest of the board
        is dealt straight away.

        Returns:
            The street the hand stopped on.
        """
        while not self.is_finished and self.game.round_over():
            self.advance()
        return self.street
