"""Game state machine for a single hand of Texas Hold'em betting."""
from typing import Any, Mapping, Optional, Union

from holdem.config import config
from holdem.game.betting import Action, ActionType, BettingRound
from holdem.game.blinds import Blinds
from holdem.game.deck import Deck
from holdem.game.errors import ConfigurationError, GameStateError
from holdem.game.player import Player
from holdem.game.pot import Pot
from holdem.utils.logger import get_logger

logger = get_logger(__name__)

MAX_BOARD_CARDS = 5


class PokerGame:
    """A table of seated players, their forced bets and the betting cursor.

    Seating order fixes every role. With three or more players the dealer
    is the last seat, the small blind the second-to-last and the big blind
    the third-to-last. Heads-up, the dealer posts the small blind and the
    first seat posts the big blind. Turns go up the seat indices and wrap.
    """

    def __init__(
        self,
        players: list[Player],
        blinds: Optional[Blinds] = None,
        deck: Optional[Deck] = None,
        hand_size: Optional[int] = None,
        max_players: Optional[int] = None,
    ):
        """Initialize a game.

        Args:
            players: Players in seat order.
            blinds: Forced bets. Defaults to no blinds and no ante.
            deck: Card supply. Defaults to a freshly shuffled 52-card deck.
            hand_size: Hole cards dealt to each player.
            max_players: Seats at the table.

        Raises:
            ConfigurationError: If the table cannot be built as requested.
        """
        self.max_players = max_players if max_players is not None else config.max_players
        self.hand_size = hand_size if hand_size is not None else config.hand_size

        if self.max_players < 2:
            raise ConfigurationError("Max players must be greater than 1.")
        if self.max_players >= config.seat_ceiling:
            raise ConfigurationError(f"Max players must be less than {config.seat_ceiling}.")
        if len(players) < 2:
            raise ConfigurationError("Must have at least 2 players.")
        if len(players) > self.max_players:
            raise ConfigurationError(f"Too many players. Max is {self.max_players}.")
        if self.hand_size < 1:
            raise ConfigurationError("Hand size must be at least 1.")

        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise ConfigurationError("Player names must be unique.")
        for player in players:
            if player.seat is not None:
                raise ConfigurationError(f"{player.name} is already seated in a game.")

        self._players = list(players)
        for seat, player in enumerate(self._players):
            player.seat = seat

        self.blinds = blinds if blinds is not None else Blinds()
        self.deck = deck if deck is not None else Deck.shuffled()
        self.board: list[Any] = []

        self._pot = Pot()
        self._round = BettingRound(self._pot)
        self._cursor: Optional[int] = None
        self._in_hand = False
        self._muck: list[Any] = []  # cards of folded players

    # Seating

    @property
    def players(self) -> list[Player]:
        """Players in seat order."""
        return list(self._players)

    @property
    def dealer(self) -> Player:
        return self._players[-1]

    @property
    def small_blind_player(self) -> Player:
        return self._players[self._small_blind_index]

    @property
    def big_blind_player(self) -> Player:
        return self._players[self._big_blind_index]

    @property
    def _small_blind_index(self) -> int:
        return len(self._players) - 1 if len(self._players) == 2 else len(self._players) - 2

    @property
    def _big_blind_index(self) -> int:
        return 0 if len(self._players) == 2 else len(self._players) - 3

    @property
    def active_players(self) -> list[Player]:
        """Players still in the hand, in seat order."""
        return [p for p in self._players if p.is_active]

    def find_player(self, name: str) -> Optional[Player]:
        """Get player by name.

        Args:
            name: Player's name.

        Returns:
            Player if found.
        """
        for player in self._players:
            if player.name == name:
                return player
        return None

    # Round state

    @property
    def pot(self) -> int:
        return self._pot.total

    @property
    def largest_bet(self) -> int:
        return self._round.largest_bet

    @property
    def betting_round(self) -> BettingRound:
        return self._round

    @property
    def in_hand(self) -> bool:
        return self._in_hand

    @property
    def player_in_action(self) -> Optional[Player]:
        """The player who must act next, or None before the hand starts."""
        if self._cursor is None:
            return None
        return self._players[self._cursor]

    def min_to_continue(self, player: Player) -> int:
        """Chips a player must add to stay in the round."""
        return self._round.min_to_continue(player)

    def round_over(self) -> bool:
        """Check if no more betting is possible this round.

        The round is over when one active player is left, when every active
        player is all-in, when the one player with chips behind
        has nothing left to match, or when every active player who still has
        chips has acted and matched the largest bet.
        """
        active = self.active_players
        if len(active) <= 1:
            return True

        if all(p.is_all_in for p in active):
            return True

        able = [p for p in active if not p.is_all_in]
        if len(able) == 1 and self._round.min_to_continue(able[0]) == 0:
            return True

        return all(
            self._round.min_to_continue(p) == 0 and self._round.has_acted(p.name)
            for p in able
        )

    # Game flow

    def start(self) -> None:
        """Start a hand: post forced bets, shuffle, deal and set the cursor.

        Raises:
            GameStateError: If a hand is already in progress or the deck
                cannot cover the deal.
        """
        if self._in_hand:
            raise GameStateError("A hand is already in progress.")

        needed = self.hand_size * len(self._players)
        if len(self.deck) < needed:
            raise GameStateError(f"Deck has {len(self.deck)} cards, {needed} needed to deal.")

        self._post_forced_bets()

        self.deck.shuffle()
        self._deal_hole_cards()

        self._in_hand = True
        self._cursor = self._seat_from(self._big_blind_index - 1)

        logger.info(
            f"Hand started: pot={self.pot}, largest bet={self.largest_bet}, "
            f"first to act={self.player_in_action.name}"
        )

    def _post_forced_bets(self) -> None:
        """Collect blinds and antes.

        Blinds count toward the posting player's round contribution. Antes
        go into the pot as dead money.
        """
        self._round = BettingRound(self._pot)

        big_blind = self.big_blind_player
        big_blind.current_bet = big_blind.collect_chips(self.blinds.big_blind, self._round)

        small_blind = self.small_blind_player
        small_blind.current_bet = small_blind.collect_chips(self.blinds.small_blind, self._round)

        for player in self._players:
            player.collect_chips(self.blinds.ante, self._round)

        self._round.largest_bet = max(p.current_bet for p in self._players)

        logger.info(
            f"Blinds posted: {small_blind.name}={small_blind.current_bet}, "
            f"{big_blind.name}={big_blind.current_bet}, ante={self.blinds.ante}"
        )

    def _deal_hole_cards(self) -> None:
        for player in self._players:
            player.receive_cards(self.deck.draw_many(self.hand_size))

    def act(self, action: Union[Action, Mapping[str, Any]]) -> None:
        """Apply the action of the player holding the cursor.

        Args:
            action: The action, or a raw mapping like
                ``{"type": "bet", "amount": 100}``.

        Raises:
            GameStateError: If no player holds the action or the round is over.
            IllegalAction: If the action breaks the betting rules. The game
                is unchanged.
        """
        if not isinstance(action, Action):
            action = Action.from_dict(action)

        player = self.player_in_action
        if player is None:
            raise GameStateError("No player is in action.")
        if self.round_over():
            raise GameStateError("The betting round is over.")

        if action.type in (ActionType.BET, ActionType.RAISE):
            wagered = player.bet(action.amount, self._round)
            logger.info(f"{player.name} bets {wagered}")

        elif action.type == ActionType.CALL:
            wagered = player.call(self._round)
            logger.info(f"{player.name} calls {wagered}")

        elif action.type == ActionType.CHECK:
            player.check(self._round)
            logger.info(f"{player.name} checks")

        elif action.type == ActionType.FOLD:
            cards = player.cards
            player.fold()
            self._muck.extend(cards)
            self._round.largest_bet = max(p.current_bet for p in self.active_players)
            logger.info(f"{player.name} folds")

        self._round.mark_acted(player.name)
        self._advance_cursor()

    def _advance_cursor(self) -> None:
        """Move the cursor to the next player who can act."""
        if self.round_over():
            logger.info("Betting round over")
            return

        self._cursor = self._seat_from(self._cursor + 1)

    def _seat_from(self, start: int) -> int:
        """First seat at or after ``start`` (wrapping) whose player can act."""
        count = len(self._players)
        for offset in range(count):
            seat = (start + offset) % count
            player = self._players[seat]
            if player.is_active and not player.is_all_in:
                return seat
        return 0

    def new_betting_round(self) -> None:
        """Clear round contributions and reopen betting on the next street.

        Raises:
            GameStateError: If no hand is running or the current round is
                still open.
        """
        if not self._in_hand:
            raise GameStateError("No hand in progress.")
        if not self.round_over():
            raise GameStateError("The current betting round is still open.")

        for player in self._players:
            player.reset_for_new_round()
        self._round = BettingRound(self._pot)
        self._cursor = self._seat_from(0)

    def deal_board(self, count: int) -> list[Any]:
        """Deal community cards.

        Args:
            count: Number of cards to deal.

        Returns:
            The cards dealt.

        Raises:
            GameStateError: If no hand is running, the board would hold more
                than five cards, or the deck cannot cover the deal.
        """
        if not self._in_hand:
            raise GameStateError("No hand in progress.")
        if len(self.board) + count > MAX_BOARD_CARDS:
            raise GameStateError(f"The board holds at most {MAX_BOARD_CARDS} cards.")
        if len(self.deck) < count:
            raise GameStateError(f"Deck has {len(self.deck)} cards, {count} needed for the board.")

        cards = self.deck.draw_many(count)
        self.board.extend(cards)
        logger.info(f"Dealt {count} community cards: {cards}")
        return cards

    def take_pot(self) -> int:
        """Hand the pot over to an external settlement.

        Returns:
            Chips that were in the pot.

        Raises:
            GameStateError: If betting is still open in the current hand.
        """
        if self._in_hand and not self.round_over():
            raise GameStateError("Cannot take the pot while betting is open.")
        return self._pot.take()

    def reset_hand(self, blinds: Optional[Blinds] = None) -> None:
        """Gather all cards back into the deck and clear hand state.

        Seating order is left as it is.

        Args:
            blinds: New forced bets for the next hand, if they change.

        Raises:
            GameStateError: If the pot has not been settled.
        """
        if self._pot.total:
            raise GameStateError(f"Pot of {self._pot.total} must be settled before a new hand.")

        for player in self._players:
            for card in player.reset_for_new_hand():
                self.deck.add(card)
        for card in self._muck + self.board:
            self.deck.add(card)

        self._muck = []
        self.board = []
        self._pot.reset()
        self._round = BettingRound(self._pot)
        self._cursor = None
        self._in_hand = False

        if blinds is not None:
            self.blinds = blinds

        logger.info(f"Hand reset, {len(self.deck)} cards in deck")

    def to_dict(self) -> dict:
        """Snapshot of the whole table, hole cards included."""
        in_action = self.player_in_action
        return {
            "blinds": self.blinds.to_dict(),
            "hand_size": self.hand_size,
            "max_players": self.max_players,
            "in_hand": self._in_hand,
            "pot": self.pot,
            "largest_bet": self.largest_bet,
            "board": [str(c) for c in self.board],
            "deck_remaining": len(self.deck),
            "players": [p.to_dict(hide_cards=False) for p in self._players],
            "player_in_action": in_action.name if in_action else None,
            "round_over": self.round_over(),
        }
