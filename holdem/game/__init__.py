"""Game engine module."""
from .deck import Deck, Card, Suit, Rank
from .blinds import Blinds
from .errors import PokerGameError, ConfigurationError, IllegalAction, GameStateError
from .pot import Pot
from .betting import BettingRound, Action, ActionRequest, ActionType
from .player import Player
from .poker_game import PokerGame
from .hand import Hand, Street

__all__ = [
    "Deck",
    "Card",
    "Suit",
    "Rank",
    "Blinds",
    "PokerGameError",
    "ConfigurationError",
    "IllegalAction",
    "GameStateError",
    "Pot",
    "BettingRound",
    "Action",
    "ActionRequest",
    "ActionType",
    "Player",
    "PokerGame",
    "Hand",
    "Street",
]
