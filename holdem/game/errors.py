"""Exceptions raised by the game engine."""


class PokerGameError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(PokerGameError):
    """A game, player or blinds structure was built with invalid parameters."""


class IllegalAction(PokerGameError):
    """A player action breaks the betting rules for the current state.

    The game is left exactly as it was before the action was attempted.
    """


class GameStateError(PokerGameError):
    """An operation was attempted when the game state makes it meaningless."""
