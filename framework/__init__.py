"""Framework exports for code-guessing games, players, and results."""

from .errors import ArenaError, CodeContractError, MatchConfigurationError, PlayerExecutionError
from .events import EventType, GameEvent
from .player import Player
from .result import GameResult, RoundResult, TerminationReason

__all__ = [
    "ArenaError",
    "CodeContractError",
    "EventType",
    "GameEvent",
    "GameResult",
    "MatchConfigurationError",
    "Player",
    "PlayerExecutionError",
    "RoundResult",
    "TerminationReason",
]
