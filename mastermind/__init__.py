"""Mastermind package exports."""

from .mastermind_config import MatchSettings
from .mastermind_feedback import coerce_code, evaluate_guess
from .mastermind_game import GameController, GameRun, validate_round_count
from .mastermind_players import ComputerPlayer, HumanPlayer, ScriptedPlayer
from .mastermind_round import RoundController
from .mastermind_scoreboard import Scoreboard
from .mastermind_state import (
    CODE_LENGTH,
    MAX_TURNS,
    PALETTE,
    Code,
    Color,
    Feedback,
    Role,
    RoleAssignment,
    RoundPhase,
    RoundState,
)

__all__ = [
    "CODE_LENGTH",
    "Code",
    "Color",
    "ComputerPlayer",
    "Feedback",
    "GameController",
    "GameRun",
    "HumanPlayer",
    "MAX_TURNS",
    "MatchSettings",
    "PALETTE",
    "Role",
    "RoleAssignment",
    "RoundController",
    "RoundPhase",
    "RoundState",
    "Scoreboard",
    "ScriptedPlayer",
    "coerce_code",
    "evaluate_guess",
    "validate_round_count",
]
