"""State, enums, and constants for Mastermind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from framework.player import Player

CODE_LENGTH = 4
MAX_TURNS = 12


class Color(str, Enum):
    """Code peg colors, in palette order."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def digit(self) -> int:
        """Return the 1-based console key for this color."""
        return PALETTE.index(self) + 1

    @classmethod
    def from_digit(cls, digit: int) -> Color:
        if not 1 <= digit <= len(PALETTE):
            raise ValueError(f"Color digit must be between 1 and {len(PALETTE)}, got {digit}.")
        return PALETTE[digit - 1]


PALETTE: tuple[Color, ...] = tuple(Color)

Code = tuple[Color, ...]


class Role(str, Enum):
    """The two mutually exclusive roles."""

    CODEMAKER = "codemaker"
    CODEBREAKER = "codebreaker"

    def other(self) -> Role:
        return Role.CODEBREAKER if self is Role.CODEMAKER else Role.CODEMAKER


class RoundPhase(str, Enum):
    """Round state machine phases."""

    AWAITING_CODE = "AWAITING_CODE"
    AWAITING_GUESS = "AWAITING_GUESS"
    EVALUATING = "EVALUATING"
    SOLVED = "SOLVED"
    TURNS_EXHAUSTED = "TURNS_EXHAUSTED"


TERMINAL_PHASES = frozenset({RoundPhase.SOLVED, RoundPhase.TURNS_EXHAUSTED})


@dataclass(frozen=True)
class Feedback:
    """Exact and present counts for one guess."""

    exact: int = 0
    present: int = 0

    def __post_init__(self) -> None:
        if self.exact < 0 or self.present < 0:
            raise ValueError("Feedback counts must be >= 0.")
        if self.exact + self.present > CODE_LENGTH:
            raise ValueError(f"exact + present must be <= {CODE_LENGTH}.")

    @property
    def solved(self) -> bool:
        return self.exact == CODE_LENGTH

    def markers(self) -> tuple[str, ...]:
        """Return key pegs: every exact marker before every present marker."""
        return ("exact",) * self.exact + ("present",) * self.present


@dataclass(frozen=True)
class RoleAssignment:
    """Two-slot record binding each role to exactly one player."""

    codemaker: Player
    codebreaker: Player

    def __post_init__(self) -> None:
        if self.codemaker is self.codebreaker:
            raise ValueError("One player cannot hold both roles.")

    @classmethod
    def from_primary(cls, primary: Player, opponent: Player, primary_role: Role) -> RoleAssignment:
        """Seat `primary` in `primary_role` and `opponent` in the other role."""
        if primary_role is Role.CODEMAKER:
            return cls(codemaker=primary, codebreaker=opponent)
        return cls(codemaker=opponent, codebreaker=primary)

    def player_for(self, role: Role) -> Player:
        return self.codemaker if role is Role.CODEMAKER else self.codebreaker

    def role_of(self, player_id: str) -> Role:
        """Return the role currently held by `player_id`."""
        if self.codemaker.player_id == player_id:
            return Role.CODEMAKER
        if self.codebreaker.player_id == player_id:
            return Role.CODEBREAKER
        raise KeyError(f"Unknown player_id: {player_id!r}")

    def swapped(self) -> RoleAssignment:
        """Return the assignment with codemaker and codebreaker exchanged."""
        return RoleAssignment(codemaker=self.codebreaker, codebreaker=self.codemaker)

    def to_dict(self) -> dict[str, Any]:
        return {
            Role.CODEMAKER.value: self.codemaker.player_id,
            Role.CODEBREAKER.value: self.codebreaker.player_id,
        }


@dataclass(frozen=True)
class RoundState:
    """Immutable state of one round."""

    round_index: int
    phase: RoundPhase = RoundPhase.AWAITING_CODE
    code: Code | None = None
    turns_left: int = MAX_TURNS
    turns_taken: int = 0
    last_guess: Code | None = None
    last_feedback: Feedback | None = None

    @property
    def is_terminal(self) -> bool:
        return self.phase in TERMINAL_PHASES
