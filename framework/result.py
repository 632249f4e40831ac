"""Round and game result models with termination metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .serialize import to_serializable


class TerminationReason(str, Enum):
    """Standardized reasons for a round ending."""

    SOLVED = "solved"
    TURNS_EXHAUSTED = "turns_exhausted"


@dataclass(frozen=True)
class RoundResult:
    """Structured outcome for one completed round."""

    round_index: int
    codemaker_id: str
    codebreaker_id: str
    code: tuple[Any, ...]
    termination_reason: TerminationReason
    turns_used: int
    points_awarded: int

    @property
    def solved(self) -> bool:
        return self.termination_reason is TerminationReason.SOLVED

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable result object."""
        return {
            "round_index": self.round_index,
            "codemaker_id": self.codemaker_id,
            "codebreaker_id": self.codebreaker_id,
            "code": to_serializable(self.code),
            "termination_reason": self.termination_reason.value,
            "turns_used": self.turns_used,
            "points_awarded": self.points_awarded,
        }


@dataclass(frozen=True)
class GameResult:
    """Structured outcome for a completed game of several rounds."""

    total_rounds: int
    totals: dict[str, int] = field(default_factory=dict)
    rounds: list[RoundResult] = field(default_factory=list)

    @property
    def winner(self) -> str | None:
        """Return the party with the most points, or None on a tie."""
        if not self.totals:
            return None
        ranked = sorted(self.totals.items(), key=lambda item: item[1], reverse=True)
        if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
            return None
        return ranked[0][0]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable result object."""
        return {
            "total_rounds": self.total_rounds,
            "totals": dict(self.totals),
            "winner": self.winner,
            "rounds": [round_result.to_dict() for round_result in self.rounds],
        }
