"""Structured exceptions used across the game engine."""

from __future__ import annotations

from typing import Any, Sequence


class ArenaError(Exception):
    """Base class for engine-level exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class MatchConfigurationError(ArenaError):
    """Raised when a game is configured incorrectly."""


class PlayerExecutionError(ArenaError):
    """Raised when a player cannot produce a code or guess."""

    def __init__(self, player_id: str, message: str):
        self.player_id = player_id
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["player_id"] = self.player_id
        return payload


class CodeContractError(ArenaError):
    """Raised when a player hands the engine a malformed code or guess."""

    def __init__(self, player_id: str, sequence: Sequence[Any] | Any, reason: str):
        self.player_id = player_id
        self.sequence = sequence
        self.reason = reason
        super().__init__(f"Malformed sequence from {player_id}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "player_id": self.player_id,
                "sequence": [getattr(item, "value", item) for item in self.sequence]
                if isinstance(self.sequence, (list, tuple))
                else repr(self.sequence),
                "reason": self.reason,
            }
        )
        return payload
