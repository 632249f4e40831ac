"""Event schema for in-memory game history."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from time import time
from typing import Any

from .serialize import to_serializable


class EventType(str, Enum):
    """Standard event types emitted by the game controller."""

    GAME_START = "game_start"
    ROUND_START = "round_start"
    CODE_SET = "code_set"
    GUESS = "guess"
    ROUND_END = "round_end"
    ROLE_SWAP = "role_swap"
    GAME_END = "game_end"


@dataclass(frozen=True)
class GameEvent:
    """Single history event emitted while a game is played."""

    event_type: EventType
    round_index: int
    turn: int
    timestamp_ms: int
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-serializable event data."""
        return {
            "event_type": self.event_type.value,
            "round_index": self.round_index,
            "turn": self.turn,
            "timestamp_ms": self.timestamp_ms,
            "payload": to_serializable(self.payload),
        }

    @classmethod
    def create(cls, event_type: EventType, round_index: int, turn: int, payload: dict[str, Any]) -> "GameEvent":
        """Construct an event with the current wall-clock timestamp."""
        return cls(
            event_type=event_type,
            round_index=round_index,
            turn=turn,
            timestamp_ms=int(time() * 1000),
            payload=payload,
        )
