"""Player interface for two-role code-guessing games."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class Player(ABC):
    """Base interface for human-driven, automated, or scripted parties.

    A player can hold either role, so every variant must be able to both set a
    hidden code and guess one. Implementations own their own input validation
    and only ever return well-formed sequences.
    """

    def __init__(self, player_id: str):
        self.player_id = player_id

    @abstractmethod
    def produce_code(self) -> Sequence[Any]:
        """Return the hidden code for a round played as codemaker."""

    @abstractmethod
    def produce_guess(self) -> Sequence[Any]:
        """Return the next guess for a turn played as codebreaker."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id!r})"
