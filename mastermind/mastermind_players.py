"""Human, random, and scripted Mastermind players."""

from __future__ import annotations

import hashlib
import random
from collections import deque
from typing import Iterable, Sequence

from framework.errors import PlayerExecutionError
from framework.player import Player

from .mastermind_console import palette_legend, read_code
from .mastermind_state import CODE_LENGTH, PALETTE, Code, Color


class HumanPlayer(Player):
    """Prompts for codes and guesses in a terminal."""

    def __init__(self, player_id: str = "human", *, use_color: bool = True):
        super().__init__(player_id=player_id)
        self.use_color = use_color

    def produce_code(self) -> Code:
        legend = palette_legend(use_color=self.use_color)
        return read_code(f"Choose {CODE_LENGTH} colors from below as the code:\n  {legend}\n  Code: ")

    def produce_guess(self) -> Code:
        return read_code("Guess the code. ")


class ComputerPlayer(Player):
    """Samples every peg uniformly from the palette."""

    def __init__(self, player_id: str = "computer", seed: int | None = None):
        super().__init__(player_id=player_id)
        self._rng = random.Random()
        if seed is not None:
            self.reseed(seed)

    def reseed(self, seed: int) -> None:
        """Derive a deterministic per-player RNG state from a shared seed."""
        material = f"{seed}:{self.player_id}".encode("utf-8")
        derived_seed = int.from_bytes(hashlib.sha256(material).digest()[:8], byteorder="big", signed=False)
        self._rng.seed(derived_seed)

    def _random_code(self) -> Code:
        return tuple(self._rng.choice(PALETTE) for _ in range(CODE_LENGTH))

    def produce_code(self) -> Code:
        return self._random_code()

    def produce_guess(self) -> Code:
        return self._random_code()


class ScriptedPlayer(Player):
    """Plays back predetermined codes and guesses in order."""

    def __init__(
        self,
        player_id: str,
        codes: Iterable[Sequence[Color]] = (),
        guesses: Iterable[Sequence[Color]] = (),
    ):
        super().__init__(player_id=player_id)
        self._codes = deque(tuple(code) for code in codes)
        self._guesses = deque(tuple(guess) for guess in guesses)

    def produce_code(self) -> Code:
        if not self._codes:
            raise PlayerExecutionError(self.player_id, "Scripted player has no codes left.")
        return self._codes.popleft()

    def produce_guess(self) -> Code:
        if not self._guesses:
            raise PlayerExecutionError(self.player_id, "Scripted player has no guesses left.")
        return self._guesses.popleft()
