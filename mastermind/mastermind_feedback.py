"""Feedback evaluation and code contract checks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from framework.errors import CodeContractError

from .mastermind_state import CODE_LENGTH, Code, Color, Feedback


def evaluate_guess(guess: Sequence[Color], code: Sequence[Color]) -> Feedback:
    """
    Compare a guess against the hidden code.

    `exact` counts positions where the guess matches the code. `present` counts
    the remaining guess positions whose color occurs anywhere in the code.
    Presence is checked by plain containment, so one code peg can back several
    present markers:

      code  = [red, red, blue, yellow]
      guess = [blue, yellow, red, red]
      -> Feedback(exact=0, present=4)
    """
    if len(guess) != CODE_LENGTH or len(code) != CODE_LENGTH:
        raise CodeContractError(
            "evaluator",
            list(guess),
            f"guess and code must both have {CODE_LENGTH} pegs (got {len(guess)} and {len(code)}).",
        )

    exact = 0
    present = 0
    for position, color in enumerate(guess):
        if code[position] == color:
            exact += 1
        elif color in code:
            present += 1
    return Feedback(exact=exact, present=present)


def coerce_code(player_id: str, sequence: Any) -> Code:
    """Check a player-produced sequence and return it as an immutable code."""
    if isinstance(sequence, (str, bytes)) or not isinstance(sequence, Sequence):
        raise CodeContractError(player_id, sequence, "expected a sequence of colors.")
    if len(sequence) != CODE_LENGTH:
        raise CodeContractError(player_id, sequence, f"expected {CODE_LENGTH} pegs, got {len(sequence)}.")

    pegs: list[Color] = []
    for item in sequence:
        try:
            pegs.append(Color(item))
        except ValueError as exc:
            raise CodeContractError(player_id, sequence, f"{item!r} is not a palette color.") from exc
    return tuple(pegs)
