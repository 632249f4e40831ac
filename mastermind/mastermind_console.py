"""Console rendering, prompts, and input parsing for Mastermind."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from framework.result import GameResult

from .mastermind_interfaces import Renderer, RoleChooser, RoundCountChooser
from .mastermind_state import CODE_LENGTH, MAX_TURNS, PALETTE, Code, Color, Feedback, Role

RESET = "\033[0m"
CODE_PEG_BACKGROUNDS: dict[Color, int] = {color: 41 + index for index, color in enumerate(PALETTE)}
EXACT_MARKER = "\033[34m⬤ \033[0m"
PRESENT_MARKER = "\033[37m⬤ \033[0m"

_CODE_INPUT_PATTERN = re.compile(rf"[1-{len(PALETTE)}]{{{CODE_LENGTH}}}")
ROLE_OPTIONS: tuple[Role, ...] = (Role.CODEMAKER, Role.CODEBREAKER)


def code_peg(color: Color, *, use_color: bool = True) -> str:
    """Return the display token for one code peg."""
    if use_color:
        return f"\033[{CODE_PEG_BACKGROUNDS[color]}m   {color.digit}   {RESET}"
    return f"{color.digit}:{color.value}"


def key_peg(marker: str, *, use_color: bool = True) -> str:
    if marker == "exact":
        return EXACT_MARKER if use_color else "B"
    return PRESENT_MARKER if use_color else "W"


def palette_legend(*, use_color: bool = True) -> str:
    return " | ".join(code_peg(color, use_color=use_color) for color in PALETTE)


def instructions(*, use_color: bool = True) -> str:
    """Return the rules text shown before a game."""
    exact = key_peg("exact", use_color=use_color)
    present = key_peg("present", use_color=use_color)
    return "\n".join(
        [
            "Mastermind is a code-breaking game for two players.",
            "",
            "Gameplay and rules",
            "  - Decide in advance how many games to play, which must be an even number.",
            "  - There are two roles: Codemaker and Codebreaker. They swap after every game.",
            f"  - The Codemaker picks {CODE_LENGTH} colors as a code from the following list:",
            "",
            f"      {palette_legend(use_color=use_color)}",
            "",
            f"  - The Codebreaker tries to guess the pattern, in both order and color, within {MAX_TURNS} turns.",
            f"  - Each guess gets feedback: {exact} for every peg right in both color and position,",
            f"    {present} for every other peg whose color appears somewhere in the code.",
            "  - Guesses and feedback alternate until the code is cracked or all turns are used.",
            "  - Players only earn points as the Codemaker: one point for each guess the Codebreaker makes,",
            "    plus one extra point if the code is not cracked in time.",
        ]
    )


def parse_code_input(text: str) -> Code | None:
    """Parse digits such as '1473' into a code, or return None when malformed."""
    value = text.strip()
    if not _CODE_INPUT_PATTERN.fullmatch(value):
        return None
    return tuple(Color.from_digit(int(char)) for char in value)


def read_code(prompt: str) -> Code:
    """Prompt until the user enters a well-formed code."""
    print(prompt, end="")
    while True:
        code = parse_code_input(input())
        if code is not None:
            return code
        low = "1" * CODE_LENGTH
        high = str(len(PALETTE)) * CODE_LENGTH
        print(f"Must be {CODE_LENGTH} digits between {low} and {high}. ", end="")


class ConsoleRenderer(Renderer):
    """Prints the decoding board and scores to a text stream."""

    def __init__(self, *, use_color: bool = True, stream: TextIO | None = None):
        self.use_color = use_color
        self.stream = stream

    def _write(self, text: str) -> None:
        print(text, file=self.stream if self.stream is not None else sys.stdout)

    def render_round_start(self, round_index: int, total_rounds: int) -> None:
        self._write(f"Round {round_index} of {total_rounds}")

    def render_turn(self, guess: Code, feedback: Feedback) -> None:
        pegs = [code_peg(color, use_color=self.use_color) for color in guess]
        markers = [key_peg(marker, use_color=self.use_color) for marker in feedback.markers()]
        self._write(f"Decoding board: {' '.join(pegs + markers)}\n")

    def render_codemaker_points(self, points: int) -> None:
        self._write(f"Codemaker's points: {points}")

    def render_round_summary(self, codemaker_points: int, codebreaker_points: int) -> None:
        self._write(f"Codemaker's points: {codemaker_points} | Codebreaker's points: {codebreaker_points}")

    def render_game_over(self, result: GameResult) -> None:
        totals = " | ".join(f"{player_id}: {points}" for player_id, points in result.totals.items())
        winner = result.winner
        verdict = f"{winner} wins." if winner is not None else "It's a tie."
        self._write(f"Game over after {result.total_rounds} rounds. {totals}. {verdict}")


class ConsoleRoundCountChooser(RoundCountChooser):
    """Asks how many rounds to play."""

    def choose_round_count(self) -> int:
        print("How many games do you want to play? ", end="")
        while True:
            raw = input().strip()
            if raw.isdecimal() and int(raw) > 0 and int(raw) % 2 == 0:
                return int(raw)
            print("Must be a positive even number. ", end="")


class ConsoleRoleChooser(RoleChooser):
    """Asks which role the human opens with."""

    def choose_initial_role(self) -> Role:
        options = "\n".join(f"  {index}. {role.value.capitalize()}" for index, role in enumerate(ROLE_OPTIONS, 1))
        print(f"Choose a role.\n{options}\nAns: ", end="")
        while True:
            raw = input().strip()
            if raw.isdecimal() and 1 <= int(raw) <= len(ROLE_OPTIONS):
                return ROLE_OPTIONS[int(raw) - 1]
            print(f"Must be 1 or {len(ROLE_OPTIONS)}. ", end="")


class FixedRoundCountChooser(RoundCountChooser):
    """Returns a round count decided ahead of time."""

    def __init__(self, rounds: int):
        self.rounds = rounds

    def choose_round_count(self) -> int:
        return self.rounds


class FixedRoleChooser(RoleChooser):
    def __init__(self, role: Role):
        self.role = role

    def choose_initial_role(self) -> Role:
        return self.role
