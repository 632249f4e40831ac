"""Collaborator interfaces the engine calls for display and setup choices."""

from __future__ import annotations

from abc import ABC, abstractmethod

from framework.result import GameResult

from .mastermind_state import Code, Feedback, Role


class Renderer(ABC):
    """Display sink for round progress. Return values are never consumed."""

    def render_round_start(self, round_index: int, total_rounds: int) -> None:
        """Optional header before each round."""

    @abstractmethod
    def render_turn(self, guess: Code, feedback: Feedback) -> None:
        """Show one guess alongside its feedback."""

    def render_codemaker_points(self, points: int) -> None:
        """Optional running total after each guess."""

    @abstractmethod
    def render_round_summary(self, codemaker_points: int, codebreaker_points: int) -> None:
        """Show both parties' totals after a round."""

    def render_game_over(self, result: GameResult) -> None:
        """Optional final summary."""


class RoundCountChooser(ABC):
    """Supplies the total number of rounds for a game."""

    @abstractmethod
    def choose_round_count(self) -> int:
        """Return a positive even integer."""


class RoleChooser(ABC):
    """Supplies the role the primary party takes in round one."""

    @abstractmethod
    def choose_initial_role(self) -> Role:
        """Return the primary party's first role."""
