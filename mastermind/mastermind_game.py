"""Game controller: an even number of rounds with roles swapping each round."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from framework.errors import MatchConfigurationError
from framework.events import EventType, GameEvent
from framework.player import Player
from framework.result import GameResult, RoundResult

from .mastermind_interfaces import Renderer, RoleChooser, RoundCountChooser
from .mastermind_round import RoundController
from .mastermind_scoreboard import Scoreboard
from .mastermind_state import Role, RoleAssignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRun:
    """Complete execution artifact for one game."""

    result: GameResult
    events: list[GameEvent]


def validate_round_count(rounds: int) -> int:
    """Return `rounds` if it is a positive even integer."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise MatchConfigurationError(f"Round count must be an integer, got {rounds!r}.")
    if rounds <= 0 or rounds % 2 != 0:
        raise MatchConfigurationError(f"Round count must be a positive even number, got {rounds}.")
    return rounds


class GameController:
    """Runs a full game between a primary party and an opponent."""

    def __init__(
        self,
        primary: Player,
        opponent: Player,
        renderer: Renderer,
        round_count_chooser: RoundCountChooser,
        role_chooser: RoleChooser,
    ):
        if primary.player_id == opponent.player_id:
            raise MatchConfigurationError(f"Players need distinct ids, both are {primary.player_id!r}.")
        self.primary = primary
        self.opponent = opponent
        self.renderer = renderer
        self.round_count_chooser = round_count_chooser
        self.role_chooser = role_chooser
        self.round_controller = RoundController(renderer)

    def play(self) -> GameRun:
        """Play every round and return the final result with its event history."""
        total_rounds = validate_round_count(self.round_count_chooser.choose_round_count())
        primary_role = Role(self.role_chooser.choose_initial_role())

        assignment = RoleAssignment.from_primary(self.primary, self.opponent, primary_role)
        scoreboard = Scoreboard(assignment)
        events: list[GameEvent] = [
            GameEvent.create(
                event_type=EventType.GAME_START,
                round_index=0,
                turn=0,
                payload={"total_rounds": total_rounds, "roles": assignment.to_dict()},
            )
        ]
        logger.info(
            "Starting %d-round game; %s opens as %s",
            total_rounds,
            self.primary.player_id,
            primary_role.value,
        )

        round_results: list[RoundResult] = []
        for round_index in range(1, total_rounds + 1):
            if round_index > 1:
                assignment = assignment.swapped()
                scoreboard.rebind(assignment)
                logger.info("Roles swapped: %s is now codemaker", assignment.codemaker.player_id)
                events.append(
                    GameEvent.create(
                        event_type=EventType.ROLE_SWAP,
                        round_index=round_index,
                        turn=0,
                        payload={"roles": assignment.to_dict()},
                    )
                )

            self.renderer.render_round_start(round_index, total_rounds)
            events.append(
                GameEvent.create(
                    event_type=EventType.ROUND_START,
                    round_index=round_index,
                    turn=0,
                    payload={"roles": assignment.to_dict()},
                )
            )
            round_results.append(self.round_controller.run(round_index, assignment, scoreboard, events))
            self.renderer.render_round_summary(
                scoreboard.points(Role.CODEMAKER),
                scoreboard.points(Role.CODEBREAKER),
            )

        result = GameResult(total_rounds=total_rounds, totals=scoreboard.totals(), rounds=round_results)
        events.append(
            GameEvent.create(
                event_type=EventType.GAME_END,
                round_index=total_rounds,
                turn=0,
                payload={"result": result.to_dict()},
            )
        )
        self.renderer.render_game_over(result)
        return GameRun(result=result, events=events)
