"""Command-line entry point for console Mastermind."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from framework.errors import ArenaError
from framework.player import Player
from framework.serialize import json_dumps

from .mastermind_config import MatchSettings, PlayerType
from .mastermind_console import (
    ConsoleRenderer,
    ConsoleRoleChooser,
    ConsoleRoundCountChooser,
    FixedRoleChooser,
    FixedRoundCountChooser,
    instructions,
)
from .mastermind_game import GameController
from .mastermind_interfaces import RoleChooser, RoundCountChooser
from .mastermind_players import ComputerPlayer, HumanPlayer
from .mastermind_state import Role

logger = logging.getLogger(__name__)


def _build_player(player_type: PlayerType, player_id: str, settings: MatchSettings) -> Player:
    if player_type == "human":
        return HumanPlayer(player_id, use_color=settings.use_color)
    return ComputerPlayer(player_id, seed=settings.seed)


def build_players(settings: MatchSettings) -> tuple[Player, Player]:
    """Create the primary party and the opponent with distinct ids."""
    if settings.primary == settings.opponent:
        primary_id, opponent_id = f"{settings.primary}-1", f"{settings.opponent}-2"
    else:
        primary_id, opponent_id = settings.primary, settings.opponent
    return (
        _build_player(settings.primary, primary_id, settings),
        _build_player(settings.opponent, opponent_id, settings),
    )


def build_choosers(settings: MatchSettings) -> tuple[RoundCountChooser, RoleChooser]:
    round_chooser: RoundCountChooser = (
        FixedRoundCountChooser(settings.rounds) if settings.rounds is not None else ConsoleRoundCountChooser()
    )
    role_chooser: RoleChooser = (
        FixedRoleChooser(settings.role) if settings.role is not None else ConsoleRoleChooser()
    )
    return round_chooser, role_chooser


def parse_settings(argv: Sequence[str] | None = None) -> tuple[MatchSettings, str]:
    parser = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    parser.add_argument("--rounds", type=int, default=None, help="Even number of rounds to play.")
    parser.add_argument("--role", choices=[role.value for role in Role], default=None)
    parser.add_argument("--primary", choices=["human", "computer"], default="human")
    parser.add_argument("--opponent", choices=["human", "computer"], default="computer")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--no-instructions", action="store_true")
    parser.add_argument("--summary-json", action="store_true")
    parser.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    args = parser.parse_args(argv)

    settings = MatchSettings(
        rounds=args.rounds,
        role=args.role,
        primary=args.primary,
        opponent=args.opponent,
        seed=args.seed,
        use_color=not args.no_color,
        show_instructions=not args.no_instructions,
        summary_json=args.summary_json,
    )
    return settings, args.log_level


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for an interactive or automated game."""
    try:
        settings, log_level = parse_settings(argv)
    except ValidationError as exc:
        for error in exc.errors():
            print(f"Invalid settings: {error['msg']}", file=sys.stderr)
        return 1

    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    primary, opponent = build_players(settings)
    round_chooser, role_chooser = build_choosers(settings)
    controller = GameController(
        primary=primary,
        opponent=opponent,
        renderer=ConsoleRenderer(use_color=settings.use_color),
        round_count_chooser=round_chooser,
        role_chooser=role_chooser,
    )

    print("Welcome to Mastermind")
    if settings.show_instructions:
        print(instructions(use_color=settings.use_color))

    try:
        run = controller.play()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        return 130
    except ArenaError as exc:
        logger.error("Game aborted: %s", exc)
        return 1

    if settings.summary_json:
        print(json_dumps(run.result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
