"""Game-level tests for role swapping, round counts, and party totals."""

from __future__ import annotations

import pytest

from framework.errors import MatchConfigurationError
from framework.events import EventType
from framework.result import GameResult
from mastermind.mastermind_console import FixedRoleChooser, FixedRoundCountChooser
from mastermind.mastermind_game import GameController, validate_round_count
from mastermind.mastermind_interfaces import Renderer
from mastermind.mastermind_players import ComputerPlayer, ScriptedPlayer
from mastermind.mastermind_scoreboard import Scoreboard
from mastermind.mastermind_state import PALETTE, Code, Feedback, Role, RoleAssignment

R, G, Y, B, M, C, W = PALETTE


class _SummaryRenderer(Renderer):
    """Records round headers, summaries, and the final result."""

    def __init__(self) -> None:
        self.headers: list[tuple[int, int]] = []
        self.summaries: list[tuple[int, int]] = []
        self.final: GameResult | None = None

    def render_round_start(self, round_index: int, total_rounds: int) -> None:
        self.headers.append((round_index, total_rounds))

    def render_turn(self, guess: Code, feedback: Feedback) -> None:
        pass

    def render_round_summary(self, codemaker_points: int, codebreaker_points: int) -> None:
        self.summaries.append((codemaker_points, codebreaker_points))

    def render_game_over(self, result: GameResult) -> None:
        self.final = result


def _two_round_players() -> tuple[ScriptedPlayer, ScriptedPlayer]:
    alice = ScriptedPlayer("alice", codes=[(R, G, B, Y)], guesses=[(C, C, M, M)])
    bob = ScriptedPlayer("bob", codes=[(C, C, M, M)], guesses=[(W, W, W, W), (R, G, B, Y)])
    return alice, bob


def test_roles_swap_between_rounds_and_points_follow_players() -> None:
    alice, bob = _two_round_players()
    renderer = _SummaryRenderer()
    controller = GameController(
        primary=alice,
        opponent=bob,
        renderer=renderer,
        round_count_chooser=FixedRoundCountChooser(2),
        role_chooser=FixedRoleChooser(Role.CODEMAKER),
    )

    run = controller.play()

    first, second = run.result.rounds
    assert (first.codemaker_id, first.codebreaker_id) == ("alice", "bob")
    assert (second.codemaker_id, second.codebreaker_id) == ("bob", "alice")
    assert first.points_awarded == 2
    assert second.points_awarded == 1
    assert run.result.totals == {"alice": 2, "bob": 1}
    assert run.result.winner == "alice"
    assert renderer.headers == [(1, 2), (2, 2)]
    assert renderer.summaries == [(2, 0), (1, 2)]
    assert renderer.final == run.result


def test_primary_can_open_as_codebreaker() -> None:
    alice = ScriptedPlayer("alice", codes=[(R, R, R, R)], guesses=[(G, G, G, G)])
    bob = ScriptedPlayer("bob", codes=[(G, G, G, G)], guesses=[(R, R, R, R)])
    controller = GameController(
        primary=alice,
        opponent=bob,
        renderer=_SummaryRenderer(),
        round_count_chooser=FixedRoundCountChooser(2),
        role_chooser=FixedRoleChooser(Role.CODEBREAKER),
    )

    run = controller.play()

    assert run.result.rounds[0].codemaker_id == "bob"
    assert run.result.rounds[1].codemaker_id == "alice"
    assert run.result.winner is None


def test_game_events_bracket_rounds_and_swaps() -> None:
    alice, bob = _two_round_players()
    controller = GameController(
        primary=alice,
        opponent=bob,
        renderer=_SummaryRenderer(),
        round_count_chooser=FixedRoundCountChooser(2),
        role_chooser=FixedRoleChooser(Role.CODEMAKER),
    )

    events = controller.play().events
    kinds = [event.event_type for event in events]

    assert kinds[0] is EventType.GAME_START
    assert kinds[-1] is EventType.GAME_END
    assert kinds.count(EventType.ROUND_START) == 2
    assert kinds.count(EventType.ROUND_END) == 2
    assert kinds.count(EventType.ROLE_SWAP) == 1
    swap = next(event for event in events if event.event_type is EventType.ROLE_SWAP)
    assert swap.payload["roles"] == {"codemaker": "bob", "codebreaker": "alice"}


@pytest.mark.parametrize("rounds", [0, -2, 3, 7])
def test_invalid_round_counts_are_rejected(rounds: int) -> None:
    with pytest.raises(MatchConfigurationError):
        validate_round_count(rounds)


def test_invalid_round_count_stops_game_before_any_code_is_requested() -> None:
    alice = ScriptedPlayer("alice")
    bob = ScriptedPlayer("bob")
    controller = GameController(
        primary=alice,
        opponent=bob,
        renderer=_SummaryRenderer(),
        round_count_chooser=FixedRoundCountChooser(0),
        role_chooser=FixedRoleChooser(Role.CODEMAKER),
    )

    with pytest.raises(MatchConfigurationError):
        controller.play()


def test_players_need_distinct_ids() -> None:
    with pytest.raises(MatchConfigurationError):
        GameController(
            primary=ScriptedPlayer("same"),
            opponent=ScriptedPlayer("same"),
            renderer=_SummaryRenderer(),
            round_count_chooser=FixedRoundCountChooser(2),
            role_chooser=FixedRoleChooser(Role.CODEMAKER),
        )


def test_two_swaps_restore_original_assignment() -> None:
    alice, bob = _two_round_players()
    assignment = RoleAssignment.from_primary(alice, bob, Role.CODEBREAKER)

    assert assignment.codemaker is bob
    assert assignment.swapped().codemaker is alice
    assert assignment.swapped().swapped() == assignment
    assert assignment.role_of("alice") is Role.CODEBREAKER


def test_scoreboard_follows_rebound_assignment() -> None:
    alice, bob = _two_round_players()
    assignment = RoleAssignment(codemaker=alice, codebreaker=bob)
    scoreboard = Scoreboard(assignment)

    scoreboard.award(Role.CODEMAKER, 3)
    scoreboard.rebind(assignment.swapped())
    scoreboard.award(Role.CODEMAKER, 1)

    assert scoreboard.points(Role.CODEBREAKER) == 3
    assert scoreboard.points(Role.CODEMAKER) == 1
    assert scoreboard.totals() == {"alice": 3, "bob": 1}

    with pytest.raises(ValueError):
        scoreboard.award(Role.CODEMAKER, -1)
    with pytest.raises(ValueError):
        scoreboard.rebind(RoleAssignment(codemaker=alice, codebreaker=ScriptedPlayer("carol")))


def test_seeded_computer_game_completes_with_consistent_totals() -> None:
    controller = GameController(
        primary=ComputerPlayer("computer-1", seed=9),
        opponent=ComputerPlayer("computer-2", seed=9),
        renderer=_SummaryRenderer(),
        round_count_chooser=FixedRoundCountChooser(4),
        role_chooser=FixedRoleChooser(Role.CODEMAKER),
    )

    result = controller.play().result

    assert len(result.rounds) == 4
    assert sum(result.totals.values()) == sum(round_result.points_awarded for round_result in result.rounds)
    for round_result in result.rounds:
        assert 1 <= round_result.turns_used <= 12
        expected = round_result.turns_used + (0 if round_result.solved else 1)
        assert round_result.points_awarded == expected
    assert result.to_dict()["total_rounds"] == 4
