"""Player and console collaborator tests."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from framework.errors import PlayerExecutionError
from framework.result import GameResult
from mastermind.mastermind_console import (
    ConsoleRenderer,
    ConsoleRoleChooser,
    ConsoleRoundCountChooser,
    instructions,
    parse_code_input,
)
from mastermind.mastermind_players import ComputerPlayer, HumanPlayer, ScriptedPlayer
from mastermind.mastermind_state import PALETTE, Feedback, Role

R, G, Y, B, M, C, W = PALETTE


def _feed_input(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    replies: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *_: next(replies))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1234", (R, G, Y, B)),
        (" 7777 \n", (W, W, W, W)),
        ("5611", (M, C, R, R)),
    ],
)
def test_parse_code_input_maps_digits_to_palette(text: str, expected: tuple) -> None:
    assert parse_code_input(text) == expected


@pytest.mark.parametrize("text", ["", "123", "12345", "1800", "0123", "abcd", "1 23"])
def test_parse_code_input_rejects_malformed_text(text: str) -> None:
    assert parse_code_input(text) is None


def test_human_guess_reprompts_until_valid(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed_input(monkeypatch, ["12", "8888", "1234"])

    guess = HumanPlayer("human", use_color=False).produce_guess()

    assert guess == (R, G, Y, B)
    output = capsys.readouterr().out
    assert output.startswith("Guess the code. ")
    assert output.count("Must be 4 digits between 1111 and 7777.") == 2


def test_human_code_prompt_lists_palette(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed_input(monkeypatch, ["7162"])

    code = HumanPlayer("human", use_color=False).produce_code()

    assert code == (W, R, C, G)
    output = capsys.readouterr().out
    assert "Choose 4 colors" in output
    assert "7:white" in output


def test_seeded_computer_player_is_reproducible() -> None:
    first = ComputerPlayer("computer", seed=42)
    second = ComputerPlayer("computer", seed=42)

    codes = [first.produce_code() for _ in range(5)]

    assert codes == [second.produce_code() for _ in range(5)]
    for code in codes:
        assert len(code) == 4
        assert all(color in PALETTE for color in code)


def test_computer_players_with_shared_seed_draw_different_streams() -> None:
    left = ComputerPlayer("computer-1", seed=7)
    right = ComputerPlayer("computer-2", seed=7)

    assert [left.produce_guess() for _ in range(10)] != [right.produce_guess() for _ in range(10)]


def test_scripted_player_raises_when_exhausted() -> None:
    player = ScriptedPlayer("script", codes=[(R, R, R, R)])

    assert player.produce_code() == (R, R, R, R)
    with pytest.raises(PlayerExecutionError) as excinfo:
        player.produce_code()
    assert excinfo.value.to_dict()["player_id"] == "script"
    with pytest.raises(PlayerExecutionError):
        player.produce_guess()


def test_round_count_chooser_requires_positive_even(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed_input(monkeypatch, ["0", "3", "two", "4"])

    assert ConsoleRoundCountChooser().choose_round_count() == 4
    assert capsys.readouterr().out.count("Must be a positive even number.") == 3


def test_role_chooser_maps_menu_index(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed_input(monkeypatch, ["3", "2"])

    assert ConsoleRoleChooser().choose_initial_role() is Role.CODEBREAKER
    output = capsys.readouterr().out
    assert "1. Codemaker" in output
    assert "Must be 1 or 2." in output


def test_plain_renderer_prints_pegs_then_markers() -> None:
    stream = io.StringIO()
    renderer = ConsoleRenderer(use_color=False, stream=stream)

    renderer.render_round_start(1, 2)
    renderer.render_turn((R, G, B, Y), Feedback(exact=1, present=2))
    renderer.render_round_summary(3, 0)
    renderer.render_game_over(GameResult(total_rounds=2, totals={"human": 3, "computer": 5}))

    lines = stream.getvalue().splitlines()
    assert lines[0] == "Round 1 of 2"
    assert lines[1] == "Decoding board: 1:red 2:green 4:blue 3:yellow B W W"
    assert "Codemaker's points: 3 | Codebreaker's points: 0" in lines
    assert lines[-1] == "Game over after 2 rounds. human: 3 | computer: 5. computer wins."


def test_color_renderer_uses_ansi_blocks() -> None:
    stream = io.StringIO()
    ConsoleRenderer(stream=stream).render_turn((R, R, R, W), Feedback(exact=3))

    output = stream.getvalue()
    assert "\033[41m   1   \033[0m" in output
    assert "\033[47m   7   \033[0m" in output
    assert output.count("⬤") == 3


def test_instructions_mention_turn_budget_and_bonus() -> None:
    text = instructions(use_color=False)

    assert "within 12 turns" in text
    assert "one extra point" in text
