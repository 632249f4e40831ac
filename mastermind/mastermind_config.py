"""Validated settings for a Mastermind session."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .mastermind_state import Role

PlayerType = Literal["human", "computer"]


class MatchSettings(BaseModel):
    """Settings gathered from the command line before a game starts.

    `rounds` and `role` are optional; when unset the console choosers ask for
    them interactively.
    """

    model_config = ConfigDict(frozen=True)

    rounds: int | None = None
    role: Role | None = None
    primary: PlayerType = "human"
    opponent: PlayerType = "computer"
    seed: int | None = None
    use_color: bool = True
    show_instructions: bool = True
    summary_json: bool = False

    @field_validator("rounds")
    @classmethod
    def _rounds_positive_even(cls, value: int | None) -> int | None:
        if value is not None and (value <= 0 or value % 2 != 0):
            raise ValueError("rounds must be a positive even number")
        return value

    @model_validator(mode="after")
    def _interactive_choices_need_a_human(self) -> MatchSettings:
        has_human = "human" in (self.primary, self.opponent)
        if not has_human and (self.rounds is None or self.role is None):
            raise ValueError("rounds and role must be set when no human is playing")
        return self
