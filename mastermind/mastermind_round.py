"""Round controller: one hidden code, up to twelve guesses."""

from __future__ import annotations

import logging
from dataclasses import replace

from framework.events import EventType, GameEvent
from framework.result import RoundResult, TerminationReason

from .mastermind_feedback import coerce_code, evaluate_guess
from .mastermind_interfaces import Renderer
from .mastermind_scoreboard import Scoreboard
from .mastermind_state import MAX_TURNS, Code, Role, RoleAssignment, RoundPhase, RoundState

logger = logging.getLogger(__name__)

POINTS_PER_GUESS = 1
UNSOLVED_BONUS = 1


class RoundController:
    """Drives the round state machine and awards codemaker points."""

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def begin_round(self, round_index: int) -> RoundState:
        return RoundState(round_index=round_index)

    def set_code(self, state: RoundState, code: Code) -> RoundState:
        """Lock in the hidden code and open the guessing budget."""
        if state.phase is not RoundPhase.AWAITING_CODE:
            raise ValueError(f"Cannot set a code in phase {state.phase.value}.")
        return replace(state, phase=RoundPhase.AWAITING_GUESS, code=code, turns_left=MAX_TURNS)

    def submit_guess(self, state: RoundState, guess: Code) -> RoundState:
        if state.phase is not RoundPhase.AWAITING_GUESS:
            raise ValueError(f"Cannot submit a guess in phase {state.phase.value}.")
        return replace(state, phase=RoundPhase.EVALUATING, last_guess=guess, last_feedback=None)

    def evaluate(self, state: RoundState) -> RoundState:
        """Score the pending guess, spend one turn, and pick the next phase."""
        if state.phase is not RoundPhase.EVALUATING or state.last_guess is None or state.code is None:
            raise ValueError(f"Nothing to evaluate in phase {state.phase.value}.")

        feedback = evaluate_guess(state.last_guess, state.code)
        turns_left = state.turns_left - 1
        if state.last_guess == state.code:
            phase = RoundPhase.SOLVED
        elif turns_left <= 0:
            phase = RoundPhase.TURNS_EXHAUSTED
        else:
            phase = RoundPhase.AWAITING_GUESS
        return replace(
            state,
            phase=phase,
            turns_left=turns_left,
            turns_taken=state.turns_taken + 1,
            last_feedback=feedback,
        )

    def run(
        self,
        round_index: int,
        assignment: RoleAssignment,
        scoreboard: Scoreboard,
        events: list[GameEvent] | None = None,
    ) -> RoundResult:
        """Play one round to completion with the given role assignment."""
        history = events if events is not None else []
        codemaker = assignment.codemaker
        codebreaker = assignment.codebreaker
        logger.info(
            "Round %d: %s is codemaker, %s is codebreaker",
            round_index,
            codemaker.player_id,
            codebreaker.player_id,
        )

        state = self.begin_round(round_index)
        code = coerce_code(codemaker.player_id, codemaker.produce_code())
        state = self.set_code(state, code)
        history.append(
            GameEvent.create(
                event_type=EventType.CODE_SET,
                round_index=round_index,
                turn=0,
                payload={"player_id": codemaker.player_id},
            )
        )

        points_awarded = 0
        while not state.is_terminal:
            guess = coerce_code(codebreaker.player_id, codebreaker.produce_guess())
            state = self.evaluate(self.submit_guess(state, guess))
            feedback = state.last_feedback
            assert feedback is not None

            self.renderer.render_turn(guess, feedback)
            total = scoreboard.award(Role.CODEMAKER, POINTS_PER_GUESS)
            points_awarded += POINTS_PER_GUESS
            if state.phase is RoundPhase.TURNS_EXHAUSTED:
                total = scoreboard.award(Role.CODEMAKER, UNSOLVED_BONUS)
                points_awarded += UNSOLVED_BONUS
            self.renderer.render_codemaker_points(total)

            logger.debug(
                "Round %d turn %d: guess=%s exact=%d present=%d turns_left=%d",
                round_index,
                state.turns_taken,
                "".join(str(color.digit) for color in guess),
                feedback.exact,
                feedback.present,
                state.turns_left,
            )
            history.append(
                GameEvent.create(
                    event_type=EventType.GUESS,
                    round_index=round_index,
                    turn=state.turns_taken,
                    payload={
                        "player_id": codebreaker.player_id,
                        "guess": guess,
                        "feedback": feedback,
                        "turns_left": state.turns_left,
                        "codemaker_points": total,
                    },
                )
            )

        reason = TerminationReason.SOLVED if state.phase is RoundPhase.SOLVED else TerminationReason.TURNS_EXHAUSTED
        result = RoundResult(
            round_index=round_index,
            codemaker_id=codemaker.player_id,
            codebreaker_id=codebreaker.player_id,
            code=code,
            termination_reason=reason,
            turns_used=state.turns_taken,
            points_awarded=points_awarded,
        )
        logger.info(
            "Round %d ended (%s) after %d turns; codemaker earned %d",
            round_index,
            reason.value,
            result.turns_used,
            points_awarded,
        )
        history.append(
            GameEvent.create(
                event_type=EventType.ROUND_END,
                round_index=round_index,
                turn=state.turns_taken,
                payload={"result": result.to_dict()},
            )
        )
        return result
