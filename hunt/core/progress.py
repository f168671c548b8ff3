"""
Progress Engine - team progression state machine

States are (current_round, current_step) pairs plus the terminal state
(max_round with all of its steps completed).

Rules:
  - Only a correct, non-replayed submission moves a team forward
  - Replaying a completed step returns its clue and changes nothing
  - Every other accepted submission costs one attempt, correct or not
  - Round completion = distinct completed steps >= steps in the round
  - Rounds advance monotonically and clamp at max_round (no wrap)
  - Out-of-order completions never move the step pointer

The engine never mutates the record it is given. Each transition returns a
fresh copy for the caller to persist.
"""
import logging
import time
from typing import Callable, Optional, Set, Tuple

from hunt.core.catalog import RoundCatalog
from hunt.core.exceptions import (
    EmptyInput,
    RoundLocked,
    RoundNotComplete,
    StepNotFound,
    StepOutOfOrder,
)
from hunt.core.normalizer import is_blank, matches_any
from hunt.models import (
    AdvanceOutcome,
    CompletedStep,
    CurrentView,
    ProgressionParams,
    RoundDefinition,
    StepOrder,
    StepView,
    SubmissionOutcome,
    TeamProgress,
)


logger = logging.getLogger(__name__)


def completed_numbers(progress: TeamProgress, round_def: RoundDefinition) -> Set[int]:
    """Step numbers of the round that the team has completed"""
    defined = {step.step_number for step in round_def.validation_steps}
    return progress.completed_in_round(round_def.round_number) & defined


def is_round_complete(progress: TeamProgress, round_def: RoundDefinition) -> bool:
    return len(completed_numbers(progress, round_def)) >= round_def.total_steps


class ProgressEngine:
    """Applies submissions to team progress records"""

    def __init__(
        self,
        catalog: RoundCatalog,
        params: Optional[ProgressionParams] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.catalog = catalog
        self.params = params or ProgressionParams()
        self.clock = clock

    # ==================== SUBMISSION ====================

    def submit_answer(
        self,
        progress: TeamProgress,
        raw_answer: Optional[str],
        round_number: Optional[int] = None,
        step_number: Optional[int] = None,
    ) -> Tuple[SubmissionOutcome, TeamProgress]:
        """
        Check an answer and compute the team's next progress record

        Args:
            progress: Current progress record (not modified)
            raw_answer: Text typed by the team
            round_number: Target round, None for the team's current round
            step_number: Target step, None for the team's current step

        Returns:
            (outcome, updated progress). For replays the same record is returned.

        Raises:
            EmptyInput: blank answer, nothing counted
            RoundLocked: round is ahead of the team, nothing counted
            RoundNotFound / StepNotFound: target does not exist in the catalog
            StepOutOfOrder: in-order policy and the step is not the current one
        """
        if is_blank(raw_answer):
            raise EmptyInput()

        effective_round = progress.current_round if round_number is None else round_number
        effective_step = progress.current_step if step_number is None else step_number

        if effective_round > progress.current_round:
            raise RoundLocked(effective_round, progress.current_round)

        round_def = self.catalog.get_round(progress.team_id, effective_round)
        step = round_def.get_step(effective_step)
        if step is None:
            raise StepNotFound(effective_round, effective_step)

        if progress.is_step_completed(effective_round, effective_step):
            logger.info(
                f"🔁 Team {progress.team_id} | R{effective_round}S{effective_step} | replay"
            )
            round_complete = is_round_complete(progress, round_def)
            return SubmissionOutcome(
                success=True,
                message="Step already completed",
                round_number=effective_round,
                step_number=effective_step,
                already_completed=True,
                next_clue=step.additional_clue,
                next_clue_type=step.additional_clue_type,
                is_round_complete=round_complete,
                is_game_complete=self._is_terminal_round(effective_round, round_complete),
            ), progress

        if (
            self.params.step_order == StepOrder.IN_ORDER
            and effective_round == progress.current_round
            and effective_step != progress.current_step
        ):
            raise StepOutOfOrder(effective_step, progress.current_step)

        updated = progress.model_copy(deep=True)
        now = self.clock()
        updated.total_attempts += 1
        updated.last_activity = now

        if not matches_any(raw_answer, step.accepted_answers):
            logger.info(
                f"❌ Team {progress.team_id} | R{effective_round}S{effective_step} | "
                f"Incorrect | Attempts: {updated.total_attempts}"
            )
            return SubmissionOutcome(
                success=False,
                message="Try again",
                round_number=effective_round,
                step_number=effective_step,
            ), updated

        updated.completed_steps.append(
            CompletedStep(round_number=effective_round, step_number=effective_step, completed_at=now)
        )
        round_complete = is_round_complete(updated, round_def)
        is_current_round = effective_round == progress.current_round

        if is_current_round:
            if round_complete:
                self._advance(updated)
            elif effective_step == progress.current_step:
                updated.current_step = self._next_open_step(updated, round_def)

        logger.info(
            f"✅ Team {progress.team_id} | R{effective_round}S{effective_step} | "
            f"Round complete: {round_complete} | Now at R{updated.current_round}S{updated.current_step}"
        )

        return SubmissionOutcome(
            success=True,
            message="You are good to go!",
            round_number=effective_round,
            step_number=effective_step,
            next_clue=step.additional_clue,
            next_clue_type=step.additional_clue_type,
            is_round_complete=round_complete,
            can_proceed=round_complete and is_current_round and effective_round < self.params.max_round,
            is_game_complete=self._is_terminal_round(effective_round, round_complete),
        ), updated

    def _advance(self, progress: TeamProgress) -> None:
        """Move to the next round, clamping at max_round"""
        progress.current_round = min(progress.current_round + 1, self.params.max_round)
        progress.current_step = 0

    def _next_open_step(self, progress: TeamProgress, round_def: RoundDefinition) -> int:
        done = completed_numbers(progress, round_def)
        for step in round_def.validation_steps:
            if step.step_number not in done:
                return step.step_number
        return progress.current_step

    def _is_terminal_round(self, round_number: int, round_complete: bool) -> bool:
        return round_number >= self.params.max_round and round_complete

    # ==================== ROUND TRANSITION ====================

    def advance_round(self, progress: TeamProgress) -> AdvanceOutcome:
        """
        Guard used before a client moves on to the next round

        A team at max_round always gets the game-complete outcome, without a
        catalog lookup and whether or not the final round's steps are solved.
        There is no round after it to move to. get_current_view reports
        is_game_complete only once the final round itself is complete, so the
        two disagree for a team that has just arrived at max_round.

        Raises:
            RoundNotFound: current round missing from the catalog
            RoundNotComplete: some step of the current round is still open
        """
        if progress.current_round >= self.params.max_round:
            return AdvanceOutcome(message="Game completed!", is_game_complete=True)

        round_def = self.catalog.get_round(progress.team_id, progress.current_round)
        done = len(completed_numbers(progress, round_def))
        if done < round_def.total_steps:
            raise RoundNotComplete(progress.current_round, done, round_def.total_steps)

        return AdvanceOutcome(
            message="Ready for next round",
            next_round=progress.current_round + 1,
        )

    # ==================== VIEWS ====================

    def get_current_view(self, progress: TeamProgress) -> CurrentView:
        """Read-only projection of the team's current round and step"""
        round_def = self.catalog.get_round(progress.team_id, progress.current_round)
        done = completed_numbers(progress, round_def)
        round_complete = len(done) >= round_def.total_steps
        game_complete = self._is_terminal_round(progress.current_round, round_complete)

        view = CurrentView(
            round_number=round_def.round_number,
            clue_type=round_def.clue_type,
            clue_content=round_def.clue_content,
            total_steps=round_def.total_steps,
            completed_count=len(done),
            is_round_complete=round_complete,
            is_game_complete=game_complete,
        )
        if round_def.total_steps == 0:
            return view

        step = round_def.get_step(progress.current_step)
        if step is None:
            raise StepNotFound(progress.current_round, progress.current_step)

        step_done = step.step_number in done
        view.current_step = StepView(
            step_number=step.step_number,
            input_type=step.input_type,
            additional_clue=step.additional_clue if step_done else None,
            additional_clue_type=step.additional_clue_type,
            is_completed=step_done,
        )
        return view

    # ==================== BOOKKEEPING ====================

    def touch(self, progress: TeamProgress) -> TeamProgress:
        return progress.model_copy(update={"last_activity": self.clock()})

    def reset_progress(self, progress: TeamProgress) -> TeamProgress:
        """Explicit reset back to round 0, step 0"""
        return TeamProgress(team_id=progress.team_id, last_activity=self.clock())
