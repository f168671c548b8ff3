"""
Hunt service - caller-facing operations over the progress engine

Every operation resolves the team, holds that team's lock around
load -> compute -> save, and reports a ServiceResult. Engine errors are
returned as structured failures carrying their error kind.
"""
import logging
import time
from typing import Callable, Optional

from hunt.config import HuntConfig
from hunt.core.catalog import RoundCatalog
from hunt.core.exceptions import HuntException, RoundLocked
from hunt.core.locks import TeamLocks
from hunt.core.progress import ProgressEngine
from hunt.core.store import ProgressStore
from hunt.models import ServiceResult, TeamProgress
from hunt.services.team_registry import TeamRegistry


logger = logging.getLogger(__name__)


def _failure(exc: HuntException) -> ServiceResult:
    return ServiceResult(success=False, error=exc.kind, message=str(exc))


def _progress_payload(progress: TeamProgress) -> dict:
    return progress.model_dump(mode="json")


class HuntService:

    def __init__(
        self,
        config: HuntConfig,
        catalog: RoundCatalog,
        registry: TeamRegistry,
        store: Optional[ProgressStore] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.catalog = catalog
        self.registry = registry
        self.store = store or ProgressStore()
        self.locks = TeamLocks()
        self.engine = ProgressEngine(catalog, config.progression_params(), clock=clock)

        for team_id in registry.team_ids():
            if team_id not in self.store:
                self.store.create(team_id)

    # ==================== TEAM SESSION ====================

    def login(self, team_id: str) -> ServiceResult:
        """Record activity for a team and return its position"""
        try:
            team = self.registry.get_active_team(team_id)
            with self.locks.hold(team.team_id):
                progress = self.engine.touch(self.store.load(team.team_id))
                self.store.save(progress)
        except HuntException as e:
            logger.info(f"❌ Login rejected for {team_id}: {e}")
            return _failure(e)

        logger.info(f"✅ Team {team.team_id} ({team.team_name}) logged in")
        return ServiceResult(
            success=True,
            data={
                "team_id": team.team_id,
                "team_name": team.team_name,
                "current_round": progress.current_round,
                "current_step": progress.current_step,
            },
            message="Login successful",
        )

    # ==================== CORE OPERATIONS ====================

    def get_current_view(self, team_id: str) -> ServiceResult:
        try:
            with self.locks.hold(team_id):
                progress = self.store.load(team_id)
            view = self.engine.get_current_view(progress)
        except HuntException as e:
            return _failure(e)
        return ServiceResult(success=True, data=view.model_dump(mode="json"))

    def submit_answer(
        self,
        team_id: str,
        answer: Optional[str],
        round_number: Optional[int] = None,
        step_number: Optional[int] = None,
    ) -> ServiceResult:
        """
        Check an answer for a team

        Args:
            team_id: Verified team id
            answer: Raw user input
            round_number: Target round or None for the current one
            step_number: Target step or None for the current one

        Returns:
            ServiceResult whose data holds the submission outcome and the
            team's resulting position. A wrong answer is success=False with
            no error kind.
        """
        try:
            with self.locks.hold(team_id):
                progress = self.store.load(team_id)
                outcome, updated = self.engine.submit_answer(
                    progress, answer, round_number=round_number, step_number=step_number
                )
                if updated is not progress:
                    self.store.save(updated)
        except HuntException as e:
            logger.info(f"❌ Submission rejected for {team_id}: {e.kind} | {e}")
            return _failure(e)

        data = outcome.model_dump(mode="json")
        data["current_round"] = updated.current_round
        data["current_step"] = updated.current_step
        data["total_attempts"] = updated.total_attempts
        return ServiceResult(success=outcome.success, data=data, message=outcome.message)

    def check_advance(self, team_id: str) -> ServiceResult:
        try:
            with self.locks.hold(team_id):
                progress = self.store.load(team_id)
            outcome = self.engine.advance_round(progress)
        except HuntException as e:
            return _failure(e)
        return ServiceResult(success=True, data=outcome.model_dump(mode="json"), message=outcome.message)

    # ==================== SUPPORTING OPERATIONS ====================

    def get_hint(self, team_id: str, round_number: int) -> ServiceResult:
        """Hint for the current round or any round already reached"""
        try:
            with self.locks.hold(team_id):
                progress = self.store.load(team_id)
            if round_number > progress.current_round:
                raise RoundLocked(round_number, progress.current_round)
            round_def = self.catalog.get_round(team_id, round_number)
        except HuntException as e:
            return _failure(e)
        return ServiceResult(
            success=True,
            data={"round_number": round_def.round_number, "hint": round_def.hint},
        )

    def get_progress(self, team_id: str) -> ServiceResult:
        try:
            with self.locks.hold(team_id):
                progress = self.store.load(team_id)
        except HuntException as e:
            return _failure(e)
        data = _progress_payload(progress)
        data["team_name"] = self.registry.get_team_name(team_id)
        return ServiceResult(success=True, data=data)

    def reset_progress(self, team_id: str) -> ServiceResult:
        """Explicit reset - the only way a team's round can go down"""
        try:
            with self.locks.hold(team_id):
                progress = self.engine.reset_progress(self.store.load(team_id))
                self.store.save(progress)
        except HuntException as e:
            return _failure(e)
        logger.info(f"🔄 Progress reset for team {team_id}")
        return ServiceResult(
            success=True,
            data=_progress_payload(progress),
            message="Team progress reset",
        )
