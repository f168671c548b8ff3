"""
In-memory progress store

Records are copied on the way in and out so that nothing outside the team
lock can mutate stored state.
"""
from typing import Dict

from hunt.core.exceptions import ProgressNotFound
from hunt.models import TeamProgress


class ProgressStore:

    def __init__(self):
        self._records: Dict[str, TeamProgress] = {}

    def create(self, team_id: str) -> TeamProgress:
        """Create an initial (0, 0) record if the team has none"""
        if team_id not in self._records:
            self._records[team_id] = TeamProgress(team_id=team_id)
        return self.load(team_id)

    def load(self, team_id: str) -> TeamProgress:
        record = self._records.get(team_id)
        if record is None:
            raise ProgressNotFound(team_id)
        return record.model_copy(deep=True)

    def save(self, progress: TeamProgress) -> None:
        self._records[progress.team_id] = progress.model_copy(deep=True)

    def __contains__(self, team_id: str) -> bool:
        return team_id in self._records
