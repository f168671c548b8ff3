"""Team registry - resolves a verified team id to a registered team"""
from typing import Dict, Iterable, List, Optional

from hunt.core.exceptions import TeamNotFound
from hunt.models import Team


class TeamRegistry:

    def __init__(self, teams: Iterable[Team] = ()):
        self._teams: Dict[str, Team] = {}
        for team in teams:
            self.register(team)

    def register(self, team: Team) -> Team:
        clean_id = team.team_id.strip()
        if not clean_id:
            raise ValueError("team_id required")
        team = team.model_copy(update={"team_id": clean_id})
        self._teams[clean_id] = team
        return team

    def get_team(self, team_id: str) -> Optional[Team]:
        return self._teams.get((team_id or "").strip())

    def get_active_team(self, team_id: str) -> Team:
        team = self.get_team(team_id)
        if team is None or not team.is_active:
            raise TeamNotFound(team_id)
        return team

    def get_team_name(self, team_id: str) -> str:
        team = self.get_team(team_id)
        return team.team_name if team else team_id

    def team_ids(self) -> List[str]:
        return list(self._teams)
