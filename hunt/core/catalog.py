"""
Round catalog - read-only lookup of round definitions per team

Lookup policy: per-team only. A round that was not seeded for a team does
not exist for that team; there is no implicit fallback to shared defaults.
Shared content is copied into teams explicitly by the catalog loader.
"""
from typing import Dict, Iterable, List, Tuple

from hunt.core.exceptions import CatalogError, RoundNotFound
from hunt.models import MAX_ROUND, RoundDefinition


class RoundCatalog:
    """In-memory round store keyed by (team_id, round_number)"""

    def __init__(self, max_round: int = MAX_ROUND):
        self.max_round = max_round
        self._rounds: Dict[Tuple[str, int], RoundDefinition] = {}

    @classmethod
    def from_definitions(cls, definitions: Iterable[RoundDefinition], max_round: int = MAX_ROUND) -> "RoundCatalog":
        catalog = cls(max_round=max_round)
        for definition in definitions:
            catalog.add_round(definition)
        return catalog

    def add_round(self, definition: RoundDefinition) -> None:
        """
        Register a round definition

        Raises:
            CatalogError: round number out of range, first step not numbered 0,
                or round already defined for the team
        """
        if not 0 <= definition.round_number <= self.max_round:
            raise CatalogError(
                f"Round number must be between 0 and {self.max_round}, "
                f"got {definition.round_number} for team {definition.team_id}"
            )
        # teams enter every round at step 0; later numbers may have gaps
        steps = definition.validation_steps
        if steps and steps[0].step_number != 0:
            raise CatalogError(
                f"Round {definition.round_number} for team {definition.team_id} "
                f"must start at step 0, first step is {steps[0].step_number}"
            )
        key = (definition.team_id, definition.round_number)
        if key in self._rounds:
            raise CatalogError(
                f"Round {definition.round_number} defined twice for team {definition.team_id}"
            )
        self._rounds[key] = definition

    def get_round(self, team_id: str, round_number: int) -> RoundDefinition:
        definition = self._rounds.get((team_id, round_number))
        if definition is None:
            raise RoundNotFound(team_id, round_number)
        return definition

    def rounds_for(self, team_id: str) -> List[RoundDefinition]:
        return sorted(
            (d for (tid, _), d in self._rounds.items() if tid == team_id),
            key=lambda d: d.round_number,
        )

    def __len__(self) -> int:
        return len(self._rounds)
