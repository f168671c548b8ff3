"""
Seed loader for teams and round definitions (YAML)
"""
import logging
from pathlib import Path
from typing import Dict, List, Tuple

import yaml
from pydantic import ValidationError

from hunt.core.catalog import RoundCatalog
from hunt.core.exceptions import CatalogError
from hunt.models import MAX_ROUND, RoundDefinition, Team


logger = logging.getLogger(__name__)


def _build_round(team_id: str, raw: Dict) -> RoundDefinition:
    try:
        return RoundDefinition(**{**raw, "team_id": team_id})
    except ValidationError as e:
        raise CatalogError(
            f"Invalid round {raw.get('round_number')} for team {team_id}: {e}"
        ) from e


def load_seed(seed_path: str, max_round: int = MAX_ROUND) -> Tuple[List[Team], RoundCatalog]:
    """
    Load teams and their rounds from a YAML seed file

    File format:
        teams:
          - team_id: TEAM001
            team_name: Alpha Squad
            use_default_rounds: true
        default_rounds:
          - round_number: 0
            clue_type: text
            clue_content: ...
            hint: ...
            validation_steps:
              - step_number: 0
                input_type: text
                accepted_answers: [echo]
                additional_clue: ...
        rounds:
          TEAM001:
            - round_number: 0
              ...

    Teams flagged with use_default_rounds get a copy of every default round
    they do not define themselves. Copies are made here, once; the catalog
    itself never falls back to defaults.

    Args:
        seed_path: Path to YAML file
        max_round: Highest legal round number

    Returns:
        (teams, catalog)

    Raises:
        FileNotFoundError: If seed file not found
        CatalogError: If the seed is malformed
    """
    path = Path(seed_path)

    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    teams: List[Team] = []
    seen_ids = set()
    for raw_team in data.get("teams") or []:
        team = Team(
            team_id=str(raw_team["team_id"]).strip(),
            team_name=str(raw_team.get("team_name") or raw_team["team_id"]).strip(),
            is_active=raw_team.get("is_active", True),
        )
        if team.team_id in seen_ids:
            raise CatalogError(f"Team {team.team_id} listed twice")
        seen_ids.add(team.team_id)
        teams.append(team)

    if not teams:
        raise CatalogError(f"No teams defined in {seed_path}")

    default_rounds = data.get("default_rounds") or []
    per_team = {str(tid).strip(): rounds for tid, rounds in (data.get("rounds") or {}).items()}

    unknown = set(per_team) - seen_ids
    if unknown:
        raise CatalogError(f"Rounds defined for unknown teams: {sorted(unknown)}")

    catalog = RoundCatalog(max_round=max_round)
    uses_defaults = {
        str(raw["team_id"]).strip() for raw in data["teams"] if raw.get("use_default_rounds")
    }

    for team in teams:
        own = per_team.get(team.team_id) or []
        own_numbers = set()
        for raw_round in own:
            definition = _build_round(team.team_id, raw_round)
            catalog.add_round(definition)
            own_numbers.add(definition.round_number)

        if team.team_id in uses_defaults:
            for raw_round in default_rounds:
                if raw_round.get("round_number") in own_numbers:
                    continue
                catalog.add_round(_build_round(team.team_id, raw_round))

        if not catalog.rounds_for(team.team_id):
            logger.warning(f"⚠️ No rounds defined for team {team.team_id}")

    logger.info(f"✅ Loaded {len(teams)} teams and {len(catalog)} rounds from {seed_path}")

    return teams, catalog
