"""
Tests for the round catalog and the YAML seed loader
"""
import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from hunt.catalog_loader import load_seed
from hunt.core.catalog import RoundCatalog
from hunt.core.exceptions import CatalogError, RoundNotFound
from hunt.models import RoundDefinition, ValidationStep


SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "rounds.yaml"


def _round(team_id, round_number, steps=1):
    return RoundDefinition(
        team_id=team_id,
        round_number=round_number,
        clue_content="clue",
        validation_steps=[
            ValidationStep(step_number=i, accepted_answers=["x"]) for i in range(steps)
        ],
    )


def _write(tmp_path, content):
    path = tmp_path / "rounds.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return str(path)


SEED = """
teams:
  - team_id: TEAM001
    team_name: Alpha Squad
    use_default_rounds: true
  - team_id: TEAM002
    team_name: Beta Warriors
  - team_id: 16146
    team_name: Numeric Team
    is_active: false
default_rounds:
  - round_number: 0
    clue_content: default zero
    hint: default hint
    validation_steps:
      - step_number: 0
        accepted_answers: [e]
  - round_number: 1
    clue_type: image
    clue_content: https://example.org/one.png
    validation_steps:
      - step_number: 1
        accepted_answers: [b]
      - step_number: 0
        input_type: code
        accepted_answers: [a]
        additional_clue: next
rounds:
  TEAM001:
    - round_number: 0
      clue_content: alpha zero
      validation_steps:
        - step_number: 0
          accepted_answers: [echo]
  TEAM002:
    - round_number: 2
      clue_content: beta two
      validation_steps: []
"""


# ==================== CATALOG ====================

def test_get_round_per_team():
    catalog = RoundCatalog.from_definitions([_round("A", 0), _round("B", 0, steps=2)])
    assert catalog.get_round("A", 0).total_steps == 1
    assert catalog.get_round("B", 0).total_steps == 2


def test_missing_round_has_no_fallback():
    catalog = RoundCatalog.from_definitions([_round("A", 0)])
    with pytest.raises(RoundNotFound):
        catalog.get_round("B", 0)
    with pytest.raises(RoundNotFound):
        catalog.get_round("A", 1)


def test_duplicate_round_rejected():
    catalog = RoundCatalog.from_definitions([_round("A", 0)])
    with pytest.raises(CatalogError):
        catalog.add_round(_round("A", 0))


def test_round_number_out_of_range_rejected():
    with pytest.raises(CatalogError):
        RoundCatalog.from_definitions([_round("A", 6)])


def test_round_must_start_at_step_zero():
    """A round entered at step 0 must define step 0"""
    definition = RoundDefinition(
        team_id="A",
        round_number=1,
        clue_content="c",
        validation_steps=[
            ValidationStep(step_number=1, accepted_answers=["b"]),
            ValidationStep(step_number=2, accepted_answers=["c"]),
        ],
    )
    with pytest.raises(CatalogError):
        RoundCatalog.from_definitions([_round("A", 0), definition])


def test_gaps_after_step_zero_allowed():
    definition = RoundDefinition(
        team_id="A",
        round_number=0,
        clue_content="c",
        validation_steps=[
            ValidationStep(step_number=5, accepted_answers=["y"]),
            ValidationStep(step_number=0, accepted_answers=["x"]),
        ],
    )
    catalog = RoundCatalog.from_definitions([definition])
    assert [s.step_number for s in catalog.get_round("A", 0).validation_steps] == [0, 5]


def test_seed_round_not_starting_at_zero_rejected(tmp_path):
    seed = """
    teams:
      - team_id: A
    rounds:
      A:
        - round_number: 0
          clue_content: c
          validation_steps:
            - step_number: 1
              accepted_answers: [x]
    """
    with pytest.raises(CatalogError):
        load_seed(_write(tmp_path, seed))


def test_rounds_for_sorted():
    catalog = RoundCatalog.from_definitions([_round("A", 2), _round("A", 0), _round("B", 1)])
    assert [r.round_number for r in catalog.rounds_for("A")] == [0, 2]


def test_duplicate_step_numbers_rejected():
    with pytest.raises(ValidationError):
        RoundDefinition(
            team_id="A",
            round_number=0,
            clue_content="c",
            validation_steps=[
                ValidationStep(step_number=0, accepted_answers=["x"]),
                ValidationStep(step_number=0, accepted_answers=["y"]),
            ],
        )


def test_empty_accepted_answers_rejected():
    with pytest.raises(ValidationError):
        ValidationStep(step_number=0, accepted_answers=[])


# ==================== LOADER ====================

def test_load_seed_teams(tmp_path):
    teams, _ = load_seed(_write(tmp_path, SEED))
    assert [t.team_id for t in teams] == ["TEAM001", "TEAM002", "16146"]
    assert teams[2].is_active is False


def test_team_round_overrides_default(tmp_path):
    _, catalog = load_seed(_write(tmp_path, SEED))
    assert catalog.get_round("TEAM001", 0).clue_content == "alpha zero"
    assert catalog.get_round("TEAM001", 1).clue_content == "https://example.org/one.png"


def test_defaults_only_copied_when_requested(tmp_path):
    _, catalog = load_seed(_write(tmp_path, SEED))
    assert catalog.get_round("TEAM002", 2).total_steps == 0
    with pytest.raises(RoundNotFound):
        catalog.get_round("TEAM002", 0)


def test_steps_sorted_by_number(tmp_path):
    _, catalog = load_seed(_write(tmp_path, SEED))
    steps = catalog.get_round("TEAM001", 1).validation_steps
    assert [s.step_number for s in steps] == [0, 1]
    assert steps[0].input_type.value == "code"


def test_rounds_for_unknown_team_rejected(tmp_path):
    seed = """
    teams:
      - team_id: A
    rounds:
      B:
        - round_number: 0
          clue_content: c
    """
    with pytest.raises(CatalogError):
        load_seed(_write(tmp_path, seed))


def test_invalid_round_reported_as_catalog_error(tmp_path):
    seed = """
    teams:
      - team_id: A
    rounds:
      A:
        - round_number: 0
          clue_content: c
          validation_steps:
            - step_number: 0
              accepted_answers: []
    """
    with pytest.raises(CatalogError):
        load_seed(_write(tmp_path, seed))


def test_seed_without_teams_rejected(tmp_path):
    with pytest.raises(CatalogError):
        load_seed(_write(tmp_path, "teams: []\n"))


def test_missing_seed_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed(str(tmp_path / "nope.yaml"))


def test_bundled_seed_loads():
    """The seed shipped in data/ is valid"""
    teams, catalog = load_seed(str(SEED_FILE))
    assert len(teams) == 5
    assert catalog.get_round("TEAM003", 3).total_steps == 4
    assert catalog.get_round("TEAM002", 1).clue_content.startswith("I have keys")
