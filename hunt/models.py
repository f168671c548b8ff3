"""
Data models for the puzzle hunt progression server
"""
from enum import Enum
from typing import List, Optional, Set, Tuple

from pydantic import BaseModel, field_validator


MAX_ROUND = 5


class ClueType(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class InputType(str, Enum):
    CODE = "code"
    TEXT = "text"


class StepOrder(str, Enum):
    """How steps inside a round may be solved"""
    OUT_OF_ORDER = "out_of_order"   # any step of the current round, any order
    IN_ORDER = "in_order"           # only the tracked current step


class ValidationStep(BaseModel):
    """One answer-checking unit inside a round"""
    step_number: int
    input_type: InputType = InputType.TEXT   # client rendering only
    accepted_answers: List[str]
    additional_clue: Optional[str] = None    # revealed on first correct answer
    additional_clue_type: ClueType = ClueType.TEXT

    @field_validator("accepted_answers")
    @classmethod
    def _answers_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("accepted_answers must not be empty")
        return value


class RoundDefinition(BaseModel):
    """Read-only round content for one team"""
    team_id: str
    round_number: int
    clue_type: ClueType = ClueType.TEXT
    clue_content: str
    hint: str = ""
    validation_steps: List[ValidationStep] = []

    @field_validator("validation_steps")
    @classmethod
    def _unique_step_numbers(cls, value: List[ValidationStep]) -> List[ValidationStep]:
        numbers = [step.step_number for step in value]
        if len(numbers) != len(set(numbers)):
            raise ValueError(f"duplicate step numbers: {numbers}")
        return sorted(value, key=lambda step: step.step_number)

    @property
    def total_steps(self) -> int:
        return len(self.validation_steps)

    def get_step(self, step_number: int) -> Optional[ValidationStep]:
        for step in self.validation_steps:
            if step.step_number == step_number:
                return step
        return None


class Team(BaseModel):
    team_id: str
    team_name: str
    is_active: bool = True


class CompletedStep(BaseModel):
    round_number: int
    step_number: int
    completed_at: Optional[float] = None


class TeamProgress(BaseModel):
    """Durable per-team progress record"""
    team_id: str
    current_round: int = 0
    current_step: int = 0
    completed_steps: List[CompletedStep] = []
    total_attempts: int = 0
    last_activity: Optional[float] = None

    def completed_pairs(self) -> Set[Tuple[int, int]]:
        return {(c.round_number, c.step_number) for c in self.completed_steps}

    def is_step_completed(self, round_number: int, step_number: int) -> bool:
        return (round_number, step_number) in self.completed_pairs()

    def completed_in_round(self, round_number: int) -> Set[int]:
        """Distinct step numbers completed for a round"""
        return {c.step_number for c in self.completed_steps if c.round_number == round_number}


class ProgressionParams(BaseModel):
    """Rules the progress engine runs with"""
    max_round: int = MAX_ROUND
    step_order: StepOrder = StepOrder.OUT_OF_ORDER


class SubmissionOutcome(BaseModel):
    """Result of checking one answer"""
    success: bool
    message: str
    round_number: int
    step_number: int
    already_completed: bool = False
    next_clue: Optional[str] = None
    next_clue_type: Optional[ClueType] = None
    is_round_complete: bool = False
    can_proceed: bool = False
    is_game_complete: bool = False


class AdvanceOutcome(BaseModel):
    success: bool = True
    message: str
    next_round: Optional[int] = None
    is_game_complete: bool = False


class StepView(BaseModel):
    step_number: int
    input_type: InputType
    additional_clue: Optional[str] = None
    additional_clue_type: ClueType = ClueType.TEXT
    is_completed: bool = False


class CurrentView(BaseModel):
    """What a team sees for its current position"""
    round_number: int
    clue_type: ClueType
    clue_content: str
    current_step: Optional[StepView] = None   # None for rounds without steps
    total_steps: int
    completed_count: int
    is_round_complete: bool
    is_game_complete: bool = False


class ServiceResult(BaseModel):
    """Structured reply for every caller-facing operation"""
    success: bool
    data: Optional[dict] = None
    error: Optional[str] = None       # error kind, e.g. "RoundNotFound"
    message: Optional[str] = None
