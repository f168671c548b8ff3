"""
Custom exceptions for progression logic

Every exception carries a stable `kind` so the service layer can report it
to callers verbatim and the API layer can map it to an HTTP status.
"""


class HuntException(Exception):
    """Base class for all hunt errors"""
    kind = "HuntError"


# ============ Catalog ============

class RoundNotFound(HuntException):
    kind = "RoundNotFound"

    def __init__(self, team_id, round_number):
        self.team_id = team_id
        self.round_number = round_number
        super().__init__(f"Round {round_number} not found for team {team_id}")


class StepNotFound(HuntException):
    kind = "StepNotFound"

    def __init__(self, round_number, step_number):
        self.round_number = round_number
        self.step_number = step_number
        super().__init__(f"Step {step_number} not found in round {round_number}")


class CatalogError(HuntException):
    """Seed data is malformed or inconsistent"""
    kind = "CatalogError"


# ============ Submission ============

class EmptyInput(HuntException):
    kind = "EmptyInput"

    def __init__(self):
        super().__init__("Input is required")


class RoundLocked(HuntException):
    """Round lies ahead of the team's current round"""
    kind = "RoundLocked"

    def __init__(self, round_number, current_round):
        self.round_number = round_number
        self.current_round = current_round
        super().__init__(
            f"Round {round_number} is not unlocked yet (current round: {current_round})"
        )


class StepOutOfOrder(HuntException):
    """Only raised under the in-order step policy"""
    kind = "StepOutOfOrder"

    def __init__(self, step_number, current_step):
        self.step_number = step_number
        self.current_step = current_step
        super().__init__(
            f"Step {step_number} must wait until step {current_step} is solved"
        )


class RoundNotComplete(HuntException):
    kind = "RoundNotComplete"

    def __init__(self, round_number, completed, total):
        self.round_number = round_number
        self.completed = completed
        self.total = total
        super().__init__(
            f"Current round not completed yet ({completed}/{total} steps in round {round_number})"
        )


# ============ Teams ============

class ProgressNotFound(HuntException):
    kind = "ProgressNotFound"

    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Progress record for team {team_id} not found")


class TeamNotFound(HuntException):
    kind = "TeamNotFound"

    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found or inactive")
