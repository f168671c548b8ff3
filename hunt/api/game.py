"""
Game endpoints for teams: current round, answer validation, round advance
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
import logging

from hunt.api.deps import current_team, get_service, raise_for_error
from hunt.services.hunt_service import HuntService


router = APIRouter(prefix="/game", tags=["game"])
logger = logging.getLogger(__name__)


def _optional_int(payload: dict, *keys: str) -> Optional[int]:
    """First present, non-null key as int; None when every key is absent or null"""
    for key in keys:
        value = payload.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise HTTPException(status_code=400, detail=f"{key} must be an integer")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail=f"{key} must be an integer")
    return None


@router.get("/round")
async def get_round(
    team_id: str = Depends(current_team),
    service: HuntService = Depends(get_service),
):
    """Current round clue and step for the calling team"""
    result = service.get_current_view(team_id)
    raise_for_error(result)
    return {"success": True, "round": result.data}


@router.post("/validate")
async def validate(
    payload: dict,
    team_id: str = Depends(current_team),
    service: HuntService = Depends(get_service),
):
    """
    Check an answer

    Request:
        {
            "roundNumber": 3,      # optional, defaults to current round
            "stepNumber": 0,       # optional, defaults to current step
            "userInput": "paris"
        }

    Response (CORRECT):
        {
            "success": true,
            "message": "You are good to go!",
            "nextClue": "...",
            "nextClueType": "text",
            "isRoundComplete": false,
            "canProceed": false,
            ...
        }

    Response (INCORRECT):
        {"success": false, "message": "Try again", ...}
    """
    round_number = _optional_int(payload, "roundNumber", "round_number")
    step_number = _optional_int(payload, "stepNumber", "step_number")
    logger.info(f"📥 Submission from team {team_id} | round={round_number} step={step_number}")

    user_input = payload.get("userInput")
    if user_input is None:
        user_input = payload.get("user_input")
    if user_input is not None and not isinstance(user_input, str):
        raise HTTPException(status_code=400, detail="userInput must be a string")

    result = service.submit_answer(
        team_id, user_input, round_number=round_number, step_number=step_number
    )
    raise_for_error(result)

    data = result.data
    response = {
        "success": result.success,
        "message": result.message,
        "roundNumber": data["round_number"],
        "stepNumber": data["step_number"],
        "currentRound": data["current_round"],
        "currentStep": data["current_step"],
        "totalAttempts": data["total_attempts"],
    }
    if result.success:
        response.update({
            "alreadyCompleted": data["already_completed"],
            "nextClue": data["next_clue"],
            "nextClueType": data["next_clue_type"],
            "isRoundComplete": data["is_round_complete"],
            "canProceed": data["can_proceed"],
            "isGameComplete": data["is_game_complete"],
        })
    return response


@router.post("/next")
async def next_round(
    team_id: str = Depends(current_team),
    service: HuntService = Depends(get_service),
):
    """Check whether the team may move on from its current round"""
    result = service.check_advance(team_id)
    raise_for_error(result)
    return {
        "success": True,
        "message": result.message,
        "nextRound": result.data["next_round"],
        "isGameComplete": result.data["is_game_complete"],
    }


@router.get("/hint/{round_number}")
async def get_hint(
    round_number: int,
    team_id: str = Depends(current_team),
    service: HuntService = Depends(get_service),
):
    result = service.get_hint(team_id, round_number)
    raise_for_error(result)
    return {"success": True, "hint": result.data["hint"], "roundNumber": result.data["round_number"]}


@router.get("/progress")
async def get_progress(
    team_id: str = Depends(current_team),
    service: HuntService = Depends(get_service),
):
    result = service.get_progress(team_id)
    raise_for_error(result)
    return {"success": True, "progress": result.data}
