"""Team login endpoint"""
from fastapi import APIRouter, Depends, HTTPException

from hunt.api.deps import get_service
from hunt.services.hunt_service import HuntService


router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("/login")
async def login(payload: dict, service: HuntService = Depends(get_service)):
    team_id = payload.get("teamId") or payload.get("team_id")
    if not team_id or not str(team_id).strip():
        raise HTTPException(status_code=400, detail="Team ID is required")

    result = service.login(str(team_id).strip())
    if not result.success:
        raise HTTPException(
            status_code=401,
            detail={"error": result.error, "message": result.message or "Invalid team ID"},
        )
    return {
        "success": True,
        "team": {
            "teamId": result.data["team_id"],
            "teamName": result.data["team_name"],
            "currentRound": result.data["current_round"],
            "currentStep": result.data["current_step"],
        },
        "message": result.message,
    }
