"""
Admin endpoints
"""
from fastapi import APIRouter, Depends
import logging

from hunt.api.deps import get_service, raise_for_error, require_admin
from hunt.services.hunt_service import HuntService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/teams/{team_id}/reset")
async def reset_team(team_id: str, service: HuntService = Depends(get_service)):
    """
    Admin: reset a team back to round 0, step 0

    Clears completed steps and the attempt counter.
    """
    logger.info(f"🔄 Admin reset requested for team {team_id}")
    result = service.reset_progress(team_id)
    raise_for_error(result)
    return {
        "success": True,
        "team": result.data,
        "message": result.message,
    }
