"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from hunt import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    service = state.SERVICE
    return {
        "status": "ok",
        "message": "Puzzle Hunt Progression Server",
        "version": "1.0.0",
        "total_teams": len(service.registry.team_ids()) if service else 0,
        "total_rounds": len(service.catalog) if service else 0,
    }
