"""
Configuration endpoints
"""
from fastapi import APIRouter, Depends

from hunt.api.deps import get_service
from hunt.services.hunt_service import HuntService


router = APIRouter(tags=["config"])


@router.get("/config")
async def get_config(service: HuntService = Depends(get_service)):
    """Progression rules the server runs with (admin key never exposed)"""
    return {
        "progression": service.engine.params.model_dump(mode="json"),
        "catalog_path": service.config.catalog_path,
    }
