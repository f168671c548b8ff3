"""
Request checks shared by the routers

Identity resolution is a flat list of checks run in order. Each check gets
the value resolved so far and returns a Check; the first failing check
stops the pipeline and becomes the HTTP error.
"""
import hmac
from typing import Callable, Dict, List, Optional

from fastapi import HTTPException, Request
from pydantic import BaseModel

from hunt import state
from hunt.models import ServiceResult
from hunt.services.hunt_service import HuntService


TEAM_HEADER = "X-Team-Id"
ADMIN_HEADER = "X-Admin-Key"

# error kind -> HTTP status
ERROR_STATUS: Dict[str, int] = {
    "EmptyInput": 400,
    "RoundNotComplete": 400,
    "StepOutOfOrder": 400,
    "RoundLocked": 403,
    "TeamNotFound": 403,
    "RoundNotFound": 404,
    "StepNotFound": 404,
    "ProgressNotFound": 404,
}


class Check(BaseModel):
    ok: bool
    value: Optional[str] = None
    status_code: int = 200
    detail: Optional[str] = None


CheckStep = Callable[[Request, HuntService, Optional[str]], Check]


def require_team_header(request: Request, service: HuntService, _: Optional[str]) -> Check:
    team_id = (request.headers.get(TEAM_HEADER) or "").strip()
    if not team_id:
        return Check(ok=False, status_code=401, detail="No team id provided, access denied")
    return Check(ok=True, value=team_id)


def require_active_team(request: Request, service: HuntService, team_id: Optional[str]) -> Check:
    team = service.registry.get_team(team_id)
    if team is None or not team.is_active:
        return Check(ok=False, status_code=403, detail="Team not found or inactive")
    return Check(ok=True, value=team.team_id)


def require_admin_key(request: Request, service: HuntService, _: Optional[str]) -> Check:
    supplied = request.headers.get(ADMIN_HEADER) or ""
    if not hmac.compare_digest(supplied.encode(), service.config.admin_key.encode()):
        return Check(ok=False, status_code=403, detail="Access denied. Admin key required.")
    return Check(ok=True)


TEAM_CHECKS: List[CheckStep] = [require_team_header, require_active_team]
ADMIN_CHECKS: List[CheckStep] = [require_admin_key]


def run_checks(request: Request, service: HuntService, steps: List[CheckStep]) -> Check:
    result = Check(ok=True)
    for step in steps:
        result = step(request, service, result.value)
        if not result.ok:
            return result
    return result


def get_service() -> HuntService:
    if state.SERVICE is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return state.SERVICE


def current_team(request: Request) -> str:
    """FastAPI dependency: verified team id of the caller"""
    result = run_checks(request, get_service(), TEAM_CHECKS)
    if not result.ok:
        raise HTTPException(status_code=result.status_code, detail=result.detail)
    return result.value


def require_admin(request: Request) -> None:
    result = run_checks(request, get_service(), ADMIN_CHECKS)
    if not result.ok:
        raise HTTPException(status_code=result.status_code, detail=result.detail)


def raise_for_error(result: ServiceResult) -> None:
    """Turn a failed ServiceResult that carries an error kind into an HTTPException"""
    if result.error is None:
        return
    raise HTTPException(
        status_code=ERROR_STATUS.get(result.error, 400),
        detail={"error": result.error, "message": result.message},
    )
