"""
FastAPI main application
Puzzle Hunt - progression server for teams solving rounds of puzzles

Modular architecture with separated API routers in hunt/api/:
- health.py: Health check and system status
- team.py: Team login
- game.py: Current round, answer validation, round advance, hints, progress
- admin.py: Progress reset
- config.py: Active progression rules

All routers reach the HuntService built at startup via hunt.state.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from hunt import state
from hunt.catalog_loader import load_seed
from hunt.config import HuntConfig, load_config
from hunt.services.hunt_service import HuntService
from hunt.services.team_registry import TeamRegistry

# Import all API routers
from hunt.api import health, team, game, admin
from hunt.api import config as config_router


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_service(config: HuntConfig) -> HuntService:
    """Wire catalog, registry and store from an explicit config"""
    teams, catalog = load_seed(config.catalog_path, max_round=config.max_round)
    return HuntService(config, catalog, TeamRegistry(teams))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: build the service from config + seed data
    try:
        config = load_config()
        state.SERVICE = build_service(config)
        logger.info(
            f"✅ Server started | step order: {config.step_order.value} | max round: {config.max_round}"
        )
    except Exception as e:
        logger.error(f"❌ Failed to start: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Puzzle Hunt - Progression Server",
    description="Tracks teams through puzzle rounds and validates their answers",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Team login (POST /teams/login)
app.include_router(team.router)

# Game endpoints (GET /game/round, POST /game/validate, POST /game/next, ...)
app.include_router(game.router)

# Admin endpoints (POST /admin/teams/{team_id}/reset)
app.include_router(admin.router)

# Config endpoint (GET /config)
app.include_router(config_router.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
