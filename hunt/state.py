"""
Global application state
The service is built once at startup and shared by all routers
"""
from typing import Optional

from hunt.services.hunt_service import HuntService

# Set by the app lifespan (or directly by tests)
SERVICE: Optional[HuntService] = None
