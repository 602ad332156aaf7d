# API endpoints and routers

from .treasure_endpoints import router as treasure_router
from .health_endpoints import router as health_router

__all__ = [
    "treasure_router",
    "health_router",
]
