"""
Health check endpoint.

GET /health reports uptime, the treasure screen summary, search metrics
and error counts by code.
"""

from fastapi import APIRouter, Depends
from typing import Any, Dict
import time

from treasure_map.config.settings import get_settings
from treasure_map.core.dependencies import get_treasure_screen
from treasure_map.core.error_handlers import error_handler
from treasure_map.core.metrics import snapshot_metrics
from treasure_map.services.treasure_screen import TreasureScreen

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health")
async def health_check(screen: TreasureScreen = Depends(get_treasure_screen)) -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment.value,
        "uptime_seconds": round(time.time() - _app_start_time, 3),
        "treasures": {
            "total": len(screen.store.all),
            "visible": len(screen.store.visible),
            "filter": screen.store.active_filter.value,
        },
        "search_provider": settings.search.provider.value,
        "metrics": snapshot_metrics(),
        "errors": error_handler.get_error_statistics(),
    }
