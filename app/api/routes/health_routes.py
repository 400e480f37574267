"""
Health Routes

GET /health - Liveness check
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Report that the API process is up."""
    settings = get_settings()
    return {
        "status": "OK",
        "message": f"{settings.app_name} API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
