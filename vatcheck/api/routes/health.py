"""Health check endpoints."""
from typing import Any

from fastapi import APIRouter

from vatcheck.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Liveness plus the configured VIES mode. Does not call VIES."""
    return {"status": "ok", "vies_mode": settings.vies_mode}
