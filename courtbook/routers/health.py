from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from .deps import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", operation_id="health_v1")
def health(settings=Depends(get_settings)):
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "mockMode": settings.mock_mode,
    }
