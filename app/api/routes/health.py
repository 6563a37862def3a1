from datetime import datetime, timezone

from fastapi import APIRouter

from app.api.dependencies import MemoRepoDep
from app.settings import settings
from app.models.health.responses import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(memo_repo: MemoRepoDep) -> HealthResponse:
    return HealthResponse(
        ok=True,
        app_name=settings.app_name,
        version=settings.app_version,
        memo_count=memo_repo.count(),
        timestamp=datetime.now(timezone.utc),
    )
