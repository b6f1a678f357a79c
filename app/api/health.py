"""헬스 체크 API."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.schemas.response import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """헬스 체크 엔드포인트."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        service=request.app.state.settings.SERVICE_NAME,
    )
