"""Health check endpoint with database connectivity and live session count."""

from fastapi import APIRouter

from app.api.deps import DbSession, Sessions
from app.core.config import settings
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbSession, sessions: Sessions) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        active_sessions=len(sessions),
    )
