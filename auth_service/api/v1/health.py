"""Health check endpoint with optional database connectivity check."""

from fastapi import APIRouter, Depends

from auth_service.api.v1.deps import get_unit_of_work
from auth_service.core.config import settings
from auth_service.core.database import check_db_connected
from auth_service.schemas.health import HealthResponse
from auth_service.unit_of_work import UnitOfWork

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(uow: UnitOfWork = Depends(get_unit_of_work)) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(uow.session) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        store="in-memory" if settings.USE_IN_MEMORY_DATABASE else "networked",
    )
