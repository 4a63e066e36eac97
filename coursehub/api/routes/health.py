"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from coursehub.api.deps import get_container
from coursehub.container import Container
from coursehub.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(container: Annotated[Container, Depends(get_container)]) -> HealthResponse:
    """Return service health status. Used by load balancers and monitoring."""
    return HealthResponse(
        environment=container.settings.APP_ENV,
        timestamp=datetime.now(UTC),
    )
