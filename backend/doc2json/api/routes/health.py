"""Health check endpoints."""

from fastapi import APIRouter, Depends

from doc2json import __version__
from doc2json.api.deps import get_app_settings
from doc2json.core.config import Settings
from doc2json.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", version=__version__, environment=settings.environment)
