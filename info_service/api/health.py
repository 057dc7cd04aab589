from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

health_api = APIRouter(prefix="/api", tags=["ops"])


@health_api.get("/health", response_class=ORJSONResponse, include_in_schema=False)
def health() -> ORJSONResponse:
    """Liveness probe for container orchestration, not part of the public API."""
    return ORJSONResponse(content={"status": "healthy"})
