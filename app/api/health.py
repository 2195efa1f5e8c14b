"""Health check endpoint."""

from fastapi import APIRouter

from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """
    Return service health status.
    Used by load balancers and monitoring; does not require a token.
    """
    return HealthResponse(status="OK", message="REM Waste API is running")
