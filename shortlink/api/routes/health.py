"""Health check API routes."""

from fastapi import APIRouter
from ...schemas.url import HealthResponse, StatusResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=StatusResponse, summary="Service banner")
async def service_status() -> dict:
    """Report that the service is up."""
    return {"status": "SHORT API - active"}


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status.
    """
    return {"status": "healthy"}
