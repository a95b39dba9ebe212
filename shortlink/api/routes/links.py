"""Link API routes.

This module contains the public endpoints:
- Create short link (POST /v1/short)
- Redirect to long URL (GET /{short_code})
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from ...core.config import Settings, get_settings
from ...models.url import LinkCreate, ErrorResponse
from ...schemas.url import LinkCreateResponse
from ...services.links import Failure, LinkService, get_link_service
from ...utils.shortener import create_short_url
from ..errors import failure_response

router = APIRouter(prefix="", tags=["Links"])


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_base_url(request: Request, settings: Settings) -> str:
    """Get the public base URL for short links.

    Args:
        request: FastAPI request object.
        settings: Application settings.

    Returns:
        Base URL string.
    """
    if settings.public_base_url:
        return settings.public_base_url.rstrip("/")
    return str(request.base_url).rstrip("/")


@router.post(
    "/v1/short",
    response_model=LinkCreateResponse,
    status_code=201,
    responses={
        201: {"description": "Short link created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Link could not be stored"},
    },
    summary="Create a short link",
    description="Store a long URL and return its short code.",
)
async def create_short_link(
    request: Request,
    link_data: LinkCreate,
    service: LinkService = Depends(get_link_service),
    settings: Settings = Depends(get_app_settings),
):
    """Create a short link from a long URL.

    Args:
        request: FastAPI request object.
        link_data: Link creation data.
        service: Link service instance.
        settings: Application settings.

    Returns:
        Created link information.
    """
    result = service.shorten(link_data.url, link_data.title)
    if isinstance(result, Failure):
        return failure_response(result)

    base_url = get_base_url(request, settings)
    return LinkCreateResponse(
        short_code=result.short_code,
        short_url=create_short_url(base_url, result.short_code),
        original_url=result.long_url,
    )


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=301,
    responses={
        301: {"description": "Redirect to the long URL"},
        400: {"model": ErrorResponse, "description": "Not a short code"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
    },
    summary="Redirect to the long URL",
    description="Decode the short code and redirect to the stored long URL.",
)
async def redirect_to_url(
    short_code: str,
    service: LinkService = Depends(get_link_service),
    settings: Settings = Depends(get_app_settings),
):
    """Redirect to the long URL.

    Args:
        short_code: The short code.
        service: Link service instance.
        settings: Application settings.

    Returns:
        Redirect response to the long URL.
    """
    result = service.resolve(short_code)
    if isinstance(result, Failure):
        return failure_response(result)

    # A code never changes target once issued
    return RedirectResponse(
        url=result.long_url,
        status_code=settings.redirect_status_code,
        headers={"Cache-Control": f"public, max-age={settings.redirect_cache_max_age}"},
    )
