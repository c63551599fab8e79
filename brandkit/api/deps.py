"""Shared API dependencies and structured error responses.

Project-scoped routes resolve their project through the dependencies below,
which consult ProjectAccessPolicy. They raise ProjectNotFoundError,
AccessDeniedError, ColorNotFoundError or TypographyNotFoundError; the
handlers registered in ``brandkit.main`` turn those into responses.
"""

from typing import Any

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.auth import UserInfo, get_current_user
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.models.brand_color import BrandColor
from brandkit.models.brand_typography import BrandTypography
from brandkit.models.project import Project
from brandkit.services.access import ProjectAccessPolicy
from brandkit.services.brand_asset import ColorService, TypographyService

logger = get_logger(__name__)

# Error codes carried in every error body
ERROR_CODES = {
    400: "VALIDATION_ERROR",
    401: "AUTHENTICATION_REQUIRED",
    403: "ACCESS_DENIED",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
}


def get_request_id(request: Request) -> str:
    """Get request_id from request state."""
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    status_code: int,
    message: str,
    code: str | None = None,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build the structured error body {"error", "code", "request_id", ...}."""
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content={
            "error": message,
            "code": code or ERROR_CODES.get(status_code, "HTTP_ERROR"),
            "request_id": get_request_id(request),
            **extra,
        },
    )


async def get_accessible_project(
    project_id: int,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Project:
    """Project the caller owns or is a member of."""
    return await ProjectAccessPolicy(session).require_access(user, project_id)


async def get_owned_project(
    project_id: int,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Project:
    """Project the caller owns."""
    return await ProjectAccessPolicy(session).require_owner(user, project_id)


async def get_owned_color(
    color_id: int,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> BrandColor:
    """Color whose project the caller owns."""
    color = await ColorService(session).get_color(color_id)
    await ProjectAccessPolicy(session).require_owner(user, color.project_id)
    return color


async def get_owned_typography(
    typography_id: int,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> BrandTypography:
    """Typography entry whose project the caller owns."""
    entry = await TypographyService(session).get_typography(typography_id)
    await ProjectAccessPolicy(session).require_owner(user, entry.project_id)
    return entry


def error_example(description: str, message: str, code: str) -> dict[str, Any]:
    """OpenAPI ``responses`` entry for a structured error."""
    return {
        "description": description,
        "content": {
            "application/json": {
                "example": {
                    "error": message,
                    "code": code,
                    "request_id": "<request_id>",
                }
            }
        },
    }


PROJECT_ERRORS: dict[int | str, dict[str, Any]] = {
    401: error_example("Not signed in", "Authentication required", "AUTHENTICATION_REQUIRED"),
    403: error_example("Not allowed", "Access denied", "ACCESS_DENIED"),
    404: error_example("Project not found", "Project not found: <id>", "NOT_FOUND"),
}
