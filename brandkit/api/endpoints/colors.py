"""Brand color endpoints.

- GET /api/projects/{project_id}/colors - Colors in display order
- POST /api/projects/{project_id}/colors - Add a color (owner only)
- PUT /api/colors/{color_id} - Update a color (owner of its project only)
- DELETE /api/colors/{color_id} - Delete a color (owner of its project only)
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import (
    PROJECT_ERRORS,
    error_example,
    get_accessible_project,
    get_owned_color,
    get_owned_project,
    get_request_id,
)
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.models.brand_color import BrandColor
from brandkit.models.project import Project
from brandkit.schemas.brand_asset import (
    BrandColorCreate,
    BrandColorResponse,
    BrandColorUpdate,
)
from brandkit.services.brand_asset import ColorService

logger = get_logger(__name__)

router = APIRouter()

COLOR_ERRORS = {
    **PROJECT_ERRORS,
    404: error_example("Color not found", "Color not found: <id>", "NOT_FOUND"),
}


@router.get(
    "/projects/{project_id}/colors",
    response_model=list[BrandColorResponse],
    summary="List colors",
    description="Colors of a project ordered by their display position.",
    responses=PROJECT_ERRORS,
)
async def list_colors(
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> list[BrandColorResponse]:
    colors = await ColorService(session).list_colors(project.id)
    return [BrandColorResponse.model_validate(c) for c in colors]


@router.post(
    "/projects/{project_id}/colors",
    response_model=BrandColorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a color",
    description="Add a color to a project. Owner only.",
    responses=PROJECT_ERRORS,
)
async def create_color(
    request: Request,
    data: BrandColorCreate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> BrandColorResponse:
    """Add a color to a project."""
    logger.debug(
        "Create color request",
        extra={
            "request_id": get_request_id(request),
            "project_id": project.id,
            "hex_code": data.hex_code,
        },
    )
    color = await ColorService(session).create_color(project.id, data)
    return BrandColorResponse.model_validate(color)


@router.put(
    "/colors/{color_id}",
    response_model=BrandColorResponse,
    summary="Update a color",
    description="Update the provided fields of a color. Owner of its project only.",
    responses=COLOR_ERRORS,
)
async def update_color(
    request: Request,
    data: BrandColorUpdate,
    color: BrandColor = Depends(get_owned_color),
    session: AsyncSession = Depends(get_session),
) -> BrandColorResponse:
    """Update a color."""
    logger.debug(
        "Update color request",
        extra={
            "request_id": get_request_id(request),
            "color_id": color.id,
            "update_fields": sorted(data.model_fields_set),
        },
    )
    color = await ColorService(session).update_color(color, data)
    return BrandColorResponse.model_validate(color)


@router.delete(
    "/colors/{color_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete a color",
    description="Delete a color. Owner of its project only.",
    responses=COLOR_ERRORS,
)
async def delete_color(
    request: Request,
    color: BrandColor = Depends(get_owned_color),
    session: AsyncSession = Depends(get_session),
) -> None:
    """Delete a color."""
    logger.debug(
        "Delete color request",
        extra={"request_id": get_request_id(request), "color_id": color.id},
    )
    await ColorService(session).delete_color(color)
