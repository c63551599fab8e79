"""Typography endpoints.

- GET /api/projects/{project_id}/typography - Typography entries
- POST /api/projects/{project_id}/typography - Add an entry (owner only)
- PUT /api/typography/{typography_id} - Update an entry (owner only)
- DELETE /api/typography/{typography_id} - Delete an entry (owner only)
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import (
    PROJECT_ERRORS,
    error_example,
    get_accessible_project,
    get_owned_project,
    get_owned_typography,
    get_request_id,
)
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.models.brand_typography import BrandTypography
from brandkit.models.project import Project
from brandkit.schemas.brand_asset import (
    BrandTypographyCreate,
    BrandTypographyResponse,
    BrandTypographyUpdate,
)
from brandkit.services.brand_asset import TypographyService

logger = get_logger(__name__)

router = APIRouter()

TYPOGRAPHY_ERRORS = {
    **PROJECT_ERRORS,
    404: error_example("Typography not found", "Typography not found: <id>", "NOT_FOUND"),
}


@router.get(
    "/projects/{project_id}/typography",
    response_model=list[BrandTypographyResponse],
    summary="List typography",
    responses=PROJECT_ERRORS,
)
async def list_typography(
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> list[BrandTypographyResponse]:
    entries = await TypographyService(session).list_typography(project.id)
    return [BrandTypographyResponse.model_validate(t) for t in entries]


@router.post(
    "/projects/{project_id}/typography",
    response_model=BrandTypographyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add typography",
    description="Add a font choice to a project. Owner only.",
    responses=PROJECT_ERRORS,
)
async def create_typography(
    request: Request,
    data: BrandTypographyCreate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> BrandTypographyResponse:
    logger.debug(
        "Create typography request",
        extra={
            "request_id": get_request_id(request),
            "project_id": project.id,
            "type": data.type,
        },
    )
    entry = await TypographyService(session).create_typography(project.id, data)
    return BrandTypographyResponse.model_validate(entry)


@router.put(
    "/typography/{typography_id}",
    response_model=BrandTypographyResponse,
    summary="Update typography",
    responses=TYPOGRAPHY_ERRORS,
)
async def update_typography(
    request: Request,
    data: BrandTypographyUpdate,
    entry: BrandTypography = Depends(get_owned_typography),
    session: AsyncSession = Depends(get_session),
) -> BrandTypographyResponse:
    logger.debug(
        "Update typography request",
        extra={
            "request_id": get_request_id(request),
            "typography_id": entry.id,
            "update_fields": sorted(data.model_fields_set),
        },
    )
    entry = await TypographyService(session).update_typography(entry, data)
    return BrandTypographyResponse.model_validate(entry)


@router.delete(
    "/typography/{typography_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete typography",
    responses=TYPOGRAPHY_ERRORS,
)
async def delete_typography(
    entry: BrandTypography = Depends(get_owned_typography),
    session: AsyncSession = Depends(get_session),
) -> None:
    await TypographyService(session).delete_typography(entry)
