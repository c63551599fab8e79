"""Brand export endpoints.

- GET /api/projects/{project_id}/export/css - CSS custom properties and font classes
- GET /api/projects/{project_id}/export/json - Portable brand document

Both are downloads (``Content-Disposition: attachment``) and require read
access to the project.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import PROJECT_ERRORS, error_response, get_accessible_project, get_request_id
from brandkit.core.database import get_session
from brandkit.core.logging import export_logger
from brandkit.models.project import Project
from brandkit.services.export import (
    ExportFormatError,
    build_brand_json,
    render_css,
    sanitize_filename,
)
from brandkit.services.project import ProjectService

router = APIRouter()


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get(
    "/projects/{project_id}/export/css",
    response_class=Response,
    summary="Export CSS",
    responses={
        **PROJECT_ERRORS,
        200: {"content": {"text/css": {}}, "description": "CSS document"},
    },
)
async def export_css(
    request: Request,
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> Response:
    """Download the brand as CSS variables."""
    details = await ProjectService(session).load_details(project.id)
    try:
        css = render_css(details)
    except ExportFormatError as e:
        export_logger.export_rejected(
            project.id, "css", e.field, e.message, request_id=get_request_id(request)
        )
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            str(e),
            errors=[{"field": e.field, "message": e.message}],
        )

    export_logger.export_generated(
        project.id, "css", len(details.colors), len(details.typography)
    )
    return Response(
        content=css,
        media_type="text/css",
        headers=_attachment(f"{sanitize_filename(details.name)}-variables.css"),
    )


@router.get(
    "/projects/{project_id}/export/json",
    response_class=JSONResponse,
    summary="Export JSON",
    responses=PROJECT_ERRORS,
)
async def export_json(
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """Download the brand as a JSON document."""
    details = await ProjectService(session).load_details(project.id)
    export_logger.export_generated(
        project.id, "json", len(details.colors), len(details.typography)
    )
    return JSONResponse(
        content=build_brand_json(details),
        headers=_attachment(f"{sanitize_filename(details.name)}-brand.json"),
    )
