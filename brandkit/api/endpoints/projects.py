"""Projects API endpoints.

Provides CRUD operations for brand projects:
- GET /api/projects - List the caller's projects
- POST /api/projects - Create a project
- GET /api/projects/{project_id} - Project with colors, typography, owner and members
- PUT /api/projects/{project_id} - Partially update a project (owner only)
- DELETE /api/projects/{project_id} - Delete a project and its assets (owner only)

Error Logging Requirements:
- Log request parameters at DEBUG level
- Return structured error responses: {"error": str, "code": str, "request_id": str}
- Log 4xx errors at WARNING
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import (
    PROJECT_ERRORS,
    get_accessible_project,
    get_owned_project,
    get_request_id,
)
from brandkit.core.auth import UserInfo, get_current_user
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.models.project import Project
from brandkit.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    ProjectWithDetails,
)
from brandkit.services.project import ProjectService

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
    description="Projects owned by the caller, most recently updated first.",
)
async def list_projects(
    request: Request,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> list[ProjectResponse]:
    """List the caller's projects."""
    logger.debug(
        "List projects request",
        extra={"request_id": get_request_id(request), "user_id": user.id},
    )
    projects = await ProjectService(session).list_projects(user.id)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    description="Create a project owned by the caller.",
)
async def create_project(
    request: Request,
    data: ProjectCreate,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> ProjectResponse:
    """Create a new project."""
    logger.debug(
        "Create project request",
        extra={
            "request_id": get_request_id(request),
            "user_id": user.id,
            "project_name": data.name,
        },
    )
    project = await ProjectService(session).create_project(user.id, data)
    return ProjectResponse.model_validate(project)


@router.get(
    "/{project_id}",
    response_model=ProjectWithDetails,
    summary="Get a project",
    description="Project with its colors, typography, owner and members.",
    responses=PROJECT_ERRORS,
)
async def get_project(
    request: Request,
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> ProjectWithDetails:
    """Get a project aggregate."""
    logger.debug(
        "Get project request",
        extra={"request_id": get_request_id(request), "project_id": project.id},
    )
    return await ProjectService(session).load_details(project.id)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    description="Update the provided fields of a project. Owner only.",
    responses=PROJECT_ERRORS,
)
async def update_project(
    request: Request,
    data: ProjectUpdate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> ProjectResponse:
    """Update an existing project."""
    logger.debug(
        "Update project request",
        extra={
            "request_id": get_request_id(request),
            "project_id": project.id,
            "update_fields": sorted(data.model_fields_set),
        },
    )
    project = await ProjectService(session).update_project(project, data)
    return ProjectResponse.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete a project",
    description="Delete a project with its colors, typography and members. Owner only.",
    responses=PROJECT_ERRORS,
)
async def delete_project(
    request: Request,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> None:
    """Delete a project."""
    logger.debug(
        "Delete project request",
        extra={"request_id": get_request_id(request), "project_id": project.id},
    )
    await ProjectService(session).delete_project(project)
