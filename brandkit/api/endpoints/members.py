"""Project member endpoints.

- GET /api/projects/{project_id}/members - Members with their identities
- POST /api/projects/{project_id}/members - Invite a user (owner only)
- PUT /api/projects/{project_id}/members/{user_id} - Change a role (owner only)
- DELETE /api/projects/{project_id}/members/{user_id} - Remove a member (owner only)

Roles are recorded but grant nothing beyond read access.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import (
    PROJECT_ERRORS,
    error_example,
    error_response,
    get_accessible_project,
    get_owned_project,
    get_request_id,
)
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.models.project import Project
from brandkit.schemas.member import (
    ProjectMemberCreate,
    ProjectMemberResponse,
    ProjectMemberUpdate,
)
from brandkit.services.member import (
    DuplicateMemberError,
    MemberNotFoundError,
    MemberService,
    MemberValidationError,
)

logger = get_logger(__name__)

router = APIRouter()

MEMBER_ERRORS = {
    **PROJECT_ERRORS,
    404: error_example("Project, user or member not found", "User not found: <id>", "NOT_FOUND"),
}


@router.get(
    "/projects/{project_id}/members",
    response_model=list[ProjectMemberResponse],
    summary="List members",
    responses=PROJECT_ERRORS,
)
async def list_members(
    project: Project = Depends(get_accessible_project),
    session: AsyncSession = Depends(get_session),
) -> list[ProjectMemberResponse]:
    return await MemberService(session).list_members(project.id)


@router.post(
    "/projects/{project_id}/members",
    response_model=ProjectMemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a member",
    description="Invite an existing user to a project. Owner only.",
    responses={
        **MEMBER_ERRORS,
        409: error_example("Already a member", "User <id> is already a member", "CONFLICT"),
    },
)
async def add_member(
    request: Request,
    data: ProjectMemberCreate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> ProjectMemberResponse | JSONResponse:
    """Invite a user to the project."""
    request_id = get_request_id(request)
    logger.debug(
        "Add member request",
        extra={
            "request_id": request_id,
            "project_id": project.id,
            "user_id": data.user_id,
            "role": data.role,
        },
    )

    try:
        return await MemberService(session).add_member(project, data)
    except MemberNotFoundError as e:
        return error_response(request, status.HTTP_404_NOT_FOUND, str(e))
    except MemberValidationError as e:
        logger.warning(
            "Member validation error",
            extra={
                "request_id": request_id,
                "field": e.field,
                "value": e.value,
                "error_message": e.message,
            },
        )
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            str(e),
            errors=[{"field": e.field, "message": e.message}],
        )
    except DuplicateMemberError as e:
        return error_response(request, status.HTTP_409_CONFLICT, str(e))


@router.put(
    "/projects/{project_id}/members/{user_id}",
    response_model=ProjectMemberResponse,
    summary="Change a member's role",
    responses=MEMBER_ERRORS,
)
async def update_member(
    request: Request,
    user_id: int,
    data: ProjectMemberUpdate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> ProjectMemberResponse | JSONResponse:
    logger.debug(
        "Update member request",
        extra={
            "request_id": get_request_id(request),
            "project_id": project.id,
            "user_id": user_id,
            "role": data.role,
        },
    )
    try:
        return await MemberService(session).update_member(project, user_id, data)
    except MemberNotFoundError as e:
        return error_response(request, status.HTTP_404_NOT_FOUND, str(e))


@router.delete(
    "/projects/{project_id}/members/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Remove a member",
    responses=MEMBER_ERRORS,
)
async def remove_member(
    request: Request,
    user_id: int,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
) -> JSONResponse | None:
    try:
        await MemberService(session).remove_member(project, user_id)
    except MemberNotFoundError as e:
        return error_response(request, status.HTTP_404_NOT_FOUND, str(e))
    return None
