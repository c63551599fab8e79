"""MemberService: invite, re-role and remove project members.

Membership grants read access only. The owner is never stored as a member.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import get_logger
from brandkit.models.project import Project
from brandkit.models.project_member import MemberRole, ProjectMember
from brandkit.models.user import User
from brandkit.repositories.member import MemberRepository
from brandkit.repositories.user import UserRepository
from brandkit.schemas.member import (
    ProjectMemberCreate,
    ProjectMemberResponse,
    ProjectMemberUpdate,
)
from brandkit.schemas.user import UserSummary

logger = get_logger(__name__)


def member_response(member: ProjectMember, user: User) -> ProjectMemberResponse:
    return ProjectMemberResponse(
        id=member.id,
        project_id=member.project_id,
        user_id=member.user_id,
        role=member.role,
        invited_at=member.invited_at,
        user=UserSummary.model_validate(user),
    )


class MemberServiceError(Exception):
    """Base exception for MemberService errors."""

    pass


class MemberNotFoundError(MemberServiceError):
    """Raised when a membership (or the user to invite) does not exist."""

    def __init__(self, project_id: int, user_id: int, message: str | None = None):
        self.project_id = project_id
        self.user_id = user_id
        super().__init__(message or f"User {user_id} is not a member of project {project_id}")


class DuplicateMemberError(MemberServiceError):
    """Raised when the user already belongs to the project."""

    def __init__(self, project_id: int, user_id: int):
        self.project_id = project_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is already a member of project {project_id}")


class MemberValidationError(MemberServiceError):
    """Raised when a membership change is not allowed."""

    def __init__(self, field: str, value: object, message: str):
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Validation error for {field}: {message}")


class MemberService:
    """Service for ProjectMember operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = MemberRepository(session)
        self.users = UserRepository(session)

    async def list_members(self, project_id: int) -> list[ProjectMemberResponse]:
        rows = await self.repository.list_with_users(project_id)
        return [member_response(member, user) for member, user in rows]

    async def add_member(
        self, project: Project, data: ProjectMemberCreate
    ) -> ProjectMemberResponse:
        """Invite a user to ``project``.

        Raises:
            MemberNotFoundError: If the user does not exist
            MemberValidationError: If the user is the project's owner
            DuplicateMemberError: If the user is already a member, including
                when a concurrent invite wins the unique constraint
        """
        project_id = project.id
        user = await self.users.get_by_id(data.user_id)
        if user is None:
            raise MemberNotFoundError(
                project.id, data.user_id, f"User not found: {data.user_id}"
            )
        if user.id == project.user_id:
            logger.warning(
                "Member validation failed",
                extra={"field": "user_id", "value": data.user_id, "project_id": project.id},
            )
            raise MemberValidationError(
                "userId", data.user_id, "The project owner cannot be added as a member"
            )
        if await self.repository.exists(project.id, user.id):
            raise DuplicateMemberError(project.id, user.id)

        user_id = user.id
        try:
            member = await self.repository.add(project_id, user_id, MemberRole(data.role).value)
        except IntegrityError as e:
            # Rolling back expires loaded rows; only the ids captured above are used
            await self.session.rollback()
            raise DuplicateMemberError(project_id, user_id) from e
        return member_response(member, user)

    async def update_member(
        self, project: Project, user_id: int, data: ProjectMemberUpdate
    ) -> ProjectMemberResponse:
        """Change a member's role.

        Raises:
            MemberNotFoundError: If the user is not a member
        """
        member = await self.repository.get(project.id, user_id)
        if member is None:
            raise MemberNotFoundError(project.id, user_id)
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise MemberNotFoundError(project.id, user_id, f"User not found: {user_id}")

        member = await self.repository.update_role(member, MemberRole(data.role).value)
        return member_response(member, user)

    async def remove_member(self, project: Project, user_id: int) -> None:
        """Raises MemberNotFoundError if the user is not a member."""
        member = await self.repository.get(project.id, user_id)
        if member is None:
            raise MemberNotFoundError(project.id, user_id)
        await self.repository.remove(member)
