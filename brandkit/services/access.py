"""Authorization gate for project-scoped operations.

One policy decides who may read or change a project:

- the owner (``project.user_id``) may do anything;
- a member, whatever their role, may read;
- nobody else may do anything.

Existence is resolved before the check, so a missing project is always
reported as not found, never as access denied.
"""

from enum import Enum
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import security_logger
from brandkit.models.project import Project
from brandkit.repositories.member import MemberRepository
from brandkit.repositories.project import ProjectRepository


class Identity(Protocol):
    """Anything carrying an authenticated user id."""

    id: int


class ProjectAction(str, Enum):
    READ = "read"
    WRITE = "write"


class ProjectNotFoundError(Exception):
    """Raised when a project does not exist."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class AccessDeniedError(Exception):
    """Raised when an authenticated user fails the ownership/membership check."""

    def __init__(self, user_id: int, project_id: int, action: ProjectAction):
        self.user_id = user_id
        self.project_id = project_id
        self.action = action
        super().__init__("Access denied")


def is_owner(user: Identity, project: Project) -> bool:
    """True iff ``user`` owns ``project``."""
    return project.user_id == user.id


class ProjectAccessPolicy:
    """Ownership/membership checks shared by every project-scoped route."""

    def __init__(self, session: AsyncSession) -> None:
        self.projects = ProjectRepository(session)
        self.members = MemberRepository(session)

    async def can_access(self, user: Identity, project: Project) -> bool:
        """True iff ``user`` owns ``project`` or is a member with any role."""
        if is_owner(user, project):
            return True
        return await self.members.exists(project.id, user.id)

    async def can_write(self, user: Identity, project: Project) -> bool:
        """Writes are owner-only; member roles do not grant them."""
        return is_owner(user, project)

    async def authorize(
        self, user: Identity, project: Project, action: ProjectAction
    ) -> Project:
        """Return ``project`` if ``user`` may perform ``action`` on it.

        Raises:
            AccessDeniedError: If the check fails
        """
        if action is ProjectAction.WRITE:
            allowed = await self.can_write(user, project)
        else:
            allowed = await self.can_access(user, project)

        if not allowed:
            security_logger.access_denied(user.id, project.id, action.value)
            raise AccessDeniedError(user.id, project.id, action)
        return project

    async def _resolve(self, project_id: int) -> Project:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def require_access(self, user: Identity, project_id: int) -> Project:
        """Resolve a project the user may read.

        Raises:
            ProjectNotFoundError: If the project does not exist
            AccessDeniedError: If the user is neither owner nor member
        """
        project = await self._resolve(project_id)
        return await self.authorize(user, project, ProjectAction.READ)

    async def require_owner(self, user: Identity, project_id: int) -> Project:
        """Resolve a project the user may change.

        Raises:
            ProjectNotFoundError: If the project does not exist
            AccessDeniedError: If the user is not the owner
        """
        project = await self._resolve(project_id)
        return await self.authorize(user, project, ProjectAction.WRITE)
