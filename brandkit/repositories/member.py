"""MemberRepository: project membership rows joined with user identities."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import db_logger, get_logger
from brandkit.models.project_member import ProjectMember
from brandkit.models.user import User

logger = get_logger(__name__)


class MemberRepository:
    """Repository for ProjectMember rows."""

    TABLE_NAME = "project_members"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_with_users(self, project_id: int) -> list[tuple[ProjectMember, User]]:
        """List a project's members with their user rows, oldest invite first."""
        result = await self.session.execute(
            select(ProjectMember, User)
            .join(User, ProjectMember.user_id == User.id)
            .where(ProjectMember.project_id == project_id)
            .order_by(ProjectMember.invited_at.asc(), ProjectMember.id.asc())
        )
        rows = [(member, user) for member, user in result.all()]
        logger.debug(
            "Members fetched",
            extra={"project_id": project_id, "count": len(rows)},
        )
        return rows

    async def get(self, project_id: int, user_id: int) -> ProjectMember | None:
        result = await self.session.execute(
            select(ProjectMember).where(
                ProjectMember.project_id == project_id,
                ProjectMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, project_id: int, user_id: int) -> bool:
        """Whether ``user_id`` holds any membership role on ``project_id``."""
        result = await self.session.execute(
            select(ProjectMember.id)
            .where(
                ProjectMember.project_id == project_id,
                ProjectMember.user_id == user_id,
            )
            .limit(1)
        )
        return result.first() is not None

    async def add(self, project_id: int, user_id: int, role: str) -> ProjectMember:
        member = ProjectMember(project_id=project_id, user_id=user_id, role=role)
        self.session.add(member)
        try:
            await self.session.flush()
            await self.session.refresh(member)
        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e,
                table=self.TABLE_NAME,
                context=f"Adding user_id={user_id} to project_id={project_id}",
            )
            raise
        logger.info(
            "Project member added",
            extra={"project_id": project_id, "user_id": user_id, "role": role},
        )
        return member

    async def update_role(self, member: ProjectMember, role: str) -> ProjectMember:
        previous = member.role
        member.role = role
        await self.session.flush()
        await self.session.refresh(member)
        logger.info(
            "Project member role changed",
            extra={
                "project_id": member.project_id,
                "user_id": member.user_id,
                "from_role": previous,
                "to_role": role,
            },
        )
        return member

    async def remove(self, member: ProjectMember) -> None:
        project_id, user_id = member.project_id, member.user_id
        await self.session.delete(member)
        await self.session.flush()
        logger.info(
            "Project member removed",
            extra={"project_id": project_id, "user_id": user_id},
        )
