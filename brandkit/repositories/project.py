"""ProjectRepository: CRUD for projects.

Entry and exit are logged at DEBUG with the project or owner id; writes that
fail are logged through ``db_logger.transaction_failure`` and re-raised, and
any operation over one second is reported as a slow query. Deleting a project
takes its colors, typography and members with it (ORM cascade, backed by
ON DELETE CASCADE).
"""

import time
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import db_logger, get_logger
from brandkit.models.project import Project

logger = get_logger(__name__)


class ProjectRepository:
    """Repository for Project CRUD operations.

    All methods accept an AsyncSession and handle database operations
    with comprehensive logging as required.
    """

    TABLE_NAME = "projects"
    SLOW_OPERATION_THRESHOLD_MS = 1000  # 1 second

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        self.session = session

    def _check_slow(self, query: str, start_time: float) -> float:
        duration_ms = (time.monotonic() - start_time) * 1000
        if duration_ms > self.SLOW_OPERATION_THRESHOLD_MS:
            db_logger.slow_query(
                query=query,
                duration_ms=duration_ms,
                table=self.TABLE_NAME,
            )
        return duration_ms

    async def create(self, user_id: int, **fields: Any) -> Project:
        """Create a new project owned by ``user_id``.

        Args:
            user_id: Owning user
            **fields: Project columns (name, tagline, category, ...)

        Returns:
            Created Project instance

        Raises:
            SQLAlchemyError: On database errors
        """
        start_time = time.monotonic()
        logger.debug(
            "Creating project",
            extra={"user_id": user_id, "project_name": fields.get("name")},
        )

        try:
            project = Project(user_id=user_id, **fields)
            self.session.add(project)
            await self.session.flush()
            await self.session.refresh(project)

            duration_ms = self._check_slow("INSERT INTO projects", start_time)
            logger.debug(
                "Project created successfully",
                extra={
                    "project_id": project.id,
                    "user_id": user_id,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            return project

        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e,
                table=self.TABLE_NAME,
                context=f"Creating project for user_id={user_id}",
            )
            raise

    async def get_by_id(self, project_id: int) -> Project | None:
        """Get a project by ID.

        Returns:
            Project instance if found, None otherwise
        """
        start_time = time.monotonic()
        logger.debug("Fetching project by ID", extra={"project_id": project_id})

        try:
            result = await self.session.execute(
                select(Project).where(Project.id == project_id)
            )
            project = result.scalar_one_or_none()

            duration_ms = self._check_slow(
                f"SELECT FROM projects WHERE id={project_id}", start_time
            )
            logger.debug(
                "Project fetch completed",
                extra={
                    "project_id": project_id,
                    "found": project is not None,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            return project

        except SQLAlchemyError as e:
            logger.error(
                "Failed to fetch project by ID",
                extra={
                    "project_id": project_id,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
                exc_info=True,
            )
            raise

    async def list_by_owner(self, user_id: int) -> list[Project]:
        """Get all projects owned by a user, most recently updated first."""
        start_time = time.monotonic()
        logger.debug("Fetching projects by owner", extra={"user_id": user_id})

        try:
            result = await self.session.execute(
                select(Project)
                .where(Project.user_id == user_id)
                .order_by(Project.updated_at.desc(), Project.id.desc())
            )
            projects = list(result.scalars().all())

            duration_ms = self._check_slow(
                f"SELECT FROM projects WHERE user_id={user_id}", start_time
            )
            logger.debug(
                "Owner projects fetch completed",
                extra={
                    "user_id": user_id,
                    "count": len(projects),
                    "duration_ms": round(duration_ms, 2),
                },
            )
            return projects

        except SQLAlchemyError as e:
            logger.error(
                "Failed to fetch projects by owner",
                extra={
                    "user_id": user_id,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
                exc_info=True,
            )
            raise

    async def update(self, project: Project, changes: dict[str, Any]) -> Project:
        """Apply ``changes`` to a project and bump ``updated_at``.

        The owner column is never written here.
        """
        start_time = time.monotonic()
        logger.debug(
            "Updating project",
            extra={"project_id": project.id, "update_fields": sorted(changes)},
        )

        try:
            for field, value in changes.items():
                if field in ("id", "user_id", "created_at", "updated_at"):
                    continue
                setattr(project, field, value)
            project.updated_at = datetime.now(UTC)

            await self.session.flush()
            await self.session.refresh(project)

            self._check_slow(f"UPDATE projects WHERE id={project.id}", start_time)
            return project

        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e,
                table=self.TABLE_NAME,
                context=f"Updating project_id={project.id}",
            )
            raise

    async def delete(self, project: Project) -> None:
        """Delete a project. Colors, typography and members go with it."""
        start_time = time.monotonic()
        project_id = project.id
        logger.debug("Deleting project", extra={"project_id": project_id})

        try:
            await self.session.delete(project)
            await self.session.flush()

            self._check_slow(f"DELETE FROM projects WHERE id={project_id}", start_time)
            logger.info("Project deleted", extra={"project_id": project_id})

        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e,
                table=self.TABLE_NAME,
                context=f"Deleting project_id={project_id}",
            )
            raise
