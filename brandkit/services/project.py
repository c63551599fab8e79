"""ProjectService with business logic for Project entities.

Orchestrates the project repository and builds the ProjectWithDetails
aggregate. Follows the layered architecture pattern:
API -> Service -> Repository -> Database.

ERROR LOGGING REQUIREMENTS:
- Log method entry/exit at DEBUG level with parameters (sanitized)
- Log validation failures with field names and rejected values
- Log state transitions at INFO level
"""

from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import get_logger
from brandkit.models.project import Project
from brandkit.repositories.brand_asset import BrandAssetRepository
from brandkit.repositories.member import MemberRepository
from brandkit.repositories.project import ProjectRepository
from brandkit.repositories.user import UserRepository
from brandkit.schemas.brand_asset import BrandColorResponse, BrandTypographyResponse
from brandkit.schemas.project import ProjectCreate, ProjectUpdate, ProjectWithDetails
from brandkit.schemas.user import UserSummary
from brandkit.services.access import ProjectNotFoundError
from brandkit.services.member import member_response

logger = get_logger(__name__)

__all__ = [
    "ProjectNotFoundError",
    "ProjectService",
    "load_project_with_details",
]


class ProjectService:
    """Service for Project business operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = ProjectRepository(session)

    async def create_project(self, user_id: int, data: ProjectCreate) -> Project:
        """Create a project owned by ``user_id``."""
        logger.debug(
            "Creating project",
            extra={"user_id": user_id, "project_name": data.name[:50]},
        )
        project = await self.repository.create(user_id=user_id, **data.model_dump())
        logger.info(
            "Project created",
            extra={"project_id": project.id, "user_id": user_id},
        )
        return project

    async def list_projects(self, user_id: int) -> list[Project]:
        """Projects owned by ``user_id``, most recently updated first."""
        return await self.repository.list_by_owner(user_id)

    async def update_project(self, project: Project, data: ProjectUpdate) -> Project:
        """Apply the fields present in ``data``. Ownership is never changed."""
        changes = data.model_dump(exclude_unset=True)
        logger.debug(
            "Updating project",
            extra={"project_id": project.id, "update_fields": sorted(changes)},
        )
        project = await self.repository.update(project, changes)
        logger.info(
            "Project updated",
            extra={"project_id": project.id, "update_fields": sorted(changes)},
        )
        return project

    async def delete_project(self, project: Project) -> None:
        await self.repository.delete(project)

    async def load_details(self, project_id: int) -> ProjectWithDetails:
        """Load the aggregate for an existing project.

        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        details = await load_project_with_details(self.session, project_id)
        if details is None:
            raise ProjectNotFoundError(project_id)
        return details


async def load_project_with_details(
    session: AsyncSession, project_id: int
) -> ProjectWithDetails | None:
    """Assemble a project with its colors, typography, owner and members.

    All reads share ``session`` and therefore one transaction, so the
    snapshot is consistent at the database's isolation level.

    Args:
        session: Request-scoped session
        project_id: Project to load

    Returns:
        Frozen ProjectWithDetails, or None if the project does not exist
    """
    project = await ProjectRepository(session).get_by_id(project_id)
    if project is None:
        return None

    assets = BrandAssetRepository(session)
    colors = await assets.list_colors(project_id)
    typography = await assets.list_typography(project_id)
    member_rows = await MemberRepository(session).list_with_users(project_id)
    owner = await UserRepository(session).get_by_id(project.user_id)

    if owner is None:
        logger.warning(
            "Project owner row missing, using placeholder",
            extra={"project_id": project_id, "user_id": project.user_id},
        )
        owner_summary = UserSummary(id=project.user_id, name="", username="")
    else:
        owner_summary = UserSummary.model_validate(owner)

    members = tuple(member_response(member, user) for member, user in member_rows)

    return ProjectWithDetails(
        id=project.id,
        name=project.name,
        tagline=project.tagline,
        category=project.category,
        description=project.description,
        logo_url=project.logo_url,
        tone_of_voice=project.tone_of_voice,
        usage_guidelines=project.usage_guidelines,
        user_id=project.user_id,
        created_at=project.created_at,
        updated_at=project.updated_at,
        colors=tuple(BrandColorResponse.model_validate(c) for c in colors),
        typography=tuple(BrandTypographyResponse.model_validate(t) for t in typography),
        owner=owner_summary,
        members=members,
    )
