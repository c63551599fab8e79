"""Models layer - SQLAlchemy ORM models.

Models define the database schema and relationships.
All models inherit from the Base class defined in core.database.
"""

from brandkit.core.database import Base
from brandkit.models.brand_color import BrandColor
from brandkit.models.brand_typography import BrandTypography
from brandkit.models.project import Project
from brandkit.models.project_member import MemberRole, ProjectMember
from brandkit.models.user import User, UserSession

__all__ = [
    "Base",
    "BrandColor",
    "BrandTypography",
    "MemberRole",
    "Project",
    "ProjectMember",
    "User",
    "UserSession",
]
