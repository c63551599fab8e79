"""ProjectMember model: grants a user access to someone else's project."""

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brandkit.core.database import Base

if TYPE_CHECKING:
    from brandkit.models.project import Project


class MemberRole(str, Enum):
    """Roles a member can hold. Stored for display; writes stay owner-only."""

    ADMIN = "admin"
    CONTRIBUTOR = "contributor"
    VIEWER = "viewer"


class ProjectMember(Base):
    """Membership row.

    Attributes:
        id: Auto-increment primary key
        project_id: Foreign key to projects table (cascade delete)
        user_id: Foreign key to users table
        role: One of admin, contributor, viewer (default viewer)
        invited_at: Timestamp when the member was added
    """

    __tablename__ = "project_members"
    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=MemberRole.VIEWER.value,
        server_default=text("'viewer'"),
    )

    invited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=text("now()"),
    )

    project: Mapped["Project"] = relationship("Project", back_populates="members")

    def __repr__(self) -> str:
        return f"<ProjectMember(project_id={self.project_id!r}, user_id={self.user_id!r}, role={self.role!r})>"
