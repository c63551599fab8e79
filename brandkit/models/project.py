"""Project model: the brand identity record.

The Project model represents one brand owned by exactly one user:
- Brand copy (name, tagline, category, description)
- Logo reference and voice guidance
- Owner reference (immutable once created)
- Timestamps for auditing; any modification bumps updated_at
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brandkit.core.database import Base

if TYPE_CHECKING:
    from brandkit.models.brand_color import BrandColor
    from brandkit.models.brand_typography import BrandTypography
    from brandkit.models.project_member import ProjectMember


class Project(Base):
    """Brand project.

    Attributes:
        id: Auto-increment primary key
        name: Brand name
        tagline: Short brand line (optional)
        category: Industry or category label (optional)
        description: Free-form description (optional)
        logo_url: URL of the uploaded logo (optional)
        tone_of_voice: Voice guidance text (optional)
        usage_guidelines: Brand usage guidance text (optional)
        user_id: Owning user
        created_at: Timestamp when project was created
        updated_at: Timestamp when project was last updated
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    tagline: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    tone_of_voice: Mapped[str | None] = mapped_column(Text, nullable=True)
    usage_guidelines: Mapped[str | None] = mapped_column(Text, nullable=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=text("now()"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=text("now()"),
        onupdate=lambda: datetime.now(UTC),
    )

    # Child rows go with the project
    colors: Mapped[list["BrandColor"]] = relationship(
        "BrandColor",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    typography: Mapped[list["BrandTypography"]] = relationship(
        "BrandTypography",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    members: Mapped[list["ProjectMember"]] = relationship(
        "ProjectMember",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id!r}, name={self.name!r}, user_id={self.user_id!r})>"
