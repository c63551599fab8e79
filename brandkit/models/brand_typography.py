"""BrandTypography model: a font choice for a project."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brandkit.core.database import Base

if TYPE_CHECKING:
    from brandkit.models.project import Project

# Role tags offered by the editor. Other values are stored as-is.
TYPOGRAPHY_TYPES = ("primary", "secondary")


class BrandTypography(Base):
    """Typography entry.

    Attributes:
        id: Auto-increment primary key
        project_id: Foreign key to projects table (cascade delete)
        type: Role tag ('primary' or 'secondary')
        font_family: Font family name
        google_font_url: Optional reference URL for the font
        weights: Weight labels, e.g. ["400", "700"]

    Example weights:
        ["300", "400", "700"]
    """

    __tablename__ = "brand_typography"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[str] = mapped_column(String(50), nullable=False)

    font_family: Mapped[str] = mapped_column(String(255), nullable=False)

    google_font_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    weights: Mapped[list[str]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )

    project: Mapped["Project"] = relationship("Project", back_populates="typography")

    def __repr__(self) -> str:
        return f"<BrandTypography(id={self.id!r}, type={self.type!r}, font_family={self.font_family!r})>"
