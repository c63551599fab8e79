"""BrandColor model: one named swatch in a project's palette."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from brandkit.core.database import Base

if TYPE_CHECKING:
    from brandkit.models.project import Project


class BrandColor(Base):
    """Palette color.

    Attributes:
        id: Auto-increment primary key
        project_id: Foreign key to projects table (cascade delete)
        name: Display name, also the source of the CSS variable name
        hex_code: Hex color string, e.g. '#1A73E8'
        usage: Optional usage note
        order: Display position; ties fall back to insertion order (id)
    """

    __tablename__ = "brand_colors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    hex_code: Mapped[str] = mapped_column(String(9), nullable=False)

    usage: Mapped[str | None] = mapped_column(Text, nullable=True)

    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    project: Mapped["Project"] = relationship("Project", back_populates="colors")

    def __repr__(self) -> str:
        return f"<BrandColor(id={self.id!r}, name={self.name!r}, hex_code={self.hex_code!r})>"
