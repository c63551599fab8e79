"""Create brand_colors and brand_typography tables.

Revision ID: 0004
Revises: 0003
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0004"
down_revision: str | None = "0003"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create brand_colors and brand_typography tables."""
    op.create_table(
        "brand_colors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("hex_code", sa.String(length=9), nullable=False),
        sa.Column("usage", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_brand_colors_project_id"), "brand_colors", ["project_id"], unique=False
    )

    op.create_table(
        "brand_typography",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("font_family", sa.String(length=255), nullable=False),
        sa.Column("google_font_url", sa.String(length=2048), nullable=True),
        sa.Column(
            "weights",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_brand_typography_project_id"),
        "brand_typography",
        ["project_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop brand_typography and brand_colors tables."""
    op.drop_index(op.f("ix_brand_typography_project_id"), table_name="brand_typography")
    op.drop_table("brand_typography")
    op.drop_index(op.f("ix_brand_colors_project_id"), table_name="brand_colors")
    op.drop_table("brand_colors")
