"""Pydantic schemas for Project validation.

Defines request/response models for Project API endpoints with validation rules,
plus the frozen ProjectWithDetails aggregate returned by the detail endpoint.
"""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from brandkit.schemas.base import CamelModel
from brandkit.schemas.brand_asset import BrandColorResponse, BrandTypographyResponse
from brandkit.schemas.member import ProjectMemberResponse
from brandkit.schemas.user import UserSummary


def _normalize_name(v: str | None) -> str:
    if v is None:
        raise ValueError("Project name cannot be null")
    v = v.strip()
    if not v:
        raise ValueError("Project name cannot be empty or whitespace only")
    return v


class ProjectCreate(CamelModel):
    """Schema for creating a new project."""

    name: str = Field(..., min_length=1, max_length=255, description="Brand name")
    tagline: str | None = Field(None, max_length=1000, description="Brand tagline")
    category: str | None = Field(None, max_length=255, description="Brand category")
    description: str | None = Field(None, description="Brand description")
    logo_url: str | None = Field(None, max_length=2048, description="Logo URL")
    tone_of_voice: str | None = Field(None, description="Tone of voice guidance")
    usage_guidelines: str | None = Field(None, description="Usage guidelines")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and normalize project name."""
        return _normalize_name(v)


class ProjectUpdate(CamelModel):
    """Schema for a partial project update. Only provided fields change."""

    name: str | None = Field(None, min_length=1, max_length=255)
    tagline: str | None = Field(None, max_length=1000)
    category: str | None = Field(None, max_length=255)
    description: str | None = None
    logo_url: str | None = Field(None, max_length=2048)
    tone_of_voice: str | None = None
    usage_guidelines: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        """Name may be omitted but never cleared."""
        return _normalize_name(v)


class ProjectResponse(CamelModel):
    """Schema for project response."""

    id: int = Field(..., description="Project ID")
    name: str
    tagline: str | None = None
    category: str | None = None
    description: str | None = None
    logo_url: str | None = None
    tone_of_voice: str | None = None
    usage_guidelines: str | None = None
    user_id: int = Field(..., description="Owner user ID")
    created_at: datetime
    updated_at: datetime


class ProjectWithDetails(ProjectResponse):
    """Project with its colors, typography, members and owner in one snapshot."""

    model_config = ConfigDict(frozen=True)

    colors: tuple[BrandColorResponse, ...] = ()
    typography: tuple[BrandTypographyResponse, ...] = ()
    owner: UserSummary
    members: tuple[ProjectMemberResponse, ...] = ()
