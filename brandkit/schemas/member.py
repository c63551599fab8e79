"""Pydantic schemas for project membership."""

from datetime import datetime

from pydantic import Field

from brandkit.models.project_member import MemberRole
from brandkit.schemas.base import CamelModel
from brandkit.schemas.user import UserSummary


class ProjectMemberCreate(CamelModel):
    """Schema for inviting a user to a project."""

    user_id: int = Field(..., description="User to invite")
    role: MemberRole = Field(default=MemberRole.VIEWER, description="Member role")


class ProjectMemberUpdate(CamelModel):
    """Schema for changing a member's role."""

    role: MemberRole


class ProjectMemberResponse(CamelModel):
    """Membership row with the member's public identity."""

    id: int
    project_id: int
    user_id: int
    role: str
    invited_at: datetime
    user: UserSummary
