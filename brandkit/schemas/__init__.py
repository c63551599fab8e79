"""Schemas layer - Pydantic request/response models."""

from brandkit.schemas.brand_asset import (
    BrandColorCreate,
    BrandColorResponse,
    BrandColorUpdate,
    BrandTypographyCreate,
    BrandTypographyResponse,
    BrandTypographyUpdate,
)
from brandkit.schemas.member import (
    ProjectMemberCreate,
    ProjectMemberResponse,
    ProjectMemberUpdate,
)
from brandkit.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    ProjectWithDetails,
)
from brandkit.schemas.upload import UploadResponse
from brandkit.schemas.user import (
    LoginRequest,
    RegisterRequest,
    UserResponse,
    UserSummary,
)

__all__ = [
    "BrandColorCreate",
    "BrandColorResponse",
    "BrandColorUpdate",
    "BrandTypographyCreate",
    "BrandTypographyResponse",
    "BrandTypographyUpdate",
    "LoginRequest",
    "ProjectCreate",
    "ProjectMemberCreate",
    "ProjectMemberResponse",
    "ProjectMemberUpdate",
    "ProjectResponse",
    "ProjectUpdate",
    "ProjectWithDetails",
    "RegisterRequest",
    "UploadResponse",
    "UserResponse",
    "UserSummary",
]
