"""Repositories layer - database access for each aggregate."""

from brandkit.repositories.brand_asset import BrandAssetRepository
from brandkit.repositories.member import MemberRepository
from brandkit.repositories.project import ProjectRepository
from brandkit.repositories.user import UserRepository

__all__ = [
    "BrandAssetRepository",
    "MemberRepository",
    "ProjectRepository",
    "UserRepository",
]
