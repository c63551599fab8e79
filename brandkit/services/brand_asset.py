"""Services for a project's colors and typography.

Callers are expected to have resolved and authorized the owning project
(see ``brandkit.services.access``); these services only deal with the rows.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import get_logger
from brandkit.models.brand_color import BrandColor
from brandkit.models.brand_typography import TYPOGRAPHY_TYPES, BrandTypography
from brandkit.repositories.brand_asset import BrandAssetRepository
from brandkit.schemas.brand_asset import (
    BrandColorCreate,
    BrandColorUpdate,
    BrandTypographyCreate,
    BrandTypographyUpdate,
)

logger = get_logger(__name__)


class BrandAssetServiceError(Exception):
    """Base exception for brand asset errors."""

    pass


class ColorNotFoundError(BrandAssetServiceError):
    """Raised when a color is not found."""

    def __init__(self, color_id: int):
        self.color_id = color_id
        super().__init__(f"Color not found: {color_id}")


class TypographyNotFoundError(BrandAssetServiceError):
    """Raised when a typography entry is not found."""

    def __init__(self, typography_id: int):
        self.typography_id = typography_id
        super().__init__(f"Typography not found: {typography_id}")


class ColorService:
    """Service for BrandColor operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = BrandAssetRepository(session)

    async def list_colors(self, project_id: int) -> list[BrandColor]:
        return await self.repository.list_colors(project_id)

    async def get_color(self, color_id: int) -> BrandColor:
        """Raises ColorNotFoundError if absent."""
        color = await self.repository.get_color(color_id)
        if color is None:
            raise ColorNotFoundError(color_id)
        return color

    async def create_color(self, project_id: int, data: BrandColorCreate) -> BrandColor:
        color = await self.repository.create_color(project_id, **data.model_dump())
        logger.info(
            "Color added",
            extra={
                "project_id": project_id,
                "color_id": color.id,
                "hex_code": color.hex_code,
            },
        )
        return color

    async def update_color(self, color: BrandColor, data: BrandColorUpdate) -> BrandColor:
        changes = data.model_dump(exclude_unset=True)
        color = await self.repository.update_color(color, changes)
        logger.info(
            "Color updated",
            extra={"color_id": color.id, "update_fields": sorted(changes)},
        )
        return color

    async def delete_color(self, color: BrandColor) -> None:
        project_id = color.project_id
        await self.repository.delete_color(color)
        logger.info("Color deleted", extra={"project_id": project_id})


class TypographyService:
    """Service for BrandTypography operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = BrandAssetRepository(session)

    async def list_typography(self, project_id: int) -> list[BrandTypography]:
        return await self.repository.list_typography(project_id)

    async def get_typography(self, typography_id: int) -> BrandTypography:
        """Raises TypographyNotFoundError if absent."""
        entry = await self.repository.get_typography(typography_id)
        if entry is None:
            raise TypographyNotFoundError(typography_id)
        return entry

    async def create_typography(
        self, project_id: int, data: BrandTypographyCreate
    ) -> BrandTypography:
        if data.type not in TYPOGRAPHY_TYPES:
            # Stored as-is; exporters treat anything but "primary" as secondary
            logger.debug(
                "Non-standard typography type",
                extra={"project_id": project_id, "type": data.type[:50]},
            )
        entry = await self.repository.create_typography(project_id, **data.model_dump())
        logger.info(
            "Typography added",
            extra={
                "project_id": project_id,
                "typography_id": entry.id,
                "font_family": entry.font_family,
            },
        )
        return entry

    async def update_typography(
        self, entry: BrandTypography, data: BrandTypographyUpdate
    ) -> BrandTypography:
        changes = data.model_dump(exclude_unset=True)
        entry = await self.repository.update_typography(entry, changes)
        logger.info(
            "Typography updated",
            extra={"typography_id": entry.id, "update_fields": sorted(changes)},
        )
        return entry

    async def delete_typography(self, entry: BrandTypography) -> None:
        project_id = entry.project_id
        await self.repository.delete_typography(entry)
        logger.info("Typography deleted", extra={"project_id": project_id})
