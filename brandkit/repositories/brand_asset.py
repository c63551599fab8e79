"""BrandAssetRepository: database access for colors and typography.

Colors are always returned in display order (``order`` ascending, then
insertion order). Typography is returned in insertion order.
"""

import time
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.logging import db_logger, get_logger
from brandkit.models.brand_color import BrandColor
from brandkit.models.brand_typography import BrandTypography

logger = get_logger(__name__)


class BrandAssetRepository:
    """Repository for BrandColor and BrandTypography rows."""

    SLOW_OPERATION_THRESHOLD_MS = 1000  # 1 second

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _check_slow(self, query: str, table: str, start_time: float) -> None:
        duration_ms = (time.monotonic() - start_time) * 1000
        if duration_ms > self.SLOW_OPERATION_THRESHOLD_MS:
            db_logger.slow_query(query=query, duration_ms=duration_ms, table=table)

    async def _write(self, instance: Any, table: str, context: str) -> None:
        try:
            await self.session.flush()
            await self.session.refresh(instance)
        except SQLAlchemyError as e:
            db_logger.transaction_failure(e, table=table, context=context)
            raise

    # Colors

    async def list_colors(self, project_id: int) -> list[BrandColor]:
        """List a project's colors in display order."""
        start_time = time.monotonic()
        result = await self.session.execute(
            select(BrandColor)
            .where(BrandColor.project_id == project_id)
            .order_by(BrandColor.order.asc(), BrandColor.id.asc())
        )
        colors = list(result.scalars().all())
        self._check_slow(
            f"SELECT FROM brand_colors WHERE project_id={project_id}",
            "brand_colors",
            start_time,
        )
        logger.debug(
            "Colors fetched",
            extra={"project_id": project_id, "count": len(colors)},
        )
        return colors

    async def get_color(self, color_id: int) -> BrandColor | None:
        result = await self.session.execute(
            select(BrandColor).where(BrandColor.id == color_id)
        )
        return result.scalar_one_or_none()

    async def create_color(self, project_id: int, **fields: Any) -> BrandColor:
        color = BrandColor(project_id=project_id, **fields)
        self.session.add(color)
        await self._write(color, "brand_colors", f"Creating color for project_id={project_id}")
        logger.debug(
            "Color created",
            extra={"project_id": project_id, "color_id": color.id},
        )
        return color

    async def update_color(self, color: BrandColor, changes: dict[str, Any]) -> BrandColor:
        for field, value in changes.items():
            if field in ("id", "project_id"):
                continue
            setattr(color, field, value)
        await self._write(color, "brand_colors", f"Updating color_id={color.id}")
        return color

    async def delete_color(self, color: BrandColor) -> None:
        color_id = color.id
        try:
            await self.session.delete(color)
            await self.session.flush()
        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e, table="brand_colors", context=f"Deleting color_id={color_id}"
            )
            raise
        logger.debug("Color deleted", extra={"color_id": color_id})

    # Typography

    async def list_typography(self, project_id: int) -> list[BrandTypography]:
        """List a project's typography entries."""
        start_time = time.monotonic()
        result = await self.session.execute(
            select(BrandTypography)
            .where(BrandTypography.project_id == project_id)
            .order_by(BrandTypography.id.asc())
        )
        entries = list(result.scalars().all())
        self._check_slow(
            f"SELECT FROM brand_typography WHERE project_id={project_id}",
            "brand_typography",
            start_time,
        )
        logger.debug(
            "Typography fetched",
            extra={"project_id": project_id, "count": len(entries)},
        )
        return entries

    async def get_typography(self, typography_id: int) -> BrandTypography | None:
        result = await self.session.execute(
            select(BrandTypography).where(BrandTypography.id == typography_id)
        )
        return result.scalar_one_or_none()

    async def create_typography(self, project_id: int, **fields: Any) -> BrandTypography:
        entry = BrandTypography(project_id=project_id, **fields)
        self.session.add(entry)
        await self._write(
            entry, "brand_typography", f"Creating typography for project_id={project_id}"
        )
        logger.debug(
            "Typography created",
            extra={"project_id": project_id, "typography_id": entry.id},
        )
        return entry

    async def update_typography(
        self, entry: BrandTypography, changes: dict[str, Any]
    ) -> BrandTypography:
        for field, value in changes.items():
            if field in ("id", "project_id"):
                continue
            setattr(entry, field, value)
        await self._write(entry, "brand_typography", f"Updating typography_id={entry.id}")
        return entry

    async def delete_typography(self, entry: BrandTypography) -> None:
        typography_id = entry.id
        try:
            await self.session.delete(entry)
            await self.session.flush()
        except SQLAlchemyError as e:
            db_logger.transaction_failure(
                e,
                table="brand_typography",
                context=f"Deleting typography_id={typography_id}",
            )
            raise
        logger.debug("Typography deleted", extra={"typography_id": typography_id})
