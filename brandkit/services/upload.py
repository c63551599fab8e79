"""Logo upload storage on the local filesystem.

Files land in ``settings.upload_dir`` under a generated name
``<epoch millis>-<random>.<ext>`` and are served from ``/uploads``.
"""

import asyncio
import re
import secrets
import time
from functools import lru_cache
from pathlib import Path

from brandkit.core.config import get_settings
from brandkit.core.logging import get_logger

logger = get_logger(__name__)

# Both the extension and the declared MIME type must mention one of these
ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|svg|webp")

UPLOAD_URL_PREFIX = "/uploads"


class UploadValidationError(Exception):
    """Raised when an uploaded file is missing, of the wrong type or too large."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UploadStorage:
    """Validates and writes uploaded images."""

    def __init__(self, directory: str | Path, max_bytes: int) -> None:
        self.directory = Path(directory)
        self.max_bytes = max_bytes

    @staticmethod
    def extension_of(filename: str) -> str:
        """Lower-cased extension including the dot, or '' if there is none."""
        return Path(filename).suffix.lower()

    def validate(self, filename: str | None, content_type: str | None, size: int) -> str:
        """Check an upload and return its normalized extension.

        Raises:
            UploadValidationError: On a missing file, disallowed type or
                oversize content
        """
        if not filename:
            raise UploadValidationError("No file uploaded")

        extension = self.extension_of(filename)
        if not ALLOWED_IMAGE_TYPES.search(extension) or not ALLOWED_IMAGE_TYPES.search(
            (content_type or "").lower()
        ):
            raise UploadValidationError("Only image files are allowed!")

        if size > self.max_bytes:
            raise UploadValidationError(
                f"File too large: {size} bytes (limit {self.max_bytes} bytes)"
            )
        return extension

    def generate_name(self, extension: str) -> str:
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{extension}"

    def _write(self, name: str, content: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / name).write_bytes(content)

    async def save(
        self, filename: str | None, content_type: str | None, content: bytes
    ) -> str:
        """Validate and store an upload.

        Returns:
            Public URL of the stored file, e.g. ``/uploads/1700000000000-42.png``
        """
        extension = self.validate(filename, content_type, len(content))
        name = self.generate_name(extension)

        start_time = time.monotonic()
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write, name, content)
        duration_ms = (time.monotonic() - start_time) * 1000

        logger.info(
            "Upload stored",
            extra={
                "stored_name": name,
                "content_type": content_type,
                "size_bytes": len(content),
                "duration_ms": round(duration_ms, 2),
            },
        )
        return f"{UPLOAD_URL_PREFIX}/{name}"


@lru_cache
def get_upload_storage() -> UploadStorage:
    """Get the upload storage configured from settings."""
    settings = get_settings()
    return UploadStorage(settings.upload_dir, settings.upload_max_bytes)
