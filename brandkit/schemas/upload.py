"""Schemas for file uploads."""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Location of a stored upload."""

    url: str = Field(..., description="Public path of the stored file")
