"""Pydantic schemas for brand colors and typography.

Color names and font families end up inside generated CSS, so characters that
could break out of a declaration are rejected here.
"""

import re

from pydantic import Field, field_validator

from brandkit.schemas.base import CamelModel

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Characters that would terminate or escape a CSS declaration or string
CSS_UNSAFE_PATTERN = re.compile(r"[\"'`;:{}()<>\\\r\n\t]")

# Color names become unquoted custom property names: letters, digits, _ and -
CSS_IDENTIFIER_PATTERN = re.compile(r"[\w-]+")

WHITESPACE_RUN = re.compile(r"\s+")


def to_css_identifier(name: str) -> str:
    """Lower-case ``name`` and turn each whitespace run into one hyphen."""
    return WHITESPACE_RUN.sub("-", name.lower())


def check_css_safe(v: str, label: str) -> str:
    """Reject values containing characters unsafe inside a CSS document."""
    if CSS_UNSAFE_PATTERN.search(v):
        raise ValueError(
            f"{label} cannot contain quotes, semicolons, colons, braces, "
            "parentheses, angle brackets, backslashes or control characters"
        )
    return v


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Color name cannot be empty or whitespace only")
    check_css_safe(v, "Color name")
    identifier = to_css_identifier(v)
    if not CSS_IDENTIFIER_PATTERN.fullmatch(identifier) or not identifier.strip("-"):
        raise ValueError(
            "Color name may only contain letters, digits, spaces, hyphens and underscores"
        )
    return v


def _check_hex(v: str) -> str:
    v = v.strip()
    if not HEX_COLOR_PATTERN.match(v):
        raise ValueError(f"Invalid hex color '{v}'. Expected #RGB, #RRGGBB or #RRGGBBAA")
    return v


def _check_font_family(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Font family cannot be empty or whitespace only")
    return check_css_safe(v, "Font family")


class BrandColorCreate(CamelModel):
    """Schema for adding a color to a project."""

    name: str = Field(..., min_length=1, max_length=255, description="Color name")
    hex_code: str = Field(..., description="Hex color, e.g. #1A73E8")
    usage: str | None = Field(None, description="Where the color is used")
    order: int = Field(default=0, description="Display position (ascending)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("hex_code")
    @classmethod
    def validate_hex_code(cls, v: str) -> str:
        return _check_hex(v)


class BrandColorUpdate(CamelModel):
    """Schema for a partial color update."""

    name: str | None = Field(None, min_length=1, max_length=255)
    hex_code: str | None = None
    usage: str | None = None
    order: int | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Color name cannot be null")
        return _check_name(v)

    @field_validator("hex_code")
    @classmethod
    def validate_hex_code(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Hex code cannot be null")
        return _check_hex(v)

    @field_validator("order")
    @classmethod
    def validate_order(cls, v: int | None) -> int:
        if v is None:
            raise ValueError("Order cannot be null")
        return v


class BrandColorResponse(CamelModel):
    """Schema for color response."""

    id: int
    project_id: int
    name: str
    hex_code: str
    usage: str | None = None
    order: int


class BrandTypographyCreate(CamelModel):
    """Schema for adding a typography entry to a project."""

    type: str = Field(..., max_length=50, description="Role tag: primary or secondary")
    font_family: str = Field(..., min_length=1, max_length=255, description="Font family")
    google_font_url: str | None = Field(None, max_length=2048, description="Font reference URL")
    weights: list[str] = Field(default_factory=list, description="Weight labels")

    @field_validator("font_family")
    @classmethod
    def validate_font_family(cls, v: str) -> str:
        return _check_font_family(v)


class BrandTypographyUpdate(CamelModel):
    """Schema for a partial typography update."""

    type: str | None = Field(None, max_length=50)
    font_family: str | None = Field(None, min_length=1, max_length=255)
    google_font_url: str | None = Field(None, max_length=2048)
    weights: list[str] | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Type cannot be null")
        return v

    @field_validator("font_family")
    @classmethod
    def validate_font_family(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Font family cannot be null")
        return _check_font_family(v)

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: list[str] | None) -> list[str]:
        return v or []


class BrandTypographyResponse(CamelModel):
    """Schema for typography response."""

    id: int
    project_id: int
    type: str
    font_family: str
    google_font_url: str | None = None
    weights: list[str] = Field(default_factory=list)
