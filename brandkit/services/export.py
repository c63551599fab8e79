"""Brand exporters: CSS custom properties and a portable JSON document.

Both exporters are pure functions of a ProjectWithDetails snapshot. Colors
appear in the snapshot's order (``order`` ascending, then insertion order).
"""

import re
from typing import Any

from brandkit.schemas.brand_asset import (
    CSS_IDENTIFIER_PATTERN,
    CSS_UNSAFE_PATTERN,
    HEX_COLOR_PATTERN,
    to_css_identifier,
)
from brandkit.schemas.project import ProjectWithDetails


class ExportFormatError(Exception):
    """Raised when a stored value cannot be rendered safely."""

    def __init__(self, field: str, value: str, message: str):
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Cannot export {field} {value!r}: {message}")


def sanitize_filename(name: str) -> str:
    """Convert a project name to a safe filename stem.

    Converts to lowercase and replaces non-alphanumeric characters with hyphens.
    Collapses multiple consecutive hyphens and strips leading/trailing hyphens.

    Examples:
        >>> sanitize_filename("My Cool Brand")
        'my-cool-brand'
        >>> sanitize_filename("Brand #1 (Test)")
        'brand-1-test'
    """
    result = name.lower()
    result = re.sub(r"[^a-z0-9]+", "-", result)
    result = result.strip("-")
    return result or "brand"


def css_variable_name(name: str) -> str:
    """Map a color name to a CSS custom property name (without the ``--``).

    Lower-cases and replaces each run of whitespace with a single hyphen:
    "Primary Blue" -> "primary-blue", "X  Y" -> "x-y".

    Raises:
        ExportFormatError: If the name contains CSS-breaking characters or
            has no identifier characters at all
    """
    if CSS_UNSAFE_PATTERN.search(name):
        raise ExportFormatError("color name", name, "contains characters not allowed in CSS")
    variable = to_css_identifier(name)
    if not CSS_IDENTIFIER_PATTERN.fullmatch(variable):
        raise ExportFormatError(
            "color name", name, "may only contain letters, digits, hyphens and underscores"
        )
    if not variable.strip("-"):
        raise ExportFormatError("color name", name, "does not form a CSS identifier")
    return variable


def _css_hex(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        raise ExportFormatError("hex code", value, "is not a hex color")
    return value


def _css_font_family(value: str) -> str:
    if CSS_UNSAFE_PATTERN.search(value):
        raise ExportFormatError("font family", value, "contains characters not allowed in CSS")
    return value


def render_css(details: ProjectWithDetails) -> str:
    """Render the project's colors and typography as a CSS document.

    Output shape::

        :root {
          --primary-blue: #1A73E8;
        }

        .font-primary {
          font-family: 'Inter', sans-serif;
        }

    A typography entry whose type is exactly ``primary`` renders as
    ``.font-primary`` with a sans-serif fallback; every other type renders
    as ``.font-secondary`` with a monospace fallback.
    """
    parts = [":root {\n"]
    for color in details.colors:
        parts.append(f"  --{css_variable_name(color.name)}: {_css_hex(color.hex_code)};\n")
    parts.append("}\n\n")

    for entry in details.typography:
        family = _css_font_family(entry.font_family)
        if entry.type == "primary":
            parts.append(f".font-primary {{\n  font-family: '{family}', sans-serif;\n}}\n\n")
        else:
            parts.append(f".font-secondary {{\n  font-family: '{family}', monospace;\n}}\n\n")

    return "".join(parts)


def build_brand_json(details: ProjectWithDetails) -> dict[str, Any]:
    """Build the portable brand document.

    Keys are fixed: name, tagline, category, colors[{name, hex, usage}],
    typography[{type, fontFamily, googleFontUrl, weights}] and
    voice{tone, guidelines}.
    """
    return {
        "name": details.name,
        "tagline": details.tagline,
        "category": details.category,
        "colors": [
            {"name": color.name, "hex": color.hex_code, "usage": color.usage}
            for color in details.colors
        ],
        "typography": [
            {
                "type": entry.type,
                "fontFamily": entry.font_family,
                "googleFontUrl": entry.google_font_url,
                "weights": list(entry.weights),
            }
            for entry in details.typography
        ],
        "voice": {
            "tone": details.tone_of_voice,
            "guidelines": details.usage_guidelines,
        },
    }
