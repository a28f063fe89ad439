"""Typography settings: fonts, paragraph layout, line breaking."""

from __future__ import annotations

from pydantic import Field

from .base import PressModel


class FontFeatures(PressModel):
    """Optional OpenType feature switches."""

    small_caps: bool | None = None
    old_style_numerals: bool | None = None
    ligatures: bool | None = None
    letter_spacing: float | None = None


class TypographySettings(PressModel):
    """Fonts, sizes, paragraph formatting and penalties."""

    body_font: str = "DejaVu Serif"
    sans_font: str = "DejaVu Sans"
    mono_font: str = "DejaVu Sans Mono"

    font_size: str = "11pt"
    line_spacing: float = 1.15

    font_features: FontFeatures | None = None

    paragraph_indent: str = "0.25in"
    paragraph_spacing: str = "0pt"
    first_line_indent: bool = True

    microtype: bool = True
    widow_penalty: int = Field(default=10000, ge=0, le=10000)
    club_penalty: int = Field(default=10000, ge=0, le=10000)
    hyphen_penalty: int = Field(default=500, ge=0, le=10000)
    tolerance: int = Field(default=2000, ge=0, le=10000)
    emergency_stretch: str = "3em"
    ragged_bottom: bool = True

    hyphenation: bool = True
    left_hyphen_min: int = 3
    right_hyphen_min: int = 3
    language: str = "en-US"


__all__ = ["FontFeatures", "TypographySettings"]
