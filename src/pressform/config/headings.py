"""Chapter, section and subsection title styling.

ChapterStyling

Two vocabularies describe chapter titles. The settings dialog writes the
short names (`display`, `fontSize`, `bold`, `align`, `numberFormat`,
`rightPage`) while presets written for the first releases use the long
names (`format`, `size`, `weight`, `alignment`, `numberStyle`, `clearPage`).
Both are accepted when a payload is loaded and folded onto the long names,
which are the only ones generators read. The short names win when a payload
carries both.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_validator, model_validator

from .base import PressModel, fold_aliases


TitleFormat = Literal["display", "hang", "block", "drop"]
HeadingSize = Literal["Huge", "huge", "LARGE", "Large", "large", "normalsize"]
HeadingWeight = Literal["normal", "bold"]
HeadingStyle = Literal["upright", "italic", "smallcaps"]
Alignment = Literal["left", "center", "right"]
ChapterNumberStyle = Literal["arabic", "roman", "Roman", "alph", "Alph", "words", "none"]

_DISPLAY_FORMATS = {
    "default": "display",
    "display": "display",
    "custom": "display",
    "hang": "hang",
    "block": "block",
}
_LEGACY_FORMATS = {
    "display": "display",
    "centered": "display",
    "inline": "hang",
    "hang": "hang",
    "block": "block",
    "drop": "drop",
}
_NUMBER_FORMATS = {"alpha": "alph", "Alpha": "Alph"}

_CHAPTER_ALIASES = {
    "display": "format",
    "fontSize": "size",
    "bold": "weight",
    "align": "alignment",
    "numberFormat": "numberStyle",
    "rightPage": "clearPage",
}
_CHAPTER_CONVERTERS = {
    "display": lambda value: _DISPLAY_FORMATS.get(str(value)),
    "bold": lambda value: "bold" if value else "normal",
    "numberFormat": lambda value: _NUMBER_FORMATS.get(str(value), value),
}


class DropCaps(PressModel):
    enabled: bool = False
    lines: int = 3
    font: str | None = None


class ChapterStyling(PressModel):
    """Chapter title appearance, numbering and page breaks."""

    format: TitleFormat = "display"
    size: HeadingSize = "Huge"
    weight: HeadingWeight = "bold"
    style: HeadingStyle = "upright"
    uppercase: bool = False
    alignment: Alignment = "center"

    space_before: str = "50pt"
    space_after: str = "40pt"

    numbered: bool = False
    number_style: ChapterNumberStyle = "arabic"
    number_position: Literal["before", "above", "none"] = "before"
    number_separator: str = ". "
    prefix: str | None = None

    new_page: bool = True
    clear_page: bool = False

    running_header: bool = True
    title_case: bool = False
    drop_caps: DropCaps | None = None

    @model_validator(mode="before")
    @classmethod
    def _reconcile_names(cls, data: Any) -> Any:
        return fold_aliases(
            data, _CHAPTER_ALIASES, prefer_source=True, convert=_CHAPTER_CONVERTERS
        )

    @field_validator("format", mode="before")
    @classmethod
    def _legacy_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _LEGACY_FORMATS.get(value, value)
        return value

    @field_validator("size", mode="before")
    @classmethod
    def _strip_backslash(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lstrip("\\")
        return value


class SectionStyling(PressModel):
    """Section title appearance."""

    size: HeadingSize = "Large"
    weight: HeadingWeight = "bold"
    style: HeadingStyle = "upright"
    alignment: Alignment = "left"
    space_before: str = "12pt"
    space_after: str = "6pt"
    numbered: bool = False
    running_header: bool = False


class SubsectionStyling(PressModel):
    """Subsection title appearance."""

    size: HeadingSize = "large"
    weight: HeadingWeight = "bold"
    style: HeadingStyle = "upright"
    alignment: Alignment = "left"
    space_before: str = "10pt"
    space_after: str = "4pt"
    numbered: bool = False


__all__ = [
    "Alignment",
    "ChapterNumberStyle",
    "ChapterStyling",
    "DropCaps",
    "HeadingSize",
    "HeadingStyle",
    "HeadingWeight",
    "SectionStyling",
    "SubsectionStyling",
    "TitleFormat",
]
