"""Lists, figures, tables and code blocks.

Each record accepts the short names written by the settings dialog
alongside the longer names used by early presets; the validators below
reconcile them once at load time.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from .base import PressModel, fold_aliases


BulletKind = Literal["bullet", "dash", "asterisk", "custom"]
EnumerationKind = Literal["arabic", "roman", "Roman", "alph", "Alph"]


class CaptionFont(PressModel):
    size: Literal["tiny", "small", "normalsize"] = "small"
    weight: Literal["normal", "bold"] = "bold"
    style: Literal["normal", "italic"] = "normal"


class ListSettings(PressModel):
    """Spacing, indentation and labels for itemize/enumerate."""

    item_sep: str | None = "0pt"
    parsep: str | None = "0pt"
    topsep: str | None = "0pt"

    left_margin: str | None = "2em"
    label_width: str | None = "1.5em"
    label_sep: str | None = "0.5em"

    bullet_level1: BulletKind = "bullet"
    bullet_level2: BulletKind = "dash"
    bullet_level3: BulletKind = "asterisk"
    custom_bullets: list[str] = Field(default_factory=list)

    number_level1: EnumerationKind = "arabic"
    number_level2: EnumerationKind = "alph"
    number_level3: EnumerationKind = "roman"

    compact: bool = True

    @model_validator(mode="before")
    @classmethod
    def _reconcile_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = dict(data)
        bullet = payload.pop("bulletStyle", None) or payload.pop("bullet_style", None)
        if bullet:
            payload["bulletLevel1"] = "custom"
            customs = list(payload.get("customBullets") or payload.get("custom_bullets") or [])
            payload.pop("custom_bullets", None)
            payload["customBullets"] = [bullet, *customs[1:]]
        spacing = payload.pop("itemSpacing", None) or payload.pop("item_spacing", None)
        if spacing == "compact":
            payload["compact"] = True
        elif spacing in ("normal", "relaxed"):
            payload["compact"] = False
            if spacing == "relaxed" and not (payload.get("itemSep") or payload.get("item_sep")):
                payload["itemSep"] = "0.5em"
        indent = payload.pop("indent", None)
        if indent is False:
            payload.pop("left_margin", None)
            payload["leftMargin"] = "0pt"
        return payload


class ImageSettings(PressModel):
    """Figure sizing, placement and captions."""

    default_width: str = "0.9\\textwidth"
    max_width: str | None = "\\textwidth"
    max_height: str | None = "0.9\\textheight"
    keep_aspect_ratio: bool = True

    align: Literal["left", "center", "right"] = "center"
    default_placement: str = "htbp"

    caption_position: Literal["above", "below"] = "below"
    caption_font: CaptionFont | None = Field(default_factory=CaptionFont)
    caption_alignment: Literal["left", "center", "right", "justify"] = "center"
    caption_separator: str = ": "

    figure_prefix: str = "Figure"
    show_figure_number: bool = False

    float_barrier: bool = False
    separator_line: bool = False

    @model_validator(mode="before")
    @classmethod
    def _reconcile_names(cls, data: Any) -> Any:
        payload = fold_aliases(
            data,
            {"centerImages": "align"},
            convert={"centerImages": lambda value: "center" if value else "left"},
        )
        return fold_aliases(
            payload,
            {"keepInPlace": "defaultPlacement"},
            prefer_source=True,
            convert={"keepInPlace": lambda value: "H" if value else None},
        )


class TableSettings(PressModel):
    """Table appearance and captions."""

    style: Literal["default", "booktabs", "grid", "minimal"] = "default"
    header_style: Literal["bold", "normal", "italic"] = "bold"
    zebra_striping: bool = False

    default_alignment: Literal["left", "center", "right"] = "left"
    header_background: bool = False

    borders: Literal["none", "all", "horizontal", "vertical", "outer"] = "horizontal"
    border_width: str = "0.4pt"

    cell_padding: str = "4pt"
    row_height: str = "auto"
    column_sep: str = "6pt"

    caption_position: Literal["above", "below"] = "above"
    caption_font: CaptionFont | None = Field(default_factory=CaptionFont)

    long_table: bool = True
    table_prefix: str = "Table"

    @model_validator(mode="before")
    @classmethod
    def _reconcile_names(cls, data: Any) -> Any:
        return fold_aliases(data, {"alternateRowColors": "zebraStriping"})


class CodeBlockSettings(PressModel):
    """Code listing appearance and highlighting."""

    highlighting: bool = True
    highlight_theme: str = "tango"
    line_numbers: bool = False
    line_number_sep: str = "6pt"

    font: str | None = "DejaVu Sans Mono"
    font_size: str | None = "\\small"

    background_color: str | None = "gray!10"
    border_color: str | None = None
    border_width: str | None = None
    border_radius: str | None = None
    padding: str | None = "6pt"

    break_lines: bool = True
    break_indent: str | None = "1em"

    @model_validator(mode="before")
    @classmethod
    def _reconcile_names(cls, data: Any) -> Any:
        payload = fold_aliases(data, {"syntaxHighlighting": "highlighting"})
        if isinstance(payload, dict):
            background = payload.pop("background", None)
            if background is False:
                payload.pop("background_color", None)
                payload["backgroundColor"] = None
        return payload


__all__ = [
    "BulletKind",
    "CaptionFont",
    "CodeBlockSettings",
    "EnumerationKind",
    "ImageSettings",
    "ListSettings",
    "TableSettings",
]
