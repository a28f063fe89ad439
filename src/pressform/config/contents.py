"""Table of contents settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import PressModel


class TableOfContentsSettings(PressModel):
    """Table of contents inclusion and styling."""

    enabled: bool = True
    depth: int = Field(default=1, ge=0, le=5)
    title: str = "Table of Contents"

    title_size: Literal["Huge", "huge", "LARGE", "Large"] = "LARGE"
    title_alignment: Literal["left", "center", "right"] = "center"

    dot_leaders: bool = True
    chapter_bold: bool = True
    indent_width: str = "1.5em"

    before_skip: str = "10pt"
    after_skip: str = "20pt"
    entry_spacing: str = "5pt"

    show_page_numbers: bool = True
    add_to_toc: bool | None = None
    hyperlinks: bool = True


__all__ = ["TableOfContentsSettings"]
