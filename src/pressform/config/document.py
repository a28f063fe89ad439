"""Document class and page numbering settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import PressModel


DocumentClass = Literal["book", "article", "report", "memoir", "scrbook"]
NumberStyle = Literal["arabic", "roman", "Roman", "alph", "Alph"]


class DocumentSettings(PressModel):
    """Document class, class options and page numbering."""

    document_class: DocumentClass = "book"
    class_options: list[str] = Field(default_factory=lambda: ["openany"])
    paper_size: Literal["letter", "a4", "custom"] | None = None
    page_numbering: bool = True
    page_number_style: NumberStyle = "arabic"
    page_number_position: Literal["header", "footer", "both"] = "footer"


__all__ = ["DocumentClass", "DocumentSettings", "NumberStyle"]
