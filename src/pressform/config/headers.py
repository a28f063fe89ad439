"""Running headers and footers."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, model_validator

from .base import PressModel, drop_null_records


class TextElement(PressModel):
    type: Literal["text"] = "text"
    content: str = ""


class TitleElement(PressModel):
    type: Literal["title"] = "title"


class ChapterElement(PressModel):
    type: Literal["chapter"] = "chapter"


class SectionElement(PressModel):
    type: Literal["section"] = "section"


class AuthorElement(PressModel):
    type: Literal["author"] = "author"


class PageElement(PressModel):
    type: Literal["page"] = "page"


class CustomElement(PressModel):
    """Raw LaTeX supplied by the user."""

    type: Literal["custom"] = "custom"
    latex: str = ""


HeaderFooterElement = Annotated[
    Union[
        TextElement,
        TitleElement,
        ChapterElement,
        SectionElement,
        AuthorElement,
        PageElement,
        CustomElement,
    ],
    Field(discriminator="type"),
]

HeaderFooterPreset = Literal["none", "book-lr", "book-center", "academic", "minimal", "custom"]


class PageHeaderFooter(PressModel):
    """Element lists for the three zones of one page side."""

    left: list[HeaderFooterElement] = Field(default_factory=list)
    center: list[HeaderFooterElement] = Field(default_factory=list)
    right: list[HeaderFooterElement] = Field(default_factory=list)


class RuleSettings(PressModel):
    enabled: bool = False
    width: str = "0pt"
    style: Literal["solid", "dotted", "dashed"] = "solid"


class HeaderFooterFont(PressModel):
    family: str | None = None
    size: Literal["tiny", "small", "normal", "large"] = "normal"
    style: Literal["normal", "italic", "bold", "bolditalic"] = "normal"


def _default_left_page() -> PageHeaderFooter:
    return PageHeaderFooter(left=[TitleElement()])


def _default_right_page() -> PageHeaderFooter:
    return PageHeaderFooter(right=[ChapterElement()])


class HeaderFooterSettings(PressModel):
    """Header/footer preset plus the custom layout used by ``preset='custom'``.

    ``left_page`` (even pages) and ``right_page`` (odd pages) are kept when
    another preset is selected so switching back to ``custom`` restores them,
    but only the custom preset reads them.
    """

    preset: HeaderFooterPreset = "book-lr"
    left_page: PageHeaderFooter = Field(default_factory=_default_left_page)
    right_page: PageHeaderFooter = Field(default_factory=_default_right_page)
    header_rule: RuleSettings = Field(
        default_factory=lambda: RuleSettings(enabled=True, width="0.4pt")
    )
    footer_rule: RuleSettings = Field(default_factory=RuleSettings)
    header_font: HeaderFooterFont = Field(
        default_factory=lambda: HeaderFooterFont(size="small", style="italic")
    )
    footer_font: HeaderFooterFont = Field(default_factory=HeaderFooterFont)
    first_page_style: Literal["plain", "empty", "fancy"] = "plain"

    @model_validator(mode="before")
    @classmethod
    def _default_missing_records(cls, data: Any) -> Any:
        return drop_null_records(
            data,
            ("leftPage", "rightPage", "headerRule", "footerRule", "headerFont", "footerFont"),
        )


__all__ = [
    "AuthorElement",
    "ChapterElement",
    "CustomElement",
    "HeaderFooterElement",
    "HeaderFooterFont",
    "HeaderFooterPreset",
    "HeaderFooterSettings",
    "PageElement",
    "PageHeaderFooter",
    "RuleSettings",
    "SectionElement",
    "TextElement",
    "TitleElement",
]
