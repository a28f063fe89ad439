"""Front matter: title page, copyright, dedication, epigraph, abstract."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from .base import PressModel, drop_null_records


class TitlePageSettings(PressModel):
    enabled: bool = True
    title_size: str = "60pt"
    title_spacing: str | None = "5.0"
    title_font: str | None = None
    subtitle_size: str = "Large"
    author_size: str = "Large"
    date_size: str = "large"
    layout: Literal["centered", "traditional", "modern", "custom"] = "centered"
    custom_layout: str | None = None


class CopyrightPageSettings(PressModel):
    enabled: bool = False
    text: str | None = None
    isbn: str | None = None
    publisher: str | None = None
    edition: str | None = None
    custom_content: str | None = None


class DedicationSettings(PressModel):
    enabled: bool = False
    text: str | None = None
    style: Literal["centered", "right", "italic"] = "centered"


class EpigraphSettings(PressModel):
    enabled: bool = False
    quote: str | None = None
    attribution: str | None = None
    style: Literal["centered", "right", "block"] = "right"


class AbstractSettings(PressModel):
    enabled: bool = False
    title: str = "Abstract"
    alignment: Literal["left", "center", "justify"] = "justify"


class FrontMatterSettings(PressModel):
    """Pages preceding the main matter."""

    title_page: TitlePageSettings = Field(default_factory=TitlePageSettings)
    copyright_page: CopyrightPageSettings = Field(default_factory=CopyrightPageSettings)
    dedication: DedicationSettings = Field(default_factory=DedicationSettings)
    epigraph: EpigraphSettings = Field(default_factory=EpigraphSettings)
    abstract: AbstractSettings = Field(default_factory=AbstractSettings)

    @model_validator(mode="before")
    @classmethod
    def _default_missing_pages(cls, data: Any) -> Any:
        return drop_null_records(
            data, ("titlePage", "copyrightPage", "dedication", "epigraph", "abstract")
        )


__all__ = [
    "AbstractSettings",
    "CopyrightPageSettings",
    "DedicationSettings",
    "EpigraphSettings",
    "FrontMatterSettings",
    "TitlePageSettings",
]
