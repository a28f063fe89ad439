from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from pressform.config import (
    ChapterStyling,
    SectionStyling,
    SubsectionStyling,
    TemplateConfiguration,
)
from pressform.core.fragments import BaseFragment
from pressform.formatters import counter_macro, heading_style


@dataclass(frozen=True)
class TitlesConfig:
    chapters: ChapterStyling
    sections: SectionStyling
    subsections: SubsectionStyling
    first_page_style: str

    @classmethod
    def from_template(cls, template: TemplateConfiguration) -> TitlesConfig:
        return cls(
            chapters=template.chapters,
            sections=template.sections,
            subsections=template.subsections,
            first_page_style=template.headers_footers.first_page_style,
        )


@dataclass(frozen=True, slots=True)
class HeadingFormat:
    """Arguments of the ``\\titleformat``/``\\titlespacing*`` pair of one level."""

    command: str
    style: str
    label: str
    before: str
    space_before: str
    space_after: str
    shape: str = ""


def chapter_label(chapters: ChapterStyling) -> str:
    if not chapters.numbered or chapters.number_style == "none":
        return ""
    if chapters.prefix:
        return f"{chapters.prefix} \\thechapter"
    return "\\thechapter"


def chapter_counter(chapters: ChapterStyling) -> str | None:
    """Counter macro for a numbered chapter with a non-arabic number style."""
    counter = counter_macro(chapters.number_style)
    if chapters.numbered and counter and chapters.number_style != "arabic":
        return counter
    return None


def chapter_format(chapters: ChapterStyling) -> HeadingFormat:
    return HeadingFormat(
        command="\\chapter",
        style=heading_style(chapters.size, chapters.weight, chapters.style, chapters.alignment),
        label=chapter_label(chapters),
        before="\\MakeUppercase" if chapters.uppercase else "",
        space_before=chapters.space_before,
        space_after=chapters.space_after,
        shape=f"[{chapters.format}]" if chapters.format else "",
    )


def heading_format(command: str, heading: SectionStyling | SubsectionStyling) -> HeadingFormat:
    return HeadingFormat(
        command=f"\\{command}",
        style=heading_style(heading.size, heading.weight, heading.style, heading.alignment),
        label=f"\\the{command}" if heading.numbered else "",
        before="\\phantomsection",
        space_before=heading.space_before,
        space_after=heading.space_after,
    )


class TitlesFragment(BaseFragment[TitlesConfig]):
    name: ClassVar[str] = "titles"
    description: ClassVar[str] = "Chapter, section and subsection titles through titlesec."
    source: ClassVar[Path] = Path(__file__).with_name("titles.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> TitlesConfig:
        return TitlesConfig.from_template(template)

    def inject(self, config: TitlesConfig, context: dict[str, Any]) -> None:
        # clear_page wins over new_page in the partial.
        context["chapters"] = config.chapters
        context["headings"] = [
            chapter_format(config.chapters),
            heading_format("section", config.sections),
            heading_format("subsection", config.subsections),
        ]
        context["chapter_counter"] = chapter_counter(config.chapters)
        context["first_page_style"] = config.first_page_style

    def should_render(self, config: TitlesConfig) -> bool:
        return True


fragment = TitlesFragment()

__all__ = [
    "HeadingFormat",
    "TitlesConfig",
    "TitlesFragment",
    "chapter_counter",
    "chapter_format",
    "chapter_label",
    "fragment",
    "heading_format",
]
