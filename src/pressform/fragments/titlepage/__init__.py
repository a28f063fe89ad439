from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pressform.config import TemplateConfiguration, TitlePageSettings
from pressform.core.fragments import BaseFragment
from pressform.formatters import leading_for, macro


def title_font_switch(settings: TitlePageSettings) -> str:
    """Font selection for the title line.

    A numeric size becomes an explicit ``\\fontsize`` with 1.1 leading; a
    size command such as ``Huge`` is used as is.
    """
    parts: list[str] = []
    if settings.title_font:
        parts.append(f"\\fontspec{{{settings.title_font}}}")
    leading = leading_for(settings.title_size)
    if leading is None:
        parts.append(macro(settings.title_size))
    else:
        parts.append(f"\\fontsize{{{settings.title_size}}}{{{leading}}}\\selectfont")
    parts.append("\\bfseries")
    if settings.title_spacing:
        parts.append(f"\\addfontfeatures{{LetterSpace={settings.title_spacing}}}")
    return "".join(parts)


def custom_layout(settings: TitlePageSettings) -> str | None:
    """Hand-written body replacing the generated layout, when selected."""
    if settings.layout == "custom" and settings.custom_layout:
        return settings.custom_layout.rstrip()
    return None


class TitlePageFragment(BaseFragment[TitlePageSettings]):
    name: ClassVar[str] = "titlepage"
    description: ClassVar[str] = "Replacement for \\maketitle laying out the title page."
    source: ClassVar[Path] = Path(__file__).with_name("titlepage.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> TitlePageSettings:
        return template.front_matter.title_page

    def should_render(self, config: TitlePageSettings) -> bool:
        return config.enabled

    def inject(self, config: TitlePageSettings, context: dict[str, Any]) -> None:
        context.update(
            custom_layout=custom_layout(config),
            title_font=title_font_switch(config),
            subtitle_size=macro(config.subtitle_size),
            author_size=macro(config.author_size),
            date_size=macro(config.date_size),
        )


fragment = TitlePageFragment()

__all__ = ["TitlePageFragment", "custom_layout", "fragment", "title_font_switch"]
