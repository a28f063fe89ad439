from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pressform.config import TableOfContentsSettings, TemplateConfiguration
from pressform.core.fragments import BaseFragment
from pressform.formatters import alignment_macro, macro, scale_length


# tocloft entry kinds, outermost first.
_ENTRY_LEVELS = ("chap", "sec", "subsec")


def entry_indents(indent_width: str) -> list[tuple[str, str]]:
    """Indent per entry level: ``indent_width`` times the level."""
    return [
        (level, "0pt" if depth == 0 else scale_length(indent_width, depth))
        for depth, level in enumerate(_ENTRY_LEVELS)
    ]


def title_font(config: TableOfContentsSettings) -> str:
    return f"{macro(config.title_size)}\\bfseries{alignment_macro(config.title_alignment)}"


class ContentsFragment(BaseFragment[TableOfContentsSettings]):
    name: ClassVar[str] = "contents"
    description: ClassVar[str] = "Table of contents styling through tocloft."
    source: ClassVar[Path] = Path(__file__).with_name("contents.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> TableOfContentsSettings:
        return template.table_of_contents

    def inject(self, config: TableOfContentsSettings, context: dict[str, Any]) -> None:
        context["toc"] = config
        context["title_font"] = title_font(config)
        context["indents"] = entry_indents(config.indent_width)
        context["levels"] = _ENTRY_LEVELS

    def should_render(self, config: TableOfContentsSettings) -> bool:
        return config.enabled


fragment = ContentsFragment()

__all__ = ["ContentsFragment", "entry_indents", "fragment", "title_font"]
