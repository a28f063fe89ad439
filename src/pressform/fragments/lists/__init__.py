from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pressform.config import ListSettings, TemplateConfiguration
from pressform.core.fragments import BaseFragment


_BULLET_LABELS = {
    "bullet": "\\textbullet",
    "dash": "\\textendash",
    "asterisk": "\\textasteriskcentered",
}
_NUMBER_SUFFIXES = {"alph": ")", "Alph": ")"}


def _keyed(pairs: list[tuple[str, str | None]]) -> str:
    return ",".join(f"{key}={value}" for key, value in pairs if value)


def bullet_label(settings: ListSettings, level: int) -> str:
    """Label for itemize ``level`` (1-based)."""
    kind = getattr(settings, f"bullet_level{level}")
    if kind == "custom":
        customs = settings.custom_bullets
        if len(customs) >= level:
            return customs[level - 1]
        if customs:
            return customs[0]
        return _BULLET_LABELS["bullet"]
    return _BULLET_LABELS[kind]


def number_label(settings: ListSettings, level: int) -> str:
    style = getattr(settings, f"number_level{level}")
    return f"\\{style}*{_NUMBER_SUFFIXES.get(style, '.')}"


def spacing_keys(settings: ListSettings) -> str:
    """enumitem spacing keys; ``compact`` replaces the individual lengths."""
    if settings.compact:
        return "noitemsep,topsep=0pt"
    return _keyed(
        [
            ("itemsep", settings.item_sep),
            ("parsep", settings.parsep),
            ("topsep", settings.topsep),
        ]
    )


def margin_keys(settings: ListSettings) -> str:
    return _keyed(
        [
            ("leftmargin", settings.left_margin),
            ("labelwidth", settings.label_width),
            ("labelsep", settings.label_sep),
        ]
    )


class ListsFragment(BaseFragment[ListSettings]):
    name: ClassVar[str] = "lists"
    description: ClassVar[str] = "Itemize and enumerate spacing and labels through enumitem."
    source: ClassVar[Path] = Path(__file__).with_name("lists.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> ListSettings:
        return template.lists

    def should_render(self, config: ListSettings) -> bool:
        return True

    def inject(self, config: ListSettings, context: dict[str, Any]) -> None:
        levels = (1, 2, 3)
        context["spacing"] = spacing_keys(config)
        context["margins"] = margin_keys(config)
        context["bullets"] = [(level, bullet_label(config, level)) for level in levels]
        context["numbers"] = [(level, number_label(config, level)) for level in levels]


fragment = ListsFragment()

__all__ = [
    "ListsFragment",
    "bullet_label",
    "fragment",
    "margin_keys",
    "number_label",
    "spacing_keys",
]
