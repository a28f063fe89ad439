from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, ClassVar

from pressform.config import (
    HeaderFooterElement,
    HeaderFooterSettings,
    PageHeaderFooter,
    TemplateConfiguration,
)
from pressform.core.fragments import BaseFragment
from pressform.formatters import escape_latex, header_font_style


_ELEMENT_MACROS = {
    "title": "\\@title",
    "chapter": "\\leftmark",
    "section": "\\rightmark",
    "author": "\\@author",
    "page": "\\thepage",
}
_ZONES = (("left", "L"), ("center", "C"), ("right", "R"))


def format_element(element: HeaderFooterElement) -> str:
    """Return the inline statement for one header/footer element."""
    if element.type == "text":
        return escape_latex(element.content)
    if element.type == "custom":
        return element.latex
    return _ELEMENT_MACROS[element.type]


def format_zone(elements: Sequence[HeaderFooterElement]) -> str:
    parts = (format_element(element) for element in elements)
    return " ".join(part for part in parts if part)


def page_zones(page: PageHeaderFooter, side: str) -> list[tuple[str, str]]:
    """Return ``(fancyhdr position, content)`` for the non-empty zones of a page."""
    zones: list[tuple[str, str]] = []
    for attribute, column in _ZONES:
        content = format_zone(getattr(page, attribute))
        if content:
            zones.append((f"{column}{side}", content))
    return zones


def _font_prefix(settings: HeaderFooterSettings, *, footer: bool = False) -> str:
    font = settings.footer_font if footer else settings.header_font
    style = header_font_style(font.size, font.style)
    return f"{style} " if style else ""


def custom_zones(settings: HeaderFooterSettings) -> list[tuple[str, str]]:
    """Even-page zones followed by odd-page zones."""
    return [
        *page_zones(settings.left_page, "E"),
        *page_zones(settings.right_page, "O"),
    ]


def rule_widths(settings: HeaderFooterSettings) -> tuple[str, str]:
    """Header and footer rule widths, ``0pt`` for a disabled rule."""
    header_rule = settings.header_rule.width if settings.header_rule.enabled else "0pt"
    footer_rule = settings.footer_rule.width if settings.footer_rule.enabled else "0pt"
    return header_rule, footer_rule


class HeadersFragment(BaseFragment[HeaderFooterSettings]):
    name: ClassVar[str] = "headers"
    description: ClassVar[str] = "Running headers and footers through fancyhdr."
    source: ClassVar[Path] = Path(__file__).with_name("headers.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> HeaderFooterSettings:
        return template.headers_footers

    def should_render(self, config: HeaderFooterSettings) -> bool:
        return config.preset != "none"

    def inject(self, config: HeaderFooterSettings, context: dict[str, Any]) -> None:
        zones = custom_zones(config) if config.preset == "custom" else []
        header_rule, footer_rule = rule_widths(config)
        context.update(
            preset=config.preset,
            zones=zones,
            header_font=_font_prefix(config),
            footer_font=_font_prefix(config, footer=True),
            header_rule=header_rule,
            footer_rule=footer_rule,
            plain_footer=config.first_page_style != "empty",
            uses_internals=(
                config.preset == "academic" or any("\\@" in content for _, content in zones)
            ),
        )


fragment = HeadersFragment()

__all__ = [
    "HeadersFragment",
    "custom_zones",
    "format_element",
    "format_zone",
    "fragment",
    "page_zones",
    "rule_widths",
]
