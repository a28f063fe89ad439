from __future__ import annotations

from pathlib import Path
import re
from typing import Any, ClassVar

from pressform.config import CodeBlockSettings, TemplateConfiguration
from pressform.core.fragments import BaseFragment
from pressform.formatters import macro


_HTML_COLOR = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def code_packages(settings: CodeBlockSettings) -> tuple[str, ...]:
    """Return the packages the code block statements depend on."""
    packages: list[str] = []
    if _uses_fvset(settings) or settings.background_color:
        packages.append("fancyvrb")
    if settings.background_color:
        packages.append("xcolor")
    if settings.break_lines:
        packages.append("fvextra")
    return tuple(packages)


def _uses_fvset(settings: CodeBlockSettings) -> bool:
    return bool(settings.font_size or settings.line_numbers or settings.break_lines)


def background_color_lines(color: str) -> list[str]:
    """Define ``codebg`` from a ``#rrggbb`` value or an xcolor expression."""
    match = _HTML_COLOR.match(color.strip())
    if match is not None:
        definition = f"\\definecolor{{codebg}}{{HTML}}{{{match.group(1).upper()}}}"
    else:
        definition = f"\\colorlet{{codebg}}{{{color.strip()}}}"
    return [definition, "\\colorlet{shadecolor}{codebg}"]


class CodeFragment(BaseFragment[CodeBlockSettings]):
    name: ClassVar[str] = "code"
    description: ClassVar[str] = "Verbatim block background, font size, numbering and wrapping."
    source: ClassVar[Path] = Path(__file__).with_name("code.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> CodeBlockSettings:
        return template.code_blocks

    def should_render(self, config: CodeBlockSettings) -> bool:
        return bool(config.background_color) or _uses_fvset(config)

    def inject(self, config: CodeBlockSettings, context: dict[str, Any]) -> None:
        break_options = ["breaklines"]
        if config.break_indent:
            break_options.append(f"breakindent={config.break_indent}")
        context["code"] = config
        context["color_lines"] = (
            background_color_lines(config.background_color) if config.background_color else []
        )
        context["font_size"] = macro(config.font_size) if config.font_size else ""
        context["break_options"] = break_options


fragment = CodeFragment()

__all__ = ["CodeFragment", "background_color_lines", "code_packages", "fragment"]
