from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pressform.config import TemplateConfiguration
from pressform.core.fragments import BaseFragment


class CustomIncludesFragment(BaseFragment[str | None]):
    name: ClassVar[str] = "custom"
    description: ClassVar[str] = "Raw statements appended after the generated preamble."
    source: ClassVar[Path] = Path(__file__).with_name("custom.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> str | None:
        return template.custom_header_includes

    def inject(self, config: str | None, context: dict[str, Any]) -> None:
        context["text"] = config or ""

    def should_render(self, config: str | None) -> bool:
        return bool(config and config.strip())


fragment = CustomIncludesFragment()

__all__ = ["CustomIncludesFragment", "fragment"]
