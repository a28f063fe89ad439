from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from pressform.config import TemplateConfiguration
from pressform.core.fragments import BaseFragment
from pressform.fragments.code import code_packages


@dataclass(frozen=True)
class ImportsConfig:
    fancy_headers: bool
    toc_styling: bool
    microtype: bool
    float_placement: bool
    float_barrier: bool
    extra: tuple[str, ...]

    @classmethod
    def from_template(cls, template: TemplateConfiguration) -> ImportsConfig:
        return cls(
            fancy_headers=template.headers_footers.preset != "none",
            toc_styling=template.table_of_contents.enabled,
            microtype=template.typography.microtype,
            float_placement=template.images.default_placement != "htbp",
            float_barrier=template.images.float_barrier,
            extra=code_packages(template.code_blocks),
        )


class ImportsFragment(BaseFragment[ImportsConfig]):
    name: ClassVar[str] = "imports"
    description: ClassVar[str] = "Packages required by the enabled features."
    source: ClassVar[Path] = Path(__file__).with_name("imports.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> ImportsConfig:
        return ImportsConfig.from_template(template)

    def inject(self, config: ImportsConfig, context: dict[str, Any]) -> None:
        context["imports"] = config

    def should_render(self, config: ImportsConfig) -> bool:
        return True


fragment = ImportsFragment()

__all__ = ["ImportsConfig", "ImportsFragment", "fragment"]
