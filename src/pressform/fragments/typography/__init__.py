from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pressform.config import FontFeatures, TemplateConfiguration, TypographySettings
from pressform.core.fragments import BaseFragment
from pressform.formatters import format_decimal


def font_feature_options(features: FontFeatures | None) -> list[str]:
    """Translate the OpenType switches into fontspec feature options."""
    if features is None:
        return []
    options: list[str] = []
    if features.old_style_numerals:
        options.append("Numbers=OldStyle")
    if features.ligatures is False:
        options.append("Ligatures=NoCommon")
    if features.letter_spacing:
        options.append(f"LetterSpace={format_decimal(features.letter_spacing)}")
    return options


class TypographyFragment(BaseFragment[TypographySettings]):
    name: ClassVar[str] = "typography"
    description: ClassVar[str] = "Paragraph layout, penalties, hyphenation and font features."
    source: ClassVar[Path] = Path(__file__).with_name("typography.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> TypographySettings:
        return template.typography

    def should_render(self, config: TypographySettings) -> bool:
        return True

    def inject(self, config: TypographySettings, context: dict[str, Any]) -> None:
        context["typography"] = config
        context["feature_options"] = font_feature_options(config.font_features)


fragment = TypographyFragment()

__all__ = ["TypographyFragment", "font_feature_options", "fragment"]
