from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from pressform.config import CaptionFont, ImageSettings, TableSettings, TemplateConfiguration
from pressform.core.fragments import BaseFragment
from pressform.formatters import latex_bool


_JUSTIFICATION = {
    "left": "raggedright",
    "right": "raggedleft",
    "justify": "justified",
}
_LABEL_SEPARATORS = {
    ":": "colon",
    ".": "period",
    "": "space",
    "-": "endash",
    "|": "quad",
}


@dataclass(frozen=True)
class FiguresConfig:
    images: ImageSettings
    tables: TableSettings

    @classmethod
    def from_template(cls, template: TemplateConfiguration) -> FiguresConfig:
        return cls(images=template.images, tables=template.tables)


def caption_font_keys(font: CaptionFont | None) -> list[str]:
    """caption package keys for a caption font; defaults when unset."""
    font = font or CaptionFont()
    keys = [f"font={font.size}"]
    if font.weight == "bold":
        keys.append("labelfont=bf")
    if font.style == "italic":
        keys.append("textfont=it")
    return keys


def label_separator(separator: str) -> str:
    return _LABEL_SEPARATORS.get(separator.strip(), "colon")


def caption_keys(images: ImageSettings) -> list[str]:
    """Keys of the global ``\\captionsetup``."""
    keys = caption_font_keys(images.caption_font)
    if images.show_figure_number:
        keys.append(f"labelsep={label_separator(images.caption_separator)}")
    else:
        keys.append("labelformat=empty")
    justification = _JUSTIFICATION.get(images.caption_alignment)
    if justification:
        keys.append(f"justification={justification}")
    return keys


def table_caption_keys(tables: TableSettings) -> list[str]:
    keys = [f"position={tables.caption_position}", f"name={tables.table_prefix}"]
    keys.extend(caption_font_keys(tables.caption_font))
    return keys


class FiguresFragment(BaseFragment[FiguresConfig]):
    name: ClassVar[str] = "figures"
    description: ClassVar[str] = "Image sizing, captions and float defaults."
    source: ClassVar[Path] = Path(__file__).with_name("figures.tex.jinja")

    def build_config(self, template: TemplateConfiguration) -> FiguresConfig:
        return FiguresConfig.from_template(template)

    def should_render(self, config: FiguresConfig) -> bool:
        return True

    def inject(self, config: FiguresConfig, context: dict[str, Any]) -> None:
        context["images"] = config.images
        context["tables"] = config.tables
        context["keep_aspect_ratio"] = latex_bool(config.images.keep_aspect_ratio)
        context["caption_keys"] = caption_keys(config.images)
        context["table_keys"] = table_caption_keys(config.tables)


fragment = FiguresFragment()

__all__ = [
    "FiguresConfig",
    "FiguresFragment",
    "caption_font_keys",
    "caption_keys",
    "fragment",
    "label_separator",
    "table_caption_keys",
]
