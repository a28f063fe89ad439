"""Key groups of the metadata block, one builder per concern.

The full generator concatenates these groups in a fixed order; the same
builders back the single-section preview.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pressform.config import TemplateConfiguration


MetadataSection = dict[str, Any]

METADATA_FIELDS = (
    "title",
    "subtitle",
    "author",
    "date",
    "keywords",
    "description",
    "identifier",
    "isbn",
)


def metadata_keys(metadata: Mapping[str, Any] | None) -> MetadataSection:
    """Copy the manuscript metadata fields present on ``metadata``."""
    section: MetadataSection = {}
    if not metadata:
        return section
    for field in METADATA_FIELDS:
        value = metadata.get(field)
        if value is not None and value != "":
            section[field] = value
    return section


def document_keys(config: TemplateConfiguration) -> MetadataSection:
    document = config.document
    section: MetadataSection = {"documentclass": document.document_class}
    if document.class_options:
        section["classoption"] = ",".join(document.class_options)
    return section


def geometry_tokens(config: TemplateConfiguration) -> list[str]:
    """Return the ordered ``name=value`` geometry options."""
    geometry = config.geometry
    if geometry is None:
        return []
    tokens: list[str] = []
    if geometry.paper_width:
        tokens.append(f"paperwidth={geometry.paper_width}")
    if geometry.paper_height:
        tokens.append(f"paperheight={geometry.paper_height}")
    tokens.extend(f"{name}={value}" for name, value in geometry.margins())
    if geometry.header_height:
        tokens.append(f"headheight={geometry.header_height}")
    if geometry.footer_height:
        tokens.append(f"footskip={geometry.footer_height}")
    return tokens


def geometry_keys(config: TemplateConfiguration) -> MetadataSection:
    tokens = geometry_tokens(config)
    return {"geometry": tokens} if tokens else {}


def typography_keys(config: TemplateConfiguration) -> MetadataSection:
    typography = config.typography
    return {
        "fontsize": typography.font_size,
        "linestretch": typography.line_spacing,
        "mainfont": typography.body_font,
        "sansfont": typography.sans_font,
        "monofont": typography.mono_font,
        "indent": typography.first_line_indent,
        "lang": typography.language,
    }


def toc_keys(config: TemplateConfiguration) -> MetadataSection:
    """TOC keys, present only when the table of contents is enabled."""
    toc = config.table_of_contents
    if not toc.enabled:
        return {}
    return {"toc": True, "toc-depth": toc.depth, "toc-title": toc.title}


def numbering_depth(config: TemplateConfiguration) -> int:
    """Derive ``secnumdepth`` from the per-level numbering flags.

    The first numbered level in chapter, section, subsection order decides;
    nothing numbered falls back to 0.
    """
    if config.chapters.numbered:
        return 0
    if config.sections.numbered:
        return 1
    if config.subsections.numbered:
        return 2
    return 0


def numbering_keys(config: TemplateConfiguration) -> MetadataSection:
    numbered = config.chapters.numbered or config.sections.numbered
    return {"numbersections": numbered, "secnumdepth": numbering_depth(config)}


def highlighting_keys(config: TemplateConfiguration) -> MetadataSection:
    code = config.code_blocks
    if not code.highlighting:
        return {}
    return {"highlight-style": code.highlight_theme}


def abstract_keys(config: TemplateConfiguration) -> MetadataSection:
    abstract = config.front_matter.abstract
    if not abstract.enabled:
        return {}
    return {"abstract-title": abstract.title}


def _toc_preview_keys(config: TemplateConfiguration) -> MetadataSection:
    toc = config.table_of_contents
    return {"toc": toc.enabled, "toc-depth": toc.depth, "toc-title": toc.title}


SectionBuilder = Callable[[TemplateConfiguration], MetadataSection]

CONFIG_SECTIONS: tuple[SectionBuilder, ...] = (
    document_keys,
    geometry_keys,
    typography_keys,
    toc_keys,
    numbering_keys,
    highlighting_keys,
    abstract_keys,
)

PREVIEW_SECTIONS: dict[str, SectionBuilder] = {
    "document": document_keys,
    "typography": typography_keys,
    "geometry": geometry_keys,
    "toc": _toc_preview_keys,
    "numbering": numbering_keys,
    "highlighting": highlighting_keys,
    "abstract": abstract_keys,
}


__all__ = [
    "CONFIG_SECTIONS",
    "METADATA_FIELDS",
    "PREVIEW_SECTIONS",
    "MetadataSection",
    "SectionBuilder",
    "abstract_keys",
    "document_keys",
    "geometry_keys",
    "geometry_tokens",
    "highlighting_keys",
    "metadata_keys",
    "numbering_depth",
    "numbering_keys",
    "toc_keys",
    "typography_keys",
]
