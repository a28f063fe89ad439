"""Typed template configuration records."""

from __future__ import annotations

from .bibliography import BibliographySettings
from .contents import TableOfContentsSettings
from .document import DocumentSettings
from .elements import (
    CaptionFont,
    CodeBlockSettings,
    ImageSettings,
    ListSettings,
    TableSettings,
)
from .frontmatter import (
    AbstractSettings,
    CopyrightPageSettings,
    DedicationSettings,
    EpigraphSettings,
    FrontMatterSettings,
    TitlePageSettings,
)
from .geometry import PageGeometry
from .headers import (
    AuthorElement,
    ChapterElement,
    CustomElement,
    HeaderFooterElement,
    HeaderFooterFont,
    HeaderFooterSettings,
    PageElement,
    PageHeaderFooter,
    RuleSettings,
    SectionElement,
    TextElement,
    TitleElement,
)
from .headings import ChapterStyling, DropCaps, SectionStyling, SubsectionStyling
from .template import (
    ExpertMode,
    TemplateConfiguration,
    create_default_template,
    load_configuration,
)
from .trim import (
    TRIM_SIZE_PRESETS,
    TrimSize,
    calculate_inner_margin,
    count_words,
    estimate_page_count,
    geometry_from_trim_size,
    get_trim_size,
)
from .typography import FontFeatures, TypographySettings


__all__ = [
    "TRIM_SIZE_PRESETS",
    "AbstractSettings",
    "AuthorElement",
    "BibliographySettings",
    "CaptionFont",
    "ChapterElement",
    "ChapterStyling",
    "CodeBlockSettings",
    "CopyrightPageSettings",
    "CustomElement",
    "DedicationSettings",
    "DocumentSettings",
    "DropCaps",
    "EpigraphSettings",
    "ExpertMode",
    "FontFeatures",
    "FrontMatterSettings",
    "HeaderFooterElement",
    "HeaderFooterFont",
    "HeaderFooterSettings",
    "ImageSettings",
    "ListSettings",
    "PageElement",
    "PageGeometry",
    "PageHeaderFooter",
    "RuleSettings",
    "SectionElement",
    "SectionStyling",
    "SubsectionStyling",
    "TableOfContentsSettings",
    "TableSettings",
    "TemplateConfiguration",
    "TextElement",
    "TitleElement",
    "TitlePageSettings",
    "TrimSize",
    "TypographySettings",
    "calculate_inner_margin",
    "count_words",
    "create_default_template",
    "estimate_page_count",
    "geometry_from_trim_size",
    "get_trim_size",
    "load_configuration",
]
