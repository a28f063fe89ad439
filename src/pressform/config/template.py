"""Root template configuration, expert-mode record and factory defaults.

TemplateConfiguration

`document` (`DocumentSettings`)
: Document class, class options and page numbering.

`typography` (`TypographySettings`)
: Fonts, line stretch, paragraph layout and line-breaking penalties.

`geometry` (`PageGeometry | None`)
: Paper size and margins. Absent until the user touches the advanced page
  settings, or replaced by a trim-size preset (see `pressform.config.trim`).

`headers_footers` (`HeaderFooterSettings`)
: Running header/footer preset or custom zone layout.

`chapters`, `sections`, `subsections`
: Title styling per heading level.

`table_of_contents`, `lists`, `images`, `tables`, `code_blocks`,
`bibliography`, `front_matter`
: Styling of the remaining document elements.

`custom_yaml` (`str | None`)
: Metadata fragment merged over the generated metadata, whatever the
  expert-mode state.

`custom_header_includes` (`str | None`)
: Raw LaTeX appended after the generated preamble.

`expert_mode` (`ExpertMode`)
: Per-artifact hand-edit overrides.

`modified_at` is bumped by the owner on every change; generators never
read it.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import Field, ValidationError, model_validator
import yaml

from pressform.core.exceptions import ConfigurationError

from .base import PressModel, drop_null_records
from .bibliography import BibliographySettings
from .contents import TableOfContentsSettings
from .document import DocumentSettings
from .elements import CodeBlockSettings, ImageSettings, ListSettings, TableSettings
from .frontmatter import FrontMatterSettings
from .geometry import PageGeometry
from .headers import HeaderFooterSettings
from .headings import ChapterStyling, SectionStyling, SubsectionStyling
from .typography import TypographySettings


TemplateCategory = Literal["fiction", "non-fiction", "academic", "technical", "special", "custom"]
SyncDirection = Literal["ui", "yaml", "latex"]

_RECORD_FIELDS = (
    "document",
    "typography",
    "headersFooters",
    "chapters",
    "sections",
    "subsections",
    "tableOfContents",
    "lists",
    "images",
    "tables",
    "codeBlocks",
    "bibliography",
    "frontMatter",
    "expertMode",
)


class ExpertMode(PressModel):
    """Hand-edit overrides for the two generated artifacts.

    A custom text is only honoured while its flag is set; a stale text left
    behind with the flag cleared is ignored.
    """

    yaml_override: bool = False
    latex_override: bool = False
    custom_yaml: str | None = Field(default=None, alias="customYAML")
    custom_latex: str | None = Field(default=None, alias="customLaTeX")
    last_sync_direction: SyncDirection | None = None

    def metadata_override(self) -> str | None:
        """Return the metadata text to emit verbatim, if any."""
        if self.yaml_override and self.custom_yaml:
            return self.custom_yaml
        return None

    def preamble_override(self) -> str | None:
        """Return the preamble text to emit verbatim, if any."""
        if self.latex_override and self.custom_latex:
            return self.custom_latex
        return None


class TemplateConfiguration(PressModel):
    """Complete description of how a manuscript is laid out."""

    id: str = ""
    name: str = "Untitled Template"
    description: str | None = None
    category: TemplateCategory | None = "custom"

    document: DocumentSettings = Field(default_factory=DocumentSettings)
    typography: TypographySettings = Field(default_factory=TypographySettings)
    geometry: PageGeometry | None = None
    headers_footers: HeaderFooterSettings = Field(default_factory=HeaderFooterSettings)

    chapters: ChapterStyling = Field(default_factory=ChapterStyling)
    sections: SectionStyling = Field(default_factory=SectionStyling)
    subsections: SubsectionStyling = Field(default_factory=SubsectionStyling)

    table_of_contents: TableOfContentsSettings = Field(default_factory=TableOfContentsSettings)
    lists: ListSettings = Field(default_factory=ListSettings)
    images: ImageSettings = Field(default_factory=ImageSettings)
    tables: TableSettings = Field(default_factory=TableSettings)
    code_blocks: CodeBlockSettings = Field(default_factory=CodeBlockSettings)
    bibliography: BibliographySettings = Field(default_factory=BibliographySettings)
    front_matter: FrontMatterSettings = Field(default_factory=FrontMatterSettings)

    custom_yaml: str | None = Field(default=None, alias="customYAML")
    custom_header_includes: str | None = None

    expert_mode: ExpertMode = Field(default_factory=ExpertMode)

    created_at: int = 0
    modified_at: int = 0
    is_built_in: bool = False
    author: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_missing_records(cls, data: Any) -> Any:
        return drop_null_records(data, _RECORD_FIELDS)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping keyed by the camelCase names."""
        return self.model_dump(mode="json", by_alias=True)


def _epoch_millis(moment: datetime | None = None) -> int:
    moment = moment or datetime.now(timezone.utc)
    return int(moment.timestamp() * 1000)


def create_default_template(now: datetime | None = None) -> TemplateConfiguration:
    """Return a fresh configuration holding the documented defaults."""
    stamp = _epoch_millis(now)
    return TemplateConfiguration(
        id=f"template-{stamp}",
        name="Untitled Template",
        category="custom",
        created_at=stamp,
        modified_at=stamp,
        is_built_in=False,
    )


def load_configuration(source: str | Mapping[str, Any]) -> TemplateConfiguration:
    """Parse YAML/JSON text (or a mapping) into a validated configuration."""
    if isinstance(source, str):
        try:
            payload = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise ConfigurationError("Template configuration is not valid YAML or JSON.") from exc
    else:
        payload = source

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigurationError("Template configuration must be a mapping at the top level.")

    try:
        return TemplateConfiguration.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid template configuration: {exc}") from exc


__all__ = [
    "ExpertMode",
    "SyncDirection",
    "TemplateCategory",
    "TemplateConfiguration",
    "create_default_template",
    "load_configuration",
]
