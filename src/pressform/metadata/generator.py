"""Lower a template configuration into the YAML metadata block."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from pressform.config import TemplateConfiguration
from pressform.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from pressform.core.exceptions import MergeFragmentError, exception_hint

from .fragment import parse_merge_fragment
from .sections import CONFIG_SECTIONS, PREVIEW_SECTIONS, metadata_keys
from .serializer import stringify_document


logger = logging.getLogger(__name__)


class MetadataGenerator:
    """Build the metadata block handed to the document compiler."""

    def __init__(self, emitter: DiagnosticEmitter | None = None) -> None:
        self.emitter = emitter or LoggingEmitter(logger_obj=logger)

    def generate(
        self,
        config: TemplateConfiguration,
        metadata: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the metadata block, or the hand-edited override when active."""
        override = config.expert_mode.metadata_override()
        if override is not None:
            return override
        return stringify_document(self.build(config, metadata))

    def build(
        self,
        config: TemplateConfiguration,
        metadata: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return the ordered key/value document before serialisation."""
        document: dict[str, Any] = metadata_keys(metadata)
        for builder in CONFIG_SECTIONS:
            document.update(builder(config))
        if config.custom_yaml:
            document.update(self._merge_fragment(config.custom_yaml))
        return document

    def generate_section(self, config: TemplateConfiguration, name: str) -> str:
        """Return a metadata block holding a single named key group.

        Preview only: the merge fragment and overrides are not applied.
        """
        builder = PREVIEW_SECTIONS.get(name)
        if builder is None:
            self.emitter.warning(
                f"Unknown metadata section '{name}', expected one of: "
                f"{', '.join(PREVIEW_SECTIONS)}."
            )
            return stringify_document({})
        return stringify_document(builder(config))

    def _merge_fragment(self, text: str) -> dict[str, Any]:
        try:
            values = parse_merge_fragment(text)
        except MergeFragmentError as exc:
            self.emitter.warning(
                f"Ignoring custom metadata fragment: {exception_hint(exc)}", exc
            )
            return {}
        self.emitter.event("fragment_merged", {"keys": list(values)})
        return values


__all__ = ["MetadataGenerator"]
