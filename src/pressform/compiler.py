"""Facade producing both artifacts in one call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pressform.config import TemplateConfiguration, load_configuration
from pressform.core.diagnostics import DiagnosticEmitter
from pressform.expert import ExpertModeController
from pressform.latex import PreambleGenerator
from pressform.metadata import MetadataGenerator


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Artifacts handed to the document compiler."""

    metadata_yaml: str
    header_includes: str


class TemplateCompiler:
    """Compile a configuration into the metadata block and the preamble."""

    def __init__(
        self,
        metadata_generator: MetadataGenerator | None = None,
        preamble_generator: PreambleGenerator | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.metadata_generator = metadata_generator or MetadataGenerator(emitter=emitter)
        self.preamble_generator = preamble_generator or PreambleGenerator()
        self.expert_mode = ExpertModeController(
            self.metadata_generator, self.preamble_generator, emitter=emitter
        )

    def compile(
        self,
        config: TemplateConfiguration,
        metadata: Mapping[str, Any] | None = None,
    ) -> CompiledTemplate:
        return CompiledTemplate(
            metadata_yaml=self.metadata_generator.generate(config, metadata),
            header_includes=self.preamble_generator.generate(config),
        )

    def compile_payload(
        self,
        source: str | Mapping[str, Any],
        metadata: Mapping[str, Any] | None = None,
    ) -> CompiledTemplate:
        """Load a serialized configuration, then compile it.

        Raises ``ConfigurationError`` when the payload cannot be loaded.
        """
        return self.compile(load_configuration(source), metadata)


__all__ = ["CompiledTemplate", "TemplateCompiler"]
