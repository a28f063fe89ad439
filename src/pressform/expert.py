"""Per-artifact override state machine.

Each generated artifact is either ``generated`` (a pure function of the
configuration) or ``overridden`` (a hand-edited text stored on the
configuration's ``expert_mode`` record). Entering the overridden state seeds
the text with the current generated output; leaving it discards the text so
that a later override starts again from a fresh generation.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import logging
from typing import Any

from pressform.config import ExpertMode, TemplateConfiguration
from pressform.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from pressform.core.exceptions import ExpertModeError
from pressform.latex import PreambleGenerator
from pressform.metadata import MetadataGenerator


logger = logging.getLogger(__name__)


class ArtifactKind(str, Enum):
    METADATA = "metadata"
    TYPESETTING = "typesetting"


class OverrideState(str, Enum):
    GENERATED = "generated"
    OVERRIDDEN = "overridden"


# artifact -> (flag field, text field, sync direction)
_ARTIFACT_FIELDS: dict[ArtifactKind, tuple[str, str, str]] = {
    ArtifactKind.METADATA: ("yaml_override", "custom_yaml", "yaml"),
    ArtifactKind.TYPESETTING: ("latex_override", "custom_latex", "latex"),
}


def override_state(mode: ExpertMode, artifact: ArtifactKind | str) -> OverrideState:
    flag, _, _ = _ARTIFACT_FIELDS[ArtifactKind(artifact)]
    return OverrideState.OVERRIDDEN if getattr(mode, flag) else OverrideState.GENERATED


def transition(
    mode: ExpertMode,
    artifact: ArtifactKind | str,
    target: OverrideState | str,
    captured: str | None = None,
) -> ExpertMode:
    """Return the expert-mode record after moving ``artifact`` to ``target``.

    Entering ``overridden`` requires the ``captured`` generated output.
    Entering ``generated`` always clears the stored text, even when the
    artifact was not overridden. The other artifact is left untouched.
    """
    artifact = ArtifactKind(artifact)
    target = OverrideState(target)
    flag, text, direction = _ARTIFACT_FIELDS[artifact]

    if target is OverrideState.GENERATED:
        if not getattr(mode, flag) and getattr(mode, text) is None:
            return mode
        return mode.model_copy(update={flag: False, text: None, "last_sync_direction": "ui"})

    if getattr(mode, flag):
        return mode
    if captured is None:
        raise ExpertModeError(
            f"Cannot override the {artifact.value} artifact without its generated text."
        )
    return mode.model_copy(update={flag: True, text: captured, "last_sync_direction": direction})


class ExpertModeController:
    """Drive the override state machine on a live configuration.

    The controller replaces ``config.expert_mode`` and nothing else.
    """

    def __init__(
        self,
        metadata_generator: MetadataGenerator | None = None,
        preamble_generator: PreambleGenerator | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.emitter = emitter or LoggingEmitter(logger_obj=logger)
        self.metadata_generator = metadata_generator or MetadataGenerator(emitter=self.emitter)
        self.preamble_generator = preamble_generator or PreambleGenerator()

    def state(self, config: TemplateConfiguration, artifact: ArtifactKind | str) -> OverrideState:
        return override_state(config.expert_mode, artifact)

    def render(
        self,
        config: TemplateConfiguration,
        artifact: ArtifactKind | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the artifact as the document compiler will receive it."""
        if ArtifactKind(artifact) is ArtifactKind.METADATA:
            return self.metadata_generator.generate(config, metadata)
        return self.preamble_generator.generate(config)

    def enter_override(
        self,
        config: TemplateConfiguration,
        artifact: ArtifactKind | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> str:
        """Switch ``artifact`` to hand-editing and return the seeded text.

        Already overridden artifacts keep their current text.
        """
        artifact = ArtifactKind(artifact)
        flag, text, _ = _ARTIFACT_FIELDS[artifact]
        if getattr(config.expert_mode, flag):
            return getattr(config.expert_mode, text) or ""
        generated = config.model_copy(update={"expert_mode": ExpertMode()})
        captured = self.render(generated, artifact, metadata)
        self._apply(
            config, artifact, transition(config.expert_mode, artifact, "overridden", captured)
        )
        return captured

    def exit_override(
        self,
        config: TemplateConfiguration,
        artifact: ArtifactKind | str,
        metadata: Mapping[str, Any] | None = None,
    ) -> str:
        """Discard the hand-edited text and return the regenerated artifact."""
        artifact = ArtifactKind(artifact)
        self._apply(config, artifact, transition(config.expert_mode, artifact, "generated"))
        return self.render(config, artifact, metadata)

    def edit(self, config: TemplateConfiguration, artifact: ArtifactKind | str, text: str) -> None:
        """Replace the hand-edited text of an overridden artifact."""
        artifact = ArtifactKind(artifact)
        if self.state(config, artifact) is not OverrideState.OVERRIDDEN:
            raise ExpertModeError(
                f"The {artifact.value} artifact is generated; enter override mode before editing."
            )
        _, field, _ = _ARTIFACT_FIELDS[artifact]
        config.expert_mode = config.expert_mode.model_copy(update={field: text})

    def _apply(
        self, config: TemplateConfiguration, artifact: ArtifactKind, mode: ExpertMode
    ) -> None:
        source = self.state(config, artifact)
        config.expert_mode = mode
        self.emitter.event(
            "override_transition",
            {
                "artifact": artifact.value,
                "source": source.value,
                "target": self.state(config, artifact).value,
            },
        )


__all__ = [
    "ArtifactKind",
    "ExpertModeController",
    "OverrideState",
    "override_state",
    "transition",
]
