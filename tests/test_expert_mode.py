from __future__ import annotations

import logging

import pytest

from pressform.config import ExpertMode, TemplateConfiguration
from pressform.core.diagnostics import NullEmitter
from pressform.core.exceptions import ExpertModeError
from pressform.expert import (
    ArtifactKind,
    ExpertModeController,
    OverrideState,
    override_state,
    transition,
)
from pressform.latex import PreambleGenerator
from pressform.metadata import MetadataGenerator


def _controller() -> ExpertModeController:
    return ExpertModeController(emitter=NullEmitter())


def test_transition_enter_stores_captured_text() -> None:
    mode = ExpertMode()

    entered = transition(mode, ArtifactKind.METADATA, OverrideState.OVERRIDDEN, "---\n---")

    assert entered.yaml_override is True
    assert entered.custom_yaml == "---\n---"
    assert entered.last_sync_direction == "yaml"
    assert mode == ExpertMode()


def test_transition_exit_discards_text() -> None:
    mode = ExpertMode(latex_override=True, custom_latex="% edited", last_sync_direction="latex")

    exited = transition(mode, "typesetting", "generated")

    assert exited.latex_override is False
    assert exited.custom_latex is None
    assert exited.last_sync_direction == "ui"


def test_transition_to_generated_clears_stale_text() -> None:
    mode = ExpertMode(custom_yaml="stale: true")

    assert transition(mode, "metadata", "generated").custom_yaml is None
    assert transition(ExpertMode(), "metadata", "generated") == ExpertMode()


def test_transition_enter_requires_captured_text() -> None:
    with pytest.raises(ExpertModeError):
        transition(ExpertMode(), "metadata", "overridden")


def test_transition_keeps_artifacts_independent() -> None:
    mode = ExpertMode(latex_override=True, custom_latex="% keep")

    entered = transition(mode, "metadata", "overridden", "---\n---")

    assert entered.latex_override is True
    assert entered.custom_latex == "% keep"
    assert override_state(entered, "metadata") is OverrideState.OVERRIDDEN


def test_enter_override_captures_generated_output() -> None:
    controller = _controller()
    config = TemplateConfiguration()
    expected = MetadataGenerator().generate(config)

    captured = controller.enter_override(config, "metadata")

    assert captured == expected
    assert controller.state(config, "metadata") is OverrideState.OVERRIDDEN
    assert controller.state(config, "typesetting") is OverrideState.GENERATED
    assert config.expert_mode.custom_yaml == expected


def test_enter_override_ignores_stale_text() -> None:
    controller = _controller()
    config = TemplateConfiguration(expert_mode=ExpertMode(custom_latex="% stale"))

    captured = controller.enter_override(config, "typesetting")

    assert captured == PreambleGenerator().generate(TemplateConfiguration())
    assert "% stale" not in captured


def test_edit_then_exit_then_reenter_starts_fresh() -> None:
    controller = _controller()
    config = TemplateConfiguration()

    controller.enter_override(config, "typesetting")
    controller.edit(config, "typesetting", "% hand edited")
    assert controller.render(config, "typesetting") == "% hand edited"

    regenerated = controller.exit_override(config, "typesetting")
    assert config.expert_mode.custom_latex is None
    assert config.expert_mode.latex_override is False
    assert regenerated == PreambleGenerator().generate(config)

    config.chapters.numbered = True
    captured = controller.enter_override(config, "typesetting")
    assert "% hand edited" not in captured
    assert "{\\thechapter}" in captured


def test_enter_override_twice_keeps_edits() -> None:
    controller = _controller()
    config = TemplateConfiguration()
    controller.enter_override(config, "metadata")
    controller.edit(config, "metadata", "---\ntitle: mine\n---")

    assert controller.enter_override(config, "metadata") == "---\ntitle: mine\n---"


def test_edit_requires_override_state() -> None:
    with pytest.raises(ExpertModeError):
        _controller().edit(TemplateConfiguration(), "metadata", "---\n---")


def test_metadata_capture_includes_merge_fragment() -> None:
    config = TemplateConfiguration(custom_yaml="linkcolor: blue")

    captured = _controller().enter_override(config, "metadata")

    assert "linkcolor: blue" in captured.splitlines()
    assert config.custom_yaml == "linkcolor: blue"


def test_transitions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    controller = ExpertModeController()
    config = TemplateConfiguration()

    with caplog.at_level(logging.INFO):
        controller.enter_override(config, "metadata")
        controller.exit_override(config, "metadata")

    messages = [record.message for record in caplog.records]
    assert "metadata artifact: generated -> overridden" in messages
    assert "metadata artifact: overridden -> generated" in messages


def test_unknown_artifact_is_rejected() -> None:
    with pytest.raises(ValueError):
        _controller().state(TemplateConfiguration(), "pdf")
