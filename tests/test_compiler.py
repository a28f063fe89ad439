from __future__ import annotations

import dataclasses

import pytest

from pressform import (
    CompiledTemplate,
    ConfigurationError,
    MetadataGenerator,
    PreambleGenerator,
    TemplateCompiler,
    TemplateConfiguration,
)
from pressform.config import ExpertMode


def test_compile_returns_both_artifacts() -> None:
    config = TemplateConfiguration()

    compiled = TemplateCompiler().compile(config, {"title": "Dune"})

    assert compiled.metadata_yaml == MetadataGenerator().generate(config, {"title": "Dune"})
    assert compiled.header_includes == PreambleGenerator().generate(config)


def test_overrides_are_independent_per_artifact() -> None:
    config = TemplateConfiguration(
        expert_mode=ExpertMode(latex_override=True, custom_latex="% mine")
    )

    compiled = TemplateCompiler().compile(config)

    assert compiled.header_includes == "% mine"
    assert compiled.metadata_yaml.startswith("---\ndocumentclass: book")


def test_compile_payload_loads_yaml() -> None:
    compiled = TemplateCompiler().compile_payload("tableOfContents:\n  enabled: false\n")

    assert "toc" not in compiled.metadata_yaml
    assert "tocloft" not in compiled.header_includes


def test_compile_payload_reports_configuration_errors() -> None:
    with pytest.raises(ConfigurationError):
        TemplateCompiler().compile_payload("chapters: [")


def test_compiled_template_is_frozen() -> None:
    compiled = CompiledTemplate(metadata_yaml="---\n---", header_includes="")

    with pytest.raises(dataclasses.FrozenInstanceError):
        compiled.header_includes = "% changed"  # type: ignore[misc]


def test_compiler_exposes_expert_mode_controller() -> None:
    compiler = TemplateCompiler()
    config = TemplateConfiguration()

    captured = compiler.expert_mode.enter_override(config, "typesetting")

    assert compiler.compile(config).header_includes == captured
