from __future__ import annotations

import logging

import pytest
import yaml

from pressform.config import ExpertMode, PageGeometry, TemplateConfiguration
from pressform.core.diagnostics import NullEmitter
from pressform.metadata import MetadataGenerator, numbering_depth


DEFAULT_BLOCK = "\n".join(
    [
        "---",
        "documentclass: book",
        "classoption: openany",
        "fontsize: 11pt",
        "linestretch: 1.15",
        "mainfont: DejaVu Serif",
        "sansfont: DejaVu Sans",
        "monofont: DejaVu Sans Mono",
        "indent: true",
        "lang: en-US",
        "toc: true",
        "toc-depth: 1",
        "toc-title: Table of Contents",
        "numbersections: false",
        "secnumdepth: 0",
        "highlight-style: tango",
        "---",
    ]
)


def _load(block: str) -> dict:
    documents = list(yaml.safe_load_all(block))
    return documents[0]


def test_default_configuration_block() -> None:
    assert MetadataGenerator().generate(TemplateConfiguration()) == DEFAULT_BLOCK


def test_output_is_deterministic() -> None:
    generator = MetadataGenerator()
    first = generator.generate(TemplateConfiguration(custom_yaml="linkcolor: blue"))
    second = generator.generate(TemplateConfiguration(custom_yaml="linkcolor: blue"))

    assert first == second


def test_output_is_well_formed_yaml() -> None:
    config = TemplateConfiguration(geometry=PageGeometry(top="1in", inner="0.75in"))
    metadata = {"title": "Part: One", "author": ["Ada", "Grace"], "keywords": []}

    loaded = _load(MetadataGenerator().generate(config, metadata))

    assert loaded["title"] == "Part: One"
    assert loaded["author"] == ["Ada", "Grace"]
    assert loaded["keywords"] == []
    assert loaded["linestretch"] == pytest.approx(1.15)
    assert loaded["geometry"] == ["top=1in", "inner=0.75in"]
    assert loaded["toc"] is True


def test_metadata_keys_lead_and_absent_keys_are_omitted() -> None:
    block = MetadataGenerator().generate(
        TemplateConfiguration(),
        {"title": "Dune", "date": None, "isbn": "978-0-00", "publisher": "ignored"},
    )
    lines = block.splitlines()

    assert lines[1] == "title: Dune"
    assert lines[2] == "isbn: 978-0-00"
    assert lines[3] == "documentclass: book"
    assert "date:" not in block
    assert "publisher" not in block


def test_empty_string_metadata_values_are_omitted() -> None:
    block = MetadataGenerator().generate(TemplateConfiguration(), {"title": "", "author": "Ada"})
    lines = block.splitlines()

    assert lines[1] == "author: Ada"
    assert not any(line.startswith("title:") for line in lines)


def test_geometry_list_order() -> None:
    config = TemplateConfiguration(
        geometry=PageGeometry(
            paper_width="6in",
            paper_height="9in",
            outer="0.5in",
            top="1in",
            header_height="14pt",
            footer_height="30pt",
        )
    )

    block = MetadataGenerator().generate(config)

    assert (
        "geometry:\n"
        "  - paperwidth=6in\n"
        "  - paperheight=9in\n"
        "  - top=1in\n"
        "  - outer=0.5in\n"
        "  - headheight=14pt\n"
        "  - footskip=30pt"
    ) in block


def test_empty_geometry_record_is_omitted() -> None:
    block = MetadataGenerator().generate(TemplateConfiguration(geometry=PageGeometry()))

    assert "geometry" not in block


def test_toc_round_trip_sample() -> None:
    config = TemplateConfiguration.model_validate(
        {"tableOfContents": {"enabled": True, "depth": 2, "title": "Contents"}}
    )

    lines = MetadataGenerator().generate(config).splitlines()

    assert "toc: true" in lines
    assert "toc-depth: 2" in lines
    assert "toc-title: Contents" in lines


def test_disabling_toc_only_removes_toc_keys() -> None:
    generator = MetadataGenerator()
    enabled = generator.generate(TemplateConfiguration()).splitlines()
    disabled_config = TemplateConfiguration.model_validate({"tableOfContents": {"enabled": False}})
    disabled = generator.generate(disabled_config).splitlines()

    assert not any(line.startswith("toc") for line in disabled)
    assert [line for line in enabled if not line.startswith("toc")] == disabled


@pytest.mark.parametrize(
    ("chapters", "sections", "subsections", "depth"),
    [
        (True, True, True, 0),
        (False, True, True, 1),
        (False, False, True, 2),
        (False, False, False, 0),
    ],
)
def test_numbering_depth_priority_chain(
    chapters: bool, sections: bool, subsections: bool, depth: int
) -> None:
    config = TemplateConfiguration.model_validate(
        {
            "chapters": {"numbered": chapters},
            "sections": {"numbered": sections},
            "subsections": {"numbered": subsections},
        }
    )

    assert numbering_depth(config) == depth
    block = MetadataGenerator().generate(config)
    assert f"secnumdepth: {depth}" in block.splitlines()
    assert f"numbersections: {'true' if chapters or sections else 'false'}" in block


def test_numbered_subsections_alone_leave_numbersections_off() -> None:
    config = TemplateConfiguration.model_validate({"subsections": {"numbered": True}})

    lines = MetadataGenerator().generate(config).splitlines()

    assert "numbersections: false" in lines
    assert "secnumdepth: 2" in lines


def test_highlighting_and_abstract_keys_follow_their_flags() -> None:
    config = TemplateConfiguration.model_validate(
        {
            "codeBlocks": {"highlighting": False},
            "frontMatter": {"abstract": {"enabled": True, "title": "Summary"}},
        }
    )

    block = MetadataGenerator().generate(config)

    assert "highlight-style" not in block
    assert block.splitlines()[-2] == "abstract-title: Summary"


def test_override_is_returned_verbatim() -> None:
    custom = "---\ntitle: hand written\n---\n"
    config = TemplateConfiguration(
        expert_mode=ExpertMode(yaml_override=True, custom_yaml=custom),
        custom_yaml="ignored: true",
    )

    assert MetadataGenerator().generate(config) == custom


def test_stale_override_text_is_ignored() -> None:
    config = TemplateConfiguration(expert_mode=ExpertMode(custom_yaml="stale: true"))

    assert MetadataGenerator().generate(config) == DEFAULT_BLOCK


def test_merge_fragment_overrides_and_appends_keys(caplog: pytest.LogCaptureFixture) -> None:
    config = TemplateConfiguration(
        custom_yaml="fontsize: 12pt\nnot a kv pair\nlinkcolor: blue\ntoc: false\n"
    )

    with caplog.at_level(logging.INFO):
        block = MetadataGenerator().generate(config)
    lines = block.splitlines()

    assert lines[3] == "fontsize: 12pt"
    assert "toc: false" in lines
    assert lines[-2] == "linkcolor: blue"
    assert "not a kv pair" not in block
    assert any("fontsize, linkcolor, toc" in record.message for record in caplog.records)


def test_merge_fragment_is_applied_independently_of_expert_mode() -> None:
    config = TemplateConfiguration(
        custom_yaml="colorlinks: true",
        expert_mode=ExpertMode(latex_override=True, custom_latex="\\relax"),
    )

    assert "colorlinks: true" in MetadataGenerator().generate(config).splitlines()


def test_null_emitter_silences_merge_events(caplog: pytest.LogCaptureFixture) -> None:
    config = TemplateConfiguration(custom_yaml="linkcolor: blue")

    with caplog.at_level(logging.INFO):
        MetadataGenerator(emitter=NullEmitter()).generate(config)

    assert not caplog.records
