from __future__ import annotations

from pressform.config import ExpertMode, TemplateConfiguration
from pressform.fragments import DEFAULT_FRAGMENTS, fragment_names
from pressform.fragments.lists import fragment as lists_fragment
from pressform.latex import PreambleGenerator


def _config(payload: dict | None = None) -> TemplateConfiguration:
    return TemplateConfiguration.model_validate(payload or {})


def test_sections_are_emitted_in_order() -> None:
    sections = PreambleGenerator().generate(_config()).split("\n\n")

    assert [section.splitlines()[0] for section in sections] == [
        "\\usepackage{graphicx}",
        "% Typography settings",
        "% Headers and footers (preset)",
        "% Chapter and section formatting",
        "% Table of contents styling",
        "% List styling",
        "% Image and figure settings",
        "% Code block styling",
        "% Custom title page",
    ]


def test_custom_includes_close_the_preamble() -> None:
    config = _config({"customHeaderIncludes": "\\usepackage{lipsum}"})

    preamble = PreambleGenerator().generate(config)

    assert preamble.endswith("\n\n% Custom header includes\n\\usepackage{lipsum}")


def test_output_is_deterministic() -> None:
    generator = PreambleGenerator()

    assert generator.generate(_config({"chapters": {"numbered": True}})) == generator.generate(
        _config({"chapters": {"numbered": True}})
    )


def test_disabled_headers_leave_no_gap() -> None:
    preamble = PreambleGenerator().generate(_config({"headersFooters": {"preset": "none"}}))

    assert "fancyhdr" not in preamble
    assert "\\pagestyle{fancy}" not in preamble
    assert "\n\n\n" not in preamble
    assert not preamble.startswith("\n")
    assert not preamble.endswith("\n")


def test_disabling_toc_only_touches_toc_output() -> None:
    generator = PreambleGenerator()
    enabled = generator.sections(_config())
    disabled = generator.sections(_config({"tableOfContents": {"enabled": False}}))

    assert disabled["contents"] == ""
    assert "tocloft" not in disabled["imports"]
    assert "cft" not in generator.generate(_config({"tableOfContents": {"enabled": False}}))
    for name in fragment_names():
        if name not in ("contents", "imports"):
            assert enabled[name] == disabled[name]


def test_override_is_returned_verbatim() -> None:
    config = TemplateConfiguration(
        expert_mode=ExpertMode(latex_override=True, custom_latex="% mine\n"),
        custom_header_includes="\\usepackage{lipsum}",
    )

    assert PreambleGenerator().generate(config) == "% mine\n"


def test_stale_override_text_is_ignored() -> None:
    config = TemplateConfiguration(expert_mode=ExpertMode(custom_latex="% stale"))

    assert PreambleGenerator().generate(config) == PreambleGenerator().generate(_config())


def test_custom_fragment_sequence() -> None:
    config = _config()

    assert PreambleGenerator([lists_fragment]).generate(config) == lists_fragment.generate(config)
    assert PreambleGenerator([]).generate(config) == ""


def test_sections_preview_names_every_fragment() -> None:
    sections = PreambleGenerator().sections(_config())

    assert list(sections) == [fragment.name for fragment in DEFAULT_FRAGMENTS]
    assert sections["custom"] == ""


def test_partial_configuration_is_handled() -> None:
    config = _config(
        {
            "geometry": None,
            "chapters": None,
            "frontMatter": None,
            "images": {"captionFont": None},
            "tables": {"captionFont": None},
            "typography": {"fontFeatures": None},
        }
    )

    preamble = PreambleGenerator().generate(config)

    assert "\\captionsetup{font=small,labelfont=bf,labelformat=empty}" in preamble
    assert "% Custom title page" in preamble
