import pytest

from pressform.formatters import (
    alignment_macro,
    counter_macro,
    escape_latex,
    format_decimal,
    format_number,
    format_yaml_scalar,
    header_font_style,
    heading_style,
    leading_for,
    macro,
    needs_quoting,
    scale_length,
    split_length,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1.5, "1.5"), (2.0, "2"), (0.12345, "0.123"), (66.00000000000001, "66"), (0.0, "0")],
)
def test_format_decimal(value: float, expected: str) -> None:
    assert format_decimal(value) == expected


def test_format_number_spells_booleans_and_integral_floats() -> None:
    assert format_number(True) == "true"
    assert format_number(False) == "false"
    assert format_number(3) == "3"
    assert format_number(1.0) == "1"
    assert format_number(1.15) == "1.15"


def test_yaml_scalars_are_quoted_only_when_reserved() -> None:
    assert format_yaml_scalar("Contents") == "Contents"
    assert format_yaml_scalar("Part: One") == '"Part: One"'
    assert format_yaml_scalar("C# notes") == '"C# notes"'
    assert format_yaml_scalar('say "hi": now') == '"say \\"hi\\": now"'
    assert format_yaml_scalar("two\nlines") == '"two\nlines"'
    assert format_yaml_scalar(None) == "null"
    assert format_yaml_scalar(2) == "2"
    assert needs_quoting("plain text") is False


def test_escape_latex() -> None:
    assert escape_latex("50% & co_") == "50\\% \\& co\\_"
    assert escape_latex("a~b") == "a\\textasciitilde{}b"
    assert escape_latex("\\") == "\\textbackslash{}"


def test_macro_tolerates_backslash() -> None:
    assert macro("Huge") == "\\Huge"
    assert macro("\\small") == "\\small"
    assert macro("  ") == ""


def test_alignment_macro() -> None:
    assert alignment_macro("center") == "\\centering"
    assert alignment_macro("right") == "\\raggedleft"
    assert alignment_macro("left") == "\\raggedright"
    assert alignment_macro(None) == "\\raggedright"


def test_heading_style_composes_font_and_alignment() -> None:
    assert (
        heading_style("Huge", "bold", "italic", "center")
        == "\\normalfont\\Huge\\bfseries\\itshape\\centering"
    )
    assert heading_style("large", "normal", "smallcaps") == "\\normalfont\\large\\scshape"
    assert heading_style("Large", "normal", "upright", "left") == "\\normalfont\\Large\\raggedright"


def test_header_font_style() -> None:
    assert header_font_style("small", "italic") == "\\small \\itshape"
    assert header_font_style("normal", "bolditalic") == "\\bfseries\\itshape"
    assert header_font_style("normal", "normal") == ""


def test_counter_macro() -> None:
    assert counter_macro("roman") == "\\roman"
    assert counter_macro("Alph") == "\\Alph"
    assert counter_macro("words") is None


def test_lengths() -> None:
    assert split_length("1.5em") == (1.5, "em")
    assert split_length("\\textwidth") is None
    assert scale_length("1.5em", 2) == "3em"
    assert scale_length("1.5em", 1) == "1.5em"
    assert scale_length("\\textwidth", 2) == "2\\textwidth"
    assert leading_for("60pt") == "66pt"
    assert leading_for("20") == "22pt"
    assert leading_for("Huge") is None
