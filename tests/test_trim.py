import pytest

from pressform.config import (
    TRIM_SIZE_PRESETS,
    TemplateConfiguration,
    calculate_inner_margin,
    count_words,
    estimate_page_count,
    geometry_from_trim_size,
    get_trim_size,
)
from pressform.metadata import geometry_tokens


def test_presets_are_registered_by_id() -> None:
    ids = [size.id for size in TRIM_SIZE_PRESETS]

    assert ids == ["6x9", "7x10", "8x10", "8.5x11", "5.5x8.5", "5x8"]
    assert get_trim_size("6x9") is TRIM_SIZE_PRESETS[0]
    assert get_trim_size("a5") is None


@pytest.mark.parametrize(
    ("pages", "expected"),
    [(0, "0.7500in"), (200, "0.8750in"), (300, "0.9375in")],
)
def test_inner_margin_grows_with_page_count(pages: int, expected: str) -> None:
    trim = get_trim_size("6x9")
    assert trim is not None

    assert calculate_inner_margin(pages, trim) == expected


def test_count_words_ignores_front_matter_code_and_markup() -> None:
    manuscript = "---\ntitle: X\n---\nHello *world* `code`\n```\nfoo bar\n```\nend"

    assert count_words(manuscript) == 3


def test_estimate_page_count_rounds_up() -> None:
    trim = get_trim_size("6x9")
    assert trim is not None

    assert estimate_page_count("word " * 251, trim) == 2
    assert estimate_page_count("", trim) == 0


def test_trim_geometry_feeds_the_metadata_block() -> None:
    trim = get_trim_size("5x8")
    assert trim is not None
    config = TemplateConfiguration(geometry=geometry_from_trim_size(trim, 100))

    assert geometry_tokens(config) == [
        "paperwidth=5in",
        "paperheight=8in",
        "top=0.5in",
        "bottom=0.625in",
        "inner=0.5500in",
        "outer=0.5in",
    ]
