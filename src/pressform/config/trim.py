"""Industry trim sizes and page-count dependent gutter margins."""

from __future__ import annotations

from dataclasses import dataclass
import math
import re

from pint import UnitRegistry

from .geometry import PageGeometry


_UNIT_REGISTRY = UnitRegistry()


@dataclass(frozen=True, slots=True)
class TrimMargins:
    top: str
    bottom: str
    outer: str
    inner_base: str
    inner_per_100_pages: str


@dataclass(frozen=True, slots=True)
class TrimSize:
    """A physical book size with its recommended margins."""

    id: str
    name: str
    width: str
    height: str
    margins: TrimMargins
    description: str
    common_use: str
    words_per_page: int = 250


TRIM_SIZE_PRESETS: tuple[TrimSize, ...] = (
    TrimSize(
        id="6x9",
        name='6" × 9" (Trade Paperback)',
        width="6in",
        height="9in",
        margins=TrimMargins("0.75in", "0.875in", "0.625in", "0.75in", "0.0625in"),
        description="Standard fiction and non-fiction",
        common_use="Most common size for novels and trade books",
        words_per_page=250,
    ),
    TrimSize(
        id="7x10",
        name='7" × 10" (Large Format)',
        width="7in",
        height="10in",
        margins=TrimMargins("0.875in", "1in", "0.75in", "0.875in", "0.0625in"),
        description="Textbooks, technical manuals, cookbooks",
        common_use="Non-fiction requiring larger text area",
        words_per_page=350,
    ),
    TrimSize(
        id="8x10",
        name='8" × 10" (Workbook)',
        width="8in",
        height="10in",
        margins=TrimMargins("0.875in", "1in", "0.75in", "1in", "0.0625in"),
        description="Workbooks, journals, activity books",
        common_use="Interactive content requiring writing space",
        words_per_page=400,
    ),
    TrimSize(
        id="8.5x11",
        name='8.5" × 11" (US Letter)',
        width="8.5in",
        height="11in",
        margins=TrimMargins("1in", "1in", "0.75in", "1in", "0.0625in"),
        description="Reports, manuals, course materials",
        common_use="Business documents and academic papers",
        words_per_page=450,
    ),
    TrimSize(
        id="5.5x8.5",
        name='5.5" × 8.5" (Digest)',
        width="5.5in",
        height="8.5in",
        margins=TrimMargins("0.625in", "0.75in", "0.5in", "0.625in", "0.0625in"),
        description="Mass market paperbacks, pocket books",
        common_use="Compact fiction, travel guides",
        words_per_page=200,
    ),
    TrimSize(
        id="5x8",
        name='5" × 8" (Mass Market)',
        width="5in",
        height="8in",
        margins=TrimMargins("0.5in", "0.625in", "0.5in", "0.5in", "0.05in"),
        description="Mass market paperbacks",
        common_use="Genre fiction, airport books",
        words_per_page=180,
    ),
)

_FRONT_MATTER = re.compile(r"\A---\n.*?\n---\n", re.DOTALL)
_FENCED_CODE = re.compile(r"```.*?```", re.DOTALL)
_INLINE_CODE = re.compile(r"`[^`]+`")
_MARKUP = re.compile(r"[#*_~\[\]()]")


def get_trim_size(trim_id: str) -> TrimSize | None:
    """Return the preset registered under ``trim_id``."""
    for size in TRIM_SIZE_PRESETS:
        if size.id == trim_id:
            return size
    return None


def calculate_inner_margin(page_count: int, trim: TrimSize) -> str:
    """Return the gutter margin, widened with the page count.

    ``inner_base + page_count / 100 * inner_per_100_pages``, in inches.
    """
    base = _UNIT_REGISTRY(trim.margins.inner_base)
    per_hundred = _UNIT_REGISTRY(trim.margins.inner_per_100_pages)
    total = (base + per_hundred * (page_count / 100)).to(_UNIT_REGISTRY.inch)
    return f"{float(total.magnitude):.4f}in"


def count_words(text: str) -> int:
    """Count prose words in a markdown manuscript."""
    text = _FRONT_MATTER.sub("", text)
    text = _FENCED_CODE.sub("", text)
    text = _INLINE_CODE.sub("", text)
    text = _MARKUP.sub("", text)
    return len(text.split())


def estimate_page_count(manuscript: str, trim: TrimSize) -> int:
    """Estimate printed pages from the manuscript word count."""
    words_per_page = trim.words_per_page or 250
    return math.ceil(count_words(manuscript) / words_per_page)


def geometry_from_trim_size(trim: TrimSize, page_count: int) -> PageGeometry:
    """Build the geometry record that stands in for a trim-size preset."""
    return PageGeometry(
        paper_size=trim.id,
        paper_width=trim.width,
        paper_height=trim.height,
        top=trim.margins.top,
        bottom=trim.margins.bottom,
        inner=calculate_inner_margin(page_count, trim),
        outer=trim.margins.outer,
    )


__all__ = [
    "TRIM_SIZE_PRESETS",
    "TrimMargins",
    "TrimSize",
    "calculate_inner_margin",
    "count_words",
    "estimate_page_count",
    "geometry_from_trim_size",
    "get_trim_size",
]
