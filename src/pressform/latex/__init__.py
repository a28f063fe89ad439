"""LaTeX preamble artifact generation."""

from __future__ import annotations

from .generator import SECTION_SEPARATOR, PreambleGenerator


__all__ = ["SECTION_SEPARATOR", "PreambleGenerator"]
