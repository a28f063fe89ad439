"""Metadata (YAML) artifact generation."""

from __future__ import annotations

from .fragment import coerce_scalar, parse_merge_fragment
from .generator import MetadataGenerator
from .sections import PREVIEW_SECTIONS, geometry_tokens, numbering_depth
from .serializer import stringify_document, stringify_value


__all__ = [
    "PREVIEW_SECTIONS",
    "MetadataGenerator",
    "coerce_scalar",
    "geometry_tokens",
    "numbering_depth",
    "parse_merge_fragment",
    "stringify_document",
    "stringify_value",
]
