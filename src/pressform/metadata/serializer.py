"""Serialise an ordered metadata mapping into a YAML metadata block."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

from pressform.formatters import format_yaml_scalar


Scalar = Union[str, int, float, bool, None]
MetadataValue = Union[Scalar, Sequence[Any], Mapping[str, Any]]

BLOCK_DELIMITER = "---"
_INDENT = "  "


def _is_simple_item(item: Any) -> bool:
    return isinstance(item, (str, int, float)) and not isinstance(item, bool)


def stringify_value(key: str, value: Any, indent: int = 0) -> str:
    """Render one ``key: value`` entry, recursing into lists and mappings."""
    prefix = _INDENT * indent

    if value is None:
        return f"{prefix}{key}:"

    if isinstance(value, Mapping):
        lines = [f"{prefix}{key}:"]
        for child_key, child_value in value.items():
            lines.append(stringify_value(str(child_key), child_value, indent + 1))
        return "\n".join(lines)

    if isinstance(value, Sequence) and not isinstance(value, str):
        if not value:
            return f"{prefix}{key}: []"
        lines = [f"{prefix}{key}:"]
        if all(_is_simple_item(item) for item in value):
            lines.extend(f"{prefix}{_INDENT}- {format_yaml_scalar(item)}" for item in value)
            return "\n".join(lines)
        for item in value:
            if isinstance(item, Mapping):
                lines.append(f"{prefix}{_INDENT}-")
                for child_key, child_value in item.items():
                    lines.append(stringify_value(str(child_key), child_value, indent + 2))
            else:
                lines.append(f"{prefix}{_INDENT}- {format_yaml_scalar(item)}")
        return "\n".join(lines)

    return f"{prefix}{key}: {format_yaml_scalar(value)}"


def stringify_document(document: Mapping[str, Any]) -> str:
    """Render a full metadata block between ``---`` delimiters."""
    lines = [BLOCK_DELIMITER]
    for key, value in document.items():
        lines.append(stringify_value(key, value))
    lines.append(BLOCK_DELIMITER)
    return "\n".join(lines)


__all__ = ["BLOCK_DELIMITER", "MetadataValue", "Scalar", "stringify_document", "stringify_value"]
