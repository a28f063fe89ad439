"""Line-oriented parser for the custom metadata merge fragment.

Only flat ``key: value`` lines are understood. Blank lines, comments and
bare ``---`` delimiters are skipped; any other line that is not a flat
pair (indented children, list items, free text) is skipped as well, so a
single bad line never prevents the remaining pairs from merging.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pressform.core.exceptions import MergeFragmentError

from .serializer import BLOCK_DELIMITER, Scalar


logger = logging.getLogger(__name__)

_PAIR_PATTERN = re.compile(r"^([a-zA-Z0-9_-]+):\s*(.*)$")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")


def coerce_scalar(raw: str) -> Scalar:
    """Coerce the textual value of a fragment line."""
    value = raw.strip()
    if value == "true":
        return True
    if value == "false":
        return False
    if value in ("null", ""):
        return None
    if _INTEGER_PATTERN.match(value):
        return int(value)
    if _FLOAT_PATTERN.match(value):
        return float(value)
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1].replace('\\"', '"')
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    return value


def parse_merge_fragment(text: Any) -> dict[str, Scalar]:
    """Return the flat key/value pairs found in ``text``, in order.

    Raises ``MergeFragmentError`` when ``text`` is not text at all.
    """
    if not isinstance(text, str):
        raise MergeFragmentError(
            f"Metadata fragment must be a string, got {type(text).__name__}."
        )

    result: dict[str, Scalar] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#") or trimmed == BLOCK_DELIMITER:
            continue
        match = _PAIR_PATTERN.match(line)
        if match is None:
            logger.debug("Skipping metadata fragment line %d: %r", lineno, line)
            continue
        key, raw_value = match.groups()
        result[key] = coerce_scalar(raw_value)
    return result


__all__ = ["coerce_scalar", "parse_merge_fragment"]
