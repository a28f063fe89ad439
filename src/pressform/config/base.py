"""Shared pydantic base for template configuration records."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_snake


class PressModel(BaseModel):
    """Base record: snake_case attributes, camelCase payload keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _lookup(payload: Mapping[str, Any], key: str) -> Any:
    value = payload.get(key)
    if value is None:
        value = payload.get(to_snake(key))
    return value


def _discard(payload: dict[str, Any], key: str) -> None:
    payload.pop(key, None)
    payload.pop(to_snake(key), None)


def fold_aliases(
    data: Any,
    pairs: Mapping[str, str],
    *,
    prefer_source: bool = False,
    convert: Mapping[str, Callable[[Any], Any]] | None = None,
) -> Any:
    """Fold alternate payload keys onto their canonical key.

    ``pairs`` maps a source key to the canonical key, both camelCase (the
    snake_case spelling is accepted as well). With ``prefer_source`` the
    source value replaces a canonical value; otherwise it only fills a gap.
    ``convert`` optionally translates a source value before it is stored.
    """
    if not isinstance(data, Mapping):
        return data
    payload = dict(data)
    converters = convert or {}
    for source, canonical in pairs.items():
        value = _lookup(payload, source)
        _discard(payload, source)
        if value is None:
            continue
        translator = converters.get(source)
        if translator is not None:
            value = translator(value)
            if value is None:
                continue
        if prefer_source or _lookup(payload, canonical) is None:
            _discard(payload, canonical)
            payload[canonical] = value
    return payload


def drop_null_records(data: Any, names: tuple[str, ...]) -> Any:
    """Remove explicit ``None`` sub-records so their defaults apply."""
    if not isinstance(data, Mapping):
        return data
    payload = dict(data)
    for name in names:
        for key in (name, to_snake(name)):
            if key in payload and payload[key] is None:
                del payload[key]
    return payload


__all__ = ["PressModel", "drop_null_records", "fold_aliases"]
