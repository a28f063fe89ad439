"""Diagnostics reported by the generators and the override controller.

Generators never raise for a validated configuration; recoverable problems
(an unparsable merge fragment, an unknown preview section) are reported as
warnings, and state changes worth surfacing are reported as events.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Drop every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def _merged_keys(payload: Mapping[str, Any]) -> str | None:
    keys = payload.get("keys") or []
    return f"Merged custom metadata keys: {', '.join(keys)}" if keys else None


def _override_transition(payload: Mapping[str, Any]) -> str | None:
    artifact = payload.get("artifact") or "<unknown>"
    return f"{artifact} artifact: {payload.get('source')} -> {payload.get('target')}"


_EVENT_MESSAGES: dict[str, Callable[[Mapping[str, Any]], str | None]] = {
    "fragment_merged": _merged_keys,
    "override_transition": _override_transition,
}


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a one-line summary for known events, ``None`` otherwise."""
    formatter = _EVENT_MESSAGES.get(name)
    if formatter is None:
        return None
    return formatter(payload)


class LoggingEmitter:
    """Forward diagnostics to a :mod:`logging` logger.

    Known events are logged at INFO with a readable summary; anything else
    goes to DEBUG with its raw payload. Exception details are attached to
    warnings only when ``debug_enabled`` is set.
    """

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        exc_info = exc if exc is not None and self.debug_enabled else None
        self._logger.warning(message, exc_info=exc_info)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
        else:
            self._logger.debug("diagnostic event %s: %s", name, dict(payload))


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
