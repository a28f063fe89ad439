"""Exception hierarchy for the template compiler."""

from __future__ import annotations


class PressformError(RuntimeError):
    """Base exception for template compilation failures."""


class ConfigurationError(PressformError):
    """Raised when a template configuration payload cannot be loaded."""


class MergeFragmentError(PressformError):
    """Raised when a custom metadata fragment cannot be parsed."""


class ExpertModeError(PressformError):
    """Raised when an override operation is requested in the wrong state."""


class TemplateError(PressformError):
    """Raised when a fragment partial cannot be loaded."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "ExpertModeError",
    "MergeFragmentError",
    "PressformError",
    "TemplateError",
    "exception_hint",
    "exception_messages",
]
