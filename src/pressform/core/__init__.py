"""Shared building blocks: diagnostics and exceptions."""

from __future__ import annotations

from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter, format_event_message
from .exceptions import (
    ConfigurationError,
    ExpertModeError,
    MergeFragmentError,
    PressformError,
    TemplateError,
    exception_hint,
    exception_messages,
)


__all__ = [
    "ConfigurationError",
    "DiagnosticEmitter",
    "ExpertModeError",
    "LoggingEmitter",
    "MergeFragmentError",
    "NullEmitter",
    "PressformError",
    "TemplateError",
    "exception_hint",
    "exception_messages",
    "format_event_message",
]
