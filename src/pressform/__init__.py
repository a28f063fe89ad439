"""Compile template configurations into a YAML metadata block and a LaTeX preamble."""

from __future__ import annotations

from .compiler import CompiledTemplate, TemplateCompiler
from .config import (
    TemplateConfiguration,
    create_default_template,
    load_configuration,
)
from .core import (
    ConfigurationError,
    ExpertModeError,
    LoggingEmitter,
    MergeFragmentError,
    NullEmitter,
    PressformError,
)
from .expert import ArtifactKind, ExpertModeController, OverrideState, transition
from .latex import PreambleGenerator
from .metadata import MetadataGenerator
from .version import get_version


__version__ = get_version()

__all__ = [
    "ArtifactKind",
    "CompiledTemplate",
    "ConfigurationError",
    "ExpertModeController",
    "ExpertModeError",
    "LoggingEmitter",
    "MergeFragmentError",
    "MetadataGenerator",
    "NullEmitter",
    "OverrideState",
    "PreambleGenerator",
    "PressformError",
    "TemplateCompiler",
    "TemplateConfiguration",
    "__version__",
    "create_default_template",
    "get_version",
    "load_configuration",
]
