"""Jinja2 environment used to render the preamble partials."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound

from pressform.core.exceptions import TemplateError
from pressform.formatters import escape_latex


@lru_cache(maxsize=None)
def build_environment(directory: str) -> Environment:
    """Return the LaTeX-friendly environment for partials under ``directory``.

    Statements use ``\\BLOCK{...}`` and expressions ``\\VAR{...}`` so LaTeX
    braces never collide with the template syntax.
    """
    environment = Environment(
        loader=FileSystemLoader(directory),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
    )
    environment.filters.setdefault("latex_escape", escape_latex)
    environment.filters.setdefault("escape_latex", escape_latex)
    return environment


def load_template(path: Path) -> Template:
    try:
        return build_environment(str(path.parent)).get_template(path.name)
    except TemplateNotFound as exc:
        raise TemplateError(f"Fragment partial is missing: {path}") from exc


__all__ = ["build_environment", "load_template"]
