"""Value formatters shared by the metadata and preamble generators.

Every helper is a pure function turning one typed configuration value into
the literal token a target language expects.
"""

from __future__ import annotations

import re
from typing import Any


_LENGTH_PATTERN = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(.*?)\s*$")
_YAML_RESERVED = (":", "#", "\n")

_ALIGNMENT_MACROS = {
    "center": "\\centering",
    "right": "\\raggedleft",
}
_STYLE_MACROS = {
    "italic": "\\itshape",
    "smallcaps": "\\scshape",
}
_HEADER_SIZES = {
    "tiny": "\\tiny",
    "small": "\\small",
    "large": "\\large",
}
_HEADER_STYLES = {
    "italic": "\\itshape",
    "bold": "\\bfseries",
    "bolditalic": "\\bfseries\\itshape",
}
_COUNTER_STYLES = {"arabic", "roman", "Roman", "alph", "Alph"}
_LATEX_ESCAPES = {
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "$": r"\$",
    "_": r"\_",
    "^": r"\^{}",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "\\": r"\textbackslash{}",
}


def format_decimal(value: float) -> str:
    """Return ``value`` with at most three decimals and no trailing zeros."""
    rounded = f"{value:.3f}"
    cleaned = rounded.rstrip("0").rstrip(".")
    return cleaned or "0"


def format_number(value: Any) -> str:
    """Render a boolean or number the way the metadata language spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def needs_quoting(text: str) -> bool:
    return any(marker in text for marker in _YAML_RESERVED)


def format_yaml_scalar(value: Any) -> str:
    """Render a scalar metadata value, quoting strings with reserved characters."""
    if value is None:
        return "null"
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    text = str(value)
    if needs_quoting(text):
        escaped = text.replace('"', '\\"')
        return f'"{escaped}"'
    return text


def escape_latex(text: str) -> str:
    """Escape the characters LaTeX treats specially in running text."""
    return "".join(_LATEX_ESCAPES.get(char, char) for char in text)


def latex_bool(value: bool) -> str:
    return "true" if value else "false"


def macro(name: str) -> str:
    """Return ``name`` as a control sequence, tolerating a leading backslash."""
    stripped = name.strip()
    if not stripped:
        return ""
    return stripped if stripped.startswith("\\") else f"\\{stripped}"


def alignment_macro(alignment: str | None) -> str:
    """Map an alignment keyword to its paragraph alignment macro."""
    return _ALIGNMENT_MACROS.get(alignment or "", "\\raggedright")


def heading_style(
    size: str,
    weight: str,
    style: str,
    alignment: str | None = None,
) -> str:
    """Compose the combined font/alignment declaration for a heading level."""
    parts = ["\\normalfont", macro(size)]
    if weight == "bold":
        parts.append("\\bfseries")
    style_macro = _STYLE_MACROS.get(style)
    if style_macro:
        parts.append(style_macro)
    if alignment is not None:
        parts.append(alignment_macro(alignment))
    return "".join(parts)


def header_font_style(size: str, style: str) -> str:
    """Font switches applied to running header text."""
    tokens = [_HEADER_SIZES.get(size, ""), _HEADER_STYLES.get(style, "")]
    return " ".join(token for token in tokens if token)


def counter_macro(style: str) -> str | None:
    """Return the counter representation macro (``\\roman``...) if known."""
    if style in _COUNTER_STYLES:
        return f"\\{style}"
    return None


def split_length(length: str) -> tuple[float, str] | None:
    """Split ``"1.5em"`` into ``(1.5, "em")``; ``None`` when not numeric."""
    match = _LENGTH_PATTERN.match(length)
    if match is None:
        return None
    return float(match.group(1)), match.group(2)


def scale_length(length: str, factor: float) -> str:
    """Multiply a length by ``factor`` (``"1.5em" * 2 -> "3em"``)."""
    if factor == 1:
        return length
    parts = split_length(length)
    if parts is None:
        return f"{format_decimal(factor)}{length.strip()}"
    magnitude, unit = parts
    return f"{format_decimal(magnitude * factor)}{unit}"


def leading_for(size: str, ratio: float = 1.1) -> str | None:
    """Return the baseline skip matching a font size, or ``None``."""
    parts = split_length(size)
    if parts is None:
        return None
    magnitude, unit = parts
    return f"{format_decimal(magnitude * ratio)}{unit or 'pt'}"


__all__ = [
    "alignment_macro",
    "counter_macro",
    "escape_latex",
    "format_decimal",
    "format_number",
    "format_yaml_scalar",
    "header_font_style",
    "heading_style",
    "latex_bool",
    "leading_for",
    "macro",
    "needs_quoting",
    "scale_length",
    "split_length",
]
