"""Built-in preamble fragments, in emission order."""

from __future__ import annotations

from pressform.core.fragments import BaseFragment

from .code import fragment as code_fragment
from .contents import fragment as contents_fragment
from .custom import fragment as custom_fragment
from .figures import fragment as figures_fragment
from .headers import fragment as headers_fragment
from .imports import fragment as imports_fragment
from .lists import fragment as lists_fragment
from .titlepage import fragment as titlepage_fragment
from .titles import fragment as titles_fragment
from .typography import fragment as typography_fragment


DEFAULT_FRAGMENTS: tuple[BaseFragment, ...] = (
    imports_fragment,
    typography_fragment,
    headers_fragment,
    titles_fragment,
    contents_fragment,
    lists_fragment,
    figures_fragment,
    code_fragment,
    titlepage_fragment,
    custom_fragment,
)


def fragment_names() -> list[str]:
    return [fragment.name for fragment in DEFAULT_FRAGMENTS]


__all__ = ["DEFAULT_FRAGMENTS", "BaseFragment", "fragment_names"]
