from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pressform.core.templates import load_template


if TYPE_CHECKING:
    from pressform.config import TemplateConfiguration


C = TypeVar("C")


class BaseFragment(ABC, Generic[C]):
    """Base contract for one section of the generated preamble.

    A fragment reads the configuration subtree it owns into ``C``, decides
    whether anything should be emitted, and renders its ``source`` partial
    with the context injected from ``C``. It never sees the output of another
    fragment.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    source: ClassVar[Path]

    @abstractmethod
    def build_config(self, template: TemplateConfiguration) -> C:
        """Return the normalized view of the configuration this fragment reads."""
        raise NotImplementedError

    @abstractmethod
    def inject(self, config: C, context: dict[str, Any]) -> None:
        """Inject the template context variables derived from the config."""
        raise NotImplementedError

    @abstractmethod
    def should_render(self, config: C) -> bool:
        """Return whether this fragment should render given the config."""
        raise NotImplementedError

    def render(self, config: C) -> str:
        """Render the partial; the trailing newline of its last line is dropped."""
        context: dict[str, Any] = {}
        self.inject(config, context)
        rendered = load_template(self.source).render(**context)
        return rendered.removesuffix("\n")

    def generate(self, template: TemplateConfiguration) -> str:
        """Build the config and render it, or return ``""`` when disabled."""
        config = self.build_config(template)
        if not self.should_render(config):
            return ""
        return self.render(config)


__all__ = ["BaseFragment"]
