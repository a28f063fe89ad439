"""Lower a template configuration into the LaTeX preamble."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from pressform.config import TemplateConfiguration
from pressform.core.fragments import BaseFragment
from pressform.fragments import DEFAULT_FRAGMENTS


logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"


class PreambleGenerator:
    """Concatenate the rendered fragments into header includes."""

    def __init__(self, fragments: Sequence[BaseFragment] | None = None) -> None:
        self.fragments: tuple[BaseFragment, ...] = tuple(
            DEFAULT_FRAGMENTS if fragments is None else fragments
        )

    def generate(self, config: TemplateConfiguration) -> str:
        """Return the preamble, or the hand-edited override when active."""
        override = config.expert_mode.preamble_override()
        if override is not None:
            return override
        rendered = [fragment.generate(config) for fragment in self.fragments]
        return SECTION_SEPARATOR.join(section for section in rendered if section.strip())

    def sections(self, config: TemplateConfiguration) -> dict[str, str]:
        """Render every fragment separately, keyed by fragment name.

        Disabled fragments map to an empty string. Overrides are ignored.
        """
        output: dict[str, str] = {}
        for fragment in self.fragments:
            output[fragment.name] = fragment.generate(config)
            logger.debug("Rendered preamble fragment '%s'.", fragment.name)
        return output


__all__ = ["SECTION_SEPARATOR", "PreambleGenerator"]
