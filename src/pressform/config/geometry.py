"""Page geometry: paper size and margins."""

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from .base import PressModel, fold_aliases


_LEGACY_MARGINS = {
    "topMargin": "top",
    "bottomMargin": "bottom",
    "innerMargin": "inner",
    "outerMargin": "outer",
}


class PageGeometry(PressModel):
    """Paper dimensions and margins.

    Older presets spell the margins ``topMargin``/``bottomMargin``/
    ``innerMargin``/``outerMargin``; those are folded onto ``top``/
    ``bottom``/``inner``/``outer`` when the record is loaded, the short
    names winning when both are present.
    """

    paper_size: str | None = None
    paper_width: str | None = None
    paper_height: str | None = None

    top: str | None = None
    bottom: str | None = None
    inner: str | None = None
    outer: str | None = None

    header_height: str | None = None
    footer_height: str | None = None
    margin_par_width: str | None = None
    margin_par_sep: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_margins(cls, data: Any) -> Any:
        return fold_aliases(data, _LEGACY_MARGINS)

    def margins(self) -> list[tuple[str, str]]:
        """Return the margins that are set, in top/bottom/inner/outer order."""
        pairs = (
            ("top", self.top),
            ("bottom", self.bottom),
            ("inner", self.inner),
            ("outer", self.outer),
        )
        return [(name, value) for name, value in pairs if value]


__all__ = ["PageGeometry"]
