"""Bibliography settings consumed by the citation pipeline."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import PressModel


class BibliographySettings(PressModel):
    style: str = "chicago-author-date"

    link_citations: bool = True
    suppress_bibliography: bool = False
    natbib: bool = False
    biblatex: bool = False

    title: str = "Bibliography"
    title_size: Literal["LARGE", "Large", "large"] = "LARGE"

    item_sep: str = "0.5em"
    indent: str = "1.5em"

    sorting: Literal["none", "nty", "nyt", "nyvt"] = "nty"
    max_names: int = Field(default=10, ge=1)
    min_names: int = Field(default=1, ge=1)


__all__ = ["BibliographySettings"]
