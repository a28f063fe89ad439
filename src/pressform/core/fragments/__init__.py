"""Preamble fragment contract."""

from __future__ import annotations

from .base import BaseFragment


__all__ = ["BaseFragment"]
