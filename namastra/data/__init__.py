"""Static name data."""

from __future__ import annotations

from .corpus import SAMPLE_NAMES, find_name, get_corpus

__all__ = ["SAMPLE_NAMES", "find_name", "get_corpus"]
