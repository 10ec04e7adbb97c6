"""Prompt templates for the wish parser."""

from __future__ import annotations

from .loader import PROMPTS_DIR, clear_cache, format_prompt, load_prompt

__all__ = ["PROMPTS_DIR", "clear_cache", "format_prompt", "load_prompt"]
