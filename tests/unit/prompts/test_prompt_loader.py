"""Tests for the prompt loader."""

from __future__ import annotations

import pytest

from namastra.prompts.loader import PROMPTS_DIR, clear_cache, format_prompt, load_prompt


class TestPromptLoader:
    """Test basic prompt loading functionality."""

    def test_prompts_dir_exists(self):
        assert (PROMPTS_DIR / "parse_wishes.txt").exists()

    def test_load_prompt_returns_template_content(self):
        """Test that load_prompt returns the raw template with placeholders."""
        clear_cache()

        template = load_prompt("parse_wishes")

        assert "{wish_text}" in template
        assert "{deities}" in template

    def test_format_prompt_substitutes_variables(self):
        clear_cache()

        formatted = format_prompt(
            "parse_wishes",
            wish_text="a soft girl name",
            deities='"Devi"',
            sources='"Vedas"',
        )

        assert "a soft girl name" in formatted
        assert "{wish_text}" not in formatted
        # Doubled braces in the example become literal JSON braces
        assert '{"gender": "boy"' in formatted

    def test_missing_variable_raises(self):
        with pytest.raises(KeyError):
            format_prompt("parse_wishes", wish_text="x")

    def test_missing_prompt_raises(self):
        with pytest.raises(FileNotFoundError):
            load_prompt("does_not_exist")

    def test_load_prompt_is_cached(self):
        clear_cache()

        assert load_prompt("parse_wishes") is load_prompt("parse_wishes")
