"""Load and format AI prompts from the config/prompts/ directory.

Prompts are plain text files with {variable} placeholders filled using
str.format(). Literal braces in a template must be doubled.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

# namastra/prompts/loader.py -> config/prompts/
PROMPTS_DIR = Path(__file__).parent.parent.parent / "config" / "prompts"


@lru_cache(maxsize=10)
def load_prompt(name: str) -> str:
    """Load a prompt template from config/prompts/.

    Args:
        name: Prompt name without extension (e.g., "parse_wishes")

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
    """
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return path.read_text(encoding="utf-8")


def format_prompt(name: str, **kwargs: str) -> str:
    """Load a prompt and substitute its variables.

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
        KeyError: If a required variable is missing from kwargs.
    """
    return load_prompt(name).format(**kwargs)


def clear_cache() -> None:
    """Clear the prompt cache. Useful for testing or hot-reloading."""
    load_prompt.cache_clear()
