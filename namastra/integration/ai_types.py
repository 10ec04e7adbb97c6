"""Wish parser types - base classes and types for parser providers.

Kept apart from the provider modules to avoid circular imports between
provider_factory and openai_provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ProviderType(Enum):
    """Supported wish parser providers.

    OpenAI calls the Responses API; Mock extracts keywords locally.
    """

    OPENAI = "openai"
    MOCK = "mock"


@dataclass
class ParserConfig:
    """Configuration for a wish parser"""

    provider: str
    model: str
    timeout: int = 30
    api_key: str | None = None
    base_url: str | None = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not self.provider:
            raise ValueError("provider must be set")


@dataclass
class ParseResult:
    """Outcome of parsing a wish.

    fragment uses WishFilters field names and holds only the keys the parser
    actually produced. raw_text is set when the model output could not be
    read as a filter fragment; such a result must not influence matching.
    """

    fragment: dict[str, Any] = field(default_factory=dict)
    raw_text: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_usable(self) -> bool:
        return self.raw_text is None

    @classmethod
    def failed(cls, error: str, error_type: str = "error", **metadata: Any) -> ParseResult:
        return cls(metadata={"error": error, "error_type": error_type, **metadata})


class WishParser(ABC):
    """Abstract base class for wish parsers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name"""
        pass

    @abstractmethod
    async def parse_wishes(self, wish_text: str) -> ParseResult:
        """Turn free text into a partial filter fragment"""
        pass

    async def close(self) -> None:
        """Release any held resources"""
        return None
