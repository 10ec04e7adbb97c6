"""OpenAI wish parser.

Sends the wish to the Responses API and reads the reply as a JSON filter
fragment. Replies that are not valid JSON, or do not fit AIWishFragment, come
back as raw text so the resolver can ignore them.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI
from pydantic import ValidationError

from ..core.constants import DEITIES, SOURCES
from ..errors import WishParseError
from ..logging_config import TRACE
from ..prompts import format_prompt
from .ai_schemas import AIWishFragment
from .ai_types import ParseResult, WishParser

logger = logging.getLogger(__name__)


class OpenAIWishParser(WishParser):
    """Wish parser backed by the OpenAI SDK."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout: float = 30.0,
    ):
        """Initialize the parser.

        Args:
            api_key: OpenAI API key
            model: Model name (e.g., 'gpt-4.1-mini')
            base_url: Optional custom API base URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url

        self._total_input_tokens = 0
        self._total_output_tokens = 0

        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
        )

    @property
    def name(self) -> str:
        return "openai"

    @property
    def token_usage(self) -> dict[str, int]:
        return {"input_tokens": self._total_input_tokens, "output_tokens": self._total_output_tokens}

    async def parse_wishes(self, wish_text: str) -> ParseResult:
        """Parse a wish; never raises.

        Transport errors and a missing key yield a failed result with an
        empty fragment.
        """
        if not self.api_key:
            logger.error("No OpenAI API key configured")
            return ParseResult.failed("No API key configured", "missing_api_key", provider=self.name)

        try:
            prompt = self._build_prompt(wish_text)
            logger.log(TRACE, f"Wish prompt: {prompt}")
            content = await self._call_model(prompt)
        except Exception as e:
            logger.error(f"OpenAI wish parser error: {e}", exc_info=True)
            return ParseResult.failed(str(e), type(e).__name__, provider=self.name)

        preview = wish_text if len(wish_text) <= 200 else f"{wish_text[:200]}..."
        logger.info(f"Wish parser reply for '{preview}': {content}")
        return self._convert_output(content)

    async def _call_model(self, prompt: str) -> str:
        response = await self.client.responses.create(
            model=self.model,
            input=prompt,
            instructions="You turn baby naming wishes into structured search filters.",
        )

        if getattr(response, "usage", None):
            self._total_input_tokens += getattr(response.usage, "input_tokens", 0) or 0
            self._total_output_tokens += getattr(response.usage, "output_tokens", 0) or 0

        status = getattr(response, "status", None)
        if status in ("failed", "incomplete"):
            raise WishParseError(f"Model response {status}")

        return response.output_text or ""

    def _build_prompt(self, wish_text: str) -> str:
        return format_prompt(
            "parse_wishes",
            wish_text=wish_text,
            deities=", ".join(f'"{d}"' for d in DEITIES),
            sources=", ".join(f'"{s}"' for s in SOURCES),
        )

    def _convert_output(self, content: str) -> ParseResult:
        """Convert model text to a ParseResult.

        Anything that is not a JSON object matching AIWishFragment is kept
        as raw_text, code fences included.
        """
        metadata: dict[str, Any] = {"provider": self.name, "model": self.model, **self.token_usage}
        try:
            fragment = AIWishFragment.model_validate_json(content)
        except ValidationError as e:
            logger.warning(f"Wish parser reply failed validation: {e.error_count()} error(s)")
            return ParseResult(raw_text=content, metadata=metadata)

        return ParseResult(fragment=fragment.to_fragment(), metadata=metadata)

    async def close(self) -> None:
        """Close the client and release resources."""
        if self.client:
            await self.client.close()

    async def __aenter__(self) -> OpenAIWishParser:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()
