"""Pydantic schema for wish parser output.

The model is asked for a JSON object; this schema validates it at the
boundary. Unknown keys are ignored, never rejected.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AIWishFragment(BaseModel):
    """Best-effort partial filter returned by the wish parser.

    Keys follow the prompt (camelCase startLetters); snake_case is accepted too.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    gender: Literal["boy", "girl", "unisex"] | None = None
    syllables: int | None = Field(default=None, ge=1)
    deity: str | None = None
    sources: list[str] | None = None
    start_letters: list[str] | None = Field(default=None, alias="startLetters")
    vibe: Literal["soft", "strong", "any"] | None = None

    def to_fragment(self) -> dict[str, Any]:
        """Keys the reply actually carried, keyed by WishFilters field name.

        An explicit null is kept so that it clears the matching filter.
        """
        return self.model_dump(exclude_unset=True, by_alias=False)
