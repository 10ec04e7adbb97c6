"""Filter resolution.

Merges the caller's baseline filters with an optional parsed wish fragment,
then enriches the result with astrology-derived starting sounds when Vedic
mode is on and the birth descriptor is complete. Collaborator failures
degrade to "use what we have"; nothing raises past resolve().
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..core.models import BirthDetails, Gender, Vibe, WishFilters
from ..integration.ai_types import ParseResult, WishParser
from ..integration.astrology import AstrologyProvider, NakshatraResult

logger = logging.getLogger(__name__)

_LIST_FIELDS = frozenset({"sources", "themes", "start_letters", "start_sounds"})
_NON_NULLABLE_FIELDS = frozenset({"vedic_mode"})


@dataclass
class ResolvedFilters:
    """Canonical filters plus what went into them"""

    filters: WishFilters
    nakshatra: NakshatraResult | None = None
    fragment_applied: bool = False


def _coerce_value(field_name: str, value: Any) -> Any:
    """Convert a fragment value to the type WishFilters stores.

    Raises:
        ValueError, TypeError: If the value cannot be converted
    """
    if field_name == "gender":
        return value if isinstance(value, Gender) else Gender(value)
    if field_name == "vibe":
        return value if isinstance(value, Vibe) else Vibe(value)
    if field_name == "birth":
        if isinstance(value, BirthDetails):
            return replace(value)
        if isinstance(value, Mapping):
            return BirthDetails(date=value.get("date"), time=value.get("time"), place=value.get("place"))
        raise TypeError("birth must be a mapping")
    if field_name in _LIST_FIELDS:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise TypeError(f"{field_name} must be a list")
        return [str(item) for item in value]
    if field_name in ("syllables", "length_max"):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{field_name} must be an integer")
        return value
    return value


def merge_filters(
    baseline: WishFilters,
    fragment: ParseResult | Mapping[str, Any] | None,
) -> WishFilters:
    """Shallow merge: fields present in fragment overwrite baseline.

    A ParseResult carrying raw text is ignored. A key present with value None
    clears that field (no constraint); absent keys leave the baseline alone.
    Unknown keys and values that cannot be coerced are skipped. birth is
    replaced as a whole. The baseline is never mutated.
    """
    merged = baseline.copy()
    if fragment is None:
        return merged

    if isinstance(fragment, ParseResult):
        if not fragment.is_usable:
            logger.info("Ignoring unparseable wish parser output")
            return merged
        values: Mapping[str, Any] = fragment.fragment
    else:
        values = fragment

    known_fields = WishFilters.field_names()
    changes: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known_fields:
            logger.debug(f"Skipping unknown filter key '{key}'")
            continue
        if value is None:
            if key in _NON_NULLABLE_FIELDS:
                logger.debug(f"Ignoring null for non-nullable filter key '{key}'")
            else:
                changes[key] = None
            continue
        try:
            changes[key] = _coerce_value(key, value)
        except (ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid value for '{key}': {e}")

    if changes:
        merged = replace(merged, **changes)
    return merged


class FilterResolver:
    """Produces one canonical WishFilters per pipeline run."""

    def __init__(
        self,
        parser: WishParser | None = None,
        astrology: AstrologyProvider | None = None,
    ):
        self.parser = parser
        self.astrology = astrology

    async def parse_fragment(self, wish_text: str) -> ParseResult | None:
        """Ask the wish parser for a fragment; returns None on any failure."""
        if self.parser is None or not wish_text.strip():
            return None
        try:
            result = await self.parser.parse_wishes(wish_text)
        except Exception as e:
            logger.warning(f"Wish parser '{self.parser.name}' failed, using baseline filters: {e}")
            return None
        if result.metadata.get("error"):
            logger.warning(f"Wish parser reported an error, using baseline filters: {result.metadata['error']}")
        return result

    async def resolve(
        self,
        baseline: WishFilters,
        fragment: ParseResult | Mapping[str, Any] | None = None,
    ) -> ResolvedFilters:
        """Merge baseline with fragment, then enrich with starting sounds."""
        try:
            filters = merge_filters(baseline, fragment)
        except Exception as e:
            logger.warning(f"Could not merge wish fragment, using baseline filters: {e}")
            filters = baseline.copy()

        applied = fragment is not None and filters != baseline
        nakshatra = await self._enrich(filters)
        return ResolvedFilters(filters=filters, nakshatra=nakshatra, fragment_applied=applied)

    async def _enrich(self, filters: WishFilters) -> NakshatraResult | None:
        """Set start_sounds from astrology when Vedic mode and full birth data allow.

        start_sounds is left untouched when the lookup is skipped or fails.
        """
        if not filters.vedic_mode:
            return None
        if filters.birth is None or not filters.birth.is_complete:
            logger.debug("Vedic mode without complete birth details; keeping start_sounds")
            return None
        if self.astrology is None:
            logger.warning("Vedic mode requested but no astrology provider is configured")
            return None

        try:
            result = await self.astrology.lookup(filters.birth)
        except Exception as e:
            logger.warning(f"Astrology lookup failed, keeping start_sounds: {e}")
            return None

        filters.start_sounds = list(result.start_sounds)
        logger.info(f"Astrology lookup: {result.nakshatra} pada {result.pada} -> {filters.start_sounds}")
        return result
