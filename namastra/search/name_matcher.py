"""Deterministic name matching.

Evaluates a resolved WishFilters against the corpus. A record is kept only
when it satisfies every active constraint; results keep corpus order and are
capped at max_results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..core.constants import MAX_RESULTS, MULTIPLE_DEITY, NO_DEITY
from ..core.models import NameRecord, WishFilters

logger = logging.getLogger(__name__)

Predicate = Callable[[NameRecord], bool]


def _starts_with_any(value: str, prefixes: Iterable[str]) -> bool:
    lowered = value.lower()
    return any(lowered.startswith(prefix.lower()) for prefix in prefixes)


class NameMatcher:
    """Filters a fixed corpus against resolved filters.

    Constraint activation:
    - gender, syllables: active when not None
    - deity: active when set and not the "None" sentinel; records with
      "Multiple" affinity satisfy any deity
    - sources, start_letters, start_sounds: active when non-empty. An empty
      list places no restriction.
    """

    def __init__(self, corpus: Sequence[NameRecord], max_results: int = MAX_RESULTS):
        if max_results <= 0:
            raise ValueError("max_results must be positive")
        self.corpus = tuple(corpus)
        self.max_results = max_results

    def constraints(self, filters: WishFilters) -> list[tuple[str, Predicate]]:
        """Build (name, predicate) pairs for the constraints active in filters."""
        active: list[tuple[str, Predicate]] = []

        gender = filters.gender
        if gender is not None:
            active.append(("gender", lambda r: r.gender == gender))

        syllables = filters.syllables
        if syllables is not None:
            active.append(("syllables", lambda r: r.syllables == syllables))

        deity = filters.deity
        if deity and deity != NO_DEITY:
            active.append(("deity", lambda r: r.deity_affinity in (deity, MULTIPLE_DEITY)))

        if filters.sources:
            wanted_sources = set(filters.sources)
            active.append(("sources", lambda r: not wanted_sources.isdisjoint(r.sources)))

        if filters.start_letters:
            letters = list(filters.start_letters)
            active.append(("start_letters", lambda r: _starts_with_any(r.name, letters)))

        if filters.start_sounds:
            sounds = list(filters.start_sounds)
            active.append(("start_sounds", lambda r: _starts_with_any(r.phonetic_start, sounds)))

        return active

    def active_constraints(self, filters: WishFilters) -> list[str]:
        """Names of the constraints that filters activates, in evaluation order."""
        return [name for name, _ in self.constraints(filters)]

    def matches(self, record: NameRecord, filters: WishFilters) -> bool:
        """Check a single record against every active constraint."""
        return all(predicate(record) for _, predicate in self.constraints(filters))

    def match(self, filters: WishFilters) -> list[NameRecord]:
        """Return matching records in corpus order, capped at max_results."""
        constraints = self.constraints(filters)
        results: list[NameRecord] = []
        total_matches = 0

        for record in self.corpus:
            if all(predicate(record) for _, predicate in constraints):
                total_matches += 1
                if len(results) < self.max_results:
                    results.append(record)

        if total_matches > self.max_results:
            logger.debug(f"Dropped {total_matches - self.max_results} matches beyond the cap of {self.max_results}")
        logger.debug(
            f"Matched {len(results)}/{len(self.corpus)} names with constraints {[name for name, _ in constraints]}"
        )
        return results


def match_names(
    filters: WishFilters,
    corpus: Sequence[NameRecord],
    max_results: int = MAX_RESULTS,
) -> list[NameRecord]:
    """Convenience wrapper: match filters against corpus in one call."""
    return NameMatcher(corpus, max_results=max_results).match(filters)
