"""Core domain models for name search.

These models represent the catalog and the query, and are independent of
any external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any


class Gender(Enum):
    """Gender a name is given for"""

    BOY = "boy"
    GIRL = "girl"
    UNISEX = "unisex"


class Popularity(Enum):
    """Popularity tier of a name"""

    RARE = "rare"
    UNCOMMON = "uncommon"
    COMMON = "common"


class Vibe(Enum):
    """Overall feel requested for a name"""

    SOFT = "soft"
    STRONG = "strong"
    ANY = "any"


@dataclass(frozen=True)
class NameRecord:
    """An immutable catalog entry.

    phonetic_start may hold several prefixes separated by "/" (e.g. "Hri/Hr");
    matching compares against the whole string.
    """

    id: str
    name: str
    gender: Gender
    syllables: int
    phonetic_start: str
    deity_affinity: str
    meaning: str
    language: str
    scripts: dict[str, str] = field(default_factory=dict)
    sources: tuple[str, ...] = ()
    region_tags: tuple[str, ...] = ()
    modernity: int = 3
    global_pronounce: int = 3
    nicknames: tuple[str, ...] = ()
    related: tuple[str, ...] = ()
    popularity: Popularity | None = None

    def __post_init__(self) -> None:
        if self.syllables < 1:
            raise ValueError(f"syllables must be positive for {self.name!r}")
        for rating_name in ("modernity", "global_pronounce"):
            rating = getattr(self, rating_name)
            if not 1 <= rating <= 5:
                raise ValueError(f"{rating_name} must be between 1 and 5 for {self.name!r}")


@dataclass
class BirthDetails:
    """Birth descriptor used for the astrology lookup"""

    date: str | None = None
    time: str | None = None
    place: str | None = None

    @property
    def is_complete(self) -> bool:
        """True only when date, time and place are all present and non-blank."""
        return all(value and value.strip() for value in (self.date, self.time, self.place))


@dataclass
class WishFilters:
    """A mutable query describing desired constraints.

    None on an optional field means "no constraint". Defaults match the
    initial state of the search form. Only gender, syllables, deity, sources,
    start_letters and start_sounds constrain matching; the remaining fields
    are carried through resolution for the caller.
    """

    gender: Gender | None = Gender.BOY
    syllables: int | None = None
    script: str | None = "Latin"
    deity: str | None = None
    sources: list[str] | None = None
    themes: list[str] | None = None
    start_letters: list[str] | None = None
    vibe: Vibe | None = Vibe.ANY
    length_max: int | None = None
    global_pronounce: bool | None = True
    birth: BirthDetails | None = None
    vedic_mode: bool = False
    start_sounds: list[str] | None = None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def copy(self) -> WishFilters:
        """Return an independent copy; list fields and birth are copied too."""
        changes: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                changes[f.name] = list(value)
            elif isinstance(value, BirthDetails):
                changes[f.name] = replace(value)
        return replace(self, **changes)
