"""Astrology collaborator.

Maps a complete birth descriptor to a nakshatra (stellar mansion), a pada
(quarter) and the starting sounds traditionally associated with it. The
search pipeline treats the returned sounds as opaque enrichment data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..core.models import BirthDetails
from ..errors import AstrologyError

logger = logging.getLogger(__name__)

# Nakshatra -> pada -> naming syllables
NAKSHATRA_PADA_SYLLABLES: dict[str, dict[int, tuple[str, ...]]] = {
    "Ashwini": {1: ("Chu",), 2: ("Che",), 3: ("Cho",), 4: ("La",)},
    "Bharani": {1: ("Li",), 2: ("Lu",), 3: ("Le",), 4: ("Lo",)},
    "Krittika": {1: ("A",), 2: ("E",), 3: ("U",), 4: ("Ea",)},
    "Rohini": {1: ("O",), 2: ("Va",), 3: ("Vi",), 4: ("Vu",)},
    "Mrigashira": {1: ("Ve",), 2: ("Vo",), 3: ("Ka",), 4: ("Ki",)},
    "Ardra": {1: ("Ku",), 2: ("Gha",), 3: ("Nga",), 4: ("Cha",)},
    "Punarvasu": {1: ("Ke",), 2: ("Ko",), 3: ("Ha",), 4: ("Hi",)},
    "Pushya": {1: ("Hu",), 2: ("He",), 3: ("Ho",), 4: ("Da",)},
    "Ashlesha": {1: ("Di",), 2: ("Du",), 3: ("De",), 4: ("Do",)},
    "Magha": {1: ("Ma",), 2: ("Mi",), 3: ("Mu",), 4: ("Me",)},
    "Purva Phalguni": {1: ("Mo",), 2: ("Ta",), 3: ("Ti",), 4: ("Tu",)},
    "Uttara Phalguni": {1: ("Te",), 2: ("To",), 3: ("Pa",), 4: ("Pi",)},
    "Hasta": {1: ("Pu",), 2: ("Sha",), 3: ("Na",), 4: ("Tha",)},
    "Chitra": {1: ("Pe",), 2: ("Po",), 3: ("Ra",), 4: ("Ri",)},
    "Swati": {1: ("Ru",), 2: ("Re",), 3: ("Ro",), 4: ("Ta",)},
    "Vishakha": {1: ("Ti",), 2: ("Tu",), 3: ("Te",), 4: ("To",)},
    "Anuradha": {1: ("Na",), 2: ("Ni",), 3: ("Nu",), 4: ("Ne",)},
    "Jyeshtha": {1: ("No",), 2: ("Ya",), 3: ("Yi",), 4: ("Yu",)},
    "Mula": {1: ("Ye",), 2: ("Yo",), 3: ("Ba",), 4: ("Bi",)},
    "Purva Ashadha": {1: ("Bu",), 2: ("Da",), 3: ("Bha",), 4: ("Dha",)},
    "Uttara Ashadha": {1: ("Be",), 2: ("Bo",), 3: ("Ja",), 4: ("Ji",)},
    "Shravana": {1: ("Ju",), 2: ("Je",), 3: ("Jo",), 4: ("Gha",)},
    "Dhanishta": {1: ("Ga",), 2: ("Gi",), 3: ("Gu",), 4: ("Ge",)},
    "Shatabhisha": {1: ("Go",), 2: ("Sa",), 3: ("Si",), 4: ("Su",)},
    "Purva Bhadrapada": {1: ("Se",), 2: ("So",), 3: ("Da",), 4: ("Di",)},
    "Uttara Bhadrapada": {1: ("Du",), 2: ("Tha",), 3: ("Jha",), 4: ("Na",)},
    "Revati": {1: ("De",), 2: ("Do",), 3: ("Cha",), 4: ("Chi",)},
}


def pada_sounds(nakshatra: str, pada: int) -> list[str]:
    """Starting sounds for one pada of a nakshatra.

    Raises:
        AstrologyError: If the nakshatra or pada is unknown
    """
    try:
        return list(NAKSHATRA_PADA_SYLLABLES[nakshatra][pada])
    except KeyError:
        raise AstrologyError(f"Unknown nakshatra/pada: {nakshatra}/{pada}") from None


def nakshatra_sounds(nakshatra: str) -> list[str]:
    """Starting sounds of every pada of a nakshatra, in pada order."""
    if nakshatra not in NAKSHATRA_PADA_SYLLABLES:
        raise AstrologyError(f"Unknown nakshatra: {nakshatra}")
    padas = NAKSHATRA_PADA_SYLLABLES[nakshatra]
    return [sound for pada in sorted(padas) for sound in padas[pada]]


@dataclass
class NakshatraResult:
    """Astrology lookup result"""

    nakshatra: str
    pada: int
    start_sounds: list[str] = field(default_factory=list)


class AstrologyProvider(ABC):
    """Abstract base class for astrology collaborators"""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def lookup(self, birth: BirthDetails) -> NakshatraResult:
        """Compute nakshatra, pada and starting sounds for a complete birth descriptor"""
        pass


class StubAstrologyProvider(AstrologyProvider):
    """Fixed-answer provider.

    No ephemeris is consulted: every complete birth descriptor maps to the
    same nakshatra and pada, with the sounds of the whole nakshatra.
    """

    def __init__(self, nakshatra: str = "Pushya", pada: int = 3):
        if nakshatra not in NAKSHATRA_PADA_SYLLABLES:
            raise ValueError(f"Unknown nakshatra: {nakshatra}")
        if pada not in NAKSHATRA_PADA_SYLLABLES[nakshatra]:
            raise ValueError(f"Unknown pada {pada} for {nakshatra}")
        self.nakshatra = nakshatra
        self.pada = pada

    @property
    def name(self) -> str:
        return "stub"

    async def lookup(self, birth: BirthDetails) -> NakshatraResult:
        if not birth.is_complete:
            raise AstrologyError("Birth date, time and place are all required")
        logger.debug(f"Stub astrology lookup for birth on {birth.date} in {birth.place}")
        return NakshatraResult(
            nakshatra=self.nakshatra,
            pada=self.pada,
            start_sounds=nakshatra_sounds(self.nakshatra),
        )


def create_astrology_provider(name: str) -> AstrologyProvider:
    """Create an astrology provider by name.

    Raises:
        ValueError: If the provider is not supported
    """
    if name.lower() == "stub":
        return StubAstrologyProvider()
    raise ValueError(f"Unsupported astrology provider: {name}. Available: stub")
