"""Static name corpus.

A small curated slice of the catalog. Order is significant: search results
are returned in this insertion order.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.models import Gender, NameRecord, Popularity

SAMPLE_NAMES: tuple[NameRecord, ...] = (
    NameRecord(
        id="1",
        name="Vihaan",
        gender=Gender.BOY,
        scripts={"Latin": "Vihaan", "Devanagari": "विहान"},
        syllables=2,
        phonetic_start="Vi",
        deity_affinity="Vishnu",
        sources=("Sahasranama", "Puranas"),
        meaning="Dawn; the first ray of sun",
        language="Sanskrit",
        region_tags=("Pan-India",),
        modernity=4,
        global_pronounce=4,
        nicknames=("Vii", "Han"),
        related=("Vivaan", "Vihan"),
        popularity=Popularity.COMMON,
    ),
    NameRecord(
        id="2",
        name="Vedant",
        gender=Gender.BOY,
        scripts={"Latin": "Vedant", "Devanagari": "वेदान्त"},
        syllables=2,
        phonetic_start="Ve",
        deity_affinity="None",
        sources=("Upanishads",),
        meaning="The end/culmination of the Veda; knowledge of the Self",
        language="Sanskrit",
        region_tags=("Pan-India",),
        modernity=3,
        global_pronounce=3,
        nicknames=("Ved",),
        related=("Vedanta", "Vedan"),
        popularity=Popularity.COMMON,
    ),
    NameRecord(
        id="3",
        name="Vasu",
        gender=Gender.BOY,
        scripts={"Latin": "Vasu", "Devanagari": "वसु"},
        syllables=2,
        phonetic_start="Va",
        deity_affinity="Vishnu",
        sources=("Sahasranama", "Puranas"),
        meaning="Wealthy; one of the eight Vasus; an epithet of Vishnu",
        language="Sanskrit",
        region_tags=("North", "South"),
        modernity=3,
        global_pronounce=4,
        nicknames=("Vas",),
        related=("Vasudev", "Vasuman"),
        popularity=Popularity.UNCOMMON,
    ),
    NameRecord(
        id="4",
        name="Hriday",
        gender=Gender.BOY,
        scripts={"Latin": "Hriday", "Devanagari": "हृदय"},
        syllables=2,
        phonetic_start="Hri/Hr",
        deity_affinity="None",
        sources=("Sanskrit",),
        meaning="Heart; core",
        language="Sanskrit",
        region_tags=("Pan-India",),
        modernity=3,
        global_pronounce=2,
        nicknames=("Hri",),
        related=("Hridaya",),
        popularity=Popularity.UNCOMMON,
    ),
    NameRecord(
        id="5",
        name="Harish",
        gender=Gender.BOY,
        scripts={"Latin": "Harish", "Devanagari": "हरीश"},
        syllables=2,
        phonetic_start="Ha",
        deity_affinity="Vishnu",
        sources=("Puranas",),
        meaning="Lord Vishnu; lord of Hari",
        language="Sanskrit",
        region_tags=("Pan-India",),
        modernity=2,
        global_pronounce=4,
        nicknames=("Hari",),
        related=("Harishchandra", "Haridas"),
        popularity=Popularity.COMMON,
    ),
)


@lru_cache(maxsize=1)
def get_corpus() -> tuple[NameRecord, ...]:
    """Return the corpus, validating id uniqueness on first load."""
    seen: set[str] = set()
    for record in SAMPLE_NAMES:
        if record.id in seen:
            raise ValueError(f"Duplicate name id in corpus: {record.id}")
        seen.add(record.id)
    return SAMPLE_NAMES


def find_name(name_id: str, corpus: tuple[NameRecord, ...] | None = None) -> NameRecord | None:
    """Look up a record by id."""
    for record in corpus if corpus is not None else get_corpus():
        if record.id == name_id:
            return record
    return None
