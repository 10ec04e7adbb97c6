"""Vocabularies and fixed limits shared by the search pipeline.

The tuples mirror the option lists offered by the search form; request
schemas validate incoming filters against them.
"""

from __future__ import annotations

THEMES: tuple[str, ...] = (
    "Virtue",
    "Nature",
    "Royal",
    "Modern",
    "Traditional",
    "Scholarly",
    "Warrior",
    "Music",
)

DEITIES: tuple[str, ...] = (
    "None",
    "Vishnu",
    "Shiva",
    "Devi",
    "Ganesha",
    "Murugan",
    "Rama",
    "Krishna",
    "Multiple",
)

SOURCES: tuple[str, ...] = (
    "Vedas",
    "Upanishads",
    "Puranas",
    "Epics",
    "Sahasranama",
    "Regional",
    "Sanskrit",
    "None",
)

SCRIPTS: tuple[str, ...] = (
    "Latin",
    "Devanagari",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Gujarati",
    "Gurmukhi",
    "Bengali-Assamese",
)

# A record with this affinity satisfies any deity filter
MULTIPLE_DEITY = "Multiple"

# A deity filter set to this value places no restriction
NO_DEITY = "None"

MAX_RESULTS = 40

SYLLABLE_CHOICES: tuple[int, ...] = (1, 2, 3)
