"""Error classes for name search.

Collaborator errors (parse, astrology) are recovered inside the pipeline and
never reach callers; UnknownNameError is the only one mapped to an HTTP status.
"""

from __future__ import annotations


class NamastraError(Exception):
    """Base exception for name search errors."""

    pass


class WishParseError(NamastraError):
    """Raised when a wish parser cannot produce a usable filter fragment."""

    pass


class AstrologyError(NamastraError):
    """Raised when the astrology collaborator cannot compute starting sounds."""

    pass


class UnknownNameError(NamastraError):
    """Raised when a name id is not present in the corpus."""

    def __init__(self, name_id: str):
        self.name_id = name_id
        super().__init__(f"Unknown name id: {name_id}")
