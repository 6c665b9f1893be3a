"""
Query constants for the candidate and skill directories.

Raw query-string values are coerced into these closed enumerations; parsing
never fails, unknown values fall back to the documented default.
"""
from enum import Enum
from typing import Final, Optional


DEFAULT_PAGE: Final[int] = 1
DEFAULT_PAGE_SIZE: Final[int] = 20
MAX_PAGE_SIZE: Final[int] = 100


class MatchMode(str, Enum):
    """Skill filter semantics."""

    ANY = "any"  # at least one requested skill
    ALL = "all"  # every requested skill, extra skills allowed

    @classmethod
    def parse(cls, value: Optional[str]) -> "MatchMode":
        if value is not None and value.strip().lower() == cls.ALL.value:
            return cls.ALL
        return cls.ANY


class SortField(str, Enum):
    """Candidate fields the directory can be sorted by."""

    NAME = "name"
    DOB = "dob"
    EMAIL = "email"
    PHONE = "phone"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortField":
        if value is None:
            return cls.NAME
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NAME


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        if value is not None and value.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


def normalize_page(page: Optional[int]) -> int:
    """Pages are 1-based; anything below 1 means the first page."""
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def normalize_page_size(page_size: Optional[int]) -> int:
    """Out-of-range sizes fall back to the default rather than being clamped."""
    if page_size is None or page_size < 1 or page_size > MAX_PAGE_SIZE:
        return DEFAULT_PAGE_SIZE
    return page_size
