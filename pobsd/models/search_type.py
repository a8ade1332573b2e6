"""Search type used by substring queries."""

from __future__ import annotations

from enum import StrEnum


class SearchType(StrEnum):
    """Whether substring matching honours case."""

    CASE_SENSITIVE = "case_sensitive"
    NOT_CASE_SENSITIVE = "not_case_sensitive"

    def contains(self, value: str, pattern: str) -> bool:
        """Return True if *pattern* occurs in *value* under this search type."""
        if self is SearchType.CASE_SENSITIVE:
            return pattern in value
        return pattern.lower() in value.lower()

    def equals(self, value: str, other: str) -> bool:
        if self is SearchType.CASE_SENSITIVE:
            return value == other
        return value.lower() == other.lower()
