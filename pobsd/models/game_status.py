"""Game status models: how well a game runs, as tested on -current."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Status(StrEnum):
    """Status level of a game.

    The database encodes the level as a leading digit (0–6) of the Status
    line; anything else is UNKNOWN.
    """

    UNKNOWN = "unknown"
    DOES_NOT_RUN = "doesnotrun"
    LAUNCHES = "launches"
    MAJOR_BUGS = "majorbugs"
    MEDIUM_IMPACT = "mediumimpact"
    MINOR_BUGS = "minorbugs"
    COMPLETABLE = "completable"
    PERFECT = "perfect"

    @property
    def digit(self) -> str:
        """Digit used in the database, empty for UNKNOWN."""
        if self is Status.UNKNOWN:
            return ""
        return str(_LEVELS.index(self))


# Index in this tuple == digit in the database
_LEVELS: tuple[Status, ...] = (
    Status.DOES_NOT_RUN,
    Status.LAUNCHES,
    Status.MAJOR_BUGS,
    Status.MEDIUM_IMPACT,
    Status.MINOR_BUGS,
    Status.COMPLETABLE,
    Status.PERFECT,
)


@dataclass(frozen=True)
class GameStatus:
    """Status level plus the free-text comment (usually the test date).

    Two statuses compare equal when their levels match; the comment is
    informational only.
    """

    status: Status = Status.UNKNOWN
    comment: str | None = None

    @classmethod
    def from_line(cls, payload: str | None) -> GameStatus:
        """Parse the payload of a Status line."""
        if not payload or payload[0] not in "0123456":
            return cls()
        comment = payload[1:].strip()
        return cls(status=_LEVELS[int(payload[0])], comment=comment or None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameStatus):
            return NotImplemented
        return self.status == other.status

    def __hash__(self) -> int:
        return hash(self.status)

    def __str__(self) -> str:
        if self.status is Status.UNKNOWN:
            return ""
        if self.comment:
            return f"{self.status.digit} {self.comment}"
        return self.status.digit
