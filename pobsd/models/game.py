"""Game model: one record of the games database."""

from __future__ import annotations

import zlib
from dataclasses import asdict, dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from pobsd.models.field import EPOCH, Field, FieldKind, render
from pobsd.models.game_status import GameStatus
from pobsd.models.search_type import SearchType
from pobsd.models.store_link import Store, StoreLink

_ARTICLES = ("the ", "a ")


class GameField(StrEnum):
    """Queryable game attributes."""

    NAME = "name"
    ENGINE = "engine"
    RUNTIME = "runtime"
    GENRE = "genre"
    TAG = "tag"
    YEAR = "year"
    DEVELOPER = "developer"
    PUBLISHER = "publisher"
    STATUS = "status"


# Fields with a secondary index in GameDataBase
INDEXED_FIELDS: tuple[GameField, ...] = (
    GameField.ENGINE,
    GameField.RUNTIME,
    GameField.GENRE,
    GameField.TAG,
    GameField.YEAR,
    GameField.DEVELOPER,
    GameField.PUBLISHER,
)

# GameField → Game attribute holding its text value(s)
_TEXT_ATTRS: dict[GameField, str] = {
    GameField.NAME: "name",
    GameField.ENGINE: "engine",
    GameField.RUNTIME: "runtime",
    GameField.GENRE: "genres",
    GameField.TAG: "tags",
    GameField.YEAR: "year",
    GameField.DEVELOPER: "developers",
    GameField.PUBLISHER: "publishers",
}


def make_uid(name: str, added: date) -> int:
    """Derive the 32-bit game identifier from the added date and the name.

    Two games with the same name added on the same day share an identifier.
    """
    crc = zlib.crc32(added.isoformat().encode("utf-8"))
    crc = zlib.crc32(name.encode("utf-8"), crc)
    return crc & 0xFFFFFFFF


def ordering_key(name: str) -> str:
    """Lowercased name without a leading "The " or "A "."""
    lowered = name.lower()
    for article in _ARTICLES:
        if lowered.startswith(article):
            return lowered[len(article) :]
    return lowered


@dataclass(frozen=True)
class Game:
    """A game of the database.

    Games sort by ``ordering_key(name)``; equality compares every field.
    ``uid`` is assigned by the parser once the record is complete.
    """

    name: str
    uid: int = 0
    cover: str | None = None
    engine: str | None = None
    setup: str | None = None
    runtime: str | None = None
    stores: list[StoreLink] | None = None
    hints: str | None = None
    genres: list[str] | None = None
    tags: list[str] | None = None
    year: str | None = None  # may be text such as "early access"
    developers: list[str] | None = None
    publishers: list[str] | None = None
    version: str | None = None
    status: GameStatus = GameStatus()
    added: date = EPOCH
    updated: date = EPOCH
    igdb_id: int | None = None

    @property
    def ordering_key(self) -> str:
        return ordering_key(self.name)

    def __lt__(self, other: Game) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.ordering_key < other.ordering_key

    def __hash__(self) -> int:
        return hash((self.uid, self.name))

    # ── Field access ──

    def field_values(self, game_field: GameField | str) -> list[str]:
        """Text values carried by *game_field* (one per list element)."""
        game_field = GameField(game_field)
        if game_field not in _TEXT_ATTRS:
            raise ValueError(f"{game_field} is not a text field")
        value = getattr(self, _TEXT_ATTRS[game_field])
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    def field_contains(
        self,
        game_field: GameField | str,
        pattern: str,
        search_type: SearchType = SearchType.CASE_SENSITIVE,
    ) -> bool:
        """True if any value of *game_field* contains *pattern*."""
        return any(search_type.contains(v, pattern) for v in self.field_values(game_field))

    def has_store(self, store: Store) -> bool:
        return any(link.store is store for link in self.stores or ())

    # ── Serialization ──

    def to_fields(self) -> list[Field]:
        """The 17 fields of this game, in database order."""
        return [
            Field(FieldKind.GAME, self.name),
            Field(FieldKind.COVER, self.cover),
            Field(FieldKind.ENGINE, self.engine),
            Field(FieldKind.SETUP, self.setup),
            Field(FieldKind.RUNTIME, self.runtime),
            Field(FieldKind.STORE, self.stores),
            Field(FieldKind.HINTS, self.hints),
            Field(FieldKind.GENRE, self.genres),
            Field(FieldKind.TAGS, self.tags),
            Field(FieldKind.YEAR, self.year),
            Field(FieldKind.DEV, self.developers),
            Field(FieldKind.PUB, self.publishers),
            Field(FieldKind.VERSION, self.version),
            Field(FieldKind.STATUS, self.status),
            Field(FieldKind.ADDED, self.added),
            Field(FieldKind.UPDATED, self.updated),
            Field(FieldKind.IGDB_ID, self.igdb_id),
        ]

    def render(self) -> str:
        """The game as it appears in the database."""
        return "\n".join(render(f) for f in self.to_fields())

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable representation."""
        data = asdict(self)
        data["status"] = {"status": str(self.status.status), "comment": self.status.comment}
        data["stores"] = [link.to_dict() for link in self.stores] if self.stores else None
        data["added"] = self.added.isoformat()
        data["updated"] = self.updated.isoformat()
        return data

    def __str__(self) -> str:
        return self.render()
