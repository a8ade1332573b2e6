"""Field model: one classified line of the games database.

A line is either ``<Label>`` or ``<Label>\\t<payload>``. ``classify()`` turns a
raw line into a ``Field`` and ``render()`` turns it back into text:

    >>> classify("Year\\t2011")
    Field(kind=<FieldKind.YEAR: 'Year'>, value='2011')
    >>> render(classify("Year\\t2011"))
    'Year\\t2011'

Payload types per kind:

    Game, Cover, Engine, Setup, Runtime,
    Hints, Year, Version                 str | None
    Genre, Tags, Dev, Pub                list[str] | None
    Store                                list[StoreLink] | None
    Status                               GameStatus (never None)
    Added, Updated                       date (epoch when missing/invalid)
    IgdbId                               int | None
    Unknown                              offending label, None for empty lines
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any, Callable

from pobsd.models.game_status import GameStatus
from pobsd.models.store_link import StoreLink

EPOCH = date(1970, 1, 1)

_DIGITS = re.compile(r"[0-9]+")


class FieldKind(StrEnum):
    """Line kinds; values are the labels used in the database."""

    GAME = "Game"
    COVER = "Cover"
    ENGINE = "Engine"
    SETUP = "Setup"
    RUNTIME = "Runtime"
    STORE = "Store"
    HINTS = "Hints"
    GENRE = "Genre"
    TAGS = "Tags"
    YEAR = "Year"
    DEV = "Dev"
    PUB = "Pub"
    VERSION = "Version"
    STATUS = "Status"
    ADDED = "Added"
    UPDATED = "Updated"
    IGDB_ID = "IgdbId"
    UNKNOWN = "Unknown field"


_LABELS: dict[str, FieldKind] = {k.value: k for k in FieldKind if k is not FieldKind.UNKNOWN}


@dataclass(frozen=True)
class Field:
    """A classified line: its kind and parsed payload."""

    kind: FieldKind
    value: Any = None

    @property
    def label(self) -> str:
        return self.kind.value


def split_line(line: str) -> tuple[str | None, str | None]:
    """Split a line on its first tab into (label, payload).

    An empty line gives (None, None); a missing or empty payload gives None.
    """
    if not line:
        return None, None
    label, sep, payload = line.partition("\t")
    if not sep or not payload:
        return label, None
    return label, payload


# ── Payload parsers ──


def _parse_list(payload: str | None) -> list[str] | None:
    if payload is None:
        return None
    return [item.strip() for item in payload.split(",")]


def _parse_stores(payload: str | None) -> list[StoreLink] | None:
    if payload is None:
        return None
    return [StoreLink.from_url(url.strip()) for url in payload.split(" ")]


def _parse_date(payload: str | None) -> date:
    if payload is None:
        return EPOCH
    try:
        return datetime.strptime(payload, "%Y-%m-%d").date()
    except ValueError:
        return EPOCH


def _parse_igdb_id(payload: str | None) -> int | None:
    if payload is None or not _DIGITS.fullmatch(payload):
        return None
    return int(payload)


_PARSERS: dict[FieldKind, Callable[[str | None], Any]] = {
    FieldKind.STORE: _parse_stores,
    FieldKind.GENRE: _parse_list,
    FieldKind.TAGS: _parse_list,
    FieldKind.DEV: _parse_list,
    FieldKind.PUB: _parse_list,
    FieldKind.STATUS: GameStatus.from_line,
    FieldKind.ADDED: _parse_date,
    FieldKind.UPDATED: _parse_date,
    FieldKind.IGDB_ID: _parse_igdb_id,
}


def classify(line: str) -> Field:
    """Convert one line of the database into a Field."""
    label, payload = split_line(line)
    if label is None:
        return Field(FieldKind.UNKNOWN)
    kind = _LABELS.get(label)
    if kind is None:
        return Field(FieldKind.UNKNOWN, label)
    parser = _PARSERS.get(kind)
    return Field(kind, parser(payload) if parser else payload)


# ── Rendering ──


def _render_payload(field: Field) -> str:
    value = field.value
    if value is None:
        return ""
    if field.kind in (FieldKind.GENRE, FieldKind.TAGS, FieldKind.DEV, FieldKind.PUB):
        return ", ".join(value)
    if field.kind is FieldKind.STORE:
        return " ".join(str(link) for link in value)
    if field.kind in (FieldKind.ADDED, FieldKind.UPDATED):
        return value.isoformat()
    return str(value)


def render(field: Field) -> str:
    """Render a Field back to its line form.

    A field without payload is rendered as the bare label, without tab.
    Unknown fields render as their offending label.
    """
    if field.kind is FieldKind.UNKNOWN:
        return field.value or ""
    payload = _render_payload(field)
    if not payload:
        return field.label
    return f"{field.label}\t{payload}"
