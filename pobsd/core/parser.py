"""Database parser: assembles classified lines into games.

Each game occupies 17 consecutive lines, one per field, in a fixed order
(Game, Cover, Engine, Setup, Runtime, Store, Hints, Genre, Tags, Year, Dev,
Pub, Version, Status, Added, Updated, IgdbId). The parser is a state machine
with one state per expected field plus two failure states:

  ERROR       a line other than Game was found while a Game line was expected
  RECOVERING  a line did not match the field expected inside a game

In both failure states every line is skipped (and reported) until the next
Game line, which starts a new game. The game being assembled when the
failure happened is dropped.

In STRICT mode parsing stops at the first skipped line; in RELAXED mode it
resumes at the next game and reports every skipped line.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import Path
from typing import Any

from loguru import logger

from pobsd.models.field import FieldKind, classify
from pobsd.models.game import Game, make_uid


class DatabaseFileError(OSError):
    """Raised when the database file cannot be opened or read."""


class ParsingMode(StrEnum):
    STRICT = "strict"
    RELAXED = "relaxed"


class ParserState(StrEnum):
    """Parser states: the field expected next, or a failure state."""

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
    ERROR = "error"
    RECOVERING = "recovering"

    @property
    def is_failure(self) -> bool:
        return self in (ParserState.ERROR, ParserState.RECOVERING)


# Field states in database order; the state after IGDB_ID is GAME again
_SEQUENCE: tuple[ParserState, ...] = tuple(s for s in ParserState if not s.is_failure)
_NEXT: dict[ParserState, ParserState] = {
    state: _SEQUENCE[(i + 1) % len(_SEQUENCE)] for i, state in enumerate(_SEQUENCE)
}

# FieldKind → Game attribute
_GAME_ATTRS: dict[FieldKind, str] = {
    FieldKind.GAME: "name",
    FieldKind.COVER: "cover",
    FieldKind.ENGINE: "engine",
    FieldKind.SETUP: "setup",
    FieldKind.RUNTIME: "runtime",
    FieldKind.STORE: "stores",
    FieldKind.HINTS: "hints",
    FieldKind.GENRE: "genres",
    FieldKind.TAGS: "tags",
    FieldKind.YEAR: "year",
    FieldKind.DEV: "developers",
    FieldKind.PUB: "publishers",
    FieldKind.VERSION: "version",
    FieldKind.STATUS: "status",
    FieldKind.ADDED: "added",
    FieldKind.UPDATED: "updated",
    FieldKind.IGDB_ID: "igdb_id",
}


def next_state(state: ParserState, kind: FieldKind) -> ParserState:
    """Transition function of the parser."""
    if state.is_failure:
        return ParserState.COVER if kind is FieldKind.GAME else state
    if kind.value != state.value:
        return ParserState.ERROR if state is ParserState.GAME else ParserState.RECOVERING
    return _NEXT[state]


@dataclass
class ParserResult:
    """Parsed games plus the 1-based numbers of the skipped lines."""

    games: list[Game] = field(default_factory=list)
    error_lines: list[int] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.error_lines)


def split_lines(data: str) -> list[str]:
    """Split on newlines only, dropping one trailing carriage return per line.

    Other line boundaries known to ``str.splitlines()`` (form feed, U+2028, ...)
    may appear inside payloads and are kept.
    """
    if not data:
        return []
    lines = data.split("\n")
    if data.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _build_game(values: dict[FieldKind, Any]) -> Game:
    kwargs = {_GAME_ATTRS[kind]: value for kind, value in values.items()}
    kwargs["name"] = kwargs.get("name") or ""
    return Game(**kwargs)


class Parser:
    """
    Games database parser.

    Usage:
        result = Parser(ParsingMode.STRICT).load_from_file("openbsd-games.db")
        if result.has_errors:
            print(result.error_lines)
        games = result.games
    """

    def __init__(self, mode: ParsingMode = ParsingMode.RELAXED) -> None:
        self.mode = mode

    def load_from_file(self, path: str | Path) -> ParserResult:
        """Parse a database file.

        Raises:
            DatabaseFileError: if *path* is not a readable regular file.
        """
        path = Path(path)
        if not path.is_file():
            raise DatabaseFileError(f"Not a file: {path}")
        try:
            # no newline translation, split_lines handles "\r\n"
            data = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DatabaseFileError(f"Failed to read {path}: {e}") from e
        logger.debug(f"Loaded database file {path} ({len(data)} chars)")
        return self.load_from_string(data)

    def load_from_string(self, data: str) -> ParserResult:
        """Parse a database held in memory. Never raises on malformed content.

        A game cut off by the end of the input is dropped and reported at the
        last line of the input.
        """
        lines = split_lines(data)
        result = ParserResult()
        state = ParserState.GAME
        pending: dict[FieldKind, Any] = {}

        for number, line in enumerate(lines, start=1):
            field_ = classify(line)
            state = next_state(state, field_.kind)
            if state.is_failure:
                pending = {}
                result.error_lines.append(number)
                logger.debug(f"Skipping line {number}: {line!r}")
                if self.mode is ParsingMode.STRICT:
                    break
                continue
            if field_.kind is FieldKind.GAME:
                pending = {}
            pending[field_.kind] = field_.value
            if field_.kind is FieldKind.IGDB_ID:
                result.games.append(_build_game(pending))
                pending = {}
        else:
            if pending:
                result.error_lines.append(len(lines))
                logger.debug(f"Dropping incomplete game {pending.get(FieldKind.GAME)!r}")

        result.games = [replace(g, uid=make_uid(g.name, g.added)) for g in result.games]

        if result.has_errors:
            logger.warning(
                f"Parsed {len(result.games)} games ({self.mode} mode), "
                f"skipped {len(result.error_lines)} line(s)"
            )
        else:
            logger.info(f"Parsed {len(result.games)} games")
        return result


def dump_games(games: Iterable[Game]) -> str:
    """Render games back to database text."""
    return "".join(f"{game.render()}\n" for game in games)
