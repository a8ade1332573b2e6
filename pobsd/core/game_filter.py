"""Multi-field game filter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

from pobsd.models.game import Game, GameField
from pobsd.models.game_status import GameStatus, Status
from pobsd.models.search_type import SearchType


@dataclass
class GameFilter:
    """
    Set of optional per-field patterns.

    A game passes the filter when ANY set criterion matches it: text fields
    by substring, ``status`` by level, ``status_pattern`` by substring of the
    level name (e.g. "complet" finds completable games). A filter with nothing
    set matches no game, so "no filter" must be handled by the caller.

    Example:
        GameFilter(name="Barrow", tag="indie").filter_games(games, SearchType.NOT_CASE_SENSITIVE)
    """

    name: str | None = None
    engine: str | None = None
    runtime: str | None = None
    genre: str | None = None
    tag: str | None = None
    year: str | None = None
    developer: str | None = None
    publisher: str | None = None
    status: Status | None = None
    status_pattern: str | None = None

    @classmethod
    def for_field(cls, game_field: GameField | str, value: str | Status) -> GameFilter:
        """Filter with a single criterion."""
        return cls().set(game_field, value)

    def set(self, game_field: GameField | str, value: str | Status | GameStatus) -> GameFilter:
        """Set one criterion; returns the filter for chaining.

        For the status field a ``Status`` or ``GameStatus`` sets the level,
        any other string sets ``status_pattern``.
        """
        game_field = GameField(game_field)
        if game_field is GameField.STATUS:
            if isinstance(value, GameStatus):
                self.status = value.status
            elif isinstance(value, Status):
                self.status = value
            else:
                self.status_pattern = value
            return self
        setattr(self, game_field.value, value)
        return self

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def check_game(self, game: Game, search_type: SearchType = SearchType.CASE_SENSITIVE) -> bool:
        if self.status is not None and game.status.status is self.status:
            return True
        if self.status_pattern is not None and search_type.contains(
            str(game.status.status), self.status_pattern
        ):
            return True
        for game_field in GameField:
            if game_field is GameField.STATUS:
                continue
            pattern = getattr(self, game_field.value)
            if pattern is not None and game.field_contains(game_field, pattern, search_type):
                return True
        return False

    def filter_games(
        self,
        games: Iterable[Game],
        search_type: SearchType = SearchType.CASE_SENSITIVE,
    ) -> list[Game]:
        """Games passing the filter, in input order."""
        return [game for game in games if self.check_game(game, search_type)]


def find_game_by_name(
    games: Iterable[Game],
    name: str,
    search_type: SearchType = SearchType.CASE_SENSITIVE,
) -> Game | None:
    """First game named *name*, or else the first whose name contains it.

    Candidates are taken in ascending uid order so the choice is stable.
    """
    substring_match: Game | None = None
    for game in sorted(games, key=lambda g: g.uid):
        if search_type.equals(game.name, name):
            return game
        if substring_match is None and search_type.contains(game.name, name):
            substring_match = game
    return substring_match
