"""Query results: sorted, re-queryable collections returned by the database."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from pobsd.core.game_filter import GameFilter, find_game_by_name
from pobsd.models.game import Game, GameField
from pobsd.models.search_type import SearchType

T = TypeVar("T", Game, str)


class QueryResult(Generic[T]):
    """
    Sorted collection of query results.

    Items are sorted on construction (games by ordering key, strings
    lexicographically) and never modified afterwards; every refining
    query returns a new result.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = sorted(items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def get(self, index: int) -> T | None:
        """Item at *index*, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def into_inner(self) -> list[T]:
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count})"


class GameQueryResult(QueryResult[Game]):
    """Query result holding games."""

    def get_game_by_name(
        self, name: str, search_type: SearchType = SearchType.CASE_SENSITIVE
    ) -> Game | None:
        return find_game_by_name(self._items, name, search_type)

    def filter_games_by(
        self,
        game_field: GameField | str,
        pattern: str,
        search_type: SearchType = SearchType.CASE_SENSITIVE,
    ) -> GameQueryResult:
        """Games whose *game_field* contains *pattern*."""
        return self.filter_games(GameFilter.for_field(game_field, pattern), search_type)

    def search_games_by_name(
        self, pattern: str, search_type: SearchType = SearchType.CASE_SENSITIVE
    ) -> GameQueryResult:
        return self.filter_games_by(GameField.NAME, pattern, search_type)

    def filter_games(
        self, game_filter: GameFilter, search_type: SearchType = SearchType.CASE_SENSITIVE
    ) -> GameQueryResult:
        return GameQueryResult(game_filter.filter_games(self._items, search_type))


class ItemQueryResult(QueryResult[str]):
    """Query result holding field values (tags, engines, ...)."""

    def get_item_by_name(self, name: str) -> str | None:
        """Exact, case-sensitive lookup."""
        return name if name in self._items else None

    def filter_items_by_name(self, name: str) -> ItemQueryResult:
        """Items containing *name*, ignoring case."""
        return ItemQueryResult(
            item for item in self._items if SearchType.NOT_CASE_SENSITIVE.contains(item, name)
        )
