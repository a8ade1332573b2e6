"""Game database: in-memory game index with per-field secondary indexes."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from pobsd.core.game_filter import GameFilter, find_game_by_name
from pobsd.data.query_result import GameQueryResult, ItemQueryResult
from pobsd.models.game import INDEXED_FIELDS, Game, GameField
from pobsd.models.search_type import SearchType
from pobsd.models.store_link import Store


def _indexed_field(game_field: GameField | str) -> GameField:
    game_field = GameField(game_field)
    if game_field not in INDEXED_FIELDS:
        raise ValueError(f"{game_field} has no index")
    return game_field


class GameDataBase:
    """
    Queryable games database, built once from parsed games.

    Games are keyed by uid. Each indexed field (engine, runtime, genre, tag,
    year, developer, publisher) maps its values to the uids of the games
    carrying them, in load order. Games sharing a uid overwrite each other,
    last one wins; the buckets of the replaced game are kept, so the winner
    can show up under values only the replaced game carried.

    Usage:
        db = GameDataBase(Parser().load_from_file("openbsd-games.db").games)
        db.match_games_by(GameField.TAG, "indie")
        db.search_games_by("engine", "godot", SearchType.NOT_CASE_SENSITIVE)
    """

    def __init__(self, games: Iterable[Game] = ()) -> None:
        self._games: dict[int, Game] = {}
        self._indexes: dict[GameField, dict[str, list[int]]] = {f: {} for f in INDEXED_FIELDS}
        for game in games:
            self._load_game(game)
        logger.debug(
            f"Game database built: {len(self._games)} games, "
            + ", ".join(f"{f}={len(idx)}" for f, idx in self._indexes.items())
        )

    def _load_game(self, game: Game) -> None:
        previous = self._games.get(game.uid)
        if previous is not None:
            logger.warning(
                f"Game uid {game.uid} collision: '{game.name}' replaces '{previous.name}'"
            )
        self._games[game.uid] = game
        for game_field, index in self._indexes.items():
            for value in game.field_values(game_field):
                index.setdefault(value, []).append(game.uid)

    @property
    def count(self) -> int:
        return len(self._games)

    def __len__(self) -> int:
        return len(self._games)

    def _games_by_uid(self) -> list[Game]:
        return [self._games[uid] for uid in sorted(self._games)]

    # ── Point lookups ──

    def get_game_by_id(self, game_id: int) -> Game | None:
        return self._games.get(game_id)

    def get_game_by_ids(self, game_ids: Iterable[int]) -> GameQueryResult:
        """Games for the given uids; unknown uids are ignored."""
        return GameQueryResult(
            self._games[uid] for uid in game_ids if uid in self._games
        )

    def get_game_by_name(
        self, name: str, search_type: SearchType = SearchType.CASE_SENSITIVE
    ) -> Game | None:
        """Game named *name*, else the first (by uid) whose name contains it."""
        return find_game_by_name(self._games.values(), name, search_type)

    def get_game_by_steam_id(self, steam_id: int) -> Game | None:
        for game in self._games_by_uid():
            for link in game.stores or ():
                if link.store is Store.STEAM and link.id == steam_id:
                    return game
        return None

    # ── Field queries ──

    def match_games_by(self, game_field: GameField | str, value: str) -> GameQueryResult:
        """Games whose *game_field* equals *value* exactly."""
        index = self._indexes[_indexed_field(game_field)]
        # uid collisions can leave the same uid twice in a bucket
        return self.get_game_by_ids(dict.fromkeys(index.get(value, ())))

    def search_games_by(
        self,
        game_field: GameField | str,
        pattern: str,
        search_type: SearchType = SearchType.CASE_SENSITIVE,
    ) -> GameQueryResult:
        """Games whose *game_field* contains *pattern*."""
        return self.search_games_by_filter(GameFilter.for_field(game_field, pattern), search_type)

    def search_games_by_filter(
        self, game_filter: GameFilter, search_type: SearchType = SearchType.CASE_SENSITIVE
    ) -> GameQueryResult:
        return GameQueryResult(game_filter.filter_games(self._games.values(), search_type))

    def get_all(self, game_field: GameField | str) -> ItemQueryResult:
        """Distinct values of an indexed field, sorted."""
        return ItemQueryResult(self._indexes[_indexed_field(game_field)])

    def get_all_with_ids(self, game_field: GameField | str) -> list[tuple[str, list[int]]]:
        """Sorted distinct values of an indexed field with their uids (load order)."""
        index = self._indexes[_indexed_field(game_field)]
        return [(value, list(index[value])) for value in sorted(index)]

    def get_all_games(self) -> GameQueryResult:
        return GameQueryResult(self._games.values())
