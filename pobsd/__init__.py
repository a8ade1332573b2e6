"""Parser and query engine for the PlayOnBSD games database."""

from __future__ import annotations

from pobsd.core.game_filter import GameFilter
from pobsd.core.parser import DatabaseFileError, Parser, ParserResult, ParsingMode, dump_games
from pobsd.data.game_database import GameDataBase
from pobsd.data.query_result import GameQueryResult, ItemQueryResult, QueryResult
from pobsd.models.field import Field, FieldKind, classify, render
from pobsd.models.game import Game, GameField
from pobsd.models.game_status import GameStatus, Status
from pobsd.models.search_type import SearchType
from pobsd.models.store_link import Store, StoreLink

__all__ = [
    "DatabaseFileError",
    "Field",
    "FieldKind",
    "Game",
    "GameDataBase",
    "GameField",
    "GameFilter",
    "GameQueryResult",
    "GameStatus",
    "ItemQueryResult",
    "Parser",
    "ParserResult",
    "ParsingMode",
    "QueryResult",
    "SearchType",
    "Status",
    "Store",
    "StoreLink",
    "classify",
    "dump_games",
    "render",
]
