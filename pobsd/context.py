"""Database context: wires configuration, parser and database for callers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pobsd.config import Config, get_config
from pobsd.core.parser import DatabaseFileError, Parser, ParserResult
from pobsd.data.game_database import GameDataBase
from pobsd.logger import setup_logger


@dataclass
class DatabaseContext:
    """Everything a front end needs to query the games database."""

    config: Config
    parser_result: ParserResult
    database: GameDataBase


def create_context(config: Config | None = None, path: str | Path | None = None) -> DatabaseContext:
    """Parse the database file and build a DatabaseContext.

    *path* overrides the configured ``database_path``.

    Raises:
        DatabaseFileError: if no database path is available or it cannot be read.
    """
    config = config or get_config()

    # Logger
    setup_logger(config.data_dir / "logs" if config.log_to_file else None, config.log_level)

    db_path = Path(path) if path else config.database_path
    if db_path is None:
        raise DatabaseFileError("No database path configured")

    parser_result = Parser(config.parsing_mode).load_from_file(db_path)
    database = GameDataBase(parser_result.games)

    return DatabaseContext(config=config, parser_result=parser_result, database=database)
