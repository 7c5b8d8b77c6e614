"""SQLAlchemy engine setup for ShareData files."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from xctransfer.errors import DataAccessError


def sqlite_uri(path: str | Path) -> str:
    """Build a read-only SQLite ``file:`` URI for *path*.

    The path is percent-encoded, so ``#``, ``?`` and ``%`` in directory
    names stay part of the filename. Opening in ``mode=ro`` makes a
    missing file an error instead of creating an empty database in its
    place.
    """
    return Path(path).expanduser().resolve().as_uri() + "?mode=ro"


def open_engine(path: str | Path, echo: bool = False) -> Engine:
    """Create an engine for the ShareData file and verify it responds.

    Raises:
        DataAccessError: The file cannot be opened as a SQLite database.
    """
    uri = sqlite_uri(path)
    logger.debug(f"Opening database: {uri}")
    engine = create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(uri, uri=True),
        echo=echo,
    )
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        engine.dispose()
        raise DataAccessError(f"Cannot open database {path}: {e}") from e
    return engine
