"""Read-only queries against a ShareData database.

Tables used:
    geohunt(uuid, name)
    point(geohunt_fk, latitude, longitude)
    waypoint(name, latitude, longitude)
    findpoint(name, latitude, longitude)

Rows come back in whatever order SQLite returns them. Route points in
particular are not sorted: the stored row order is the path order.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from xctransfer.database import open_engine
from xctransfer.errors import DataAccessError
from xctransfer.models import Findpoint, Hunt, RoutePoint, Waypoint

T = TypeVar("T")

_HUNTS_SQL = text("SELECT uuid, name FROM geohunt")
_POINTS_SQL = text("SELECT latitude, longitude FROM point WHERE geohunt_fk = :hunt")
_WAYPOINTS_SQL = text("SELECT name, latitude, longitude FROM waypoint")
_FINDPOINTS_SQL = text("SELECT name, latitude, longitude FROM findpoint")


def _as_str(value: Any) -> str:
    if value is None:
        raise TypeError("unexpected NULL text value")
    return str(value)


def _as_float(value: Any) -> float:
    if value is None:
        raise TypeError("unexpected NULL coordinate")
    return float(value)


class ShareDataSource:
    """Data access for one ShareData file.

    Args:
        engine: SQLAlchemy engine bound to the ShareData file. The source
            owns it and disposes it on :meth:`close`.
    """

    def __init__(self, engine: Engine):
        self._engine = engine

    @classmethod
    def open(cls, path, echo: bool = False) -> "ShareDataSource":
        """Open the ShareData file at *path* read-only."""
        return cls(open_engine(path, echo=echo))

    def close(self) -> None:
        self._engine.dispose()

    def __enter__(self) -> "ShareDataSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- queries ---------------------------------------------------------

    def hunts(self) -> list[Hunt]:
        return self._fetch(
            "geohunt", _HUNTS_SQL, {},
            lambda row: Hunt(uuid=_as_str(row[0]), name=_as_str(row[1])),
        )

    def points(self, hunt_uuid: str) -> list[RoutePoint]:
        """Route points of one hunt, in stored row order."""
        return self._fetch(
            "point", _POINTS_SQL, {"hunt": hunt_uuid},
            lambda row: RoutePoint(
                latitude=_as_float(row[0]), longitude=_as_float(row[1])
            ),
        )

    def waypoints(self) -> list[Waypoint]:
        return self._fetch(
            "waypoint", _WAYPOINTS_SQL, {},
            lambda row: Waypoint(
                name=_as_str(row[0]),
                latitude=_as_float(row[1]),
                longitude=_as_float(row[2]),
            ),
        )

    def findpoints(self) -> list[Findpoint]:
        return self._fetch(
            "findpoint", _FINDPOINTS_SQL, {},
            lambda row: Findpoint(
                name=_as_str(row[0]),
                latitude=_as_float(row[1]),
                longitude=_as_float(row[2]),
            ),
        )

    def _fetch(
        self,
        table: str,
        statement,
        params: dict,
        decode: Callable[[Any], T],
    ) -> list[T]:
        """Run *statement* and decode every row, failing on the first error."""
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(statement, params).all()
        except SQLAlchemyError as e:
            raise DataAccessError(f"Query on '{table}' failed: {e}") from e

        records: list[T] = []
        for idx, row in enumerate(rows):
            try:
                records.append(decode(row))
            except (TypeError, ValueError) as e:
                raise DataAccessError(
                    f"Cannot decode row {idx} of '{table}': {e}"
                ) from e
        logger.debug(f"Read {len(records)} rows from {table}")
        return records
