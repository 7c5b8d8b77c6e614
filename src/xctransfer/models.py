"""Record dataclasses read from a ShareData database.

Coordinates are WGS84 degrees. Ranges are not validated; whatever is
stored in the database passes through to the KML output unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hunt:
    """A geohunt: one named route.

    Attributes:
        uuid: Identifier referenced by ``point.geohunt_fk``.
        name: Display name, used as the route placemark name.
    """

    uuid: str
    name: str


@dataclass(frozen=True)
class RoutePoint:
    """One point on a hunt's route, in query order."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Waypoint:
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Findpoint:
    name: str
    latitude: float
    longitude: float
