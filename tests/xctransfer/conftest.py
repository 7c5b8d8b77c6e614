"""Shared fixtures for xctransfer tests."""

from __future__ import annotations

import sqlite3

import pytest

_SCHEMA = """
CREATE TABLE geohunt (uuid TEXT, name TEXT);
CREATE TABLE point (geohunt_fk TEXT, latitude REAL, longitude REAL);
CREATE TABLE waypoint (name TEXT, latitude REAL, longitude REAL);
CREATE TABLE findpoint (name TEXT, latitude REAL, longitude REAL);
"""


@pytest.fixture
def make_sharedata(tmp_path):
    """Factory writing a ShareData SQLite file from row lists."""

    def _make(hunts=(), points=(), waypoints=(), findpoints=(), name="ShareData"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
        try:
            conn.executescript(_SCHEMA)
            conn.executemany("INSERT INTO geohunt VALUES (?, ?)", hunts)
            conn.executemany("INSERT INTO point VALUES (?, ?, ?)", points)
            conn.executemany("INSERT INTO waypoint VALUES (?, ?, ?)", waypoints)
            conn.executemany("INSERT INTO findpoint VALUES (?, ?, ?)", findpoints)
            conn.commit()
        finally:
            conn.close()
        return path

    return _make


@pytest.fixture
def ridge_trail_db(make_sharedata):
    """One hunt with three points, two waypoints, one findpoint."""
    return make_sharedata(
        hunts=[("h-1", "Ridge Trail")],
        points=[
            ("h-1", 10.0, 50.0),
            ("h-1", 10.1, 50.1),
            ("h-1", 10.2, 50.2),
        ],
        waypoints=[("Summit", 47.421, 10.985), ("Hut", 47.39, 11.01)],
        findpoints=[("Cache", 47.4, 10.99)],
    )


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
