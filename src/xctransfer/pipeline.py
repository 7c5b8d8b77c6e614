"""The export run: ShareData records to one KML file."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from xctransfer.kml.builder import (
    build_document,
    findpoint_placemark,
    route_placemark,
    waypoint_placemark,
)
from xctransfer.kml.writer import wrap_kml, write_kml
from xctransfer.source import ShareDataSource


@dataclass
class RunSummary:
    """What one export run produced."""

    output_path: Path
    routes: int
    waypoints: int
    findpoints: int


class Pipeline:
    """One export run over a single ShareData source.

    Stages run in a fixed order: hunts and their route points, then
    waypoints, then findpoints, then the document is assembled and
    written. Any :class:`~xctransfer.errors.XCTransferError` propagates
    to the caller unchanged.

    Args:
        source: Open data source. The pipeline does not close it.
    """

    def __init__(self, source: ShareDataSource):
        self.source = source

    def _placemarks(self) -> tuple[list[ET.Element], list[ET.Element], list[ET.Element]]:
        logger.info("Make KML...")
        routes = [
            route_placemark(hunt.name, self.source.points(hunt.uuid))
            for hunt in self.source.hunts()
        ]
        waypoints = [waypoint_placemark(wp) for wp in self.source.waypoints()]
        findpoints = [findpoint_placemark(fp) for fp in self.source.findpoints()]
        return routes, waypoints, findpoints

    def run(self, output_path: str | Path) -> RunSummary:
        """Build the document and write it to *output_path*."""
        routes, waypoints, findpoints = self._placemarks()
        root = wrap_kml(build_document(routes, waypoints, findpoints))
        path = write_kml(root, output_path)
        return RunSummary(
            output_path=path,
            routes=len(routes),
            waypoints=len(waypoints),
            findpoints=len(findpoints),
        )
