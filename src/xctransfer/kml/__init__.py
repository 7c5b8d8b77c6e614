"""KML document building and writing.

Uses only xml.etree.ElementTree (stdlib).
KML coordinates are in "lng,lat" order (longitude first).
"""

from xctransfer.kml.builder import (
    build_document,
    findpoint_placemark,
    route_placemark,
    waypoint_placemark,
)
from xctransfer.kml.writer import next_output_path, wrap_kml, write_kml

__all__ = [
    "build_document",
    "findpoint_placemark",
    "next_output_path",
    "route_placemark",
    "waypoint_placemark",
    "wrap_kml",
    "write_kml",
]
