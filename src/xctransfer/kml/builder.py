"""Build KML Placemark and Document elements from ShareData records.

Routes become LineString placemarks, waypoints and findpoints become
Point placemarks. Each placemark references one of three shared styles
declared at the top of the Document.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from decimal import Decimal
from typing import Iterable, Sequence

from loguru import logger

from xctransfer.models import Findpoint, RoutePoint, Waypoint

ROUTE_STYLE = "orangeLineGreenPoly"
WAYPOINT_STYLE = "wayPoint"
FINDPOINT_STYLE = "findPoint"

# RGBA
ROUTE_LINE_COLOR = (237, 100, 0, 255)
ROUTE_LINE_WIDTH = 4
ROUTE_FILL_COLOR = (0, 255, 0, 127)
FINDPOINT_COLOR = (255, 0, 0, 255)
WAYPOINT_COLOR = (255, 163, 0, 255)

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    r"[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def kml_color(r: int, g: int, b: int, a: int) -> str:
    """Encode an RGBA colour as KML ``aabbggrr`` hex."""
    return f"{a:02x}{b:02x}{g:02x}{r:02x}"


def _decimal(value: float) -> str:
    """Shortest fixed-point text that parses back to the same float."""
    return format(Decimal(repr(value)), "f")


def _coord_to_string(latitude: float, longitude: float) -> str:
    """Format one coordinate as 'lng,lat'."""
    return f"{_decimal(longitude)},{_decimal(latitude)}"


def _clean_text(text: str) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", text)


def _placemark(name: str, style_id: str) -> ET.Element:
    pm = ET.Element("Placemark")
    ET.SubElement(pm, "name").text = _clean_text(name)
    ET.SubElement(pm, "styleUrl").text = f"#{style_id}"
    return pm


def _write_point(pm: ET.Element, latitude: float, longitude: float) -> None:
    point = ET.SubElement(pm, "Point")
    ET.SubElement(point, "coordinates").text = _coord_to_string(latitude, longitude)


def route_placemark(name: str, points: Sequence[RoutePoint]) -> ET.Element:
    """Build a LineString placemark for a hunt's route.

    An empty or single-point route still produces a placemark; its
    coordinate list is simply degenerate.
    """
    logger.info(f"Way generation: {name}")
    pm = _placemark(name, ROUTE_STYLE)
    ls = ET.SubElement(pm, "LineString")
    coords = ET.SubElement(ls, "coordinates")
    coords.text = " ".join(
        _coord_to_string(p.latitude, p.longitude) for p in points
    )
    return pm


def waypoint_placemark(wp: Waypoint) -> ET.Element:
    logger.info(f"Waypoint generation: {wp.name}")
    pm = _placemark(wp.name, WAYPOINT_STYLE)
    _write_point(pm, wp.latitude, wp.longitude)
    return pm


def findpoint_placemark(fp: Findpoint) -> ET.Element:
    logger.info(f"Findpoint generation: {fp.name}")
    pm = _placemark(fp.name, FINDPOINT_STYLE)
    _write_point(pm, fp.latitude, fp.longitude)
    return pm


def _write_shared_style(doc: ET.Element, style_id: str) -> ET.Element:
    style = ET.SubElement(doc, "Style")
    style.set("id", style_id)
    return style


def _write_styles(doc: ET.Element) -> None:
    """Declare the route, findpoint and waypoint styles."""
    route = _write_shared_style(doc, ROUTE_STYLE)
    line_style = ET.SubElement(route, "LineStyle")
    ET.SubElement(line_style, "color").text = kml_color(*ROUTE_LINE_COLOR)
    ET.SubElement(line_style, "width").text = str(ROUTE_LINE_WIDTH)
    poly_style = ET.SubElement(route, "PolyStyle")
    ET.SubElement(poly_style, "color").text = kml_color(*ROUTE_FILL_COLOR)

    find = _write_shared_style(doc, FINDPOINT_STYLE)
    icon_style = ET.SubElement(find, "IconStyle")
    ET.SubElement(icon_style, "color").text = kml_color(*FINDPOINT_COLOR)

    way = _write_shared_style(doc, WAYPOINT_STYLE)
    icon_style = ET.SubElement(way, "IconStyle")
    ET.SubElement(icon_style, "color").text = kml_color(*WAYPOINT_COLOR)


def build_document(
    routes: Iterable[ET.Element],
    waypoints: Iterable[ET.Element],
    findpoints: Iterable[ET.Element],
) -> ET.Element:
    """Assemble the Document element.

    Shared styles come first, then all routes, all waypoints and all
    findpoints, each group in the order given.

    Args:
        routes: Placemarks from :func:`route_placemark`.
        waypoints: Placemarks from :func:`waypoint_placemark`.
        findpoints: Placemarks from :func:`findpoint_placemark`.

    Returns:
        The ``Document`` element, not yet wrapped in a ``kml`` root.
    """
    doc = ET.Element("Document")
    _write_styles(doc)
    for group in (routes, waypoints, findpoints):
        doc.extend(group)
    return doc
