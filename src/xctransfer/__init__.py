"""xctransfer — export XChange2 ShareData hunts and points to KML.

Reads geohunts, waypoints and findpoints from a ShareData SQLite file
and writes a single styled KML document for mapping software.
"""

from xctransfer.models import Findpoint, Hunt, RoutePoint, Waypoint

__all__ = ["Findpoint", "Hunt", "RoutePoint", "Waypoint"]
