"""
Geographic helpers: great-circle distance and map navigation links.
"""

import math
from typing import Any, Dict, Optional
from urllib.parse import urlencode

EARTH_RADIUS_METERS = 6371000
NAVIGATION_BASE_URL = "https://www.google.com/maps/dir/"


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    R = EARTH_RADIUS_METERS
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return R * c


def build_navigation_url(location: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Google Maps directions link for a GeoJSON point.

    The point stores [lng, lat]; the destination parameter wants "lat,lng".
    Returns None when the location has no usable coordinates.
    """
    if not location:
        return None
    coordinates = location.get("coordinates")
    if not coordinates or len(coordinates) < 2:
        return None
    lng, lat = coordinates[0], coordinates[1]
    query = urlencode({"api": 1, "destination": f"{lat},{lng}"}, safe=",")
    return f"{NAVIGATION_BASE_URL}?{query}"
