"""Geographic utility functions for decoded flight paths."""

import math
from typing import List, Sequence, Tuple
from geopy.distance import geodesic

def calculate_heading(start_coord: Tuple[float, float], end_coord: Tuple[float, float]) -> float:
    """Initial great-circle course from one position to the next.

    Args:
        start_coord: Starting coordinate (lon, lat)
        end_coord: Ending coordinate (lon, lat)

    Returns:
        Course in degrees true, 0 <= course < 360
    """
    lon1, lat1 = map(math.radians, start_coord)
    lon2, lat2 = map(math.radians, end_coord)
    d_lon = lon2 - lon1

    east = math.sin(d_lon) * math.cos(lat2)
    north = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return math.degrees(math.atan2(east, north)) % 360

def leg_headings(coords: Sequence[Tuple[float, float]]) -> List[float]:
    """Course of each leg between consecutive coordinates."""
    return [calculate_heading(a, b) for a, b in zip(coords, coords[1:])]

def geodesic_length(coords: Sequence[Tuple[float, float]]) -> float:
    """Sum of geodesic distances between consecutive coordinates.

    Args:
        coords: Coordinates in (lon, lat) order

    Returns:
        Length in metres, 0.0 for fewer than two coordinates
    """
    total = 0.0
    for (lon1, lat1), (lon2, lat2) in zip(coords, coords[1:]):
        # geopy takes (lat, lon)
        total += geodesic((lat1, lon1), (lat2, lon2)).meters
    return total
