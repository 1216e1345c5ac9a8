"""Type definitions for decoded IGC flight logs."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

import pandas as pd
from shapely.geometry import LineString, MultiPoint, mapping

from .geo_utils import geodesic_length, leg_headings


class Coordinates(NamedTuple):
    """A position in signed decimal degrees, longitude first."""
    lon: float
    lat: float


Bounds = Tuple[float, float, float, float]


@dataclass
class Trackpoint:
    """One logged fix."""
    coordinates: Coordinates
    timestamp: datetime
    elevation: Optional[float] = None  # None when the fix was 2D only


@dataclass
class Waypoint:
    """A named turnpoint of the declared task."""
    coordinates: Coordinates
    name: str = ''


def _line_string(coords: List[Coordinates]) -> Optional[LineString]:
    if len(coords) < 2:
        return None
    return LineString(coords)


def _bounds(coords: List[Coordinates]) -> Optional[Bounds]:
    if not coords:
        return None
    return MultiPoint(coords).bounds


@dataclass
class Track:
    """Ordered fixes of the flown path."""
    points: List[Trackpoint] = field(default_factory=list)

    def append(self, point: Trackpoint) -> None:
        self.points.append(point)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Trackpoint]:
        return iter(self.points)

    def __getitem__(self, i):
        return self.points[i]

    def coordinates(self) -> List[Coordinates]:
        return [p.coordinates for p in self.points]

    @property
    def start_time(self) -> Optional[datetime]:
        return self.points[0].timestamp if self.points else None

    @property
    def end_time(self) -> Optional[datetime]:
        return self.points[-1].timestamp if self.points else None

    def duration(self) -> timedelta:
        """Time between the first and the last fix."""
        if not self.points:
            return timedelta(0)
        return self.end_time - self.start_time

    def distance(self) -> float:
        """Geodesic length of the track in metres."""
        return geodesic_length(self.coordinates())

    def headings(self) -> List[float]:
        """Course flown between each pair of consecutive fixes, in degrees."""
        return leg_headings(self.coordinates())

    def line_string(self) -> Optional[LineString]:
        return _line_string(self.coordinates())

    def bounds(self) -> Optional[Bounds]:
        """Bounding box as (min_lon, min_lat, max_lon, max_lat)."""
        return _bounds(self.coordinates())

    def to_dataframe(self) -> pd.DataFrame:
        """Fixes as a DataFrame with columns time, lat, lon, alt.

        Unknown elevations become NaN in the alt column.
        """
        if not self.points:
            return pd.DataFrame(columns=["time", "lat", "lon", "alt"])
        return pd.DataFrame({
            "time": [p.timestamp for p in self.points],
            "lat": [p.coordinates.lat for p in self.points],
            "lon": [p.coordinates.lon for p in self.points],
            "alt": [p.elevation for p in self.points],
        })


@dataclass
class Route:
    """Ordered turnpoints of a task declaration."""
    waypoints: List[Waypoint] = field(default_factory=list)

    def append(self, waypoint: Waypoint) -> None:
        self.waypoints.append(waypoint)

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints)

    def __getitem__(self, i):
        return self.waypoints[i]

    def coordinates(self) -> List[Coordinates]:
        return [w.coordinates for w in self.waypoints]

    def names(self) -> List[str]:
        return [w.name for w in self.waypoints]

    def line_string(self) -> Optional[LineString]:
        return _line_string(self.coordinates())

    def bounds(self) -> Optional[Bounds]:
        """Bounding box as (min_lon, min_lat, max_lon, max_lat)."""
        return _bounds(self.coordinates())


@dataclass
class IGCData:
    """Everything decoded from one IGC file."""
    tracks: List[Track] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)

    def bounds(self) -> Optional[Bounds]:
        """Bounding box enclosing every track and route."""
        coords = []
        for track in self.tracks:
            coords.extend(track.coordinates())
        for route in self.routes:
            coords.extend(route.coordinates())
        return _bounds(coords)

    def to_geojson(self) -> Dict:
        """Tracks and routes as a GeoJSON FeatureCollection.

        Paths with fewer than two points have no line geometry and are left out.
        """
        features = []
        for kind, paths in (("Track", self.tracks), ("Route", self.routes)):
            for path in paths:
                line = path.line_string()
                if line is None:
                    continue
                properties = {"Type": kind}
                if kind == "Route":
                    properties["names"] = path.names()
                else:
                    properties["start_time"] = path.start_time.isoformat()
                    properties["end_time"] = path.end_time.isoformat()
                features.append({
                    "type": "Feature",
                    "geometry": mapping(line),
                    "properties": properties,
                })
        return {"type": "FeatureCollection", "features": features}
