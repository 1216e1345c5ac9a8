"""IGC flight log decoding package."""

from .errors import IGCError
from .interfaces import Coordinates, Trackpoint, Waypoint, Track, Route, IGCData
from .record_types import RecordType
from .state import DecoderState
from .parser import IGCParser, decode, decode_bytes, load_file, load_url
from .geo_utils import calculate_heading, geodesic_length

__all__ = [
    'IGCError', 'Coordinates', 'Trackpoint', 'Waypoint', 'Track', 'Route', 'IGCData',
    'RecordType', 'DecoderState', 'IGCParser',
    'decode', 'decode_bytes', 'load_file', 'load_url',
    'calculate_heading', 'geodesic_length'
]
