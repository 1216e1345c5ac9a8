"""Fixed-width field decoders for IGC records.

Every reader takes the raw line bytes and the offset of the field. Readers
never raise on malformed input; they return None and leave the choice of
diagnostic to the record handler.
"""

import math
from dataclasses import dataclass
from datetime import time
from typing import Optional, Tuple

from .config import CENTURY_PIVOT, MAX_LATITUDE, MAX_LONGITUDE

FIX_3D = b'A'
FIX_2D = b'V'


@dataclass
class FixAltitude:
    """The altitude pair of a B record."""
    validity: bytes
    pressure: int
    gnss: int

    @property
    def elevation(self) -> Optional[float]:
        """GNSS altitude in metres, or None when the fix was 2D only."""
        if self.validity == FIX_3D:
            return float(self.gnss)
        return None


def int_n(data: bytes, offset: int, width: int) -> Optional[int]:
    """Decode `width` ASCII digits starting at `offset`."""
    field = data[offset:offset + width]
    if len(field) != width or not field.isdigit():
        return None
    return int(field)


def _read_angle(data: bytes, offset: int, degree_width: int, hemispheres: Tuple[bytes, bytes],
                limit: float) -> Optional[float]:
    degrees = int_n(data, offset, degree_width)
    minutes = int_n(data, offset + degree_width, 2)
    fraction = int_n(data, offset + degree_width + 2, 3)
    if degrees is None or minutes is None or fraction is None:
        return None

    hemisphere = data[offset + degree_width + 5:offset + degree_width + 6]
    if hemisphere not in hemispheres:
        return None

    value = degrees + (minutes + fraction / 1000) / 60
    if value > limit:
        return None

    if hemisphere == hemispheres[1]:
        value = -value
    return value


def read_lat(data: bytes, offset: int = 0) -> Optional[float]:
    """Decode a DDMMmmmN/S latitude to decimal degrees."""
    return _read_angle(data, offset, 2, (b'N', b'S'), MAX_LATITUDE)


def read_lon(data: bytes, offset: int = 0) -> Optional[float]:
    """Decode a DDDMMmmmE/W longitude to decimal degrees."""
    return _read_angle(data, offset, 3, (b'E', b'W'), MAX_LONGITUDE)


def read_altitude(data: bytes, offset: int = 0) -> Optional[FixAltitude]:
    """Decode the validity flag, pressure altitude and GNSS altitude of a fix.

    The pressure altitude is five digits, or a minus sign and four digits.
    """
    validity = data[offset:offset + 1]
    if validity not in (FIX_3D, FIX_2D):
        return None

    if data[offset + 1:offset + 2] == b'-':
        pressure = int_n(data, offset + 2, 4)
        if pressure is not None:
            pressure = -pressure
    else:
        pressure = int_n(data, offset + 1, 5)

    gnss = int_n(data, offset + 6, 5)
    if pressure is None or gnss is None:
        return None

    return FixAltitude(validity, pressure, gnss)


def read_timestamp(data: bytes, offset: int = 0) -> Optional[time]:
    """Decode HHMMSS to a time of day."""
    hour = int_n(data, offset, 2)
    minute = int_n(data, offset + 2, 2)
    second = int_n(data, offset + 4, 2)
    if hour is None or minute is None or second is None:
        return None

    try:
        return time(hour, minute, second)
    except ValueError:
        return None


def expand_year(yy: int) -> int:
    if yy < CENTURY_PIVOT:
        return 2000 + yy
    return 1900 + yy


def read_date_fields(data: bytes, offset: int = 0) -> Optional[Tuple[int, int, int]]:
    """Decode DDMMYY to (year, month, day) without checking the calendar."""
    day = int_n(data, offset, 2)
    month = int_n(data, offset + 2, 2)
    year = int_n(data, offset + 4, 2)
    if day is None or month is None or year is None:
        return None
    return expand_year(year), month, day


def _format_angle(value: float, degree_width: int, hemispheres: Tuple[str, str]) -> bytes:
    hemisphere = hemispheres[1] if math.copysign(1.0, value) < 0 else hemispheres[0]
    thousandths = round(abs(value) * 60000)
    degrees, rest = divmod(thousandths, 60000)
    minutes, fraction = divmod(rest, 1000)
    return f"{degrees:0{degree_width}d}{minutes:02d}{fraction:03d}{hemisphere}".encode('ascii')


def format_lat(value: float) -> bytes:
    """Encode decimal degrees as a DDMMmmmN/S latitude field."""
    return _format_angle(value, 2, ('N', 'S'))


def format_lon(value: float) -> bytes:
    """Encode decimal degrees as a DDDMMmmmE/W longitude field."""
    return _format_angle(value, 3, ('E', 'W'))
