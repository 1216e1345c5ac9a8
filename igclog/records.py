"""Handlers for the IGC record types the decoder understands.

Each handler takes the raw line bytes, trailing line terminator included,
so length checks count the terminator the same way the line reader does.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone

from . import errors
from .config import (
    A_RECORD_MIN_LENGTH, H_DATE_MIN_LENGTH, B_RECORD_MIN_LENGTH, C_RECORD_MIN_LENGTH,
    B_TIME_OFFSET, B_LAT_OFFSET, B_LON_OFFSET, B_ALTITUDE_OFFSET,
    C_LAT_OFFSET, C_LON_OFFSET, C_NAME_OFFSET,
    DATE_HEADER_PREFIX, DATE_OFFSET,
)
from .fields import read_altitude, read_date_fields, read_lat, read_lon, read_timestamp
from .interfaces import Coordinates, Route, Track, Trackpoint, Waypoint
from .record_types import RecordType
from .state import DecoderState

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0, 0)


def _is_print(byte: int) -> bool:
    return 0x20 <= byte <= 0x7e


def read_a_record(line: bytes) -> bool:
    """Check the manufacturer/logger identification record."""
    if len(line) < A_RECORD_MIN_LENGTH or line[0] != RecordType.A:
        return False
    return all(_is_print(b) for b in line[1:7])


def read_h_record(state: DecoderState, line: bytes) -> None:
    """Pick the flight date out of an HFDTE header; other headers are ignored."""
    if len(line) < H_DATE_MIN_LENGTH or not line.startswith(DATE_HEADER_PREFIX):
        return

    fields = read_date_fields(line, DATE_OFFSET)
    if fields is None:
        raise state.fail(errors.INVALID_DATE_HEADER)

    try:
        state.date = date(*fields)
    except ValueError:
        raise state.fail(errors.INVALID_DATE)

    logger.debug(f"Flight date {state.date.isoformat()}")


def open_track(state: DecoderState) -> None:
    state.tracks.append(Track())
    state.time = MIDNIGHT
    state.track_open = True


def open_route(state: DecoderState) -> None:
    state.routes.append(Route())
    state.route_open = True


def read_b_record(state: DecoderState, line: bytes) -> None:
    """Decode a fix and append it to the open track."""
    if len(line) < B_RECORD_MIN_LENGTH:
        raise state.fail(errors.INVALID_B_RECORD)

    fix_time = read_timestamp(line, B_TIME_OFFSET)
    if fix_time is None:
        raise state.fail(errors.INVALID_TIMESTAMP)

    lat = read_lat(line, B_LAT_OFFSET)
    if lat is None:
        raise state.fail(errors.INVALID_LATITUDE)
    lon = read_lon(line, B_LON_OFFSET)
    if lon is None:
        raise state.fail(errors.INVALID_LONGITUDE)

    altitude = read_altitude(line, B_ALTITUDE_OFFSET)
    if altitude is None:
        raise state.fail(errors.INVALID_ALTITUDE)

    if fix_time < state.time:
        state.date += timedelta(days=1)
        logger.debug(f"Midnight rollover at line {state.line_no}, date now {state.date.isoformat()}")
    state.time = fix_time

    state.tracks[-1].append(Trackpoint(
        coordinates=Coordinates(lon, lat),
        timestamp=datetime.combine(state.date, fix_time, tzinfo=timezone.utc),
        elevation=altitude.elevation,
    ))


def read_c_record(state: DecoderState, line: bytes) -> None:
    """Decode a task turnpoint and append it to the open route.

    Turnpoints at exactly (0, 0) are placeholders and are dropped.
    """
    if len(line) < C_RECORD_MIN_LENGTH:
        raise state.fail(errors.INVALID_C_RECORD)

    lat = read_lat(line, C_LAT_OFFSET)
    if lat is None:
        raise state.fail(errors.INVALID_LATITUDE)
    lon = read_lon(line, C_LON_OFFSET)
    if lon is None:
        raise state.fail(errors.INVALID_LONGITUDE)

    if lat == 0 and lon == 0:
        logger.debug(f"Skipping placeholder turnpoint at line {state.line_no}")
        return

    # the last byte is the line terminator
    name = line[C_NAME_OFFSET:len(line) - 1].strip()
    state.routes[-1].append(Waypoint(
        coordinates=Coordinates(lon, lat),
        name=name.decode('latin-1'),
    ))
