"""IGC flight log decoding."""

import io
import logging
from typing import BinaryIO, Optional, Union

import requests

from . import errors
from .config import DEFAULT_TIMEOUT, LINE_BUFFER_SIZE, MAX_LINE_LENGTH
from .errors import IGCError
from .interfaces import IGCData
from .record_types import RecordType
from .records import open_route, open_track, read_a_record, read_b_record, read_c_record, read_h_record
from .state import DecoderState

logger = logging.getLogger(__name__)

class IGCParser:
    """Single-pass IGC decoder.

    Every load_file call starts from a fresh DecoderState, which stays on
    the parser afterwards for error_string and error_line.
    """

    def __init__(self):
        self.state = DecoderState()

    @property
    def error_string(self) -> str:
        return self.state.error.message if self.state.error else ''

    @property
    def error_line(self) -> int:
        return self.state.line_no

    def load_file(self, stream: BinaryIO) -> IGCData:
        """Decode an IGC file from a binary stream.

        Args:
            stream: Object with a readline(size) method returning bytes

        Returns:
            The decoded tracks and routes

        Raises:
            IGCError: on the first line that does not conform to the format
        """
        state = self.state = DecoderState()

        try:
            while True:
                line = self._read_line(stream)
                if not line:
                    break
                self._read_record(line)
                state.line_no += 1
        except IGCError as e:
            logger.error(f"Failed to decode IGC file: {e}")
            raise

        logger.info(f"Decoded {len(state.tracks)} track(s) with "
                    f"{sum(len(t) for t in state.tracks)} trackpoints, "
                    f"{len(state.routes)} route(s) with "
                    f"{sum(len(r) for r in state.routes)} waypoints")
        return IGCData(tracks=state.tracks, routes=state.routes)

    def _read_line(self, stream: BinaryIO) -> bytes:
        try:
            line = stream.readline(LINE_BUFFER_SIZE)
        except OSError as e:
            logger.debug(f"Read failed at line {self.state.line_no}: {str(e)}")
            raise self.state.fail(errors.IO_ERROR)

        if isinstance(line, str):
            # text streams count characters; latin-1 keeps that equal to bytes
            try:
                line = line.encode('latin-1')
            except UnicodeEncodeError:
                raise self.state.fail(errors.IO_ERROR)
        if len(line) > MAX_LINE_LENGTH:
            raise self.state.fail(errors.LINE_LIMIT_EXCEEDED)
        return line

    def _read_record(self, line: bytes) -> None:
        state = self.state

        if state.line_no == 1:
            if not read_a_record(line):
                raise state.fail(errors.MISSING_A_RECORD)
            return

        tag = line[0]
        if tag == RecordType.H:
            read_h_record(state, line)
        elif tag == RecordType.C:
            if state.route_open:
                read_c_record(state, line)
            else:
                logger.debug(f"Task declaration at line {state.line_no}")
                open_route(state)
        elif tag == RecordType.B:
            if state.date is None:
                raise state.fail(errors.MISSING_DATE_HEADER)
            if not state.track_open:
                open_track(state)
            read_b_record(state, line)


def decode(stream: BinaryIO) -> IGCData:
    """Decode one IGC file from a binary stream."""
    return IGCParser().load_file(stream)

def decode_bytes(data: Union[bytes, str]) -> IGCData:
    """Decode one IGC file held in memory."""
    if isinstance(data, str):
        return decode(io.StringIO(data))
    return decode(io.BytesIO(data))

def load_file(path) -> IGCData:
    """Open and decode an IGC file from disk."""
    logger.info(f"Loading IGC file {path}")
    with open(path, 'rb') as f:
        return decode(f)

def load_url(url: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> IGCData:
    """Download and decode an IGC file.

    Args:
        url: Location of the IGC file
        timeout: Request timeout in seconds

    Returns:
        The decoded tracks and routes
    """
    logger.info(f"Loading IGC file from {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to load IGC file: {str(e)}")
        raise

    logger.debug(f"Retrieved {len(response.content)} bytes")
    return decode(io.BytesIO(response.content))
