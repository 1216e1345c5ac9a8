"""Configuration constants for IGC decoding."""

# Line reader
LINE_BUFFER_SIZE = 80  # 76 content bytes + CR + LF + NUL + one spare
MAX_LINE_LENGTH = LINE_BUFFER_SIZE - 1

# Minimum record lengths, counted with any trailing line terminator
A_RECORD_MIN_LENGTH = 7
H_DATE_MIN_LENGTH = 10
B_RECORD_MIN_LENGTH = 35
C_RECORD_MIN_LENGTH = 18

# Field offsets within a B record
B_TIME_OFFSET = 1
B_LAT_OFFSET = 7
B_LON_OFFSET = 15
B_ALTITUDE_OFFSET = 24

# Field offsets within a C record
C_LAT_OFFSET = 1
C_LON_OFFSET = 9
C_NAME_OFFSET = 18

# Date header
DATE_HEADER_PREFIX = b'HFDTE'
DATE_OFFSET = 5
CENTURY_PIVOT = 80  # two-digit years below this are 20YY, the rest 19YY

# Coordinate limits in decimal degrees
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

# Remote loading
DEFAULT_TIMEOUT = 30  # seconds
