"""Diagnostics raised while decoding IGC files."""

# Messages reported to callers verbatim
MISSING_A_RECORD = "Invalid/missing A record"
INVALID_DATE_HEADER = "Invalid date header format"
INVALID_DATE = "Invalid date"
MISSING_DATE_HEADER = "Missing date header"
INVALID_TIMESTAMP = "Invalid timestamp"
INVALID_LATITUDE = "Invalid latitude"
INVALID_LONGITUDE = "Invalid longitude"
INVALID_ALTITUDE = "Invalid altitude"
INVALID_B_RECORD = "Invalid B record"
INVALID_C_RECORD = "Invalid C record"
LINE_LIMIT_EXCEEDED = "Line limit exceeded"
IO_ERROR = "I/O error"


class IGCError(ValueError):
    """A file did not conform to the IGC format.

    INVALID_B_RECORD and INVALID_C_RECORD report fix and turnpoint lines
    shorter than their minimum length; every other message names the
    field or structure that failed.

    Attributes:
        message: One of the diagnostic strings above
        line: 1-based index of the line where decoding stopped
    """

    def __init__(self, message: str, line: int):
        super().__init__(message, line)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"
