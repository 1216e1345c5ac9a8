"""Cross-record decoder state."""

from dataclasses import dataclass, field
import datetime
from typing import List, Optional

from .errors import IGCError
from .interfaces import Route, Track

@dataclass
class DecoderState:
    """State carried from one record to the next while decoding a file."""
    date: Optional[datetime.date] = None
    time: Optional[datetime.time] = None
    tracks: List[Track] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)
    track_open: bool = False
    route_open: bool = False
    line_no: int = 1
    error: Optional[IGCError] = None

    def fail(self, message: str) -> IGCError:
        """Record the first error at the current line and return it for raising."""
        if self.error is None:
            self.error = IGCError(message, self.line_no)
        return self.error
