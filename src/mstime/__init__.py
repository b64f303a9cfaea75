"""mstime - millisecond TimeSpan and DateTime value types."""

from __future__ import annotations

try:
    from mstime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging

from mstime._constants import DEFAULT_FORMAT, INVALID_TIMESTAMP, ISO_FORMAT
from mstime._datetime import DateTime
from mstime._errors import (
    InvalidDateError,
    InvalidFormatError,
    MaxFormatLengthExceededError,
    MaxInputLengthExceededError,
    MSTimeError,
    ParseMismatchError,
    UnsupportedDirectiveError,
)
from mstime._timespan import TimeSpan, TimeSpanComponents

__all__ = [
    "DateTime",
    "TimeSpan",
    "TimeSpanComponents",
    "DEFAULT_FORMAT",
    "INVALID_TIMESTAMP",
    "ISO_FORMAT",
    "MSTimeError",
    "InvalidDateError",
    "InvalidFormatError",
    "MaxFormatLengthExceededError",
    "MaxInputLengthExceededError",
    "ParseMismatchError",
    "UnsupportedDirectiveError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
