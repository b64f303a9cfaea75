"""DateTime - a UTC calendar timestamp with millisecond precision."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from mstime._calendar import (
    CalendarFields,
    fields_from_timestamp,
    is_leap_year,
    timestamp_from_fields,
)
from mstime._constants import (
    DEFAULT_FORMAT,
    INVALID_TIMESTAMP,
    ISO_FORMAT,
    MAX_FORMAT_LENGTH,
    MAX_INPUT_LENGTH,
)
from mstime._errors import MSTimeError
from mstime._format import render, scan
from mstime._timespan import TimeSpan
from mstime._utils import validate_format_string, validate_input_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class DateTime:
    """A point in time stored as milliseconds since 1970-01-01T00:00:00.000 UTC.

    Calendar fields are derived from the millisecond count using the
    proleptic Gregorian calendar; nothing but the count is stored.

    Example:
        >>> dt = DateTime.from_fields(2022, 1, 31, 12, 34, 56, 789)
        >>> dt.to_iso_string_msec()
        '2022-01-31T12:34:56.789'
        >>> (dt + TimeSpan.from_days(1)).day
        1
    """

    timestamp: int = 0

    # ---- Construction ----

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> DateTime:
        """Build a DateTime from calendar fields.

        Fields are not validated: months outside 1-12 fold into the year and
        days and clock fields are added linearly, so ``(2022, 1, 32)`` is
        February 1st.
        """
        return cls(timestamp_from_fields(year, month, day, hour, minute, second, millisecond))

    @classmethod
    def from_timestamp(cls, timestamp: int) -> DateTime:
        return cls(timestamp)

    @classmethod
    def now(cls) -> DateTime:
        """The current system time, truncated to milliseconds."""
        return cls(time.time_ns() // 1_000_000)

    @classmethod
    def parse(
        cls,
        text: str,
        fmt: str = DEFAULT_FORMAT,
        *,
        max_input_length: int = MAX_INPUT_LENGTH,
        max_format_length: int = MAX_FORMAT_LENGTH,
    ) -> DateTime | None:
        """Parse a string against a calendar format.

        When the fourth character from the end of ``text`` is a period,
        ``%S`` also reads a fractional second (``56.789``); otherwise only
        whole seconds are read and the milliseconds are zero.

        Args:
            text: The string to parse.
            fmt: Format string using ``%`` directives. Defaults to
                ``"%Y-%m-%d %H:%M:%S"``.
            max_input_length: Longest accepted ``text``.
            max_format_length: Longest accepted ``fmt``.

        Returns:
            The parsed DateTime, or None if the string does not match the
            format, describes an impossible date, or either string is invalid.
        """
        with_milliseconds = len(text) >= 4 and text[-4] == "."
        try:
            validate_input_string(text, max_input_length)
            validate_format_string(fmt, max_format_length)
            timestamp = scan(text, fmt, with_milliseconds)
        except MSTimeError as e:
            logger.debug("parse of %r with format %r failed: %s", text, fmt, e.internal())
            return None
        return cls(timestamp)

    # ---- Calendar fields ----

    @property
    def fields(self) -> CalendarFields:
        return fields_from_timestamp(self.timestamp)

    @property
    def year(self) -> int:
        return self.fields.year

    @property
    def month(self) -> int:
        return self.fields.month

    @property
    def day(self) -> int:
        return self.fields.day

    @property
    def hour(self) -> int:
        return self.fields.hour

    @property
    def minute(self) -> int:
        return self.fields.minute

    @property
    def second(self) -> int:
        return self.fields.second

    @property
    def millisecond(self) -> int:
        return self.fields.millisecond

    @property
    def weekday(self) -> int:
        """Day of the week, 0 for Monday through 6 for Sunday."""
        return self.fields.weekday

    @property
    def day_of_year(self) -> int:
        return self.fields.day_of_year

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def is_valid(self) -> bool:
        """False for the reserved INVALID_TIMESTAMP value."""
        return self.timestamp != INVALID_TIMESTAMP

    # ---- Formatting ----

    def format(self, fmt: str = DEFAULT_FORMAT, *, max_format_length: int = MAX_FORMAT_LENGTH) -> str:
        """Render with whole-second precision.

        Raises:
            InvalidFormatError: If ``fmt`` is malformed or uses an unsupported directive.
            MaxFormatLengthExceededError: If ``fmt`` is longer than ``max_format_length``.
        """
        validate_format_string(fmt, max_format_length)
        return render(self.fields, fmt)

    def format_w_milliseconds(
        self, fmt: str = DEFAULT_FORMAT, *, max_format_length: int = MAX_FORMAT_LENGTH
    ) -> str:
        """Render with ``%S`` (and ``%T``) carrying three fractional digits.

        Raises:
            InvalidFormatError: If ``fmt`` is malformed or uses an unsupported directive.
            MaxFormatLengthExceededError: If ``fmt`` is longer than ``max_format_length``.
        """
        validate_format_string(fmt, max_format_length)
        return render(self.fields, fmt, with_milliseconds=True)

    def to_iso_string(self) -> str:
        return self.format(ISO_FORMAT)

    def to_iso_string_msec(self) -> str:
        return self.format_w_milliseconds(ISO_FORMAT)

    def __str__(self) -> str:
        return self.format()

    # ---- Arithmetic ----

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return DateTime(self.timestamp + other.total_milliseconds)

    __radd__ = __add__

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        if isinstance(other, DateTime):
            return TimeSpan(self.timestamp - other.timestamp)
        if isinstance(other, TimeSpan):
            return DateTime(self.timestamp - other.total_milliseconds)
        return NotImplemented
