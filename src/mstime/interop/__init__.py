"""Flat integer interface for hosts without object support.

TimeSpans cross as total milliseconds and DateTimes as milliseconds since the
epoch, with INVALID_TIMESTAMP reserved to signal failure. Strings arrive as
``(data, length)`` pairs and formatted text is written into caller-supplied
``bytearray`` buffers, truncated and NUL-terminated.
"""

from mstime._constants import INVALID_TIMESTAMP
from mstime.interop.datetime import (
    datetime_add_timespan,
    datetime_create,
    datetime_difference,
    datetime_equals,
    datetime_format,
    datetime_format_milliseconds,
    datetime_get_day,
    datetime_get_hour,
    datetime_get_millisecond,
    datetime_get_minute,
    datetime_get_month,
    datetime_get_second,
    datetime_get_year,
    datetime_greater_equal,
    datetime_greater_than,
    datetime_less_equal,
    datetime_less_than,
    datetime_not_equals,
    datetime_now,
    datetime_parse,
    datetime_subtract_timespan,
    datetime_to_iso_string,
    datetime_to_iso_string_msec,
)
from mstime.interop.timespan import (
    timespan_add,
    timespan_create,
    timespan_divide,
    timespan_equals,
    timespan_from_days,
    timespan_from_hours,
    timespan_from_milliseconds,
    timespan_from_minutes,
    timespan_from_seconds,
    timespan_get_days,
    timespan_get_hours,
    timespan_get_milliseconds,
    timespan_get_minutes,
    timespan_get_seconds,
    timespan_get_total_days,
    timespan_get_total_hours,
    timespan_get_total_milliseconds,
    timespan_get_total_minutes,
    timespan_get_total_seconds,
    timespan_greater_equal,
    timespan_greater_than,
    timespan_less_equal,
    timespan_less_than,
    timespan_multiply,
    timespan_not_equals,
    timespan_subtract,
    timespan_to_string,
)

__all__ = [
    "INVALID_TIMESTAMP",
    # TimeSpan
    "timespan_create",
    "timespan_from_days",
    "timespan_from_hours",
    "timespan_from_minutes",
    "timespan_from_seconds",
    "timespan_from_milliseconds",
    "timespan_get_days",
    "timespan_get_hours",
    "timespan_get_minutes",
    "timespan_get_seconds",
    "timespan_get_milliseconds",
    "timespan_get_total_days",
    "timespan_get_total_hours",
    "timespan_get_total_minutes",
    "timespan_get_total_seconds",
    "timespan_get_total_milliseconds",
    "timespan_add",
    "timespan_subtract",
    "timespan_multiply",
    "timespan_divide",
    "timespan_to_string",
    "timespan_equals",
    "timespan_not_equals",
    "timespan_less_than",
    "timespan_greater_than",
    "timespan_less_equal",
    "timespan_greater_equal",
    # DateTime
    "datetime_create",
    "datetime_now",
    "datetime_parse",
    "datetime_get_year",
    "datetime_get_month",
    "datetime_get_day",
    "datetime_get_hour",
    "datetime_get_minute",
    "datetime_get_second",
    "datetime_get_millisecond",
    "datetime_add_timespan",
    "datetime_subtract_timespan",
    "datetime_difference",
    "datetime_format",
    "datetime_format_milliseconds",
    "datetime_to_iso_string",
    "datetime_to_iso_string_msec",
    "datetime_equals",
    "datetime_not_equals",
    "datetime_less_than",
    "datetime_greater_than",
    "datetime_less_equal",
    "datetime_greater_equal",
]
