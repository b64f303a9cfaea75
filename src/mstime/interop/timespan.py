"""Flat TimeSpan functions over total-millisecond integers."""

from __future__ import annotations

import logging

from mstime._constants import INVALID_TIMESTAMP
from mstime._timespan import TimeSpan
from mstime._utils import fits_int64
from mstime.interop._buffer import write_string

logger = logging.getLogger(__name__)


def _checked(value: int) -> int:
    if not fits_int64(value):
        logger.warning("timespan %d does not fit in 64 bits", value)
        return INVALID_TIMESTAMP
    return value


# ---- Construction ----


def timespan_create(days: int, hours: int, minutes: int, seconds: int, milliseconds: int) -> int:
    return _checked(TimeSpan.of(days, hours, minutes, seconds, milliseconds).total_milliseconds)


def timespan_from_days(days: int) -> int:
    return _checked(TimeSpan.from_days(days).total_milliseconds)


def timespan_from_hours(hours: int) -> int:
    return _checked(TimeSpan.from_hours(hours).total_milliseconds)


def timespan_from_minutes(minutes: int) -> int:
    return _checked(TimeSpan.from_minutes(minutes).total_milliseconds)


def timespan_from_seconds(seconds: int) -> int:
    return _checked(TimeSpan.from_seconds(seconds).total_milliseconds)


def timespan_from_milliseconds(milliseconds: int) -> int:
    return _checked(TimeSpan.from_milliseconds(milliseconds).total_milliseconds)


# ---- Components ----


def timespan_get_days(ts_ms: int) -> int:
    return TimeSpan.to_components(ts_ms).days


def timespan_get_hours(ts_ms: int) -> int:
    return TimeSpan.to_components(ts_ms).hours


def timespan_get_minutes(ts_ms: int) -> int:
    return TimeSpan.to_components(ts_ms).minutes


def timespan_get_seconds(ts_ms: int) -> int:
    return TimeSpan.to_components(ts_ms).seconds


def timespan_get_milliseconds(ts_ms: int) -> int:
    return TimeSpan.to_components(ts_ms).milliseconds


# ---- Totals ----


def timespan_get_total_days(ts_ms: int) -> int:
    return TimeSpan(ts_ms).total_days


def timespan_get_total_hours(ts_ms: int) -> int:
    return TimeSpan(ts_ms).total_hours


def timespan_get_total_minutes(ts_ms: int) -> int:
    return TimeSpan(ts_ms).total_minutes


def timespan_get_total_seconds(ts_ms: int) -> int:
    return TimeSpan(ts_ms).total_seconds


def timespan_get_total_milliseconds(ts_ms: int) -> int:
    return TimeSpan(ts_ms).total_milliseconds


# ---- Arithmetic ----


def timespan_add(ts1_ms: int, ts2_ms: int) -> int:
    return _checked((TimeSpan(ts1_ms) + TimeSpan(ts2_ms)).total_milliseconds)


def timespan_subtract(ts1_ms: int, ts2_ms: int) -> int:
    return _checked((TimeSpan(ts1_ms) - TimeSpan(ts2_ms)).total_milliseconds)


def timespan_multiply(ts_ms: int, factor: int) -> int:
    return _checked((TimeSpan(ts_ms) * factor).total_milliseconds)


def timespan_divide(ts_ms: int, divisor: int) -> int:
    """Divide, truncating toward zero; a zero divisor yields INVALID_TIMESTAMP."""
    if divisor == 0:
        logger.warning("rejected division of timespan %d by zero", ts_ms)
        return INVALID_TIMESTAMP
    return _checked((TimeSpan(ts_ms) / divisor).total_milliseconds)


# ---- Rendering ----


def timespan_to_string(ts_ms: int, buffer: bytearray, buffer_size: int) -> None:
    write_string(buffer, buffer_size, TimeSpan(ts_ms).to_string())


# ---- Comparison ----


def timespan_equals(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) == TimeSpan(ts2_ms))


def timespan_not_equals(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) != TimeSpan(ts2_ms))


def timespan_less_than(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) < TimeSpan(ts2_ms))


def timespan_greater_than(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) > TimeSpan(ts2_ms))


def timespan_less_equal(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) <= TimeSpan(ts2_ms))


def timespan_greater_equal(ts1_ms: int, ts2_ms: int) -> int:
    return int(TimeSpan(ts1_ms) >= TimeSpan(ts2_ms))
