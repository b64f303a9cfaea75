"""Flat DateTime functions over milliseconds-since-epoch integers.

Failures never raise: values that cannot be produced are reported as
INVALID_TIMESTAMP and formatting failures leave the output buffer untouched.
"""

from __future__ import annotations

import logging

from mstime._constants import INVALID_TIMESTAMP, ISO_FORMAT
from mstime._datetime import DateTime
from mstime._errors import MSTimeError
from mstime._timespan import TimeSpan
from mstime._utils import fits_int64
from mstime.interop._buffer import StringData, read_string, write_string

logger = logging.getLogger(__name__)


def _checked(value: int) -> int:
    if not fits_int64(value):
        logger.warning("timestamp %d does not fit in 64 bits", value)
        return INVALID_TIMESTAMP
    return value


# ---- Construction ----


def datetime_create(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Milliseconds since the epoch for the given fields.

    Negative fields are rejected with INVALID_TIMESTAMP; other out-of-range
    values fold as they do for DateTime.from_fields.
    """
    fields = (year, month, day, hour, minute, second, millisecond)
    if any(value < 0 for value in fields):
        logger.warning("rejected negative calendar field in %r", fields)
        return INVALID_TIMESTAMP
    return _checked(DateTime.from_fields(*fields).timestamp)


def datetime_now() -> int:
    return DateTime.now().timestamp


def datetime_parse(text: StringData, fmt: StringData, text_len: int, fmt_len: int) -> int:
    """Parse ``text`` against ``fmt``; INVALID_TIMESTAMP when it does not match."""
    text_str = read_string(text, text_len)
    fmt_str = read_string(fmt, fmt_len)
    if text_str is None or fmt_str is None:
        return INVALID_TIMESTAMP
    parsed = DateTime.parse(text_str, fmt_str)
    if parsed is None:
        return INVALID_TIMESTAMP
    return _checked(parsed.timestamp)


# ---- Calendar fields ----


def datetime_get_year(dt_ms: int) -> int:
    return DateTime(dt_ms).year


def datetime_get_month(dt_ms: int) -> int:
    return DateTime(dt_ms).month


def datetime_get_day(dt_ms: int) -> int:
    return DateTime(dt_ms).day


def datetime_get_hour(dt_ms: int) -> int:
    return DateTime(dt_ms).hour


def datetime_get_minute(dt_ms: int) -> int:
    return DateTime(dt_ms).minute


def datetime_get_second(dt_ms: int) -> int:
    return DateTime(dt_ms).second


def datetime_get_millisecond(dt_ms: int) -> int:
    return DateTime(dt_ms).millisecond


# ---- Arithmetic ----


def datetime_add_timespan(dt_ms: int, ts_ms: int) -> int:
    return _checked((DateTime(dt_ms) + TimeSpan(ts_ms)).timestamp)


def datetime_subtract_timespan(dt_ms: int, ts_ms: int) -> int:
    return _checked((DateTime(dt_ms) - TimeSpan(ts_ms)).timestamp)


def datetime_difference(dt1_ms: int, dt2_ms: int) -> int:
    """Signed TimeSpan milliseconds from ``dt2_ms`` to ``dt1_ms``."""
    return _checked((DateTime(dt1_ms) - DateTime(dt2_ms)).total_milliseconds)


# ---- Formatting ----


def _write_formatted(
    dt_ms: int,
    fmt: StringData,
    buffer: bytearray,
    fmt_len: int,
    buffer_size: int,
    with_milliseconds: bool,
) -> None:
    fmt_str = read_string(fmt, fmt_len)
    if fmt_str is None:
        return
    date_time = DateTime(dt_ms)
    try:
        if with_milliseconds:
            text = date_time.format_w_milliseconds(fmt_str)
        else:
            text = date_time.format(fmt_str)
    except MSTimeError as e:
        logger.warning("cannot format timestamp %d: %s", dt_ms, e.internal())
        return
    write_string(buffer, buffer_size, text)


def datetime_format(
    dt_ms: int, fmt: StringData, buffer: bytearray, fmt_len: int, buffer_size: int
) -> None:
    _write_formatted(dt_ms, fmt, buffer, fmt_len, buffer_size, with_milliseconds=False)


def datetime_format_milliseconds(
    dt_ms: int, fmt: StringData, buffer: bytearray, fmt_len: int, buffer_size: int
) -> None:
    _write_formatted(dt_ms, fmt, buffer, fmt_len, buffer_size, with_milliseconds=True)


def datetime_to_iso_string(dt_ms: int, buffer: bytearray, buffer_size: int) -> None:
    datetime_format(dt_ms, ISO_FORMAT, buffer, len(ISO_FORMAT), buffer_size)


def datetime_to_iso_string_msec(dt_ms: int, buffer: bytearray, buffer_size: int) -> None:
    datetime_format_milliseconds(dt_ms, ISO_FORMAT, buffer, len(ISO_FORMAT), buffer_size)


# ---- Comparison ----


def datetime_equals(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) == DateTime(dt2_ms))


def datetime_not_equals(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) != DateTime(dt2_ms))


def datetime_less_than(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) < DateTime(dt2_ms))


def datetime_greater_than(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) > DateTime(dt2_ms))


def datetime_less_equal(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) <= DateTime(dt2_ms))


def datetime_greater_equal(dt1_ms: int, dt2_ms: int) -> int:
    return int(DateTime(dt1_ms) >= DateTime(dt2_ms))
