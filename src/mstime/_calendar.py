"""Proleptic Gregorian calendar arithmetic.

Day counts are relative to 1970-01-01. The conversions work on 400-year eras
(146097 days each) so they hold for any year, including zero and negative
years, without lookup tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from mstime._constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND

DAYS_PER_ERA = 146097
"""Days in a 400-year Gregorian cycle."""

EPOCH_SHIFT = 719468
"""Days from 0000-03-01 to 1970-01-01."""

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since the epoch.

    Months outside 1-12 fold into the year (month 13 is January of the next
    year, month 0 is December of the previous one) and days are added
    linearly, so out-of-range fields produce a wrapped but well-defined date.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    # Count years from March so the leap day is the last day of the year.
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since the epoch to ``(year, month, day)``."""
    days += EPOCH_SHIFT
    era = days // DAYS_PER_ERA
    day_of_era = days - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def weekday_from_days(days: int) -> int:
    """Weekday of a day count, 0 for Monday through 6 for Sunday."""
    # 1970-01-01 was a Thursday.
    return (days + 3) % 7


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based ordinal of a date within its year."""
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1


def is_valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


@dataclass(frozen=True)
class CalendarFields:
    """Calendar and clock fields of a millisecond timestamp."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @property
    def weekday(self) -> int:
        return weekday_from_days(days_from_civil(self.year, self.month, self.day))

    @property
    def day_of_year(self) -> int:
        return day_of_year(self.year, self.month, self.day)


def fields_from_timestamp(timestamp: int) -> CalendarFields:
    """Split milliseconds since the epoch into calendar fields.

    The day count is floored so instants before the epoch resolve to the
    previous calendar day with a non-negative time of day.
    """
    days, remaining = divmod(timestamp, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, remaining = divmod(remaining, MS_PER_HOUR)
    minute, remaining = divmod(remaining, MS_PER_MINUTE)
    second, millisecond = divmod(remaining, MS_PER_SECOND)
    return CalendarFields(year, month, day, hour, minute, second, millisecond)


def timestamp_from_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Milliseconds since the epoch for the given calendar fields."""
    return (
        days_from_civil(year, month, day) * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )
