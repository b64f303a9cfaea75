"""TimeSpan - a signed duration with millisecond precision."""

from __future__ import annotations

from dataclasses import dataclass

from mstime._constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from mstime._utils import trunc_div


@dataclass(frozen=True)
class TimeSpanComponents:
    """A duration broken down into days, hours, minutes, seconds and milliseconds.

    Components may lie outside their natural ranges (``hours=30``); they are
    folded when a TimeSpan is built from them.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    @property
    def total_milliseconds(self) -> int:
        return (
            self.days * MS_PER_DAY
            + self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )


@dataclass(frozen=True, order=True)
class TimeSpan:
    """A signed time interval stored as a whole number of milliseconds.

    The millisecond count is the canonical representation; the day, hour,
    minute, second and millisecond components are derived from it on demand
    and all share the sign of the duration.

    Example:
        >>> span = TimeSpan.of(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)
        >>> str(span)
        '1d 02:03:04.005'
    """

    total_milliseconds: int = 0

    # ---- Construction ----

    @classmethod
    def of(
        cls,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> TimeSpan:
        """Build a TimeSpan from individual components.

        Components are summed, so values outside their natural range
        (``hours=25``) and mixed signs are accepted.
        """
        return cls.from_components(
            TimeSpanComponents(days, hours, minutes, seconds, milliseconds)
        )

    @classmethod
    def from_components(cls, components: TimeSpanComponents) -> TimeSpan:
        return cls(components.total_milliseconds)

    @classmethod
    def from_days(cls, days: int) -> TimeSpan:
        return cls.of(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> TimeSpan:
        return cls.of(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> TimeSpan:
        return cls.of(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeSpan:
        return cls.of(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> TimeSpan:
        return cls.of(milliseconds=milliseconds)

    # ---- Decomposition ----

    @staticmethod
    def to_components(duration_ms: int) -> TimeSpanComponents:
        """Decompose a millisecond count into components.

        The magnitude is decomposed first and the sign applied to every
        component afterwards, so ``-90_000`` becomes ``-1 min -30 s`` rather
        than ``-2 min +30 s``.

        Args:
            duration_ms: Duration in milliseconds, may be negative.

        Returns:
            The components, each carrying the sign of ``duration_ms``.
        """
        negative = duration_ms < 0
        magnitude = -duration_ms if negative else duration_ms

        days, remaining = divmod(magnitude, MS_PER_DAY)
        hours, remaining = divmod(remaining, MS_PER_HOUR)
        minutes, remaining = divmod(remaining, MS_PER_MINUTE)
        seconds, milliseconds = divmod(remaining, MS_PER_SECOND)

        components = TimeSpanComponents(days, hours, minutes, seconds, milliseconds)
        assert components.total_milliseconds == magnitude

        if negative:
            return TimeSpanComponents(-days, -hours, -minutes, -seconds, -milliseconds)
        return components

    @property
    def components(self) -> TimeSpanComponents:
        return self.to_components(self.total_milliseconds)

    @property
    def days(self) -> int:
        """Days component (not the total number of days)."""
        return self.components.days

    @property
    def hours(self) -> int:
        """Hours component, within -23..23."""
        return self.components.hours

    @property
    def minutes(self) -> int:
        """Minutes component, within -59..59."""
        return self.components.minutes

    @property
    def seconds(self) -> int:
        """Seconds component, within -59..59."""
        return self.components.seconds

    @property
    def milliseconds(self) -> int:
        """Milliseconds component, within -999..999."""
        return self.components.milliseconds

    # ---- Totals, truncated toward zero ----

    @property
    def total_days(self) -> int:
        return trunc_div(self.total_milliseconds, MS_PER_DAY)

    @property
    def total_hours(self) -> int:
        return trunc_div(self.total_milliseconds, MS_PER_HOUR)

    @property
    def total_minutes(self) -> int:
        return trunc_div(self.total_milliseconds, MS_PER_MINUTE)

    @property
    def total_seconds(self) -> int:
        return trunc_div(self.total_milliseconds, MS_PER_SECOND)

    # ---- Arithmetic ----

    def __add__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.total_milliseconds + other.total_milliseconds)

    def __sub__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.total_milliseconds - other.total_milliseconds)

    def __mul__(self, factor: object) -> TimeSpan:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return TimeSpan(self.total_milliseconds * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> TimeSpan:
        """Divide by an integer, truncating toward zero.

        A zero divisor is a caller error and raises ZeroDivisionError.
        """
        if not isinstance(divisor, int) or isinstance(divisor, bool):
            return NotImplemented
        return TimeSpan(trunc_div(self.total_milliseconds, divisor))

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self.total_milliseconds)

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return TimeSpan(abs(self.total_milliseconds))

    # ---- Rendering ----

    def to_string(self) -> str:
        """Render as ``[Nd ]HH:MM:SS[.mmm]``.

        The day prefix appears only for a non-zero days component and the
        millisecond suffix only for a non-zero milliseconds component.
        """
        parts = self.components
        text = f"{parts.hours:02d}:{parts.minutes:02d}:{parts.seconds:02d}"
        if parts.days != 0:
            text = f"{parts.days}d {text}"
        if parts.milliseconds != 0:
            text = f"{text}.{parts.milliseconds:03d}"
        return text

    def __str__(self) -> str:
        return self.to_string()
