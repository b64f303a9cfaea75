"""Calendar format strings - Lark grammar plus rendering and scanning interpreters."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from io import StringIO

from lark import Lark, Token, Tree
from lark.exceptions import LarkError
from lark.visitors import Interpreter

from mstime._calendar import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    CalendarFields,
    civil_from_days,
    days_from_civil,
    days_in_year,
    is_valid_date,
    timestamp_from_fields,
)
from mstime._constants import FORMAT_CACHE_SIZE
from mstime._errors import (
    ERR_MSG_INCOMPLETE_DATE,
    ERR_MSG_INPUT_MISMATCH,
    ERR_MSG_INVALID_DATE,
    ERR_MSG_INVALID_FORMAT,
    InvalidDateError,
    InvalidFormatError,
    ParseMismatchError,
    UnsupportedDirectiveError,
)

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
start: _item*

_item: directive
     | percent
     | literal

directive: DIRECTIVE
percent: PERCENT
literal: LITERAL

DIRECTIVE: /%[A-Za-z]/
PERCENT: "%%"
LITERAL: /[^%]+/
"""

_parser = Lark(_GRAMMAR, parser="lalr")

# Directives that stand for a longer format
COMPOSITE_DIRECTIVES: dict[str, str] = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "D": "%m/%d/%y",
    "R": "%H:%M",
    "c": "%a %b %e %H:%M:%S %Y",
    "x": "%m/%d/%y",
    "X": "%H:%M:%S",
}


@functools.lru_cache(maxsize=FORMAT_CACHE_SIZE)
def compile_format(fmt: str) -> Tree:
    """Parse a format string into a tree of directive/percent/literal items.

    Raises:
        InvalidFormatError: If the string contains a stray or incomplete ``%``.
    """
    try:
        tree = _parser.parse(fmt)
    except LarkError as e:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot compile format {fmt!r}: {e}",
            wrapped=e,
        ) from e
    logger.debug("compiled format %r into %d items", fmt, len(tree.children))
    return tree


def _directive_letter(tree: Tree) -> str:
    token = tree.children[0]
    assert isinstance(token, Token)
    return str(token)[1]


def _format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


_RENDERERS: dict[str, Callable[[CalendarFields, bool], str]] = {
    "Y": lambda f, ms: _format_year(f.year),
    "y": lambda f, ms: f"{f.year % 100:02d}",
    "C": lambda f, ms: f"{f.year // 100:02d}",
    "m": lambda f, ms: f"{f.month:02d}",
    "d": lambda f, ms: f"{f.day:02d}",
    "e": lambda f, ms: f"{f.day:2d}",
    "j": lambda f, ms: f"{f.day_of_year:03d}",
    "H": lambda f, ms: f"{f.hour:02d}",
    "I": lambda f, ms: f"{f.hour % 12 or 12:02d}",
    "p": lambda f, ms: "AM" if f.hour < 12 else "PM",
    "M": lambda f, ms: f"{f.minute:02d}",
    "S": lambda f, ms: f"{f.second:02d}.{f.millisecond:03d}" if ms else f"{f.second:02d}",
    "a": lambda f, ms: WEEKDAY_NAMES[f.weekday][:3],
    "A": lambda f, ms: WEEKDAY_NAMES[f.weekday],
    "b": lambda f, ms: MONTH_NAMES[f.month - 1][:3],
    "h": lambda f, ms: MONTH_NAMES[f.month - 1][:3],
    "B": lambda f, ms: MONTH_NAMES[f.month - 1],
    "u": lambda f, ms: str(f.weekday + 1),
    "w": lambda f, ms: str((f.weekday + 1) % 7),
    "z": lambda f, ms: "+0000",
    "Z": lambda f, ms: "UTC",
    "n": lambda f, ms: "\n",
    "t": lambda f, ms: "\t",
}


def _unsupported(spec: str, purpose: str) -> UnsupportedDirectiveError:
    return UnsupportedDirectiveError(
        f"unsupported format directive %{spec}",
        f"directive %{spec} cannot be used for {purpose}",
    )


class Formatter(Interpreter):
    """Renders calendar fields through a compiled format tree."""

    def __init__(self, fields: CalendarFields, with_milliseconds: bool = False) -> None:
        self._w = StringIO()
        self._fields = fields
        self._with_milliseconds = with_milliseconds

    @property
    def result(self) -> str:
        return self._w.getvalue()

    def literal(self, tree: Tree) -> None:
        self._w.write(str(tree.children[0]))

    def percent(self, tree: Tree) -> None:
        self._w.write("%")

    def directive(self, tree: Tree) -> None:
        spec = _directive_letter(tree)
        composite = COMPOSITE_DIRECTIVES.get(spec)
        if composite is not None:
            self.visit(compile_format(composite))
            return
        render = _RENDERERS.get(spec)
        if render is None:
            raise _unsupported(spec, "formatting")
        self._w.write(render(self._fields, self._with_milliseconds))


def render(fields: CalendarFields, fmt: str, with_milliseconds: bool = False) -> str:
    """Render ``fields`` according to ``fmt``."""
    formatter = Formatter(fields, with_milliseconds)
    formatter.visit(compile_format(fmt))
    return formatter.result


class Scanner(Interpreter):
    """Reads calendar fields out of a string by walking a compiled format tree.

    Each directive consumes input from the current position and records the
    value it read. ``result`` validates the collected values and returns the
    timestamp in milliseconds.
    """

    # Directive letter -> scanning method name
    _SCANNERS: dict[str, str] = {
        "Y": "_scan_year",
        "y": "_scan_short_year",
        "m": "_scan_month",
        "d": "_scan_day",
        "e": "_scan_padded_day",
        "j": "_scan_day_of_year",
        "H": "_scan_hour",
        "I": "_scan_hour12",
        "p": "_scan_meridiem",
        "M": "_scan_minute",
        "S": "_scan_second",
        "a": "_scan_weekday_name",
        "A": "_scan_weekday_name",
        "b": "_scan_month_name",
        "B": "_scan_month_name",
        "h": "_scan_month_name",
        "u": "_scan_iso_weekday",
        "w": "_scan_sunday_weekday",
        "n": "_scan_whitespace",
        "t": "_scan_whitespace",
    }

    def __init__(self, text: str, with_milliseconds: bool = False) -> None:
        self._text = text
        self._pos = 0
        self._with_milliseconds = with_milliseconds
        self._values: dict[str, int] = {}

    # ---- Tree items ----

    def literal(self, tree: Tree) -> None:
        for ch in str(tree.children[0]):
            if ch.isspace():
                self._skip_whitespace()
            else:
                self._expect(ch)

    def percent(self, tree: Tree) -> None:
        self._expect("%")

    def directive(self, tree: Tree) -> None:
        spec = _directive_letter(tree)
        composite = COMPOSITE_DIRECTIVES.get(spec)
        if composite is not None:
            self.visit(compile_format(composite))
            return
        method = self._SCANNERS.get(spec)
        if method is None:
            raise _unsupported(spec, "parsing")
        getattr(self, method)()

    # ---- Input primitives ----

    def _mismatch(self, expected: str) -> ParseMismatchError:
        return ParseMismatchError(
            ERR_MSG_INPUT_MISMATCH,
            f"expected {expected} at position {self._pos} of {self._text!r}",
        )

    def _expect(self, ch: str) -> None:
        if self._text[self._pos : self._pos + 1] != ch:
            raise self._mismatch(repr(ch))
        self._pos += 1

    def _skip_whitespace(self) -> int:
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        return self._pos - start

    def _read_digits(self, max_digits: int) -> str:
        start = self._pos
        while (
            self._pos < len(self._text)
            and self._pos - start < max_digits
            and self._text[self._pos] in "0123456789"
        ):
            self._pos += 1
        if self._pos == start:
            raise self._mismatch("a digit")
        return self._text[start : self._pos]

    def _read_int(self, max_digits: int) -> int:
        return int(self._read_digits(max_digits))

    def _read_name(self, names: tuple[str, ...]) -> int:
        """Match a full or three-letter name, case-insensitively; return its index."""
        for candidates in (names, tuple(name[:3] for name in names)):
            for index, name in enumerate(candidates):
                end = self._pos + len(name)
                if self._text[self._pos : end].lower() == name.lower():
                    self._pos = end
                    return index
        raise self._mismatch("a name")

    # ---- Directive scanners ----

    def _scan_year(self) -> None:
        sign = 1
        if self._text[self._pos : self._pos + 1] in ("+", "-"):
            sign = -1 if self._text[self._pos] == "-" else 1
            self._pos += 1
        self._values["year"] = sign * self._read_int(4)

    def _scan_short_year(self) -> None:
        value = self._read_int(2)
        self._values["year"] = value + (1900 if value >= 69 else 2000)

    def _scan_month(self) -> None:
        self._values["month"] = self._read_int(2)

    def _scan_day(self) -> None:
        self._values["day"] = self._read_int(2)

    def _scan_padded_day(self) -> None:
        if self._text[self._pos : self._pos + 1] == " ":
            self._pos += 1
        self._values["day"] = self._read_int(2)

    def _scan_day_of_year(self) -> None:
        self._values["day_of_year"] = self._read_int(3)

    def _scan_hour(self) -> None:
        self._values["hour"] = self._read_int(2)

    def _scan_hour12(self) -> None:
        self._values["hour12"] = self._read_int(2)

    def _scan_meridiem(self) -> None:
        self._values["pm"] = self._read_name(("AM", "PM"))

    def _scan_minute(self) -> None:
        self._values["minute"] = self._read_int(2)

    def _scan_second(self) -> None:
        self._values["second"] = self._read_int(2)
        if self._with_milliseconds and self._text[self._pos : self._pos + 1] == ".":
            self._pos += 1
            digits = self._read_digits(3)
            self._values["millisecond"] = int(digits.ljust(3, "0"))

    def _scan_weekday_name(self) -> None:
        self._values["weekday"] = self._read_name(WEEKDAY_NAMES)

    def _scan_month_name(self) -> None:
        self._values["month"] = self._read_name(MONTH_NAMES) + 1

    def _scan_iso_weekday(self) -> None:
        value = self._read_int(1)
        if not 1 <= value <= 7:
            raise self._mismatch("an ISO weekday 1-7")
        self._values["weekday"] = value - 1

    def _scan_sunday_weekday(self) -> None:
        value = self._read_int(1)
        if value > 6:
            raise self._mismatch("a weekday 0-6")
        self._values["weekday"] = (value - 1) % 7

    def _scan_whitespace(self) -> None:
        if self._skip_whitespace() == 0:
            raise self._mismatch("whitespace")

    # ---- Result ----

    def _invalid(self, details: str) -> InvalidDateError:
        return InvalidDateError(ERR_MSG_INVALID_DATE, f"{details} in {self._text!r}")

    def _resolve_date(self) -> tuple[int, int, int]:
        values = self._values
        if "year" not in values:
            raise InvalidDateError(ERR_MSG_INCOMPLETE_DATE, "format has no year directive")
        year = values["year"]

        if "day_of_year" in values:
            ordinal = values["day_of_year"]
            if not 1 <= ordinal <= days_in_year(year):
                raise self._invalid(f"day of year {ordinal} out of range")
            _, month, day = civil_from_days(days_from_civil(year, 1, 1) + ordinal - 1)
            if values.get("month", month) != month or values.get("day", day) != day:
                raise self._invalid(f"day of year {ordinal} disagrees with month/day")
            return year, month, day

        if "month" not in values or "day" not in values:
            raise InvalidDateError(ERR_MSG_INCOMPLETE_DATE, "format has no month or day directive")
        month, day = values["month"], values["day"]
        if not is_valid_date(year, month, day):
            raise self._invalid(f"{year:04d}-{month:02d}-{day:02d} is not a calendar date")
        return year, month, day

    def _resolve_hour(self) -> int:
        values = self._values
        if "hour12" not in values:
            return values.get("hour", 0)
        hour12 = values["hour12"]
        if "pm" not in values:
            raise InvalidDateError(ERR_MSG_INCOMPLETE_DATE, "%I requires %p")
        if not 1 <= hour12 <= 12:
            raise self._invalid(f"12-hour clock value {hour12} out of range")
        hour = hour12 % 12 + 12 * values["pm"]
        if values.get("hour", hour) != hour:
            raise self._invalid("12-hour and 24-hour clock values disagree")
        return hour

    @property
    def result(self) -> int:
        """Milliseconds since the epoch described by the scanned input.

        Raises:
            ParseMismatchError: If input remains after the format is exhausted.
            InvalidDateError: If the scanned values are not a calendar date/time.
        """
        if self._pos != len(self._text):
            raise ParseMismatchError(
                ERR_MSG_INPUT_MISMATCH,
                f"unexpected trailing input {self._text[self._pos:]!r}",
            )
        year, month, day = self._resolve_date()
        hour = self._resolve_hour()
        minute = self._values.get("minute", 0)
        second = self._values.get("second", 0)
        millisecond = self._values.get("millisecond", 0)
        if hour > 23 or minute > 59 or second > 59:
            raise self._invalid(f"time {hour:02d}:{minute:02d}:{second:02d} out of range")

        fields = CalendarFields(year, month, day, hour, minute, second, millisecond)
        if "weekday" in self._values and self._values["weekday"] != fields.weekday:
            raise self._invalid("weekday disagrees with date")
        return timestamp_from_fields(year, month, day, hour, minute, second, millisecond)


def scan(text: str, fmt: str, with_milliseconds: bool = False) -> int:
    """Parse ``text`` against ``fmt`` and return milliseconds since the epoch.

    Raises:
        InvalidFormatError: If ``fmt`` cannot be compiled or uses an unsupported directive.
        ParseMismatchError: If ``text`` does not match ``fmt``.
        InvalidDateError: If the matched values do not form a valid date and time.
    """
    scanner = Scanner(text, with_milliseconds)
    scanner.visit(compile_format(fmt))
    return scanner.result
