"""Integer helpers and input validation utilities."""

from __future__ import annotations

from mstime._constants import INT64_MAX, INT64_MIN, MAX_FORMAT_LENGTH, MAX_INPUT_LENGTH
from mstime._errors import (
    ERR_MSG_FORMAT_TOO_LONG,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_INVALID_FORMAT,
    InvalidFormatError,
    MaxFormatLengthExceededError,
    MaxInputLengthExceededError,
)


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors; durations truncate so that ``-90 min`` is
    ``-1 h`` rather than ``-2 h``.
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def validate_no_null_bytes(value: str, context: str = "format strings") -> None:
    """Reject strings containing null bytes."""
    if "\x00" in value:
        raise InvalidFormatError(
            f"{context} cannot contain null bytes",
            f"null byte found in {context}: {value!r}",
        )


def validate_format_string(fmt: str, max_length: int = MAX_FORMAT_LENGTH) -> None:
    """Validate a calendar format string before compiling it."""
    if not isinstance(fmt, str):
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"format must be a string, got {type(fmt).__name__}",
        )
    if len(fmt) > max_length:
        raise MaxFormatLengthExceededError(
            ERR_MSG_FORMAT_TOO_LONG,
            f"format length {len(fmt)} exceeds limit {max_length}",
        )
    validate_no_null_bytes(fmt)


def validate_input_string(text: str, max_length: int = MAX_INPUT_LENGTH) -> None:
    """Validate a string handed to the parser."""
    if len(text) > max_length:
        raise MaxInputLengthExceededError(
            ERR_MSG_INPUT_TOO_LONG,
            f"input length {len(text)} exceeds limit {max_length}",
        )
    validate_no_null_bytes(text, "parse inputs")
