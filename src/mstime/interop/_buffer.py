"""Helpers for strings that cross the boundary as (data, length) pairs."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

StringData = bytes | bytearray | memoryview | str
"""A caller string; only the first ``length`` units are read."""


def read_string(data: StringData, length: int) -> str | None:
    """Decode the first ``length`` units of ``data``.

    The host's strings are not NUL-terminated, so the explicit length is
    authoritative. Returns None for a non-positive length, a length past the
    end of ``data``, or bytes that are not UTF-8.
    """
    if length <= 0 or length > len(data):
        logger.warning("rejected string of length %d (data holds %d)", length, len(data))
        return None
    if isinstance(data, str):
        return data[:length]
    try:
        return bytes(data[:length]).decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("rejected string that is not valid UTF-8")
        return None


def write_string(buffer: bytearray, buffer_size: int, text: str) -> bool:
    """Copy ``text`` into ``buffer`` as UTF-8, truncating silently.

    At most ``buffer_size - 1`` bytes are written and a NUL byte always
    follows them. Returns False without touching the buffer when the size is
    not positive or exceeds the buffer.
    """
    if buffer_size <= 0 or buffer_size > len(buffer):
        logger.warning("invalid buffer size %d (buffer holds %d)", buffer_size, len(buffer))
        return False
    encoded = text.encode("utf-8")[: buffer_size - 1]
    buffer[: len(encoded)] = encoded
    buffer[len(encoded)] = 0
    return True
