"""Unit, format, and resource limit constants."""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

INVALID_TIMESTAMP = -INT64_MAX
"""Reserved timestamp meaning "invalid" at the integer boundary."""

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"
ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"

MAX_FORMAT_LENGTH = 256
"""Maximum accepted format string length."""

MAX_INPUT_LENGTH = 256
"""Maximum accepted length of a string handed to DateTime.parse."""

FORMAT_CACHE_SIZE = 128
"""Number of compiled format trees kept in memory."""
