"""Exception hierarchy for timestamp formatting and parsing."""


class MSTimeError(Exception):
    """Base exception for mstime errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(MSTimeError):
    """Raised when a format string is malformed."""


class UnsupportedDirectiveError(InvalidFormatError):
    """Raised when a format string uses a directive that is not supported."""


class MaxFormatLengthExceededError(MSTimeError):
    """Raised when a format string exceeds the configured length limit."""


class MaxInputLengthExceededError(MSTimeError):
    """Raised when a string to parse exceeds the configured length limit."""


class ParseMismatchError(MSTimeError):
    """Raised when an input string does not match its format."""


class InvalidDateError(MSTimeError):
    """Raised when parsed fields do not describe a calendar date."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = "invalid format string"
ERR_MSG_UNSUPPORTED_DIRECTIVE = "unsupported format directive"
ERR_MSG_FORMAT_TOO_LONG = "format string too long"
ERR_MSG_INPUT_TOO_LONG = "input string too long"
ERR_MSG_INPUT_MISMATCH = "input does not match format"
ERR_MSG_INVALID_DATE = "invalid calendar date"
ERR_MSG_INCOMPLETE_DATE = "format does not determine a date"
