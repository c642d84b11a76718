"""
Timecode Errors
===============

Exception hierarchy for timecode parsing, conversion and arithmetic.

Every failure is raised immediately at the point of call. Nothing is
clamped or silently normalized: either a fully valid TimeCode is produced
or one of these errors is raised.

Hierarchy:
    TimeCodeError
        - TimeCodeSyntaxError: string does not match the grammar
        - FrameRateConflictError: rate hint disagrees with the "@rate" suffix
        - InvalidFrameRateError: ``rate`` read on an unresolved FrameRate
        - InvalidFrameRateArgumentError: unresolved or non-positive rate passed in
        - InvalidTimeCodeError: fields name a frame that cannot exist
        - FrameRateMismatchError: arithmetic across different rates

Value-related errors also derive from ValueError so callers that only
know about the builtin can still catch them.
"""


class TimeCodeError(Exception):
    """Base class for all timecode errors."""
    pass


class TimeCodeSyntaxError(TimeCodeError, ValueError):
    """Raised when a string is not a valid SMPTE timecode."""

    def __init__(self, text: str, detail: str = "") -> None:
        self.text = text
        message = f"Invalid SMPTE timecode '{text}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class FrameRateConflictError(TimeCodeError, ValueError):
    """Raised when an explicit frame rate disagrees with the one in the string."""
    pass


class InvalidFrameRateError(TimeCodeError):
    """
    Raised when the numeric rate of an unresolved FrameRate is requested.

    This is a programming error: callers must check ``is_valid`` first.
    """
    pass


class InvalidFrameRateArgumentError(TimeCodeError, ValueError):
    """Raised when a resolved, positive frame rate was required."""
    pass


class InvalidTimeCodeError(TimeCodeError, ValueError):
    """Raised when time fields do not name a reachable frame at the given rate."""
    pass


class FrameRateMismatchError(TimeCodeError, ValueError):
    """Raised when timecodes at different frame rates are combined."""
    pass
