"""
TimeCode Model
==============

Immutable SMPTE timecode value.

A TimeCode is four time fields plus a resolved FrameRate. Its absolute
frame count is derived once at construction and stored with the fields;
construction fails for any field combination that counting up from
00:00:00:00 at that rate could never reach.

Ways to build one:
    - TimeCode(hour, minute, second, frame, frame_rate)
    - TimeCode.from_string("01:00:00;00", FrameRate.NTSC_29_97_DF)
    - TimeCode.from_frame_count(107892, FrameRate.NTSC_29_97_DF)
    - TimeCode.coerce(value, frame_rate) for a string, frame count or TimeCode
    - tc.add(...) / tc.subtract(...), which rebuild from a frame count

Example:
    from smpte_timecode import FrameRate, TimeCode

    tc = TimeCode.from_string("00:00:59;29", FrameRate.NTSC_29_97_DF)
    print(tc.frame_count)   # 1799
    print(tc.add(1))        # 00:01:00;02
"""

import functools
import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import Optional, Tuple, Union

from smpte_timecode.conversion.frames import (
    format_fields,
    frames_to_timecode,
    timecode_to_frames,
)
from smpte_timecode.errors import (
    FrameRateConflictError,
    FrameRateMismatchError,
    InvalidFrameRateArgumentError,
)
from smpte_timecode.models.frame_rate import FrameRate
from smpte_timecode.parsing.grammar import parse_timecode_string


logger = logging.getLogger(__name__)


TimeCodeOperand = Union[str, int, "TimeCode"]


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class TimeCode:
    """
    SMPTE timecode at a specific frame rate.

    Ordering compares frame counts and is only defined between timecodes
    at equal frame rates.

    Attributes:
        hour: Hour, not limited to 24 when given directly
        minute: Minute, 0-59
        second: Second, 0-59
        frame: Frame number, 0 to nominal rate - 1
        frame_rate: Resolved frame rate
        frame_count: 0-based frame index from 00:00:00:00 (derived)
    """

    hour: int
    minute: int
    second: int
    frame: int
    frame_rate: FrameRate
    frame_count: int = field(init=False)

    def __post_init__(self) -> None:
        frame_count = timecode_to_frames(
            self.hour, self.minute, self.second, self.frame, self.frame_rate
        )
        object.__setattr__(self, "frame_count", frame_count)

    @property
    def drop_frame(self) -> bool:
        """True if this timecode uses drop-frame counting."""
        return self.frame_rate.drop_frame

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_string(cls, value: str, frame_rate: Optional[FrameRate] = None) -> "TimeCode":
        """
        Parse a timecode string.

        Args:
            value: Timecode such as "01:00:00;00" or "01:00:00;00@29.97"
            frame_rate: Rate to interpret the string at. If omitted the string
                must carry its own rate with an "@rate" suffix.

        Returns:
            Fully validated TimeCode

        Raises:
            TypeError: If value is not a string
            InvalidFrameRateArgumentError: If frame_rate is given but
                unresolved, or neither source supplies a rate
            TimeCodeSyntaxError: If value is not a valid timecode string
            FrameRateConflictError: If the string's rate differs from frame_rate
            InvalidTimeCodeError: If the fields are impossible at the rate
        """
        if not isinstance(value, str):
            raise TypeError(f"Timecode must be a string, got {type(value).__name__}")

        if frame_rate is not None and not frame_rate.is_valid:
            raise InvalidFrameRateArgumentError(
                "Invalid frame rate (only pass fully formed frame rates or omit "
                "the frame rate to parse it from the time code)"
            )

        parsed = parse_timecode_string(value)
        if frame_rate is not None and parsed.frame_rate.is_valid and not frame_rate.is_equal(parsed.frame_rate):
            raise FrameRateConflictError(
                f"Timecode '{value}' specifies frame rate {parsed.frame_rate}, "
                f"was expecting {frame_rate}"
            )

        if frame_rate is not None:
            parsed = parsed.with_frame_rate(frame_rate)

        return cls(parsed.hour, parsed.minute, parsed.second, parsed.frame, parsed.frame_rate)

    @classmethod
    def from_frame_count(cls, value: int, frame_rate: FrameRate) -> "TimeCode":
        """
        Build the timecode for an absolute frame count.

        Counts wrap around a 24-hour day, so the resulting hour is 0-23.

        Raises:
            TypeError: If value is not an integer
            InvalidFrameRateArgumentError: If frame_rate is unresolved
        """
        hour, minute, second, frame = frames_to_timecode(value, frame_rate)
        return cls(hour, minute, second, frame, frame_rate)

    @classmethod
    def coerce(cls, value: TimeCodeOperand, frame_rate: FrameRate) -> "TimeCode":
        """
        Convert a string, frame count or TimeCode to a TimeCode.

        Strings are parsed at frame_rate, integers are frame counts at
        frame_rate, and TimeCodes are returned unchanged.

        Raises:
            TypeError: For any other type
        """
        return _coerce(value, frame_rate)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, *operands: TimeCodeOperand) -> "TimeCode":
        """
        Return a new TimeCode with the operands' frame counts added.

        Each operand is coerced at this timecode's frame rate and must end
        up at an equal rate. Operands with a frame count of zero or less are
        left out. The result wraps around a 24-hour day.

        Raises:
            FrameRateMismatchError: If an operand is at a different rate
        """
        return self._calculate(1, operands)

    def subtract(self, *operands: TimeCodeOperand) -> "TimeCode":
        """Return a new TimeCode with the operands' frame counts subtracted."""
        return self._calculate(-1, operands)

    def _calculate(self, direction: int, operands: Tuple[TimeCodeOperand, ...]) -> "TimeCode":
        timecodes = []
        for operand in operands:
            timecode = TimeCode.coerce(operand, self.frame_rate)
            if not timecode.frame_rate.is_equal(self.frame_rate):
                raise FrameRateMismatchError(
                    f"Timecode framerates must match to do calculations: "
                    f"{timecode.frame_rate} vs {self.frame_rate}"
                )
            timecodes.append(timecode)

        total = self.frame_count
        for timecode in timecodes:
            if timecode.frame_count <= 0:
                logger.debug(f"Skipping operand {timecode} with frame count {timecode.frame_count}")
                continue
            total += direction * timecode.frame_count

        return TimeCode.from_frame_count(total, self.frame_rate)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    # =========================================================================
    # Ordering & Rendering
    # =========================================================================

    def __lt__(self, other):
        if not isinstance(other, TimeCode):
            return NotImplemented
        if not self.frame_rate.is_equal(other.frame_rate):
            raise FrameRateMismatchError(
                f"Cannot compare timecodes at {self.frame_rate} and {other.frame_rate}"
            )
        return self.frame_count < other.frame_count

    def __str__(self) -> str:
        return format_fields(self.hour, self.minute, self.second, self.frame, self.drop_frame)

    def __repr__(self) -> str:
        return f"TimeCode('{self}', {self.frame_rate}, frame_count={self.frame_count})"

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "timecode": str(self),
            "frame_count": self.frame_count,
            "frame_rate": str(self.frame_rate),
            "drop_frame": self.drop_frame,
        }


# =============================================================================
# Operand Coercion
# =============================================================================

def _is_operand(value) -> bool:
    return isinstance(value, (str, TimeCode)) or (
        isinstance(value, Integral) and not isinstance(value, bool)
    )


@functools.singledispatch
def _coerce(value, frame_rate: FrameRate) -> TimeCode:
    raise TypeError(
        f"Cannot convert {type(value).__name__} to a TimeCode "
        f"(expected a string, frame count or TimeCode)"
    )


@_coerce.register
def _coerce_text(value: str, frame_rate: FrameRate) -> TimeCode:
    return TimeCode.from_string(value, frame_rate)


@_coerce.register
def _coerce_frame_count(value: Integral, frame_rate: FrameRate) -> TimeCode:
    return TimeCode.from_frame_count(value, frame_rate)


@_coerce.register
def _coerce_bool(value: bool, frame_rate: FrameRate) -> TimeCode:
    raise TypeError("Cannot convert a bool to a TimeCode")


@_coerce.register
def _coerce_timecode(value: TimeCode, frame_rate: FrameRate) -> TimeCode:
    return value
