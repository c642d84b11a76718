"""
Frame Count Conversion
======================

Conversion between timecode fields and absolute frame counts.

Frame count 0 is 00:00:00:00. Field widths use the nominal integer rate
(29.97 counts as 30, 59.94 as 60, 23.976 as 24).

Drop-frame counting:
    Drop-frame keeps symbolic time close to wall-clock time at NTSC rates
    by skipping frame NUMBERS (never actual frames). At the start of every
    minute except minutes divisible by 10, the first few frame numbers are
    skipped:

        nominal rate <= 30:  2 numbers  (00:01:00;00 and ;01 do not exist)
        nominal rate >  30:  4 numbers  (;00 to ;03 at 59.94)

    At 29.97 DF this gives:
        one dropping minute      = 30*60  - 2   = 1798 frames
        one 10-minute block      = 30*600 - 9*2 = 17982 frames

Day wrap:
    Fields -> count accepts any hour. Count -> fields reduces modulo one
    day, so hour always comes back in 0-23 and negative counts wrap to the
    previous day.
"""

from dataclasses import dataclass
from functools import lru_cache
from numbers import Integral
from typing import Tuple

from smpte_timecode.errors import InvalidFrameRateArgumentError, InvalidTimeCodeError
from smpte_timecode.models.frame_rate import FrameRate


TimeFields = Tuple[int, int, int, int]

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


@dataclass(frozen=True, slots=True)
class FrameCounting:
    """
    Frame counting constants for one frame rate.

    Attributes:
        nominal_fps: Integer rate used for field widths
        dropped_per_minute: Frame numbers skipped per dropping minute (0 if NDF)
        frames_per_minute: Real frames in a dropping minute
        frames_per_10_minutes: Real frames in a 10-minute block
        frames_per_day: Real frames in 24 hours of timecode
    """

    nominal_fps: int
    dropped_per_minute: int
    frames_per_minute: int
    frames_per_10_minutes: int
    frames_per_day: int

    @classmethod
    def for_rate(cls, frame_rate: FrameRate) -> "FrameCounting":
        """
        Derive counting constants from a resolved frame rate.

        Raises:
            InvalidFrameRateArgumentError: If the rate is unresolved, or too
                low to skip frame numbers in drop-frame
        """
        if not isinstance(frame_rate, FrameRate):
            raise TypeError(f"Expected a FrameRate, got {type(frame_rate).__name__}")
        if not frame_rate.is_valid:
            raise InvalidFrameRateArgumentError(
                f"Timecode requires a resolved frame rate, got {frame_rate}"
            )

        nominal = frame_rate.nominal_fps
        if nominal < 1:
            raise InvalidFrameRateArgumentError(
                f"Frame rate {frame_rate} is below one frame per second"
            )

        dropped = 0
        if frame_rate.drop_frame:
            dropped = 2 if nominal <= 30 else 4
            if nominal <= dropped:
                raise InvalidFrameRateArgumentError(
                    f"Frame rate {frame_rate} is too low for drop-frame counting"
                )

        per_minute = nominal * SECONDS_PER_MINUTE - dropped
        per_10_minutes = nominal * SECONDS_PER_MINUTE * 10 - 9 * dropped

        return cls(
            nominal_fps=nominal,
            dropped_per_minute=dropped,
            frames_per_minute=per_minute,
            frames_per_10_minutes=per_10_minutes,
            frames_per_day=per_10_minutes * 6 * HOURS_PER_DAY,
        )


@lru_cache(maxsize=64)
def frame_counting(frame_rate: FrameRate) -> FrameCounting:
    """Cached FrameCounting.for_rate; frame rates are immutable and hashable."""
    return FrameCounting.for_rate(frame_rate)


def _check_field(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"Timecode {name} must be an integer, got {value!r}")


def format_fields(
    hour: int,
    minute: int,
    second: int,
    frame: int,
    drop_frame: bool,
) -> str:
    """Render fields as HH:MM:SS:FF, or HH:MM:SS;FF for drop-frame."""
    separator = ";" if drop_frame else ":"
    return f"{hour:02d}:{minute:02d}:{second:02d}{separator}{frame:02d}"


def timecode_to_frames(
    hour: int,
    minute: int,
    second: int,
    frame: int,
    frame_rate: FrameRate,
) -> int:
    """
    Convert timecode fields to an absolute frame count.

    Args:
        hour: Hour, zero or more (not limited to a day)
        minute: Minute, 0-59
        second: Second, 0-59
        frame: Frame number, 0 to nominal rate - 1
        frame_rate: Resolved frame rate

    Returns:
        0-based frame count from 00:00:00:00

    Raises:
        TypeError: If a field is not an integer
        InvalidFrameRateArgumentError: If the frame rate is unresolved
        InvalidTimeCodeError: If a field is out of range, or the fields name
            a frame number skipped by drop-frame counting
    """
    for name, value in (("hour", hour), ("minute", minute), ("second", second), ("frame", frame)):
        _check_field(name, value)

    counting = frame_counting(frame_rate)
    fps = counting.nominal_fps

    def invalid(reason: str) -> InvalidTimeCodeError:
        label = format_fields(hour, minute, second, frame, frame_rate.drop_frame)
        return InvalidTimeCodeError(f"Time code {label} is invalid in {frame_rate}: {reason}")

    if hour < 0:
        raise invalid("hour must not be negative")
    if not 0 <= minute < MINUTES_PER_HOUR:
        raise invalid("minute must be in 0-59")
    if not 0 <= second < SECONDS_PER_MINUTE:
        raise invalid("second must be in 0-59")
    if not 0 <= frame < fps:
        raise invalid(f"frame must be in 0-{fps - 1}")

    frame_count = (hour * 3600 + minute * 60 + second) * fps + frame

    dropped = counting.dropped_per_minute
    if dropped:
        if second == 0 and minute % 10 != 0 and frame < dropped:
            raise invalid("frame number is skipped by drop-frame counting")

        total_minutes = hour * MINUTES_PER_HOUR + minute
        frame_count -= dropped * (total_minutes - total_minutes // 10)

    return frame_count


def frames_to_timecode(frame_count: int, frame_rate: FrameRate) -> TimeFields:
    """
    Convert an absolute frame count to timecode fields.

    Exact inverse of timecode_to_frames within one day. Counts outside
    [0, frames_per_day) wrap around the 24-hour clock.

    Args:
        frame_count: 0-based frame count, may be negative
        frame_rate: Resolved frame rate

    Returns:
        (hour, minute, second, frame) with hour in 0-23

    Raises:
        TypeError: If frame_count is not an integer
        InvalidFrameRateArgumentError: If the frame rate is unresolved
    """
    if isinstance(frame_count, bool) or not isinstance(frame_count, Integral):
        raise TypeError(f"Frame count must be an integer, got {frame_count!r}")

    counting = frame_counting(frame_rate)
    fps = counting.nominal_fps

    frame_count = int(frame_count) % counting.frames_per_day

    # Put the skipped frame numbers back so plain positional division works
    dropped = counting.dropped_per_minute
    if dropped:
        blocks, remainder = divmod(frame_count, counting.frames_per_10_minutes)
        if remainder < dropped:
            remainder += dropped
        frame_count += 9 * dropped * blocks
        frame_count += dropped * ((remainder - dropped) // counting.frames_per_minute)

    hour = frame_count // (fps * 3600) % HOURS_PER_DAY
    minute = frame_count // (fps * 60) % MINUTES_PER_HOUR
    second = frame_count // fps % SECONDS_PER_MINUTE
    frame = frame_count % fps

    return hour, minute, second, frame
