"""
Frame Rate Model
================

Exact rational frame rates with a drop-frame counting flag.

A FrameRate is either resolved (an exact ``Fraction``) or unresolved.
The unresolved form is what a timecode string without an "@rate" suffix
parses to: it still knows whether the string used drop-frame separators,
but has no numeric rate until the caller supplies one.

Exactness:
    NTSC rates are held as exact fractions (30000/1001, not 29.97).
    Drop-frame math and rate equality depend on it:

        FrameRate(30, 1.001).is_equal(FrameRate(30000, 1001))  -> True
        FrameRate.from_rate(29.97).is_same_rate(FrameRate(30000, 1001))  -> False

Example:
    from smpte_timecode.models.frame_rate import FrameRate

    rate = FrameRate.NTSC_29_97_DF
    print(rate)               # ≈29.97fps DF [30000/1001]
    print(rate.nominal_fps)   # 30
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import Any, ClassVar, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from smpte_timecode.errors import InvalidFrameRateArgumentError, InvalidFrameRateError


RateComponent = Union[int, float, str, Decimal, Fraction]


def _to_fraction(value: RateComponent) -> Fraction:
    """
    Convert a rate component to an exact Fraction.

    Floats go through their shortest decimal text, so ``1.001`` becomes
    1001/1000 rather than its binary approximation.
    """
    if isinstance(value, bool):
        raise TypeError(f"Frame rate components must be numbers, got {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidFrameRateArgumentError(f"Frame rate components must be finite, got {value!r}")
        return Fraction(repr(value))
    if isinstance(value, (Rational, Decimal, str)):
        try:
            return Fraction(value)
        except (ValueError, ZeroDivisionError, OverflowError) as e:
            raise InvalidFrameRateArgumentError(f"Invalid frame rate component {value!r}: {e}") from e
    raise TypeError(f"Frame rate components must be numbers, got {type(value).__name__}")


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def _format_decimal(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return repr(float(value))


@dataclass(frozen=True, slots=True, init=False)
class FrameRate:
    """
    Exact frame rate plus drop-frame flag.

    Immutable. Construct with a numerator/denominator pair, both present
    or both omitted. Omitting both gives the unresolved rate, which is
    also available as ``FrameRate.invalid(drop_frame)``.

    Attributes:
        exact_rate: Reduced rate as a Fraction, or None when unresolved
        drop_frame: Whether timecodes at this rate use drop-frame counting
    """

    exact_rate: Optional[Fraction]
    drop_frame: bool

    NTSC_23_97_DF: ClassVar["FrameRate"]
    NTSC_23_97_NDF: ClassVar["FrameRate"]
    NTSC_29_97_DF: ClassVar["FrameRate"]
    NTSC_29_97_NDF: ClassVar["FrameRate"]
    NTSC_59_94_DF: ClassVar["FrameRate"]
    NTSC_59_94_NDF: ClassVar["FrameRate"]
    PAL_60: ClassVar["FrameRate"]
    PAL_30: ClassVar["FrameRate"]
    PAL_24: ClassVar["FrameRate"]

    def __init__(
        self,
        numerator: Optional[RateComponent] = None,
        denominator: Optional[RateComponent] = None,
        drop_frame: bool = False,
    ) -> None:
        """
        Initialize frame rate.

        Args:
            numerator: Rate numerator (e.g. 30000 or 30)
            denominator: Rate denominator (e.g. 1001 or 1.001)
            drop_frame: Whether drop-frame counting is used

        Raises:
            InvalidFrameRateArgumentError: Only one component given, or the
                resulting rate is not positive
        """
        if (numerator is None) != (denominator is None):
            raise InvalidFrameRateArgumentError(
                "Frame rate numerator and denominator must both be given or both omitted"
            )

        exact_rate = None
        if numerator is not None:
            num = _to_fraction(numerator)
            den = _to_fraction(denominator)
            if den == 0:
                raise InvalidFrameRateArgumentError(
                    f"Frame rate denominator must be non-zero, got {denominator!r}"
                )
            exact_rate = num / den
            if exact_rate <= 0:
                raise InvalidFrameRateArgumentError(
                    f"Frame rate must be positive, got {numerator!r}/{denominator!r}"
                )

        object.__setattr__(self, "exact_rate", exact_rate)
        object.__setattr__(self, "drop_frame", bool(drop_frame))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_rate(cls, rate: RateComponent, drop_frame: bool = False) -> "FrameRate":
        """
        Build a frame rate from a simple integer or decimal FPS value.

        Args:
            rate: Frames per second, used as numerator over 1
            drop_frame: Whether drop-frame counting is used
        """
        return cls(rate, 1, drop_frame)

    @classmethod
    def invalid(cls, drop_frame: bool = False) -> "FrameRate":
        """Unresolved frame rate carrying only the drop-frame flag."""
        return cls(None, None, drop_frame)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def is_valid(self) -> bool:
        """True if the numeric rate is known."""
        return self.exact_rate is not None

    @property
    def rate(self) -> Fraction:
        """
        Exact numeric rate.

        Raises:
            InvalidFrameRateError: If this frame rate is unresolved
        """
        if self.exact_rate is None:
            raise InvalidFrameRateError(
                "Cannot get the rate of an invalid frame rate. Please check is_valid first"
            )
        return self.exact_rate

    @property
    def numerator(self) -> Optional[int]:
        return None if self.exact_rate is None else self.exact_rate.numerator

    @property
    def denominator(self) -> Optional[int]:
        return None if self.exact_rate is None else self.exact_rate.denominator

    @property
    def nominal_fps(self) -> int:
        """
        Integer frame rate used for timecode field widths.

        29.97 counts frames as 30, 59.94 as 60, 23.976 as 24.
        """
        return _round_half_up(self.rate)

    # =========================================================================
    # Comparison
    # =========================================================================

    def is_same_rate(self, other: Optional["FrameRate"]) -> bool:
        """True if both rates are resolved and numerically equal (ignores drop-frame)."""
        if other is None:
            return False
        if not self.is_valid or not other.is_valid:
            return False
        return self.exact_rate == other.exact_rate

    def is_equal(self, other: Optional["FrameRate"]) -> bool:
        """
        True if both rates are resolved, numerically equal and agree on drop-frame.

        Two unresolved rates are never equal to each other.
        """
        if other is None:
            return False
        if other.drop_frame != self.drop_frame:
            return False
        if other.is_valid != self.is_valid:
            return False
        if not self.is_valid:
            return False
        return other.exact_rate == self.exact_rate

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate FrameRate fields in pydantic models by instance check only."""
        return core_schema.is_instance_schema(cls)

    # =========================================================================
    # Rendering
    # =========================================================================

    def __str__(self) -> str:
        suffix = ""
        if self.exact_rate is None or self.exact_rate.denominator != 1 or self.drop_frame:
            suffix = f" {'DF' if self.drop_frame else 'NDF'}"

        if self.exact_rate is None:
            return f"[Invalid]{suffix}"

        simple = Fraction(_round_half_up(self.exact_rate * 100), 100)
        if simple == self.exact_rate:
            label = _format_decimal(self.exact_rate)
        else:
            label = f"≈{_format_decimal(simple)}"
        return f"{label}fps{suffix} [{self.numerator}/{self.denominator}]"

    def __repr__(self) -> str:
        if self.exact_rate is None:
            return f"FrameRate(invalid, drop_frame={self.drop_frame})"
        return f"FrameRate({self.numerator}/{self.denominator}, drop_frame={self.drop_frame})"


FrameRate.NTSC_23_97_DF = FrameRate(24, 1.001, True)
FrameRate.NTSC_23_97_NDF = FrameRate(24, 1.001, False)
FrameRate.NTSC_29_97_DF = FrameRate(30, 1.001, True)
FrameRate.NTSC_29_97_NDF = FrameRate(30, 1.001, False)
FrameRate.NTSC_59_94_DF = FrameRate(60, 1.001, True)
FrameRate.NTSC_59_94_NDF = FrameRate(60, 1.001, False)
FrameRate.PAL_60 = FrameRate(60, 1, False)
FrameRate.PAL_30 = FrameRate(30, 1, False)
FrameRate.PAL_24 = FrameRate(24, 1, False)
