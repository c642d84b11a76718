"""
smpte_timecode
==============

SMPTE ST 12-1 timecode parsing, validation and frame arithmetic.

Converts between HH:MM:SS:FF / HH:MM:SS;FF strings and absolute frame
counts at exact rational frame rates, including drop-frame counting.

Components:
    - models: FrameRate, TimeCode and the parsed-string schema
    - parsing: Timecode string grammar
    - conversion: Field <-> frame count algorithms
    - config: YAML / environment configuration and logging setup

Example:
    from smpte_timecode import FrameRate, TimeCode

    tc = TimeCode.from_string("10:00:00;00", FrameRate.NTSC_29_97_DF)
    print(tc.frame_count)   # 1078920
"""

__version__ = "0.1.0"

from smpte_timecode.errors import (
    FrameRateConflictError,
    FrameRateMismatchError,
    InvalidFrameRateArgumentError,
    InvalidFrameRateError,
    InvalidTimeCodeError,
    TimeCodeError,
    TimeCodeSyntaxError,
)
from smpte_timecode.models import FrameRate, ParsedTimeCodeString, TimeCode
from smpte_timecode.parsing import parse_timecode_string

__all__ = [
    "__version__",
    # Models
    "FrameRate",
    "ParsedTimeCodeString",
    "TimeCode",
    # Parsing
    "parse_timecode_string",
    # Errors
    "TimeCodeError",
    "TimeCodeSyntaxError",
    "FrameRateConflictError",
    "InvalidFrameRateError",
    "InvalidFrameRateArgumentError",
    "InvalidTimeCodeError",
    "FrameRateMismatchError",
]
