"""
Timecode Grammar
================

Structural parsing of SMPTE timecode strings.

Grammar:
    H+ SEP MM SEP SS SEP FF [ "@" RATE ]

    - Hour is one or more digits; minute, second and frame are exactly two.
    - Each separator is ":" or ";".
    - A ";" before the frame field marks drop-frame. It is only accepted
      as HH:MM:SS;FF or HH;MM;SS;FF. Any other mix is ambiguous.
    - RATE is a decimal number. "29.97" means exactly 30000/1001;
      anything else is taken as RATE/1 unless listed in
      settings.parsing.well_known_frame_rates.

This stage does not check field ranges or drop-frame rules. That happens
when a TimeCode is built from the result.

Example:
    parse_timecode_string("00:01:00;02")
    # hour=0 minute=1 second=0 frame=2 frame_rate=[Invalid] DF

    parse_timecode_string("00:10:00:00@25")
    # hour=0 minute=10 second=0 frame=0 frame_rate=25fps [25/1]
"""

import logging
import re

from smpte_timecode import config
from smpte_timecode.errors import InvalidFrameRateArgumentError, TimeCodeSyntaxError
from smpte_timecode.models.frame_rate import FrameRate
from smpte_timecode.models.parsed import ParsedTimeCodeString


logger = logging.getLogger(__name__)


TIMECODE_PATTERN = re.compile(
    r"(?P<hour>\d+)(?P<hour_sep>[:;])"
    r"(?P<minute>\d\d)(?P<minute_sep>[:;])"
    r"(?P<second>\d\d)(?P<second_sep>[:;])"
    r"(?P<frame>\d\d)"
    r"(?:@(?P<rate>\d+(?:\.\d+)?))?",
    re.ASCII,
)

# Separator pairs (hour/minute, minute/second) allowed before a ";" frame separator
DROP_FRAME_SEPARATORS = ("::", ";;")


def resolve_rate_suffix(rate_text: str, drop_frame: bool) -> FrameRate:
    """
    Turn the text after "@" into a FrameRate.

    Args:
        rate_text: Decimal rate as written, e.g. "25" or "29.97"
        drop_frame: Drop-frame flag taken from the separators

    Returns:
        Resolved FrameRate
    """
    well_known = config.settings.parsing.well_known_frame_rates
    numerator, denominator = well_known.get(rate_text, (rate_text, 1))
    return FrameRate(numerator, denominator, drop_frame)


def parse_timecode_string(text: str) -> ParsedTimeCodeString:
    """
    Parse a timecode string into raw fields and an embedded frame rate.

    Args:
        text: Timecode such as "01:02:03:04", "01:02:03;04" or "01:02:03:04@25"

    Returns:
        ParsedTimeCodeString. Its frame rate is unresolved when the string
        has no "@rate" suffix.

    Raises:
        TypeError: If text is not a string
        TimeCodeSyntaxError: If text does not match the grammar, mixes
            separators ambiguously, or names a zero frame rate
    """
    if not isinstance(text, str):
        raise TypeError(f"Timecode must be a string, got {type(text).__name__}")

    match = TIMECODE_PATTERN.fullmatch(text)
    if match is None:
        raise TimeCodeSyntaxError(text)

    drop_frame = False
    if match.group("second_sep") == ";":
        drop_frame = True
        separators = match.group("hour_sep") + match.group("minute_sep")
        if separators not in DROP_FRAME_SEPARATORS:
            raise TimeCodeSyntaxError(
                text,
                "Ambiguous drop-frame format. For drop-frame timecodes, "
                "you can use HH:MM:SS;FF or HH;MM;SS;FF.",
            )

    rate_text = match.group("rate")
    if rate_text:
        try:
            frame_rate = resolve_rate_suffix(rate_text, drop_frame)
        except InvalidFrameRateArgumentError as e:
            raise TimeCodeSyntaxError(text, str(e)) from e
    else:
        frame_rate = FrameRate.invalid(drop_frame)

    parsed = ParsedTimeCodeString(
        hour=int(match.group("hour")),
        minute=int(match.group("minute")),
        second=int(match.group("second")),
        frame=int(match.group("frame")),
        frame_rate=frame_rate,
    )

    logger.debug(f"Parsed timecode '{text}': {parsed.hour}h {parsed.minute}m "
                 f"{parsed.second}s {parsed.frame}f at {frame_rate}")

    return parsed
