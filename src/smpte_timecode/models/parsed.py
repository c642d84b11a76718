"""
Parsed Timecode Schema
======================

Intermediate result of the timecode grammar stage.

This is the structural reading of a timecode string: four raw numeric
fields and whatever frame rate the string itself carried. No field
ranges or drop-frame rules have been checked yet, and the frame rate
may be unresolved (see FrameRate.invalid) when the string had no
"@rate" suffix.

Example:
    from smpte_timecode.parsing import parse_timecode_string

    parsed = parse_timecode_string("01:00:00;00@29.97")
    print(parsed.hour, parsed.frame_rate)   # 1 ≈29.97fps DF [30000/1001]
"""

from pydantic import BaseModel, ConfigDict, Field

from smpte_timecode.models.frame_rate import FrameRate


class ParsedTimeCodeString(BaseModel):
    """
    Raw fields extracted from a timecode string.

    Attributes:
        hour: Hour digits (any number of digits)
        minute: Two-digit minute field, unchecked
        second: Two-digit second field, unchecked
        frame: Two-digit frame field, unchecked
        frame_rate: Rate from the "@rate" suffix, or an unresolved rate
            carrying only the drop-frame flag
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(
        ...,
        ge=0,
        description="Hour field (unbounded)",
    )

    minute: int = Field(
        ...,
        ge=0,
        description="Minute field as written",
    )

    second: int = Field(
        ...,
        ge=0,
        description="Second field as written",
    )

    frame: int = Field(
        ...,
        ge=0,
        description="Frame field as written",
    )

    frame_rate: FrameRate = Field(
        ...,
        description="Frame rate embedded in the string, possibly unresolved",
    )

    def with_frame_rate(self, frame_rate: FrameRate) -> "ParsedTimeCodeString":
        """Return a copy with the frame rate replaced."""
        return self.model_copy(update={"frame_rate": frame_rate})
