"""
Data Models
===========

Value types for the smpte_timecode package.

Models:
    - FrameRate: Exact rational frame rate plus drop-frame flag
    - ParsedTimeCodeString: Raw fields from the grammar stage
    - TimeCode: Validated timecode with its derived frame count
"""

from smpte_timecode.models.frame_rate import FrameRate
from smpte_timecode.models.parsed import ParsedTimeCodeString
from smpte_timecode.models.timecode import TimeCode, TimeCodeOperand

__all__ = [
    "FrameRate",
    "ParsedTimeCodeString",
    "TimeCode",
    "TimeCodeOperand",
]
