"""
Frame Count Conversion
======================

Field <-> frame count algorithms, including drop-frame compensation.
"""

from smpte_timecode.conversion.frames import (
    FrameCounting,
    format_fields,
    frame_counting,
    frames_to_timecode,
    timecode_to_frames,
)

__all__ = [
    "FrameCounting",
    "format_fields",
    "frame_counting",
    "frames_to_timecode",
    "timecode_to_frames",
]
