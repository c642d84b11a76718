"""
Timecode Parsing
================

String grammar for SMPTE timecodes: field extraction, separator rules
and "@rate" suffix resolution.
"""

from smpte_timecode.parsing.grammar import (
    TIMECODE_PATTERN,
    parse_timecode_string,
    resolve_rate_suffix,
)

__all__ = [
    "TIMECODE_PATTERN",
    "parse_timecode_string",
    "resolve_rate_suffix",
]
