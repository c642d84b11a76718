"""
Conversion Tests
================

Field <-> frame count algorithms, including drop-frame compensation.

The exhaustive tests walk every frame of the first hour at each rate,
counting up field by field and skipping the drop-frame numbers, and check
both directions of the conversion at every step.
"""

import pytest

from smpte_timecode.conversion import FrameCounting, frames_to_timecode, timecode_to_frames
from smpte_timecode.errors import InvalidFrameRateArgumentError, InvalidTimeCodeError
from smpte_timecode.models.frame_rate import FrameRate
from smpte_timecode.models.timecode import TimeCode


# (timecode, frame rate, expected frame count or None if invalid)
CONVERSION_CASES = [
    # Drop frame around dropped numbers
    ("00:00:59;29", FrameRate.NTSC_29_97_DF, 1799),
    ("00:01:00;02", FrameRate.NTSC_29_97_DF, 1800),
    ("00:01:00;03", FrameRate.NTSC_29_97_DF, 1801),
    ("00:09:59;29", FrameRate.NTSC_29_97_DF, 17981),
    ("00:10:00;00", FrameRate.NTSC_29_97_DF, 17982),
    ("00:10:00;01", FrameRate.NTSC_29_97_DF, 17983),
    ("00:10:59;29", FrameRate.NTSC_29_97_DF, 19781),
    ("00:11:00;02", FrameRate.NTSC_29_97_DF, 19782),
    ("00:11:00;03", FrameRate.NTSC_29_97_DF, 19783),

    # Skipped numbers
    ("00:01:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:01:00;01", FrameRate.NTSC_29_97_DF, None),
    ("00:02:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:03:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:04:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:05:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:06:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:07:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:08:00;00", FrameRate.NTSC_29_97_DF, None),
    ("00:09:00;01", FrameRate.NTSC_29_97_DF, None),
    ("01:01:00;00", FrameRate.NTSC_29_97_DF, None),

    # Non drop
    ("00:00:00:29", FrameRate.NTSC_29_97_NDF, 29),
    ("00:00:01:00", FrameRate.NTSC_29_97_NDF, 30),
    ("00:00:09:29", FrameRate.NTSC_29_97_NDF, 299),
    ("00:00:10:00", FrameRate.NTSC_29_97_NDF, 300),
    ("00:00:59:29", FrameRate.NTSC_29_97_NDF, 1799),
    ("00:01:00:00", FrameRate.NTSC_29_97_NDF, 1800),
    ("00:09:59:29", FrameRate.NTSC_29_97_NDF, 17999),
    ("00:10:00:00", FrameRate.NTSC_29_97_NDF, 18000),
    ("01:00:00:00", FrameRate.NTSC_29_97_NDF, 108000),
    ("10:00:00:00", FrameRate.NTSC_29_97_NDF, 1080000),

    ("00:00:10;00", FrameRate.NTSC_29_97_DF, 300),
    ("01:00:00;00", FrameRate.NTSC_29_97_DF, 107892),
    ("10:00:00;00", FrameRate.NTSC_29_97_DF, 1078920),

    ("00:01:00:00", FrameRate.from_rate(25), 1500),
    ("00:10:00:00", FrameRate.from_rate(25), 15000),
    ("01:00:00:00", FrameRate.from_rate(25), 90000),
    ("10:00:00:00", FrameRate.from_rate(25), 900000),

    # 59.94 drops four numbers
    ("00:00:59;59", FrameRate.NTSC_59_94_DF, 3599),
    ("00:01:00;04", FrameRate.NTSC_59_94_DF, 3600),
    ("00:01:00;03", FrameRate.NTSC_59_94_DF, None),
    ("00:10:00;00", FrameRate.NTSC_59_94_DF, 35964),

    # 23.976 drops two numbers on a 24 frame base
    ("00:00:59;23", FrameRate.NTSC_23_97_DF, 1439),
    ("00:01:00;02", FrameRate.NTSC_23_97_DF, 1440),
    ("00:10:00;00", FrameRate.NTSC_23_97_DF, 14382),
]


EXHAUSTIVE_RATES = [
    FrameRate.NTSC_23_97_DF,
    FrameRate.NTSC_29_97_DF,
    FrameRate.NTSC_59_94_DF,
    FrameRate.PAL_24,
    FrameRate.PAL_30,
    FrameRate.PAL_60,
]


def _walk_first_hour(frame_rate):
    """Yield (fields, frame_count) for every frame of the first hour."""
    whole_rate = frame_rate.nominal_fps
    dropped = (4 if whole_rate > 30 else 2) if frame_rate.drop_frame else 0
    hour = minute = second = frame = 0
    frame_count = 0

    while hour < 1:
        yield (hour, minute, second, frame), frame_count

        frame_count += 1
        frame += 1
        if frame == whole_rate:
            frame = 0
            second += 1
        if second == 60:
            second = 0
            minute += 1
        if minute == 60:
            minute = 0
            hour += 1

        if dropped and second == 0 and frame == 0 and minute % 10 != 0:
            frame = dropped


class TestNamedConversions:
    """Tests for the literal conversion table."""

    @pytest.mark.parametrize("text, frame_rate, expected", CONVERSION_CASES)
    def test_frame_count(self, text, frame_rate, expected):
        if expected is None:
            with pytest.raises(InvalidTimeCodeError):
                TimeCode.from_string(text, frame_rate)
            return

        tc = TimeCode.from_string(text, frame_rate)
        assert tc.frame_count == expected
        assert str(tc) == text
        assert frames_to_timecode(expected, frame_rate) == (tc.hour, tc.minute, tc.second, tc.frame)


class TestExhaustive:
    """Walk every frame of the first hour at each rate."""

    @pytest.mark.parametrize("frame_rate", EXHAUSTIVE_RATES, ids=str)
    def test_first_hour(self, frame_rate):
        for fields, frame_count in _walk_first_hour(frame_rate):
            assert timecode_to_frames(*fields, frame_rate) == frame_count, fields
            assert frames_to_timecode(frame_count, frame_rate) == fields, frame_count

    @pytest.mark.parametrize("frame_rate", [FrameRate.NTSC_29_97_DF, FrameRate.from_rate(25)], ids=str)
    def test_string_round_trip(self, frame_rate):
        """Every 7th frame survives fields -> string -> TimeCode."""
        for fields, frame_count in _walk_first_hour(frame_rate):
            if frame_count % 7:
                continue
            tc = TimeCode(*fields, frame_rate)
            again = TimeCode.from_string(str(tc), frame_rate)
            assert again == tc
            assert again.frame_count == frame_count


class TestDropFrameSkips:
    """Tests for the numbers skipped at minute boundaries."""

    @pytest.mark.parametrize("minute", [m for m in range(60) if m % 10])
    def test_29_97_skips_two(self, minute):
        for frame in (0, 1):
            with pytest.raises(InvalidTimeCodeError):
                timecode_to_frames(0, minute, 0, frame, FrameRate.NTSC_29_97_DF)
        timecode_to_frames(0, minute, 0, 2, FrameRate.NTSC_29_97_DF)

    @pytest.mark.parametrize("minute", [m for m in range(60) if m % 10])
    def test_59_94_skips_four(self, minute):
        for frame in range(4):
            with pytest.raises(InvalidTimeCodeError):
                timecode_to_frames(0, minute, 0, frame, FrameRate.NTSC_59_94_DF)
        timecode_to_frames(0, minute, 0, 4, FrameRate.NTSC_59_94_DF)

    @pytest.mark.parametrize("minute", [0, 10, 20, 30, 40, 50])
    def test_tenth_minutes_keep_all_numbers(self, minute):
        assert timecode_to_frames(0, minute, 0, 0, FrameRate.NTSC_29_97_DF) == minute // 10 * 17982

    def test_non_drop_keeps_all_numbers(self):
        assert timecode_to_frames(0, 1, 0, 0, FrameRate.NTSC_29_97_NDF) == 1800

    def test_message_names_fields_and_rate(self):
        with pytest.raises(InvalidTimeCodeError, match=r"00:01:00;00 is invalid in ≈29.97fps DF"):
            timecode_to_frames(0, 1, 0, 0, FrameRate.NTSC_29_97_DF)


class TestFieldRanges:
    """Tests for out-of-range fields."""

    @pytest.mark.parametrize("fields", [
        (-1, 0, 0, 0),
        (0, 60, 0, 0),
        (0, -1, 0, 0),
        (0, 0, 60, 0),
        (0, 0, 0, 25),
        (0, 0, 0, -1),
    ])
    def test_rejected(self, fields):
        with pytest.raises(InvalidTimeCodeError):
            timecode_to_frames(*fields, FrameRate.from_rate(25))

    def test_frame_bound_uses_nominal_rate(self):
        """29.97 allows frame 29 but not 30."""
        assert timecode_to_frames(0, 0, 0, 29, FrameRate.NTSC_29_97_NDF) == 29
        with pytest.raises(InvalidTimeCodeError):
            timecode_to_frames(0, 0, 0, 30, FrameRate.NTSC_29_97_NDF)

    def test_non_integer_field(self):
        with pytest.raises(TypeError):
            timecode_to_frames(0, 0, 1.5, 0, FrameRate.from_rate(25))

    def test_unresolved_rate(self):
        with pytest.raises(InvalidFrameRateArgumentError):
            timecode_to_frames(0, 0, 0, 0, FrameRate.invalid(False))


class TestDayWrap:
    """Tests for the 24-hour wrap of frame count -> fields."""

    def test_negative_count_wraps_to_previous_day(self):
        assert frames_to_timecode(-1, FrameRate.from_rate(25)) == (23, 59, 59, 24)
        assert frames_to_timecode(-1, FrameRate.NTSC_29_97_DF) == (23, 59, 59, 29)

    def test_count_past_one_day_wraps(self):
        frame_rate = FrameRate.from_rate(25)
        day = 25 * 86400
        assert frames_to_timecode(day + 30, frame_rate) == (0, 0, 1, 5)

    def test_hour_over_24_accepted_but_wraps_on_round_trip(self):
        frame_rate = FrameRate.from_rate(25)
        frame_count = timecode_to_frames(25, 0, 0, 0, frame_rate)
        assert frame_count == 25 * 3600 * 25
        assert frames_to_timecode(frame_count, frame_rate) == (1, 0, 0, 0)

    def test_frames_per_day(self):
        assert FrameCounting.for_rate(FrameRate.NTSC_29_97_DF).frames_per_day == 17982 * 144
        assert FrameCounting.for_rate(FrameRate.from_rate(25)).frames_per_day == 25 * 86400

    def test_non_integer_count(self):
        with pytest.raises(TypeError):
            frames_to_timecode(1.0, FrameRate.from_rate(25))
        with pytest.raises(TypeError):
            frames_to_timecode(True, FrameRate.from_rate(25))


class TestFrameCounting:
    """Tests for the per-rate counting constants."""

    def test_29_97_df(self):
        counting = FrameCounting.for_rate(FrameRate.NTSC_29_97_DF)
        assert counting.nominal_fps == 30
        assert counting.dropped_per_minute == 2
        assert counting.frames_per_minute == 1798
        assert counting.frames_per_10_minutes == 17982

    def test_59_94_df(self):
        counting = FrameCounting.for_rate(FrameRate.NTSC_59_94_DF)
        assert counting.dropped_per_minute == 4
        assert counting.frames_per_minute == 3596
        assert counting.frames_per_10_minutes == 35964

    def test_non_drop(self):
        counting = FrameCounting.for_rate(FrameRate.NTSC_29_97_NDF)
        assert counting.dropped_per_minute == 0
        assert counting.frames_per_10_minutes == 18000

    def test_drop_frame_needs_enough_frames(self):
        with pytest.raises(InvalidFrameRateArgumentError):
            FrameCounting.for_rate(FrameRate.from_rate(2, True))
