"""
Test Configuration
==================

Pytest fixtures and test configuration for smpte_timecode.
"""

import pytest


@pytest.fixture
def ntsc_df():
    """29.97 drop-frame rate."""
    from smpte_timecode.models.frame_rate import FrameRate

    return FrameRate.NTSC_29_97_DF


@pytest.fixture
def pal_25():
    """Plain 25 fps rate."""
    from smpte_timecode.models.frame_rate import FrameRate

    return FrameRate.from_rate(25)


@pytest.fixture
def default_settings(monkeypatch):
    """Replace the global settings with defaults for the duration of a test."""
    from smpte_timecode import config

    settings = config.Settings()
    monkeypatch.setattr(config, "settings", settings)
    return settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all SMPTE_TIMECODE_* environment variables."""
    import os

    for name in list(os.environ):
        if name.startswith("SMPTE_TIMECODE_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
