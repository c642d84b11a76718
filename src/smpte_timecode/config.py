"""
smpte_timecode Configuration
============================

This module handles configuration loading for the timecode library.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. YAML config file
    3. Default values (lowest priority)

Config File Search:
    1. Path passed to load_config()
    2. $SMPTE_TIMECODE_CONFIG
    3. ./smpte_timecode.yaml or ./smpte_timecode.yml

Environment Variable Mapping:
    SMPTE_TIMECODE_FRAME_RATES       -> parsing.well_known_frame_rates
                                        ("59.94=60000/1001,23.976=24000/1001")
    SMPTE_TIMECODE_LOG_LEVEL         -> logging.level
    SMPTE_TIMECODE_LOG_FORMAT        -> logging.format

Example:
    from smpte_timecode.config import settings, setup_logging

    setup_logging(settings)
    print(settings.parsing.well_known_frame_rates)

Note:
    Importing the library never touches the root logger. Applications
    that want the configured format call setup_logging() themselves.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


CONFIG_PATH_ENV = "SMPTE_TIMECODE_CONFIG"
DEFAULT_CONFIG_NAMES = ("smpte_timecode.yaml", "smpte_timecode.yml")

# "@29.97" means exactly 30000/1001; every other suffix is RATE/1 unless configured
DEFAULT_FRAME_RATES: Dict[str, Tuple[int, int]] = {"29.97": (30000, 1001)}

LOG_FORMATS = ("text", "json")


# =============================================================================
# Configuration Models
# =============================================================================

class ParsingConfig(BaseModel):
    """
    Timecode string parsing configuration.

    Keys are compared with the suffix text exactly, so quote them in YAML
    ("59.94": [60000, 1001]) or they load as floats.
    """

    well_known_frame_rates: Dict[str, Tuple[int, int]] = Field(
        default_factory=lambda: dict(DEFAULT_FRAME_RATES),
        description="\"@rate\" suffix text resolved to an exact numerator/denominator",
    )

    @field_validator("well_known_frame_rates")
    @classmethod
    def keep_default_rates(cls, v: Dict[str, Tuple[int, int]]) -> Dict[str, Tuple[int, int]]:
        """Configured rates extend the defaults rather than replacing them."""
        for text, (numerator, denominator) in v.items():
            if numerator <= 0 or denominator <= 0:
                raise ValueError(f"Frame rate for '{text}' must be positive, got {numerator}/{denominator}")
            default = DEFAULT_FRAME_RATES.get(text)
            if default is not None and (numerator, denominator) != default:
                raise ValueError(
                    f"Frame rate for '{text}' is fixed at {default[0]}/{default[1]}, "
                    f"got {numerator}/{denominator}"
                )
        return {**v, **DEFAULT_FRAME_RATES}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Accept only the formats setup_logging knows."""
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(LOG_FORMATS)}, got '{v}'")
        return v


class Settings(BaseModel):
    """
    Main settings class for smpte_timecode.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def _find_config_file(config_path: Optional[str]) -> Optional[Path]:
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV)
    if config_path is not None:
        return Path(config_path)

    for name in DEFAULT_CONFIG_NAMES:
        path = Path(name)
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to a YAML file. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist
    """
    path = _find_config_file(config_path)

    config_data = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.info(f"Loading config from: {path}")
        with open(path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Parsing settings
    if env_rates := os.environ.get("SMPTE_TIMECODE_FRAME_RATES"):
        rates = config_data.setdefault("parsing", {}).setdefault("well_known_frame_rates", {})
        rates.update(_parse_rate_mapping(env_rates))

    # Logging settings
    if env_log := os.environ.get("SMPTE_TIMECODE_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("SMPTE_TIMECODE_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def _parse_rate_mapping(value: str) -> Dict[str, Tuple[int, int]]:
    """
    Parse "TEXT=NUM/DEN" pairs separated by commas.

    Raises:
        ValueError: If an entry is malformed
    """
    rates = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            text, fraction = entry.split("=", 1)
            numerator, denominator = fraction.split("/", 1)
            rates[text.strip()] = (int(numerator), int(denominator))
        except ValueError as e:
            raise ValueError(f"Invalid frame rate mapping '{entry}' (expected TEXT=NUM/DEN)") from e
    return rates


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
