# File: calendar_layout/core/config_manager.py
"""
Centralized configuration management for the calendar layout engine.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

import pytz
from dotenv import load_dotenv

from calendar_layout.models.config import (
    LayoutConfig,
    DEFAULT_PIXELS_PER_HOUR,
    DEFAULT_MINIMUM_HEIGHT_PIXELS,
    DEFAULT_DURATION_MINUTES,
)
from calendar_layout.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _parse_number(raw: Union[str, int, float]) -> Union[int, float]:
    """Parse '64' -> 64 and '7.5' -> 7.5; raises ValueError otherwise."""
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


class Config:
    """Application configuration singleton."""

    # Layout knobs (raw env values, parsed by layout_config)
    PIXELS_PER_HOUR = os.getenv("CALENDAR_PIXELS_PER_HOUR", str(DEFAULT_PIXELS_PER_HOUR))
    MINIMUM_HEIGHT_PIXELS = os.getenv("CALENDAR_MIN_HEIGHT_PIXELS", str(DEFAULT_MINIMUM_HEIGHT_PIXELS))
    DEFAULT_DURATION_MINUTES = os.getenv("CALENDAR_DEFAULT_DURATION_MINUTES", str(DEFAULT_DURATION_MINUTES))

    # Application Settings
    TARGET_TIMEZONE: Optional[str] = os.getenv("TIMEZONE") or None

    # Width of one lane when a day view scrolls horizontally
    SCROLL_COLUMN_WIDTH = 200

    @classmethod
    def layout_config(cls) -> LayoutConfig:
        """Build a LayoutConfig from the environment settings."""
        return LayoutConfig(
            pixels_per_hour=_parse_number(cls.PIXELS_PER_HOUR),
            minimum_height_pixels=_parse_number(cls.MINIMUM_HEIGHT_PIXELS),
            default_duration_minutes=_parse_number(cls.DEFAULT_DURATION_MINUTES),
        )

    @classmethod
    def load_layout_config(cls, path: Union[str, Path]) -> LayoutConfig:
        """
        Load layout configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON object of valid settings
        """
        config_file = Path(path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            data: Dict[str, Any] = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {config_file}")

        logger.debug(f"Loaded layout configuration from {config_file}")
        return LayoutConfig.from_dict(data)

    @classmethod
    def timezone_error(cls) -> Optional[str]:
        """Return a message when TIMEZONE is set to an unknown zone."""
        if cls.TARGET_TIMEZONE:
            try:
                pytz.timezone(cls.TARGET_TIMEZONE)
            except pytz.UnknownTimeZoneError:
                return f"TIMEZONE is not a known timezone: {cls.TARGET_TIMEZONE!r}"
        return None

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured values are usable."""
        errors: List[str] = []

        settings = {
            "CALENDAR_PIXELS_PER_HOUR": cls.PIXELS_PER_HOUR,
            "CALENDAR_MIN_HEIGHT_PIXELS": cls.MINIMUM_HEIGHT_PIXELS,
            "CALENDAR_DEFAULT_DURATION_MINUTES": cls.DEFAULT_DURATION_MINUTES,
        }
        for name, raw in settings.items():
            try:
                value = _parse_number(raw)
            except ValueError:
                errors.append(f"{name} is not a number: {raw!r}")
                continue
            if value <= 0:
                errors.append(f"{name} must be positive, got {raw!r}")

        timezone_error = cls.timezone_error()
        if timezone_error:
            errors.append(timezone_error)

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
