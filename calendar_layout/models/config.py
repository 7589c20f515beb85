# File: calendar_layout/models/config.py
"""
Data models for layout engine configuration.
"""

from dataclasses import dataclass

DEFAULT_PIXELS_PER_HOUR = 64
DEFAULT_MINIMUM_HEIGHT_PIXELS = 32
DEFAULT_DURATION_MINUTES = 60


@dataclass
class LayoutConfig:
    """Tunable knobs of the layout engine."""
    pixels_per_hour: float = DEFAULT_PIXELS_PER_HOUR
    minimum_height_pixels: float = DEFAULT_MINIMUM_HEIGHT_PIXELS
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES

    def __post_init__(self):
        """Reject non-positive values."""
        for name in ('pixels_per_hour', 'minimum_height_pixels', 'default_duration_minutes'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict) -> 'LayoutConfig':
        """Create LayoutConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            pixels_per_hour=data.get('pixels_per_hour', data.get('pixelsPerHour', DEFAULT_PIXELS_PER_HOUR)),
            minimum_height_pixels=data.get(
                'minimum_height_pixels',
                data.get('minimumHeightPixels', DEFAULT_MINIMUM_HEIGHT_PIXELS)
            ),
            default_duration_minutes=data.get(
                'default_duration_minutes',
                data.get('defaultDurationMinutes', DEFAULT_DURATION_MINUTES)
            ),
        )

    def to_dict(self) -> dict:
        return {
            'pixels_per_hour': self.pixels_per_hour,
            'minimum_height_pixels': self.minimum_height_pixels,
            'default_duration_minutes': self.default_duration_minutes,
        }
