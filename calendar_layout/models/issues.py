# File: calendar_layout/models/issues.py
"""
Non-fatal problems reported while preparing events for layout.
"""

from dataclasses import dataclass

@dataclass
class NormalizationIssue:
    """An event that could not be laid out."""
    event_id: str
    field: str
    message: str

    def __str__(self) -> str:
        """String representation of issue."""
        return f"Event {self.event_id} - {self.field}: {self.message}"
