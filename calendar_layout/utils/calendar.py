# File: calendar_layout/utils/calendar.py
"""
Calendar helpers shared by the day, week and month views.
"""

import calendar
import datetime
from typing import Dict, List, Optional

from calendar_layout.models import PositionedEvent

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

DAY_NAMES = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


def _sunday_index(day: datetime.date) -> int:
    """Weekday with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7


def week_start(day: datetime.date) -> datetime.date:
    """Sunday of the week containing `day`."""
    if isinstance(day, datetime.datetime):
        day = day.date()
    return day - datetime.timedelta(days=_sunday_index(day))


def week_days(day: datetime.date) -> List[datetime.date]:
    """The seven dates (Sunday..Saturday) of the week containing `day`."""
    first = week_start(day)
    return [first + datetime.timedelta(days=i) for i in range(7)]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of the 1st (0 = Sunday, 6 = Saturday)."""
    return _sunday_index(datetime.date(year, month, 1))


def month_days(year: int, month: int) -> List[datetime.date]:
    return [datetime.date(year, month, d) for d in range(1, days_in_month(year, month) + 1)]


def format_time_12h(moment: datetime.datetime) -> str:
    """Format as e.g. '2:00 PM'."""
    hours = moment.hour % 12 or 12
    period = 'PM' if moment.hour >= 12 else 'AM'
    return f"{hours}:{moment.minute:02d} {period}"


def format_hour_label(hour: int) -> str:
    """Timeline label for an hour of the day, e.g. '12 AM', '3 PM'."""
    if hour == 0:
        return '12 AM'
    if hour < 12:
        return f'{hour} AM'
    if hour == 12:
        return '12 PM'
    return f'{hour - 12} PM'


def event_color(moment: datetime.date, today: Optional[datetime.date] = None) -> str:
    """'green' for past days, 'blue' for today, 'purple' for future days."""
    if isinstance(moment, datetime.datetime):
        moment = moment.date()
    today = today or datetime.date.today()
    if moment < today:
        return 'green'
    if moment == today:
        return 'blue'
    return 'purple'


def column_geometry(
    positioned: PositionedEvent,
    max_columns: int = 1,
    scroll_column_width: Optional[float] = None
) -> Dict[str, object]:
    """
    Horizontal placement for the rendering layer.

    By default lanes share the day width as percentages of the event's own
    cluster. When `scroll_column_width` is given and the day has more than one
    column, every lane gets that fixed pixel width instead and the view scrolls.
    """
    if scroll_column_width and max_columns > 1:
        return {
            'unit': 'px',
            'left': positioned.column * scroll_column_width,
            'width': scroll_column_width,
        }
    return {
        'unit': '%',
        'left': positioned.column / positioned.total_columns * 100,
        'width': 100 / positioned.total_columns,
    }
