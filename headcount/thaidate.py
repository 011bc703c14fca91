from datetime import date, timedelta
from typing import Optional

from django.utils import timezone

from .constants import BUDDHIST_ERA_OFFSET

# Malformed dates collapse to the earliest representable date: they sort
# before every real report and match no realistic window
MIN_POINT = date.min


def normalize(date_string: str) -> date:
    """Convert a Buddhist-era ``D/M/Y`` string to a comparable ``date``.

    Day and month are not range checked: ``31/2/2567`` rolls over into
    March the same way a permissive calendar constructor would. Anything
    that cannot be read as three integers yields ``MIN_POINT``.
    """
    parts = (date_string or '').split('/')
    if len(parts) != 3:
        return MIN_POINT
    try:
        day, month, year = [int(p) for p in parts]
        # Month overflow carries into the year, day overflow into the month
        y, m0 = divmod((year - BUDDHIST_ERA_OFFSET) * 12 + (month - 1), 12)
        return date(y, m0 + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return MIN_POINT


def to_localized(d: date) -> str:
    return f"{d.day}/{d.month}/{d.year + BUDDHIST_ERA_OFFSET}"


def today_localized(today: Optional[date] = None) -> str:
    """Report date stamp for a new submission, e.g. ``15/7/2567``."""
    return to_localized(today or timezone.localdate())


def current_academic_year(today: Optional[date] = None) -> str:
    return str((today or timezone.localdate()).year + BUDDHIST_ERA_OFFSET)
