from datetime import date
from typing import NamedTuple

from django.db import models

from .constants import DORMITORIES, INFIRMARY
from .thaidate import normalize


class Window(models.TextChoices):
    LATEST = 'latest', 'ล่าสุด'
    DAILY = 'daily', 'รายวัน'
    MONTHLY = 'monthly', 'รายเดือน'
    YEARLY = 'yearly', 'รายปี'


class DormitoryStat(NamedTuple):
    name: str
    total: int
    sick: int


def parse_window(value) -> Window:
    try:
        return Window(value)
    except ValueError:
        return Window.LATEST


def _latest_per_dormitory(reports):
    latest = {}
    points = {}
    for r in reports:
        point = normalize(r.report_date)
        current = latest.get(r.dormitory)
        # Strictly newer only, so the first report seen keeps a tie
        if current is None or point > points[r.dormitory]:
            latest[r.dormitory] = r
            points[r.dormitory] = point
    return list(latest.values())


def select_reports(reports, window: Window, now: date):
    """Reports that feed the given window, relative to ``now``."""
    if window == Window.LATEST:
        return _latest_per_dormitory(reports)
    if window == Window.DAILY:
        def keep(d):
            return d.day == now.day and d.month == now.month and d.year == now.year
    elif window == Window.MONTHLY:
        def keep(d):
            return d.month == now.month and d.year == now.year
    elif window == Window.YEARLY:
        def keep(d):
            return d.year == now.year
    else:
        return list(reports)
    return [r for r in reports if keep(normalize(r.report_date))]


def _bucket(reports):
    buckets = {}
    for r in reports:
        acc = buckets.setdefault(r.dormitory, {'present': 0, 'sick': 0})
        if r.dormitory == INFIRMARY:
            # Infirmary students are counted as sick only
            acc['sick'] += r.sick_count
            continue
        acc['present'] += r.present_count
        acc['sick'] += r.sick_count
    return buckets


def aggregate(reports, window: Window, now: date):
    """
    Roll reports up into one row per dormitory plus grand totals.

    - Rows follow DORMITORIES order without the infirmary; dormitories with
      no reports in the window are emitted as zero rows.
    - total_present / total_sick are summed over buckets, so total_sick
      includes the infirmary while total_present never does.
    """
    window = parse_window(window)
    buckets = _bucket(select_reports(reports, window, now))

    rows = []
    for name in DORMITORIES:
        if name == INFIRMARY:
            continue
        acc = buckets.get(name)
        if acc:
            rows.append(DormitoryStat(name, acc['present'] + acc['sick'], acc['sick']))
        else:
            rows.append(DormitoryStat(name, 0, 0))

    return {
        'rows': rows,
        'total_present': sum(acc['present'] for acc in buckets.values()),
        'total_sick': sum(acc['sick'] for acc in buckets.values()),
        'label_suffix': f"({window.label})",
    }


def chart_data(rows):
    return {
        'labels': [row.name for row in rows],
        'totals': [row.total for row in rows],
        'sick': [row.sick for row in rows],
    }
