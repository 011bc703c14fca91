import logging

from django.db import transaction
from django.db.models import Q

from .constants import INFIRMARY, MAX_IMAGES
from .models import Report, ReportImage
from .thaidate import today_localized

logger = logging.getLogger(__name__)

REPORT_FIELDS = (
    'reporter_name', 'position', 'academic_year', 'dormitory',
    'present_count', 'sick_count', 'log',
)


@transaction.atomic
def save_report(data, images=(), instance=None, today=None, remove_images=()):
    """Create a report, or replace every field of ``instance``.

    New reports get a fresh id from the database and today's Buddhist-era
    date; edits keep both. Photos beyond MAX_IMAGES are ignored.
    """
    report = instance if instance is not None else Report(report_date=today_localized(today))
    for name in REPORT_FIELDS:
        setattr(report, name, data.get(name, '' if name == 'log' else 0))
    if report.dormitory == INFIRMARY:
        report.present_count = 0
    report.full_clean(exclude=['report_date'])
    report.save()

    if remove_images:
        ReportImage.objects.filter(report=report, pk__in=[img.pk for img in remove_images]).delete()
    room = MAX_IMAGES - report.images.count()
    for upload in list(images)[:max(room, 0)]:
        ReportImage.objects.create(report=report, image=upload)

    logger.info('Report %s %s for %s (%s)', report.pk, 'updated' if instance is not None else 'created',
                report.dormitory, report.report_date)
    return report


def remove_reports(ids):
    """Delete the reports with the given ids; unknown ids are ignored."""
    ids = list(ids)
    if not ids:
        return 0
    _, per_model = Report.objects.filter(pk__in=ids).delete()
    removed = per_model.get('headcount.Report', 0)
    logger.info('Removed %s report(s) out of %s requested', removed, len(ids))
    return removed


def search_reports(queryset, term):
    term = (term or '').strip()
    if not term:
        return queryset
    return queryset.filter(Q(reporter_name__icontains=term) | Q(dormitory__icontains=term))
