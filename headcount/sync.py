import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


def report_payload(report):
    return {
        'id': report.pk,
        'reportDate': report.report_date,
        'reporterName': report.reporter_name,
        'position': report.position,
        'academicYear': report.academic_year,
        'dormitory': report.dormitory,
        'presentCount': report.present_count,
        'sickCount': report.sick_count,
        'log': report.log,
    }


def push_report(report) -> bool:
    """Best-effort copy of a saved report to the external sheet endpoint.

    Runs after the local save has committed and never undoes it; the
    caller only learns whether the push went through.
    """
    url = getattr(settings, 'HEADCOUNT_SYNC_URL', '')
    if not url:
        return True
    timeout = getattr(settings, 'HEADCOUNT_SYNC_TIMEOUT', 10)
    try:
        resp = requests.post(url, json=report_payload(report), timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning('Sync of report %s to %s failed: %s', report.pk, url, exc)
        return False
    return True
