import pytest
import requests

from headcount import sync
from headcount.models import Report


class _Response:
    def __init__(self, status=200):
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f'{self.status} error')


def _report():
    return Report(id=3, report_date='15/7/2567', reporter_name='a', position='ครู',
                  academic_year='2567', dormitory='ภูไท', present_count=4, sick_count=1, log='')


def test_push_without_url_is_a_noop(settings, monkeypatch):
    settings.HEADCOUNT_SYNC_URL = ''

    def fail(*args, **kwargs):
        raise AssertionError('should not post')

    monkeypatch.setattr(sync.requests, 'post', fail)
    assert sync.push_report(_report()) is True


def test_push_posts_payload(settings, monkeypatch):
    settings.HEADCOUNT_SYNC_URL = 'https://example.invalid/exec'
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        return _Response()

    monkeypatch.setattr(sync.requests, 'post', fake_post)
    assert sync.push_report(_report()) is True
    url, payload = calls[0]
    assert url == 'https://example.invalid/exec'
    assert payload['reportDate'] == '15/7/2567'
    assert payload['dormitory'] == 'ภูไท'
    assert payload['presentCount'] == 4


@pytest.mark.parametrize('failure', [
    requests.ConnectionError('down'),
    requests.Timeout('slow'),
])
def test_push_failure_is_reported_not_raised(settings, monkeypatch, failure):
    settings.HEADCOUNT_SYNC_URL = 'https://example.invalid/exec'

    def fake_post(*args, **kwargs):
        raise failure

    monkeypatch.setattr(sync.requests, 'post', fake_post)
    assert sync.push_report(_report()) is False


def test_push_http_error_is_reported(settings, monkeypatch):
    settings.HEADCOUNT_SYNC_URL = 'https://example.invalid/exec'
    monkeypatch.setattr(sync.requests, 'post', lambda *a, **k: _Response(500))
    assert sync.push_report(_report()) is False
