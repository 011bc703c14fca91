from datetime import date
from types import SimpleNamespace

from headcount.aggregation import (
    DormitoryStat,
    Window,
    aggregate,
    chart_data,
    parse_window,
    select_reports,
)
from headcount.constants import DORMITORIES, INFIRMARY

PHUTHAI = "ภูไท"
PRAEWA = "แพรวา"
NOW = date(2024, 5, 12)


def make(dormitory, report_date, present=0, sick=0, ident=None):
    return SimpleNamespace(
        id=ident, dormitory=dormitory, report_date=report_date,
        present_count=present, sick_count=sick,
    )


def row_for(result, name):
    return next(r for r in result['rows'] if r.name == name)


def test_latest_keeps_newest_report_per_dormitory():
    reports = [
        make(PHUTHAI, '10/5/2567', present=10, sick=1),
        make(PHUTHAI, '12/5/2567', present=12, sick=0),
        make(INFIRMARY, '12/5/2567', sick=3),
    ]
    result = aggregate(reports, Window.LATEST, NOW)
    assert row_for(result, PHUTHAI) == DormitoryStat(PHUTHAI, 12, 0)
    assert result['total_present'] == 12
    assert result['total_sick'] == 3
    assert result['label_suffix'] == '(ล่าสุด)'


def test_latest_tie_keeps_first_seen():
    first = make(PHUTHAI, '12/5/2567', present=40, ident=1)
    second = make(PHUTHAI, '12/5/2567', present=50, ident=2)
    selected = select_reports([first, second], Window.LATEST, NOW)
    assert [r.id for r in selected] == [1]


def test_latest_one_report_per_dormitory_with_max_date():
    reports = [
        make(PRAEWA, '1/5/2567', ident=1),
        make(PHUTHAI, '3/5/2567', ident=2),
        make(PRAEWA, '9/5/2567', ident=3),
        make(PHUTHAI, '2/5/2567', ident=4),
        make(PRAEWA, '5/5/2567', ident=5),
    ]
    selected = select_reports(reports, Window.LATEST, NOW)
    assert sorted(r.id for r in selected) == [2, 3]


def test_malformed_date_loses_latest_comparison_and_matches_no_window():
    bad = make(PHUTHAI, 'abc', present=99, ident=1)
    good = make(PHUTHAI, '1/1/2500', present=5, ident=2)
    assert [r.id for r in select_reports([bad, good], Window.LATEST, NOW)] == [2]
    for window in (Window.DAILY, Window.MONTHLY, Window.YEARLY):
        assert select_reports([bad], window, NOW) == []


def test_malformed_date_alone_still_counts_for_latest():
    bad = make(PHUTHAI, 'abc', present=7)
    assert row_for(aggregate([bad], Window.LATEST, NOW), PHUTHAI).total == 7


def test_daily_monthly_yearly_filters():
    reports = [
        make(PHUTHAI, '12/5/2567', present=1),
        make(PHUTHAI, '11/5/2567', present=10),
        make(PHUTHAI, '12/4/2567', present=100),
        make(PHUTHAI, '12/5/2566', present=1000),
    ]
    assert aggregate(reports, Window.DAILY, NOW)['total_present'] == 1
    assert aggregate(reports, Window.MONTHLY, NOW)['total_present'] == 11
    assert aggregate(reports, Window.YEARLY, NOW)['total_present'] == 111
    assert aggregate(reports, Window.MONTHLY, NOW)['label_suffix'] == '(รายเดือน)'


def test_non_latest_windows_sum_every_matching_report():
    reports = [
        make(PHUTHAI, '12/5/2567', present=10, sick=1),
        make(PHUTHAI, '12/5/2567', present=20, sick=2),
    ]
    assert row_for(aggregate(reports, Window.DAILY, NOW), PHUTHAI) == DormitoryStat(PHUTHAI, 33, 3)


def test_rows_follow_declared_order_without_infirmary():
    reports = [make(name, '12/5/2567', present=1) for name in reversed(DORMITORIES)]
    expected = [d for d in DORMITORIES if d != INFIRMARY]
    for window in Window:
        result = aggregate(reports, window, NOW)
        assert [r.name for r in result['rows']] == expected

    empty = aggregate([], Window.LATEST, NOW)
    assert [r.name for r in empty['rows']] == expected
    assert all(r.total == 0 and r.sick == 0 for r in empty['rows'])
    assert empty['total_present'] == 0 and empty['total_sick'] == 0


def test_infirmary_present_count_never_counted():
    reports = [make(INFIRMARY, '12/5/2567', present=50, sick=4)]
    result = aggregate(reports, Window.DAILY, NOW)
    assert result['total_present'] == 0
    assert result['total_sick'] == 4
    assert INFIRMARY not in [r.name for r in result['rows']]


def test_totals_agree_with_rows_plus_infirmary():
    reports = [
        make(PHUTHAI, '12/5/2567', present=30, sick=2),
        make(PRAEWA, '12/5/2567', present=25, sick=5),
        make(INFIRMARY, '12/5/2567', present=9, sick=6),
        make("ฟ้าแดด", '12/5/2567', present=40, sick=0),
    ]
    result = aggregate(reports, Window.DAILY, NOW)
    rows = result['rows']
    assert result['total_sick'] == sum(r.sick for r in rows) + 6
    assert result['total_present'] == sum(r.total - r.sick for r in rows)


def test_aggregate_is_repeatable():
    reports = [
        make(PHUTHAI, '12/5/2567', present=30, sick=2),
        make(INFIRMARY, '1/5/2567', sick=1),
    ]
    for window in Window:
        assert aggregate(reports, window, NOW) == aggregate(reports, window, NOW)


def test_parse_window_falls_back_to_latest():
    assert parse_window('monthly') == Window.MONTHLY
    assert parse_window('weekly') == Window.LATEST
    assert parse_window(None) == Window.LATEST


def test_chart_data_lists():
    rows = [DormitoryStat('x', 5, 1), DormitoryStat('y', 0, 0)]
    assert chart_data(rows) == {'labels': ['x', 'y'], 'totals': [5, 0], 'sick': [1, 0]}


def test_malformed_date_sorts_below_pre_1970_reports():
    bad = make(PHUTHAI, 'abc', present=99, ident=1)
    old = make(PHUTHAI, '1/1/2500', present=5, ident=2)
    assert [r.id for r in select_reports([bad, old], Window.LATEST, NOW)] == [2]
    epoch = date(1970, 1, 1)
    for window in (Window.DAILY, Window.MONTHLY, Window.YEARLY):
        assert aggregate([bad], window, epoch)['total_present'] == 0
