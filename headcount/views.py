import logging
from urllib.parse import urlencode

from django.conf import settings
from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_POST

from .aggregation import Window, aggregate, chart_data, parse_window
from .constants import DORMITORIES
from .forms import ReportForm
from .models import Report
from .selection import SelectionController
from .store import remove_reports, save_report, search_reports
from .sync import push_report
from .thaidate import today_localized

logger = logging.getLogger(__name__)


def _selection(request):
    return SelectionController(
        request.session,
        settings.HEADCOUNT_DELETE_PASSPHRASE,
        on_remove=remove_reports,
    )


def _back_to_dashboard(request):
    params = {}
    for key in ('view', 'q'):
        value = (request.POST.get(key) or request.GET.get(key) or '').strip()
        if value:
            params[key] = value
    url = reverse('headcount:dashboard')
    return redirect(f"{url}?{urlencode(params)}" if params else url)


def dashboard(request):
    window = parse_window(request.GET.get('view'))
    search = (request.GET.get('q') or '').strip()
    today = timezone.localdate()

    # Newest first, matching the table and the latest-per-dormitory tie rule
    reports = list(Report.objects.all())
    stats = aggregate(reports, window, today)

    selection = _selection(request)
    selection.discard_missing(r.id for r in reports)
    visible = list(search_reports(Report.objects.all(), search))
    visible_ids = [r.id for r in visible]
    selected = set(selection.selected)

    context = {
        'window': window,
        'windows': Window.choices,
        'search': search,
        'stats': stats,
        'chart': chart_data(stats['rows']),
        'dormitory_count': len(DORMITORIES) - 1,
        'report_count': len(reports),
        'rows': [(r, r.id in selected) for r in visible],
        'selected_count': selection.count,
        'all_selected': selection.all_selected(visible_ids),
        'pending_delete': selection.pending,
    }
    return render(request, 'headcount/dashboard.html', context)


def _save_from_form(request, form, instance=None):
    report = save_report(
        form.cleaned_data,
        images=form.cleaned_data.get('images') or [],
        instance=instance,
        remove_images=form.cleaned_data.get('remove_images') or [],
    )
    # Local state is already committed; a failed push is only reported
    if not push_report(report):
        messages.warning(request, 'เกิดข้อผิดพลาดในการส่งข้อมูล กรุณาลองใหม่อีกครั้ง')
    return report


def report_create(request):
    if request.method == 'POST':
        form = ReportForm(request.POST, request.FILES)
        if form.is_valid():
            report = _save_from_form(request, form)
            messages.success(request, f'บันทึกรายงาน {report.dormitory} เรียบร้อย')
            return redirect('headcount:dashboard')
    else:
        form = ReportForm()
    return render(request, 'headcount/report_form.html', {
        'form': form,
        'is_editing': False,
        'report_date': today_localized(),
    })


def report_edit(request, pk: int):
    report = get_object_or_404(Report, pk=pk)
    if request.method == 'POST':
        form = ReportForm(request.POST, request.FILES, instance=report)
        if form.is_valid():
            report = _save_from_form(request, form, instance=report)
            messages.success(request, f'แก้ไขรายงาน {report.dormitory} เรียบร้อย')
            return redirect('headcount:dashboard')
    else:
        form = ReportForm(instance=report)
    return render(request, 'headcount/report_form.html', {
        'form': form,
        'is_editing': True,
        'report': report,
        'report_date': report.report_date,
    })


def report_detail(request, pk: int):
    report = get_object_or_404(Report.objects.prefetch_related('images'), pk=pk)
    return render(request, 'headcount/report_detail.html', {'report': report})


@require_POST
def selection_toggle(request, pk: int):
    _selection(request).toggle(pk)
    return _back_to_dashboard(request)


@require_POST
def selection_all(request):
    selection = _selection(request)
    if request.POST.get('checked') == '1':
        visible = search_reports(Report.objects.all(), request.POST.get('q'))
        selection.select_all(visible.values_list('id', flat=True))
    else:
        selection.clear_all()
    return _back_to_dashboard(request)


@require_POST
def delete_request(request):
    if not _selection(request).request_delete():
        messages.info(request, 'กรุณาเลือกรายการที่ต้องการลบ')
    return _back_to_dashboard(request)


@require_POST
def delete_confirm(request):
    selection = _selection(request)
    if not selection.pending:
        return _back_to_dashboard(request)
    count = selection.count
    if selection.confirm(request.POST.get('code', '')):
        logger.info('Bulk delete confirmed for %s report(s)', count)
        messages.success(request, 'ลบข้อมูลสำเร็จ')
    else:
        messages.error(request, 'รหัสไม่ถูกต้อง')
    return _back_to_dashboard(request)


@require_POST
def delete_cancel(request):
    _selection(request).cancel()
    return _back_to_dashboard(request)
