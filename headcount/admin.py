from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import Report, ReportImage


class ReportImageInline(admin.TabularInline):
    model = ReportImage
    extra = 0


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = (
        "report_date", "dormitory", "reporter_name", "position",
        "academic_year", "present_count", "sick_count", "view_button",
    )
    list_filter = ("dormitory", "academic_year", "position")
    search_fields = ("reporter_name", "dormitory", "log")
    inlines = [ReportImageInline]

    def view_button(self, obj):
        url = reverse('headcount:report_detail', args=[obj.id])
        return format_html('<a class="button" href="{}" target="_blank">View</a>', url)
    view_button.short_description = 'View'


@admin.register(ReportImage)
class ReportImageAdmin(admin.ModelAdmin):
    list_display = ("report", "image", "uploaded")
    search_fields = ("report__reporter_name", "report__dormitory")
    date_hierarchy = "uploaded"
