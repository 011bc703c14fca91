from django.db import models

from .constants import (
    ACADEMIC_YEAR_CHOICES,
    DORMITORY_CHOICES,
    INFIRMARY,
    POSITION_CHOICES,
)


class Report(models.Model):
    """One daily headcount submitted for a dormitory (or the infirmary)."""
    report_date = models.CharField(max_length=16, help_text="Buddhist-era D/M/Y, e.g. 15/7/2567")
    reporter_name = models.CharField(max_length=150)
    position = models.CharField(max_length=64, choices=POSITION_CHOICES)
    academic_year = models.CharField(max_length=4, choices=ACADEMIC_YEAR_CHOICES)
    dormitory = models.CharField(max_length=64, choices=DORMITORY_CHOICES)
    present_count = models.PositiveIntegerField(default=0)
    sick_count = models.PositiveIntegerField(default=0)
    log = models.TextField(blank=True)
    created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["dormitory"], name="idx_report_dormitory"),
        ]

    def __str__(self):
        return f"{self.dormitory} - {self.report_date} ({self.reporter_name})"

    @property
    def is_infirmary(self) -> bool:
        return self.dormitory == INFIRMARY


class ReportImage(models.Model):
    report = models.ForeignKey(Report, on_delete=models.CASCADE, related_name="images")
    image = models.ImageField(upload_to="reports/%Y/%m/")
    uploaded = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.report} - {self.image.name}"
