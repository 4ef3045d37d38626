from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator
from django.db import models

from projects.models import Project, WorkType

from .utils import format_period_range


class TimeSheet(models.Model):
    STATUS_OPEN = 'open'
    STATUS_CLOSED = 'closed'
    STATUS_CHOICES = [
        (STATUS_OPEN, 'Open'),
        (STATUS_CLOSED, 'Closed'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='timesheets')
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_OPEN)

    # Cached sum of entry hours, refreshed after every entry mutation
    total_hours = models.DecimalField(max_digits=7, decimal_places=2, default=Decimal('0'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-start_date']
        constraints = [
            models.UniqueConstraint(fields=['user', 'start_date'], name='unique_timesheet_period_per_user'),
        ]
        indexes = [
            models.Index(fields=['user', 'start_date', 'end_date'], name='timesheets_user_period_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.period_range} ({self.get_status_display()})"

    @property
    def is_open(self):
        return self.status == self.STATUS_OPEN

    @property
    def period_range(self):
        return format_period_range(self.start_date, self.end_date)

    def contains_date(self, value):
        return self.start_date <= value <= self.end_date

    def calculate_total_hours(self):
        return self.entries.aggregate(total=models.Sum('hours'))['total'] or Decimal('0')

    def recalculate_total_hours(self):
        """Refresh the cached total and modification timestamp from the entries"""
        self.total_hours = self.calculate_total_hours()
        self.save(update_fields=['total_hours', 'updated_at'])
        return self.total_hours


class TimeEntry(models.Model):
    timesheet = models.ForeignKey(TimeSheet, on_delete=models.CASCADE, related_name='entries')
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='time_entries'
    )
    project = models.ForeignKey(
        Project, on_delete=models.PROTECT, related_name='time_entries', db_column='project_code'
    )
    work_type = models.ForeignKey(
        WorkType, on_delete=models.PROTECT, related_name='time_entries', db_column='work_type_code'
    )
    entry_date = models.DateField()
    hours = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MaxValueValidator(Decimal('24'))]
    )
    start_time = models.TimeField(blank=True, null=True)
    end_time = models.TimeField(blank=True, null=True)
    notes = models.TextField(max_length=1000, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['entry_date', 'start_time', 'created_at']
        verbose_name_plural = 'time entries'
        indexes = [
            models.Index(fields=['timesheet', 'entry_date'], name='timesheets_entry_date_idx'),
            models.Index(fields=['project', 'entry_date'], name='timesheets_entry_project_idx'),
        ]

    def __str__(self):
        return f"{self.entry_date} {self.project_id}/{self.work_type_id} {self.hours}h"

    @property
    def project_code(self):
        return self.project_id

    @property
    def work_type_code(self):
        return self.work_type_id

    def clean(self):
        """Model-level validation, used by admin forms"""
        if self.hours is not None and self.hours <= 0:
            raise ValidationError({'hours': 'Hours must be greater than 0 and at most 24'})

        if self.timesheet_id and not self.timesheet.is_open:
            raise ValidationError({'timesheet': 'Cannot modify entries of closed timesheet'})

        if self.timesheet_id and self.entry_date:
            if not self.timesheet.contains_date(self.entry_date):
                raise ValidationError({'entry_date': 'Entry date must be within timesheet period'})
