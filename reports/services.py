from collections import OrderedDict, defaultdict
from decimal import Decimal
from itertools import groupby

from timesheets.models import TimeEntry, TimeSheet
from timesheets.services import get_timesheet
from timetracker_backend.results import ServiceResult


def summarize_project_entries(project, entries):
    """Total, per-day totals and entry details for one project's entries"""
    daily_totals = defaultdict(Decimal)
    details = []
    for entry in entries:
        daily_totals[entry.entry_date] += entry.hours
        details.append({
            'id': entry.id,
            'entry_date': entry.entry_date,
            'hours': entry.hours,
            'work_type_code': entry.work_type_id,
            'work_type_name': entry.work_type.name,
            'notes': entry.notes,
        })

    return {
        'project_code': project.code,
        'project_name': project.name,
        'total_hours': sum(daily_totals.values(), Decimal('0')),
        'time_entries': details,
        'daily_totals': [
            {'date': day, 'hours': hours} for day, hours in sorted(daily_totals.items())
        ],
    }


def build_project_time_report(user, timesheet_id=None, start_date=None, end_date=None):
    """
    Group the user's time entries by timesheet, then by project.

    With ``timesheet_id`` only that timesheet is reported. Otherwise every
    timesheet overlapping [start_date, end_date] is, and entries outside the
    range are left out.
    """
    if timesheet_id is not None:
        result = get_timesheet(user, timesheet_id)
        if not result.success:
            return result
        timesheets = [result.data]
    else:
        queryset = TimeSheet.objects.filter(user=user)
        if start_date:
            queryset = queryset.filter(end_date__gte=start_date)
        if end_date:
            queryset = queryset.filter(start_date__lte=end_date)
        timesheets = list(queryset.order_by('-start_date'))

    entries = TimeEntry.objects.filter(
        timesheet__in=timesheets
    ).select_related('project', 'work_type').order_by(
        'timesheet_id', 'project_id', 'entry_date', 'start_time', 'created_at'
    )
    if start_date:
        entries = entries.filter(entry_date__gte=start_date)
    if end_date:
        entries = entries.filter(entry_date__lte=end_date)

    projects_by_timesheet = defaultdict(list)
    for timesheet_pk, timesheet_entries in groupby(entries, key=lambda e: e.timesheet_id):
        for _, project_entries in groupby(timesheet_entries, key=lambda e: e.project_id):
            project_entries = list(project_entries)
            projects_by_timesheet[timesheet_pk].append(
                summarize_project_entries(project_entries[0].project, project_entries)
            )

    report = []
    for timesheet in timesheets:
        projects = projects_by_timesheet.get(timesheet.pk, [])
        report.append(OrderedDict([
            ('timesheet_id', timesheet.pk),
            ('start_date', timesheet.start_date),
            ('end_date', timesheet.end_date),
            ('status', timesheet.get_status_display()),
            ('total_hours', timesheet.total_hours),
            ('reported_hours', sum((p['total_hours'] for p in projects), Decimal('0'))),
            ('projects', projects),
        ]))

    return ServiceResult.ok(report)
