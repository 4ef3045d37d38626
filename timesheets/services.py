"""
Timesheet and time entry workflow.

Every function takes the acting user and returns a ``ServiceResult``.
Mutations of entries run in a transaction that also refreshes the parent
timesheet's cached total, so ``TimeSheet.total_hours`` always matches the
sum of its entries.
"""
import logging

from django.db import IntegrityError, transaction

from timetracker_backend.results import ServiceResult

from .models import TimeEntry, TimeSheet
from .serializers import TimeEntryWriteSerializer
from .utils import get_period_start_end_dates

logger = logging.getLogger(__name__)

PERIOD_CONFLICT = 'A timesheet already exists for this period'
TIMESHEET_NOT_FOUND = 'Timesheet not found'
INVALID_TIMESHEET = 'Invalid timesheet'
ENTRY_NOT_FOUND = 'Time entry not found'
ENTRY_OUTSIDE_PERIOD = 'Entry date must be within timesheet period'


# Timesheets

def get_or_create_timesheet(user, for_date):
    """
    Return the user's timesheet covering ``for_date``, creating an open one
    for the period starting on that week's Monday when none exists.

    On success ``result.data`` is a ``(timesheet, created)`` tuple.
    """
    covering = TimeSheet.objects.filter(user=user, start_date__lte=for_date, end_date__gte=for_date).first()
    if covering is not None:
        return ServiceResult.ok((covering, False))

    start_date, end_date = get_period_start_end_dates(for_date)

    overlapping = TimeSheet.objects.filter(
        user=user,
        start_date__lte=end_date,
        end_date__gte=start_date
    ).exists()
    if overlapping:
        logger.warning(
            "Refused timesheet %s..%s for %s: overlaps an existing period", start_date, end_date, user
        )
        return ServiceResult.failure(PERIOD_CONFLICT)

    try:
        with transaction.atomic():
            timesheet = TimeSheet.objects.create(
                user=user,
                start_date=start_date,
                end_date=end_date,
                status=TimeSheet.STATUS_OPEN,
            )
    except IntegrityError:
        # Lost a race with a concurrent request for the same period
        existing = TimeSheet.objects.filter(user=user, start_date=start_date, end_date=end_date).first()
        if existing is not None:
            return ServiceResult.ok((existing, False))
        return ServiceResult.failure(PERIOD_CONFLICT)

    logger.info("Created timesheet %s (%s..%s) for %s", timesheet.pk, start_date, end_date, user)
    return ServiceResult.ok((timesheet, True), 'Timesheet created successfully')


def get_timesheet_for_date(user, for_date):
    timesheet = TimeSheet.objects.filter(
        user=user,
        start_date__lte=for_date,
        end_date__gte=for_date
    ).first()
    if timesheet is None:
        return ServiceResult.not_found('No timesheet covers this date')
    return ServiceResult.ok(timesheet)


def get_user_timesheets(user):
    return ServiceResult.ok(list(TimeSheet.objects.filter(user=user).order_by('-start_date')))


def _owned_timesheet(user, timesheet_id, missing=TIMESHEET_NOT_FOUND, foreign='Unauthorized access',
                     for_update=False):
    """Return ``(timesheet, None)`` or ``(None, failure_result)``"""
    queryset = TimeSheet.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    timesheet = queryset.filter(pk=timesheet_id).first()
    if timesheet is None:
        return None, ServiceResult.not_found(missing)
    if timesheet.user_id != user.pk:
        logger.warning("User %s tried to access timesheet %s of another user", user, timesheet_id)
        return None, ServiceResult.unauthorized(foreign)
    return timesheet, None


def get_timesheet(user, timesheet_id):
    timesheet, failure = _owned_timesheet(user, timesheet_id)
    if failure:
        return failure
    return ServiceResult.ok(timesheet)


def close_timesheet(user, timesheet_id):
    """Close an open timesheet after a final refresh of its total"""
    with transaction.atomic():
        timesheet, failure = _owned_timesheet(user, timesheet_id, for_update=True)
        if failure:
            return failure

        if not timesheet.is_open:
            return ServiceResult.failure('Timesheet is already closed')

        timesheet.status = TimeSheet.STATUS_CLOSED
        timesheet.total_hours = timesheet.calculate_total_hours()
        timesheet.save(update_fields=['status', 'total_hours', 'updated_at'])

    logger.info("Closed timesheet %s with %s hours", timesheet.pk, timesheet.total_hours)
    return ServiceResult.ok(timesheet, 'Timesheet closed successfully')


# Time entries

def get_timesheet_entries(user, timesheet_id):
    timesheet, failure = _owned_timesheet(user, timesheet_id, missing=INVALID_TIMESHEET, foreign=INVALID_TIMESHEET)
    if failure:
        return failure

    entries = timesheet.entries.select_related('project', 'work_type').order_by('entry_date', 'start_time')
    return ServiceResult.ok(list(entries))


def _validate_entry(data, timesheet, require_active):
    """Run field validation and the period check; return ``(validated_data, failure)``"""
    serializer = TimeEntryWriteSerializer(data=data, context={'require_active': require_active})
    if not serializer.is_valid():
        return None, ServiceResult.validation_failure(serializer.errors)

    validated = serializer.validated_data
    if not timesheet.contains_date(validated['entry_date']):
        return None, ServiceResult.failure(ENTRY_OUTSIDE_PERIOD)
    return validated, None


def _apply_entry_fields(entry, validated):
    entry.project = validated['project']
    entry.work_type = validated['work_type']
    entry.entry_date = validated['entry_date']
    entry.hours = validated['hours']
    entry.start_time = validated.get('start_time')
    entry.end_time = validated.get('end_time')
    entry.notes = validated.get('notes') or ''


def create_time_entry(user, timesheet_id, data):
    """Add an entry to one of the user's open timesheets"""
    with transaction.atomic():
        timesheet, failure = _owned_timesheet(
            user, timesheet_id, missing=INVALID_TIMESHEET, foreign=INVALID_TIMESHEET, for_update=True
        )
        if failure:
            return failure

        if not timesheet.is_open:
            return ServiceResult.failure('Cannot add entries to closed timesheet')

        validated, failure = _validate_entry(data, timesheet, require_active=True)
        if failure:
            return failure

        entry = TimeEntry(timesheet=timesheet, created_by=user)
        _apply_entry_fields(entry, validated)
        entry.save()

        timesheet.recalculate_total_hours()

    logger.info("Added %sh entry %s to timesheet %s", entry.hours, entry.pk, timesheet.pk)
    return ServiceResult.ok(entry, 'Time entry created successfully')


def _owned_entry(user, entry_id):
    """Return ``(entry, locked_timesheet, None)`` or ``(None, None, failure_result)``"""
    entry = TimeEntry.objects.filter(pk=entry_id).first()
    if entry is None:
        return None, None, ServiceResult.not_found(ENTRY_NOT_FOUND)

    timesheet = TimeSheet.objects.select_for_update().get(pk=entry.timesheet_id)
    if entry.created_by_id != user.pk or timesheet.user_id != user.pk:
        logger.warning("User %s tried to change time entry %s of another user", user, entry_id)
        return None, None, ServiceResult.unauthorized()
    return entry, timesheet, None


def update_time_entry(user, entry_id, data):
    """Replace the fields of an entry on an open timesheet"""
    with transaction.atomic():
        entry, timesheet, failure = _owned_entry(user, entry_id)
        if failure:
            return failure

        if not timesheet.is_open:
            return ServiceResult.failure('Cannot modify entries of closed timesheet')

        validated, failure = _validate_entry(data, timesheet, require_active=False)
        if failure:
            return failure

        _apply_entry_fields(entry, validated)
        entry.save()

        timesheet.recalculate_total_hours()

    logger.info("Updated time entry %s on timesheet %s", entry.pk, timesheet.pk)
    return ServiceResult.ok(entry, 'Time entry updated successfully')


def delete_time_entry(user, entry_id):
    with transaction.atomic():
        entry, timesheet, failure = _owned_entry(user, entry_id)
        if failure:
            return failure

        if not timesheet.is_open:
            return ServiceResult.failure('Cannot delete entries of closed timesheet')

        entry.delete()
        timesheet.recalculate_total_hours()

    logger.info("Deleted time entry %s from timesheet %s", entry_id, timesheet.pk)
    return ServiceResult.ok(timesheet, 'Time entry deleted successfully')
