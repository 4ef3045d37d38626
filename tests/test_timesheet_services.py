from datetime import date
from decimal import Decimal

import pytest

from timesheets import services
from timesheets.models import TimeSheet
from timetracker_backend.results import KIND_BUSINESS_RULE, KIND_NOT_FOUND, KIND_UNAUTHORIZED

pytestmark = pytest.mark.django_db


class TestGetOrCreateTimesheet:

    def test_creates_open_timesheet_for_period(self, user):
        result = services.get_or_create_timesheet(user, date(2024, 1, 17))

        assert result.success
        timesheet, created = result.data
        assert created
        assert timesheet.user == user
        assert timesheet.start_date == date(2024, 1, 15)
        assert timesheet.end_date == date(2024, 1, 28)
        assert timesheet.status == TimeSheet.STATUS_OPEN
        assert timesheet.total_hours == Decimal('0')
        assert result.message == 'Timesheet created successfully'

    def test_period_starts_on_monday_of_requested_week(self, user):
        timesheet, created = services.get_or_create_timesheet(user, date(2024, 1, 10)).data

        assert created
        assert timesheet.start_date == date(2024, 1, 8)
        assert timesheet.end_date == date(2024, 1, 21)

    def test_returns_timesheet_already_covering_date(self, user, timesheet):
        # 2024-01-24 falls in the second week of the existing sheet
        result = services.get_or_create_timesheet(user, date(2024, 1, 24))

        assert result.success
        assert result.data == (timesheet, False)
        assert TimeSheet.objects.filter(user=user).count() == 1

    def test_returns_existing_timesheet(self, user, timesheet):
        result = services.get_or_create_timesheet(user, date(2024, 1, 28))

        assert result.success
        assert result.data == (timesheet, False)
        assert TimeSheet.objects.filter(user=user).count() == 1

    def test_periods_are_per_user(self, user, other_user, timesheet):
        result = services.get_or_create_timesheet(other_user, date(2024, 1, 20))

        assert result.success
        other_sheet, created = result.data
        assert created
        assert other_sheet.pk != timesheet.pk

    def test_rejects_period_overlapping_misaligned_timesheet(self, user):
        TimeSheet.objects.create(user=user, start_date=date(2024, 1, 20), end_date=date(2024, 2, 2))

        result = services.get_or_create_timesheet(user, date(2024, 1, 16))

        assert not result.success
        assert result.kind == KIND_BUSINESS_RULE
        assert result.error == services.PERIOD_CONFLICT
        assert TimeSheet.objects.filter(user=user).count() == 1

    def test_next_period_starts_after_existing_one(self, user, timesheet):
        next_sheet, created = services.get_or_create_timesheet(user, date(2024, 1, 31)).data

        assert created
        assert next_sheet.start_date == date(2024, 1, 29)
        assert next_sheet.end_date == date(2024, 2, 11)


class TestTimesheetLookup:

    def test_for_date(self, user, timesheet):
        result = services.get_timesheet_for_date(user, date(2024, 1, 21))
        assert result.success
        assert result.data == timesheet

    def test_for_date_without_timesheet(self, user, timesheet):
        result = services.get_timesheet_for_date(user, date(2024, 2, 5))
        assert not result.success
        assert result.kind == KIND_NOT_FOUND

    def test_user_timesheets_newest_first(self, user, other_user, timesheet, closed_timesheet):
        TimeSheet.objects.create(user=other_user, start_date=date(2024, 1, 15), end_date=date(2024, 1, 28))

        result = services.get_user_timesheets(user)

        assert result.data == [timesheet, closed_timesheet]

    def test_get_timesheet_of_other_user(self, other_user, timesheet):
        result = services.get_timesheet(other_user, timesheet.pk)
        assert not result.success
        assert result.kind == KIND_UNAUTHORIZED
        assert result.error == 'Unauthorized access'

    def test_get_missing_timesheet(self, user):
        result = services.get_timesheet(user, 9999)
        assert result.kind == KIND_NOT_FOUND
        assert result.error == services.TIMESHEET_NOT_FOUND


class TestCloseTimesheet:

    def test_close_refreshes_total(self, user, timesheet, make_entry):
        make_entry(timesheet, hours='3.50')
        make_entry(timesheet, hours='4.00', entry_date=date(2024, 1, 16))
        TimeSheet.objects.filter(pk=timesheet.pk).update(total_hours=Decimal('0'))

        result = services.close_timesheet(user, timesheet.pk)

        assert result.success
        assert result.message == 'Timesheet closed successfully'
        timesheet.refresh_from_db()
        assert timesheet.status == TimeSheet.STATUS_CLOSED
        assert timesheet.total_hours == Decimal('7.50')

    def test_close_twice(self, user, closed_timesheet):
        result = services.close_timesheet(user, closed_timesheet.pk)
        assert not result.success
        assert result.kind == KIND_BUSINESS_RULE
        assert result.error == 'Timesheet is already closed'

    def test_close_other_users_timesheet(self, other_user, timesheet):
        result = services.close_timesheet(other_user, timesheet.pk)
        assert result.kind == KIND_UNAUTHORIZED
        timesheet.refresh_from_db()
        assert timesheet.is_open

    def test_close_missing_timesheet(self, user):
        result = services.close_timesheet(user, 4242)
        assert result.kind == KIND_NOT_FOUND
