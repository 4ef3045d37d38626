"""
Shared fixtures for the time tracker tests.

Timesheets run from a Monday for 14 days, so 2024-01-01..2024-01-14 and
2024-01-15..2024-01-28 are consecutive periods.
"""
from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

PERIOD_START = date(2024, 1, 15)
PERIOD_END = date(2024, 1, 28)
STRONG_PASSWORD = 'Sup3r$ecret'


@pytest.fixture
def user(db):
    from authentication.models import User
    return User.objects.create_user(
        email='alice@example.com',
        password=STRONG_PASSWORD,
        first_name='Alice',
        last_name='Smith',
    )


@pytest.fixture
def other_user(db):
    from authentication.models import User
    return User.objects.create_user(
        email='bob@example.com',
        password=STRONG_PASSWORD,
        first_name='Bob',
        last_name='Jones',
    )


@pytest.fixture
def project(db):
    from projects.models import Project
    return Project.objects.create(code='APOLLO', name='Apollo', description='Moon shot')


@pytest.fixture
def inactive_project(db):
    from projects.models import Project
    return Project.objects.create(code='LEGACY', name='Legacy', is_active=False)


@pytest.fixture
def work_type(db):
    from projects.models import WorkType
    return WorkType.objects.create(code='CODE', name='Coding')


@pytest.fixture
def inactive_work_type(db):
    from projects.models import WorkType
    return WorkType.objects.create(code='OLD', name='Retired work', is_active=False)


@pytest.fixture
def timesheet(user):
    from timesheets.models import TimeSheet
    return TimeSheet.objects.create(user=user, start_date=PERIOD_START, end_date=PERIOD_END)


@pytest.fixture
def closed_timesheet(user):
    from timesheets.models import TimeSheet
    return TimeSheet.objects.create(
        user=user,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 14),
        status=TimeSheet.STATUS_CLOSED,
    )


@pytest.fixture
def entry_data(project, work_type):
    return {
        'project_code': project.code,
        'work_type_code': work_type.code,
        'entry_date': '2024-01-16',
        'hours': '8.00',
        'notes': 'Build the landing module',
    }


@pytest.fixture
def make_entry(user, project, work_type):
    """Create an entry directly and keep the timesheet total in sync"""
    from timesheets.models import TimeEntry

    def _make_entry(timesheet, hours='4.00', entry_date=None, project_obj=None, work_type_obj=None):
        entry = TimeEntry.objects.create(
            timesheet=timesheet,
            created_by=timesheet.user,
            project=project_obj or project,
            work_type=work_type_obj or work_type,
            entry_date=entry_date or timesheet.start_date,
            hours=Decimal(hours),
        )
        timesheet.recalculate_total_hours()
        return entry

    return _make_entry


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_login(user)
    return api_client
