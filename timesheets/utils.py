from datetime import date, datetime, timedelta

from django.conf import settings


def get_period_start_end_dates(for_date):
    """
    Get the biweekly period that starts on the Monday of ``for_date``'s week.

    Returns: (start_date, end_date) tuple, both inclusive
    """
    if isinstance(for_date, datetime):
        for_date = for_date.date()

    start_date = for_date - timedelta(days=for_date.weekday())
    end_date = start_date + timedelta(days=settings.TIMESHEET_PERIOD_DAYS - 1)
    return start_date, end_date


def format_period_range(start_date, end_date):
    """Format a period as 'Jan 01 - Jan 14, 2024' style string"""
    if start_date.year == end_date.year:
        return f"{start_date.strftime('%b %d')} - {end_date.strftime('%b %d, %Y')}"
    return f"{start_date.strftime('%b %d, %Y')} - {end_date.strftime('%b %d, %Y')}"


def parse_date(value):
    """Parse a YYYY-MM-DD string, returning None when it is missing or malformed"""
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except (TypeError, ValueError):
        return None
