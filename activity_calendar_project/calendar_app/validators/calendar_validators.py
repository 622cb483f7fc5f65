"""
Calendar View Validators

Simple validation functions for month calendar request parameters.
Validates the month id format and the optional sport type filter.
"""

import re
from typing import List, Optional

from calendar_app.exceptions import CalendarValidationError
from calendar_app.models import Activity
from core.config import CalendarViewConfig


def validate_month_id(month_id: str) -> str:
    """
    Validate month id format (YYYY-MM).

    Args:
        month_id: Month string (e.g., '2024-02')

    Returns:
        Validated month_id string

    Raises:
        CalendarValidationError: If format is invalid or year is out of range

    Example:
        >>> validate_month_id('2024-02')
        '2024-02'
        >>> validate_month_id('2024-13')
        CalendarValidationError: Invalid month format
    """
    if not month_id:
        raise CalendarValidationError("Month is required", field='month')

    pattern = r'^\d{4}-(0[1-9]|1[0-2])$'
    if not re.match(pattern, month_id):
        raise CalendarValidationError(
            "Invalid month format. Expected format: YYYY-MM (e.g., '2024-02')",
            field='month'
        )

    year_int = int(month_id.split('-')[0])
    if not (CalendarViewConfig.MIN_YEAR <= year_int <= CalendarViewConfig.MAX_YEAR):
        raise CalendarValidationError(
            f"Month year must be between {CalendarViewConfig.MIN_YEAR} and "
            f"{CalendarViewConfig.MAX_YEAR}, got {year_int}",
            field='month'
        )

    return month_id


def validate_sport_types(sport_types: Optional[List[str]]) -> Optional[List[str]]:
    """
    Validate the sport type filter.

    Args:
        sport_types: Sport type values from the query string (may be empty)

    Returns:
        De-duplicated list of sport types in request order, or None for no filter

    Raises:
        CalendarValidationError: If a value is not a known sport type or too many are given

    Example:
        >>> validate_sport_types(['Run', 'Ride', 'Run'])
        ['Run', 'Ride']
        >>> validate_sport_types([])
        None
    """
    if not sport_types:
        return None

    cleaned = []
    for value in sport_types:
        value = (value or '').strip()
        if value and value not in cleaned:
            cleaned.append(value)

    if not cleaned:
        return None

    if len(cleaned) > CalendarViewConfig.MAX_SPORT_TYPE_FILTERS:
        raise CalendarValidationError(
            f"Too many sport types (max {CalendarViewConfig.MAX_SPORT_TYPE_FILTERS})",
            field='sport_type'
        )

    known = {choice for choice, _label in Activity.SPORT_TYPE_CHOICES}
    unknown = [value for value in cleaned if value not in known]
    if unknown:
        raise CalendarValidationError(
            f"Unknown sport type(s): {', '.join(unknown)}",
            field='sport_type'
        )

    return cleaned


def validate_calendar_request(month_id: str, sport_types: Optional[List[str]] = None) -> dict:
    """
    Validate all calendar request parameters together.

    Example:
        >>> validate_calendar_request('2024-02', ['Run'])
        {'month': '2024-02', 'sport_types': ['Run']}
    """
    return {
        'month': validate_month_id(month_id),
        'sport_types': validate_sport_types(sport_types),
    }
