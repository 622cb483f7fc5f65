"""
Core Configuration Module

Business logic configuration for the application.
Separate from Django settings.py for better modularity and testability.
"""

import calendar
from typing import Optional


class CalendarViewConfig:
    """
    Month Calendar View Configuration

    Controls how the month grid is laid out and how the calendar API
    validates incoming requests.
    """

    # Grid Layout Configuration
    FIRST_DAY_OF_WEEK: int = calendar.MONDAY
    """
    Weekday shown in the first column of the grid.
    Uses the standard library numbering: Monday=0 ... Sunday=6.
    Default: Monday (ISO weeks)
    """

    DATE_KEY_FORMAT: str = '%Y-%m-%d'
    """
    strftime format used to key activities by calendar date.
    Example: '2024-02-29'
    """

    TRAILING_DAYS_UPPER_BOUND: int = 6
    """
    Days added after the last day of the month when computing the end of
    the activity range query. A week row never needs more than 6 days
    from the next month.
    """

    # Request Validation
    MIN_YEAR: int = 1970
    """Earliest year accepted by the calendar API."""

    MAX_YEAR: int = 2100
    """Latest year accepted by the calendar API."""

    MAX_SPORT_TYPE_FILTERS: int = 20
    """Maximum number of sport_type query parameters in one request."""

    # Timezone
    TIMEZONE: Optional[str] = None
    """
    IANA timezone used to decide which calendar day an activity falls on.
    Default: None (use settings.TIME_ZONE)
    """

    # Validation Methods
    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if any configuration is invalid.
        """
        if not isinstance(cls.FIRST_DAY_OF_WEEK, int):
            raise ValueError(f"FIRST_DAY_OF_WEEK must be an integer, got {type(cls.FIRST_DAY_OF_WEEK)}")

        if not (calendar.MONDAY <= cls.FIRST_DAY_OF_WEEK <= calendar.SUNDAY):
            raise ValueError(
                f"FIRST_DAY_OF_WEEK must be between 0 (Monday) and 6 (Sunday), got {cls.FIRST_DAY_OF_WEEK}"
            )

        if not isinstance(cls.TRAILING_DAYS_UPPER_BOUND, int):
            raise ValueError(
                f"TRAILING_DAYS_UPPER_BOUND must be an integer, got {type(cls.TRAILING_DAYS_UPPER_BOUND)}"
            )

        if cls.TRAILING_DAYS_UPPER_BOUND < 6:
            raise ValueError(
                f"TRAILING_DAYS_UPPER_BOUND must be at least 6 to cover the last week row, "
                f"got {cls.TRAILING_DAYS_UPPER_BOUND}"
            )

        if not (1 <= cls.MIN_YEAR <= cls.MAX_YEAR <= 9999):
            raise ValueError(
                f"Year range must satisfy 1 <= MIN_YEAR <= MAX_YEAR <= 9999, "
                f"got {cls.MIN_YEAR}-{cls.MAX_YEAR}"
            )

        if cls.MAX_SPORT_TYPE_FILTERS < 1:
            raise ValueError(
                f"MAX_SPORT_TYPE_FILTERS must be positive, got {cls.MAX_SPORT_TYPE_FILTERS}"
            )

    @classmethod
    def get_first_day_of_week(cls, user: Optional[object] = None) -> int:
        """
        Get the weekday shown in the first grid column.

        Args:
            user: Optional user object for per-user configuration

        Returns:
            Weekday number (Monday=0 ... Sunday=6)
        """
        return cls.FIRST_DAY_OF_WEEK

    @classmethod
    def get_timezone(cls) -> str:
        """
        Get the IANA timezone used for activity dates.

        Returns:
            CalendarViewConfig.TIMEZONE when set, otherwise settings.TIME_ZONE
        """
        if cls.TIMEZONE:
            return cls.TIMEZONE

        from django.conf import settings
        return settings.TIME_ZONE

    @classmethod
    def get_config_dict(cls) -> dict:
        """
        Get all configuration as a dictionary.
        Useful for passing to templates or APIs.

        Returns:
            Dictionary of all configuration values
        """
        return {
            'first_day_of_week': cls.FIRST_DAY_OF_WEEK,
            'first_day_of_week_name': calendar.day_name[cls.FIRST_DAY_OF_WEEK],
            'date_key_format': cls.DATE_KEY_FORMAT,
            'trailing_days_upper_bound': cls.TRAILING_DAYS_UPPER_BOUND,
            'min_year': cls.MIN_YEAR,
            'max_year': cls.MAX_YEAR,
            'max_sport_type_filters': cls.MAX_SPORT_TYPE_FILTERS,
        }


# Validate configuration on module import
try:
    CalendarViewConfig.validate()
except ValueError as e:
    raise RuntimeError(f"Invalid CalendarViewConfig: {e}")
