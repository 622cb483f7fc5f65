"""
Month Calendar Service Layer

Builds the day grid of a month view and attaches activities to each day.
Activities for the whole visible range are fetched with a single
repository query and grouped by date, instead of one query per day.
"""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from calendar_app.repository import ActivityFilter, ActivityRepository, get_activity_repository
from calendar_app.utils.days import Activities, Day, Days
from calendar_app.utils.month import Month
from core.config import CalendarViewConfig

logger = logging.getLogger('django')


class Calendar:
    """
    Month grid builder.

    The grid starts on the first weekday column before day 1 and ends on
    the last column after the last day, so its length is always a
    multiple of 7.

    Usage:
        calendar = Calendar.create(Month(2024, 2), get_activity_repository())
        days = calendar.get_days()
    """

    def __init__(
        self,
        month: Month,
        activity_repository: ActivityRepository,
        first_weekday: Optional[int] = None
    ):
        self._month = month
        self._activity_repository = activity_repository
        self._first_weekday = (
            CalendarViewConfig.get_first_day_of_week() if first_weekday is None else first_weekday
        )

    @classmethod
    def create(
        cls,
        month: Month,
        activity_repository: ActivityRepository,
        first_weekday: Optional[int] = None
    ) -> 'Calendar':
        return cls(month=month, activity_repository=activity_repository, first_weekday=first_weekday)

    @property
    def month(self) -> Month:
        return self._month

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    def get_days(self, activity_filter: Optional[ActivityFilter] = None) -> Days:
        """
        Build the grid of days for the month.

        Args:
            activity_filter: Optional restriction passed to the repository query
                (default: None, all activities in range)

        Returns:
            Days: leading days of the previous month, every day of the month,
            then trailing days of the next month up to a full week row
        """
        week_day_of_first_day = self._month.week_day_of_first_day(self._first_weekday)
        first_day = self._month.first_day
        last_day = self._month.last_day

        first_day_to_show = first_day - timedelta(days=week_day_of_first_day - 1)
        # Upper bound: the last row never needs more than 6 days of the next month.
        last_day_to_show = last_day + timedelta(
            days=CalendarViewConfig.TRAILING_DAYS_UPPER_BOUND
        )

        all_activities = self._activity_repository.find_by_date_range(
            first_day_to_show, last_day_to_show, activity_filter
        )
        activities_by_date = self._group_by_date(all_activities)

        days = Days.empty()
        for offset in range(week_day_of_first_day - 1, 0, -1):
            days.add(self._build_day(first_day - timedelta(days=offset), False, activities_by_date))

        for day_number in range(1, self._month.number_of_days + 1):
            day_date = date(self._month.year, self._month.month, day_number)
            days.add(self._build_day(day_date, True, activities_by_date))

        day_date = last_day
        while len(days) % Days.WEEK_LENGTH != 0:
            day_date += timedelta(days=1)
            days.add(self._build_day(day_date, False, activities_by_date))

        logger.debug(
            f"Built calendar grid for {self._month.id} - {len(days)} days, "
            f"{len(all_activities)} activities fetched ({first_day_to_show} to {last_day_to_show})"
        )
        return days

    @staticmethod
    def _date_key(value: date) -> str:
        return value.strftime(CalendarViewConfig.DATE_KEY_FORMAT)

    @classmethod
    def _group_by_date(cls, activities) -> Dict[str, List]:
        activities_by_date: Dict[str, List] = {}
        for activity in activities:
            activities_by_date.setdefault(cls._date_key(activity.start_date), []).append(activity)
        return activities_by_date

    @classmethod
    def _build_day(
        cls,
        day_date: date,
        is_current_month: bool,
        activities_by_date: Dict[str, List]
    ) -> Day:
        matching = activities_by_date.get(cls._date_key(day_date))
        return Day.create(
            day_number=day_date.day,
            is_current_month=is_current_month,
            date=day_date,
            activities=Activities.from_list(matching) if matching else Activities.empty(),
        )


class CalendarService:
    """
    Service class for the month calendar view.

    Parses request values into domain objects and builds the grid
    against the configured activity repository.
    """

    def __init__(self, activity_repository: Optional[ActivityRepository] = None):
        self.activity_repository = activity_repository or get_activity_repository()

    def get_month_calendar(
        self,
        month_id: str,
        sport_types: Optional[List[str]] = None
    ) -> Dict:
        """
        Build the calendar for a 'YYYY-MM' month id.

        Args:
            month_id: Month in YYYY-MM format (e.g., '2024-02')
            sport_types: Optional sport types to restrict activities to

        Returns:
            Dictionary containing:
            {
                'month': Month,
                'days': Days,
                'first_weekday': 0,
                'activity_filter': ActivityFilter or None
            }

        Raises:
            InvalidMonthError: If month_id is not a valid month
            ActivityQueryError: If activities cannot be loaded
        """
        logger.info(f"Building month calendar - month: {month_id}, sport_types: {sport_types or 'all'}")

        month = Month.from_string(month_id)
        activity_filter = ActivityFilter(sport_types=sport_types) if sport_types else None
        if activity_filter is not None and activity_filter.is_empty():
            activity_filter = None

        calendar = Calendar.create(month, self.activity_repository)
        days = calendar.get_days(activity_filter)

        return {
            'month': month,
            'days': days,
            'first_weekday': calendar.first_weekday,
            'activity_filter': activity_filter,
        }


def get_month_calendar(month_id: str, sport_types: Optional[List[str]] = None) -> Dict:
    """Convenience function to build a month calendar with the default repository."""
    return CalendarService().get_month_calendar(month_id, sport_types)
