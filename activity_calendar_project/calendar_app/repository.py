# repository.py
import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import List, Optional

from django.db import DatabaseError
from pydantic import BaseModel, Field, field_validator

from calendar_app.exceptions import ActivityQueryError
from core.config import CalendarViewConfig
from utils.timezone import start_of_day

logger = logging.getLogger('django')


class ActivityFilter(BaseModel):
    """
    Optional restriction applied on top of a date range query.

    An empty filter (or None) means no restriction.
    """
    sport_types: Optional[List[str]] = Field(
        default=None,
        description="Only return activities with one of these sport types"
    )

    @field_validator('sport_types')
    @classmethod
    def strip_sport_types(cls, value):
        if value is None:
            return None
        cleaned = [v.strip() for v in value if v and v.strip()]
        return cleaned or None

    def is_empty(self) -> bool:
        return not self.sport_types


class ActivityRepository(ABC):
    """
    Activity storage seen by the calendar.

    Implementations return activities whose start date lies between
    start_date and end_date, both inclusive, ordered by start time.
    """

    @abstractmethod
    def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
        activity_filter: Optional[ActivityFilter] = None
    ) -> List:
        raise NotImplementedError


class DjangoActivityRepository(ActivityRepository):
    """
    ORM-backed activity repository.

    Day boundaries are midnights in CalendarViewConfig.get_timezone(), the
    same timezone Activity.start_date is computed in.

    Usage:
        repository = DjangoActivityRepository()
        activities = repository.find_by_date_range(date(2024, 1, 29), date(2024, 3, 6))
    """

    def find_by_date_range(
        self,
        start_date: date,
        end_date: date,
        activity_filter: Optional[ActivityFilter] = None
    ) -> List:
        """
        Fetch activities starting between two dates (inclusive).

        Args:
            start_date: First calendar date to include
            end_date: Last calendar date to include
            activity_filter: Optional ActivityFilter, None for no restriction

        Returns:
            List of Activity instances ordered by start_date_time

        Raises:
            ValueError: If start_date is after end_date
            ActivityQueryError: If the database query fails
        """
        from calendar_app.models import Activity

        if start_date > end_date:
            raise ValueError(f"start_date {start_date} is after end_date {end_date}")

        tz_name = CalendarViewConfig.get_timezone()
        range_start = start_of_day(start_date, tz_name)
        range_end = start_of_day(end_date + timedelta(days=1), tz_name)

        try:
            queryset = Activity.objects.filter(
                start_date_time__gte=range_start,
                start_date_time__lt=range_end,
            )
            if activity_filter is not None and not activity_filter.is_empty():
                queryset = queryset.filter(sport_type__in=activity_filter.sport_types)
            activities = list(queryset.order_by('start_date_time', 'id'))
        except DatabaseError as e:
            logger.error(f"Activity range query failed for {start_date} - {end_date}: {str(e)}")
            raise ActivityQueryError(
                f"Failed to load activities between {start_date} and {end_date}: {str(e)}",
                details={'start_date': start_date.isoformat(), 'end_date': end_date.isoformat()}
            ) from e

        logger.debug(
            f"Loaded {len(activities)} activities between {start_date} and {end_date} "
            f"(filter: {activity_filter.sport_types if activity_filter else 'none'})"
        )
        return activities


_activity_repository_instance: Optional[ActivityRepository] = None


def get_activity_repository() -> ActivityRepository:
    """
    Get or create singleton ActivityRepository instance.

    Returns:
        Configured ActivityRepository instance
    """
    global _activity_repository_instance

    if _activity_repository_instance is None:
        _activity_repository_instance = DjangoActivityRepository()
        logger.info("Created new DjangoActivityRepository singleton instance")

    return _activity_repository_instance


def set_activity_repository(repository: ActivityRepository) -> None:
    """Replace the singleton instance, e.g. with an in-memory repository in tests."""
    global _activity_repository_instance
    _activity_repository_instance = repository


def reset_activity_repository():
    """
    Reset singleton instance (useful for testing).

    Usage:
        reset_activity_repository()  # Force recreation on next get_activity_repository() call
    """
    global _activity_repository_instance
    if _activity_repository_instance:
        _activity_repository_instance = None
        logger.info("ActivityRepository singleton instance reset")
