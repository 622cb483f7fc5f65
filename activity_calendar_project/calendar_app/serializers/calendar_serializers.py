"""
Calendar View Serializers

Handles JSON serialization for month calendar API responses.
Formats the day grid for frontend consumption.
"""

import calendar
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from calendar_app.exceptions import CalendarAppError, InvalidMonthError
from calendar_app.utils.days import Day, Days
from calendar_app.utils.month import Month
from utils.timezone import get_timezone_info

logger = logging.getLogger('django')


class CalendarSerializer:
    """
    Serializer for month calendar API responses.

    Converts Month/Days structures to JSON-ready formats.
    """

    @staticmethod
    def serialize_month_response(data: Dict, tz_name: str) -> Dict[str, Any]:
        """
        Serialize a month calendar for frontend consumption.

        Args:
            data: Result of CalendarService.get_month_calendar containing:
                - month: Month
                - days: Days
                - first_weekday: int
            tz_name: IANA timezone the activity dates were computed in

        Returns:
            JSON-ready dictionary

        Example:
            {
                'success': True,
                'month': '2024-02',
                'month_label': 'February 2024',
                'previous_month': '2024-01',
                'next_month': '2024-03',
                'weekday_headers': ['Mon', 'Tue', ...],
                'weeks': [[{'day_number': 29, 'date': '2024-01-29', ...}, ...], ...],
                'total_days': 35,
                'total_activities': 4,
                ...
            }
        """
        month: Month = data['month']
        days: Days = data['days']
        first_weekday: int = data['first_weekday']

        weeks = [
            [CalendarSerializer.serialize_day(day) for day in week]
            for week in days.weeks()
        ]
        total_activities = sum(len(day.activities) for day in days)
        utcoffset, is_dst, tz_fullname = get_timezone_info(tz_name)

        response = {
            'success': True,
            'month': month.id,
            'month_label': month.label,
            'previous_month': CalendarSerializer._neighbour_id(month.previous_month),
            'next_month': CalendarSerializer._neighbour_id(month.next_month),
            'first_weekday': first_weekday,
            'weekday_headers': CalendarSerializer._weekday_headers(first_weekday),
            'weeks': weeks,
            'total_days': len(days),
            'total_activities': total_activities,
            'timezone': {
                'name': tz_name,
                'full_name': tz_fullname,
                'utcoffset': utcoffset,
                'is_daylight_saving': is_dst,
            },
            'timestamp': CalendarSerializer._get_timestamp(),
        }

        logger.debug(
            f"Serialized calendar response - {response['total_days']} days, "
            f"{total_activities} activities"
        )
        return response

    @staticmethod
    def serialize_day(day: Day) -> Dict[str, Any]:
        return {
            'day_number': day.day_number,
            'date': day.date.isoformat(),
            'is_current_month': day.is_current_month,
            'activities': [CalendarSerializer.serialize_activity(a) for a in day.activities],
        }

    @staticmethod
    def serialize_activity(activity) -> Dict[str, Any]:
        start = getattr(activity, 'start_date_time', None)
        return {
            'id': getattr(activity, 'pk', getattr(activity, 'id', None)),
            'name': getattr(activity, 'name', ''),
            'sport_type': getattr(activity, 'sport_type', None),
            'start_date': activity.start_date.isoformat(),
            'start_date_time': start.isoformat() if start else None,
        }

    @staticmethod
    def serialize_error_response(message: str, status_code: int = 400, error_code: str = None) -> Dict[str, Any]:
        """
        Serialize error response.

        Args:
            message: Error message to show the user
            status_code: HTTP status code (for logging)
            error_code: Machine-readable error code

        Returns:
            Error response dictionary
        """
        logger.warning(f"Serializing error response - status {status_code}: {message}")

        return {
            'success': False,
            'error': message,
            'error_code': error_code,
            'status_code': status_code,
            'timestamp': CalendarSerializer._get_timestamp(),
        }

    @staticmethod
    def serialize_exception(error: CalendarAppError) -> Dict[str, Any]:
        return CalendarSerializer.serialize_error_response(
            error.user_message,
            status_code=error.status_code,
            error_code=error.error_code,
        )

    @staticmethod
    def _neighbour_id(get_month: Callable[[], Month]) -> Optional[str]:
        """Id of a neighbouring month, None past the supported year range."""
        try:
            return get_month().id
        except InvalidMonthError:
            return None

    @staticmethod
    def _weekday_headers(first_weekday: int) -> List[str]:
        return [calendar.day_abbr[(first_weekday + i) % 7] for i in range(7)]

    @staticmethod
    def _get_timestamp() -> str:
        return datetime.now().isoformat()


# Convenience functions for direct import
def serialize_month_response(data: Dict, tz_name: str) -> Dict[str, Any]:
    return CalendarSerializer.serialize_month_response(data, tz_name)


def serialize_error_response(message: str, status_code: int = 400, error_code: str = None) -> Dict[str, Any]:
    return CalendarSerializer.serialize_error_response(message, status_code, error_code)


def serialize_exception(error: CalendarAppError) -> Dict[str, Any]:
    return CalendarSerializer.serialize_exception(error)
