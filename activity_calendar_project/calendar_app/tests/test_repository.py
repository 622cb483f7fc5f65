"""
Tests for the ORM-backed activity repository.
"""
from datetime import date
from unittest.mock import patch

import pytest
import pytz
from django.db import DatabaseError

from calendar_app.exceptions import ActivityQueryError
from calendar_app.repository import (
    ActivityFilter,
    DjangoActivityRepository,
    get_activity_repository,
    reset_activity_repository,
    set_activity_repository,
)
from calendar_app.services.calendar_service import Calendar
from calendar_app.utils.month import Month
from core.config import CalendarViewConfig


pytestmark = pytest.mark.django_db


class TestFindByDateRange:

    def test_range_is_inclusive_on_both_ends(self, make_activity):
        before = make_activity(2024, 1, 28, hour=23, minute=59)
        first = make_activity(2024, 1, 29, hour=0, minute=0)
        last = make_activity(2024, 3, 6, hour=23, minute=59)
        after = make_activity(2024, 3, 7, hour=0, minute=0)

        result = DjangoActivityRepository().find_by_date_range(date(2024, 1, 29), date(2024, 3, 6))

        assert first in result
        assert last in result
        assert before not in result
        assert after not in result

    def test_results_are_ordered_by_start(self, make_activity):
        late = make_activity(2024, 2, 10, hour=18)
        early = make_activity(2024, 2, 10, hour=6)
        other_day = make_activity(2024, 2, 9, hour=20)

        result = DjangoActivityRepository().find_by_date_range(date(2024, 2, 1), date(2024, 2, 29))

        assert result == [other_day, early, late]

    def test_sport_type_filter(self, make_activity):
        run = make_activity(2024, 2, 10, sport_type="Run")
        make_activity(2024, 2, 10, sport_type="Ride")
        swim = make_activity(2024, 2, 11, sport_type="Swim")

        result = DjangoActivityRepository().find_by_date_range(
            date(2024, 2, 1), date(2024, 2, 29), ActivityFilter(sport_types=["Run", "Swim"])
        )

        assert result == [run, swim]

    def test_empty_filter_returns_everything(self, make_activity):
        make_activity(2024, 2, 10, sport_type="Run")
        make_activity(2024, 2, 10, sport_type="Ride")

        result = DjangoActivityRepository().find_by_date_range(
            date(2024, 2, 1), date(2024, 2, 29), ActivityFilter(sport_types=[])
        )

        assert len(result) == 2

    def test_day_boundaries_follow_timezone(self, make_activity, monkeypatch):
        # 23:30 in Brussels on 31 January is 17:30 the same day in New York.
        activity = make_activity(2024, 1, 31, hour=23, minute=30)
        repository = DjangoActivityRepository()

        assert repository.find_by_date_range(date(2024, 2, 1), date(2024, 2, 1)) == []

        monkeypatch.setattr(CalendarViewConfig, 'TIMEZONE', "America/New_York")
        assert repository.find_by_date_range(date(2024, 1, 31), date(2024, 1, 31)) == [activity]

    def test_calendar_timezone_decides_query_and_attachment_alike(self, make_activity, monkeypatch):
        # 03:00 in Brussels on 1 February is 21:00 on 31 January in New York.
        activity = make_activity(2024, 2, 1, hour=3)
        monkeypatch.setattr(CalendarViewConfig, 'TIMEZONE', "America/New_York")

        days = Calendar.create(Month(2024, 2), DjangoActivityRepository()).get_days()

        attached = [d.date for d in days if activity in d.activities]
        assert attached == [date(2024, 1, 31)]

    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValueError):
            DjangoActivityRepository().find_by_date_range(date(2024, 2, 2), date(2024, 2, 1))

    def test_database_error_is_wrapped(self):
        with patch("calendar_app.models.Activity.objects.filter", side_effect=DatabaseError("boom")):
            with pytest.raises(ActivityQueryError) as excinfo:
                DjangoActivityRepository().find_by_date_range(date(2024, 2, 1), date(2024, 2, 29))

        assert isinstance(excinfo.value.__cause__, DatabaseError)
        assert excinfo.value.details == {'start_date': '2024-02-01', 'end_date': '2024-02-29'}


class TestActivityModel:

    def test_start_date_in_calendar_timezone(self, make_activity):
        activity = make_activity(2024, 2, 29, hour=0, minute=30)
        # Stored in UTC as 28 February 23:30; the calendar day is still 29 February.
        assert activity.start_date_time.astimezone(pytz.utc).day == 28
        assert activity.start_date == date(2024, 2, 29)

    def test_str(self, make_activity):
        activity = make_activity(2024, 2, 29, hour=7, name="Leap day run")
        assert str(activity).startswith("Leap day run (Run)")


class TestCalendarWithDatabase:

    def test_grid_uses_one_query(self, make_activity, django_assert_num_queries):
        make_activity(2024, 1, 30)
        make_activity(2024, 2, 14)
        make_activity(2024, 2, 14, hour=18)
        make_activity(2024, 3, 3)

        with django_assert_num_queries(1):
            days = Calendar.create(Month(2024, 2), DjangoActivityRepository()).get_days()

        counts = {d.date: len(d.activities) for d in days if d.has_activities}
        assert counts == {date(2024, 1, 30): 1, date(2024, 2, 14): 2, date(2024, 3, 3): 1}


class TestRepositorySingleton:

    def test_get_returns_same_instance(self):
        assert get_activity_repository() is get_activity_repository()
        assert isinstance(get_activity_repository(), DjangoActivityRepository)

    def test_reset_creates_new_instance(self):
        first = get_activity_repository()
        reset_activity_repository()
        assert get_activity_repository() is not first

    def test_set_replaces_instance(self, in_memory_repository):
        repository = in_memory_repository()
        set_activity_repository(repository)
        assert get_activity_repository() is repository
