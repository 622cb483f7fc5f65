"""
Pytest Configuration and Fixtures for Calendar App Tests

Provides fixtures for:
- In-memory activity repository (no database)
- Plain activity objects
- Database-backed Activity factory
"""
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional

import pytest
import pytz

from calendar_app.repository import ActivityFilter, ActivityRepository, reset_activity_repository


@dataclass(frozen=True)
class FakeActivity:
    """Minimal activity: identity, sport type and start date."""
    id: int
    start_date: date
    name: str = "Morning Run"
    sport_type: str = "Run"
    start_date_time: Optional[datetime] = None


class InMemoryActivityRepository(ActivityRepository):
    """Activity repository over a list, recording every range query."""

    def __init__(self, activities: List = None):
        self.activities = list(activities or [])
        self.calls = []

    def find_by_date_range(self, start_date, end_date, activity_filter: Optional[ActivityFilter] = None):
        self.calls.append((start_date, end_date, activity_filter))
        result = [a for a in self.activities if start_date <= a.start_date <= end_date]
        if activity_filter is not None and not activity_filter.is_empty():
            result = [a for a in result if a.sport_type in activity_filter.sport_types]
        return result


# ===== ACTIVITY FIXTURES =====

@pytest.fixture
def fake_activity():
    """Factory fixture for creating FakeActivity objects."""
    counter = {'next_id': 1}

    def _create(start_date: date, sport_type: str = "Run", name: str = None) -> FakeActivity:
        activity_id = counter['next_id']
        counter['next_id'] += 1
        return FakeActivity(
            id=activity_id,
            start_date=start_date,
            name=name or f"Activity {activity_id}",
            sport_type=sport_type,
            start_date_time=datetime.combine(start_date, time(8, 0)),
        )
    return _create


@pytest.fixture
def in_memory_repository():
    """Factory fixture for creating InMemoryActivityRepository instances."""
    def _create(activities: List = None) -> InMemoryActivityRepository:
        return InMemoryActivityRepository(activities)
    return _create


@pytest.fixture
def make_activity(db, settings):
    """Factory fixture for persisted Activity rows, times given in settings.TIME_ZONE."""
    from calendar_app.models import Activity

    def _create(year, month, day, hour=8, minute=0, sport_type="Run", name=None) -> Activity:
        tz = pytz.timezone(settings.TIME_ZONE)
        start = tz.localize(datetime(year, month, day, hour, minute))
        return Activity.objects.create(
            name=name or f"{sport_type} {year}-{month:02d}-{day:02d}",
            sport_type=sport_type,
            start_date_time=start,
            distance_in_meters=5000,
            moving_time_in_seconds=1800,
        )
    return _create


@pytest.fixture(autouse=True)
def _reset_repository_singleton():
    """Each test starts with a fresh repository singleton."""
    reset_activity_repository()
    yield
    reset_activity_repository()
