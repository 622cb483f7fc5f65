from django.db import models
from django.utils import timezone

from core.config import CalendarViewConfig
from utils.timezone import to_calendar_date


class Activity(models.Model):
    """
    A recorded sport activity shown on the month calendar.
    Only its start date and identity matter to the calendar grid.
    """
    SPORT_TYPE_CHOICES = [
        ('Run', 'Run'),
        ('TrailRun', 'Trail Run'),
        ('Ride', 'Ride'),
        ('VirtualRide', 'Virtual Ride'),
        ('Swim', 'Swim'),
        ('Walk', 'Walk'),
        ('Hike', 'Hike'),
        ('WeightTraining', 'Weight Training'),
        ('Workout', 'Workout'),
    ]

    name = models.CharField(max_length=255)
    sport_type = models.CharField(max_length=32, choices=SPORT_TYPE_CHOICES, default='Run')
    start_date_time = models.DateTimeField(default=timezone.now)
    distance_in_meters = models.FloatField(default=0)
    moving_time_in_seconds = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'calendar_activities'
        ordering = ['start_date_time', 'id']
        indexes = [
            models.Index(fields=['start_date_time'], name='calendar_ac_start_d_5b1f3e_idx'),
            models.Index(fields=['sport_type', 'start_date_time'], name='calendar_ac_sport_t_8c2a4d_idx'),
        ]

    @property
    def start_date(self):
        """Calendar date of the activity in the calendar timezone."""
        return to_calendar_date(self.start_date_time, CalendarViewConfig.get_timezone())

    def __str__(self):
        return f"{self.name} ({self.sport_type}) - {self.start_date_time:%Y-%m-%d %H:%M}"
