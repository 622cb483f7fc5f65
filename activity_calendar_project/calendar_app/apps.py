from django.apps import AppConfig
import logging

logger = logging.getLogger('django')


class CalendarAppConfig(AppConfig):
    """
    Configuration for the activity calendar application.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'calendar_app'

    def ready(self):
        """
        Called when Django starts.

        Validates calendar configuration early so a bad value fails at startup.
        """
        from core.config import CalendarViewConfig

        CalendarViewConfig.validate()
        logger.info(
            f"Calendar app ready (first day of week: {CalendarViewConfig.get_config_dict()['first_day_of_week_name']})"
        )
