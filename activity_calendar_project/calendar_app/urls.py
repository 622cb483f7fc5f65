from django.urls import path

from calendar_app.views import calendar_view

app_name = "calendar_app"

urlpatterns = [
    path("api/calendar/config/", calendar_view.calendar_config_api, name="calendar_config"),
    path("api/calendar/<str:month>/", calendar_view.month_calendar_api, name="month_calendar"),
]
