from django.contrib import admin

from calendar_app.models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ("name", "sport_type", "start_date_time", "distance_in_meters", "moving_time_in_seconds")
    search_fields = ("name",)
    list_filter = ("sport_type",)
    date_hierarchy = "start_date_time"
    ordering = ("-start_date_time",)
