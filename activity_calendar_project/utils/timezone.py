import datetime

import pytz


def to_calendar_date(value, tz_name):
    """
    Return the calendar date of `value` as seen in the IANA timezone `tz_name`.

    Naive datetimes are taken as already expressed in that timezone.
    Plain dates are returned unchanged.
    """
    if not isinstance(value, datetime.datetime):
        return value
    if value.tzinfo is None or value.utcoffset() is None:
        return value.date()
    return value.astimezone(pytz.timezone(tz_name)).date()


def get_timezone_info(tz_name, now=None):
    """
    Given an IANA timezone name, returns a tuple (utcoffset_formatted, is_daylight_saving, tz_fullname)
    where utcoffset_formatted is a string like "-06:00:00" and is_daylight_saving is a boolean.
    """
    tz = pytz.timezone(tz_name)
    if now is None:
        now = datetime.datetime.now(tz)
    else:
        now = now.astimezone(tz)
    offset_timedelta = now.utcoffset() or datetime.timedelta(0)
    offset_seconds = int(offset_timedelta.total_seconds())
    sign = '+' if offset_seconds >= 0 else '-'
    offset_seconds = abs(offset_seconds)
    hours = offset_seconds // 3600
    minutes = (offset_seconds % 3600) // 60
    seconds = offset_seconds % 60
    utcoffset_formatted = "{}{:02d}:{:02d}:{:02d}".format(sign, hours, minutes, seconds)

    is_daylight_saving = bool(now.dst() and now.dst() != datetime.timedelta(0))

    # Extend as needed.
    IANA_TO_FULLNAME = {
        "America/Chicago": "Central Standard Time",
        "America/New_York": "Eastern Standard Time",
        "Asia/Kolkata": "Indian Standard Time",
        "Europe/Brussels": "Central European Time",
        "UTC": "Coordinated Universal Time",
    }
    tz_fullname = IANA_TO_FULLNAME.get(tz_name, tz_name)

    return utcoffset_formatted, is_daylight_saving, tz_fullname


def start_of_day(day, tz_name):
    """Aware datetime for midnight at the start of `day` in timezone `tz_name`."""
    tz = pytz.timezone(tz_name)
    return tz.localize(datetime.datetime.combine(day, datetime.time.min))
