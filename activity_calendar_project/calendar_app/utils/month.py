"""
Month Value Object

Immutable year/month pair exposing the calendar facts needed to lay out
a month grid: day count, weekday column of the first day, and the
neighbouring months.
"""
import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from calendar_app.exceptions import InvalidMonthError

_MONTH_ID_PATTERN = re.compile(r'^(\d{4})-(\d{2})$')


@dataclass(frozen=True, order=True)
class Month:
    """
    A calendar month.

    Args:
        year: Calendar year (2-9998, so padding days of every grid are valid dates)
        month: Calendar month (1-12)

    Raises:
        InvalidMonthError: If the year or month is out of range
    """
    year: int
    month: int

    MIN_YEAR: ClassVar[int] = date.min.year + 1
    MAX_YEAR: ClassVar[int] = date.max.year - 1

    def __post_init__(self):
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise InvalidMonthError(f"Year must be an integer, got {self.year!r}")
        if isinstance(self.month, bool) or not isinstance(self.month, int):
            raise InvalidMonthError(f"Month must be an integer, got {self.month!r}")
        if not (1 <= self.month <= 12):
            raise InvalidMonthError(
                f"Month must be between 1 and 12, got {self.month}",
                details={'year': self.year, 'month': self.month}
            )
        if not (self.MIN_YEAR <= self.year <= self.MAX_YEAR):
            raise InvalidMonthError(
                f"Year must be between {self.MIN_YEAR} and {self.MAX_YEAR}, got {self.year}",
                details={'year': self.year, 'month': self.month}
            )

    @classmethod
    def from_date(cls, value: date) -> 'Month':
        """Return the month containing `value` (a date or datetime)."""
        return cls(value.year, value.month)

    @classmethod
    def from_string(cls, value: str) -> 'Month':
        """
        Parse a 'YYYY-MM' month id.

        Example:
            >>> Month.from_string('2024-02')
            Month(year=2024, month=2)
        """
        match = _MONTH_ID_PATTERN.match(value or '')
        if not match:
            raise InvalidMonthError(
                f"Invalid month format {value!r}. Expected format: YYYY-MM (e.g., '2024-02')"
            )
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def current(cls) -> 'Month':
        return cls.from_date(date.today())

    @property
    def id(self) -> str:
        """Month id, e.g. '2024-02'."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        """Display label, e.g. 'February 2024'."""
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def number_of_days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.number_of_days)

    def week_day_of_first_day(self, first_weekday: int = calendar.MONDAY) -> int:
        """
        Column (1-7) of the first day of the month in a week starting on `first_weekday`.

        With the default Monday start this is the ISO weekday, so a month
        starting on a Thursday returns 4.

        Args:
            first_weekday: Weekday of the first column (Monday=0 ... Sunday=6)
        """
        return (self.first_day.weekday() - first_weekday) % 7 + 1

    def previous_month(self) -> 'Month':
        if self.month == 1:
            return Month(self.year - 1, 12)
        return Month(self.year, self.month - 1)

    def next_month(self) -> 'Month':
        if self.month == 12:
            return Month(self.year + 1, 1)
        return Month(self.year, self.month + 1)

    def __str__(self) -> str:
        return self.id
