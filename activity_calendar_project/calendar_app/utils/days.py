"""
Day Grid Value Types

Thin collections used by the month grid builder:
- Activities: immutable ordered activities for one calendar date
- Day: one grid cell
- Days: the ordered, append-only grid
"""
from dataclasses import dataclass, field
import datetime
from typing import Iterable, Iterator, List, Optional


class Activities:
    """Immutable ordered collection of activities."""

    __slots__ = ('_items',)

    def __init__(self, items: Iterable = ()):
        self._items = tuple(items)

    @classmethod
    def empty(cls) -> 'Activities':
        return cls()

    @classmethod
    def from_list(cls, items: Iterable) -> 'Activities':
        return cls(items)

    def to_list(self) -> List:
        return list(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Activities):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Activities({len(self._items)})"


@dataclass(frozen=True)
class Day:
    """
    One cell of the month grid.

    is_current_month is False for padding days borrowed from the
    previous or next month.
    """
    day_number: int
    is_current_month: bool
    date: datetime.date
    activities: Activities = field(default_factory=Activities.empty)

    @classmethod
    def create(cls, day_number: int, is_current_month: bool, date: datetime.date,
               activities: Optional[Activities] = None) -> 'Day':
        return cls(
            day_number=day_number,
            is_current_month=is_current_month,
            date=date,
            activities=activities if activities is not None else Activities.empty(),
        )

    @property
    def has_activities(self) -> bool:
        return len(self.activities) > 0


class Days:
    """Ordered grid of Day records. Only grows by appending."""

    WEEK_LENGTH = 7

    def __init__(self):
        self._days: List[Day] = []

    @classmethod
    def empty(cls) -> 'Days':
        return cls()

    def add(self, day: Day) -> None:
        self._days.append(day)

    def current_month_days(self) -> List[Day]:
        return [day for day in self._days if day.is_current_month]

    def weeks(self) -> List[List[Day]]:
        """Split the grid into rows of 7 days."""
        return [
            self._days[i:i + self.WEEK_LENGTH]
            for i in range(0, len(self._days), self.WEEK_LENGTH)
        ]

    def to_list(self) -> List[Day]:
        return list(self._days)

    def __iter__(self) -> Iterator[Day]:
        return iter(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def __getitem__(self, index):
        return self._days[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Days):
            return NotImplemented
        return self._days == other._days

    def __repr__(self) -> str:
        return f"Days({len(self._days)})"
