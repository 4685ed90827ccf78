"""Data model for a thirty-minute slot in the weekly class grid."""

import threading
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

# Labels for each weekday, Monday first.
WEEKDAY_STRINGS = ["Mon", "Tue", "Wed", "Thu", "Fri"]

SLOTS_PER_DAY = 30
DAYS_PER_WEEK = 5
FIRST_HOUR = 8

# Any-week anchor for date-less display. Must be a Monday.
REFERENCE_MONDAY = date(2001, 1, 1)


def _generate_timeslot_strings() -> list[str]:
    """Labels for each time-of-day slot, "8:00 AM" through "10:00 PM".

    The grid ends at 9:30 PM; "10:00 PM" is only reached as an end time.
    """
    res = []
    for hour in range(8, 12):
        res.append(f"{hour}:00 AM")
        res.append(f"{hour}:30 AM")
    res.append("12:00 PM")
    res.append("12:30 PM")
    for hour in range(1, 10):
        res.append(f"{hour}:00 PM")
        res.append(f"{hour}:30 PM")
    res.append("10:00 PM")
    return res


TIMESLOT_STRINGS = _generate_timeslot_strings()

_SLOT_OBJECTS: dict[int, "Slot"] = {}
_SLOT_LOCK = threading.Lock()


def _index_of(table: list[str], label: str) -> int:
    try:
        return table.index(label)
    except ValueError:
        return -1


@dataclass(frozen=True)
class Slot:
    """A thirty-minute slot, Monday to Friday, 30 slots a day from 8 AM.

    Monday slots are 0 to 29, Tuesday 30 to 59, and so on; slot 0 is
    Monday 8:00-8:30 AM. When treated as an instant, a slot is its start time.
    The label table stops at "10:00 PM", so the last slot of each day has no
    time label.

    Immutable (frozen=True) and compared by index, so it can be used as a
    dict key / set member. Out-of-range indices are accepted; their derived
    labels are None.
    """

    index: int

    @classmethod
    def from_slot_number(cls, index: int) -> "Slot":
        """The canonical slot object for a slot number."""
        slot = _SLOT_OBJECTS.get(index)
        if slot is None:
            with _SLOT_LOCK:
                slot = _SLOT_OBJECTS.setdefault(index, cls(index))
        return slot

    @classmethod
    def from_start_date(cls, when: datetime) -> "Slot":
        """Converts a weekday datetime between 8 AM and 10 PM to a slot.

        Weekends give out-of-range slots: Sunday counts as day 0.
        """
        return cls.from_slot_number(
            SLOTS_PER_DAY * (when.isoweekday() % 7 - 1)
            + 2 * (when.hour - FIRST_HOUR)
            + when.minute // 30
        )

    @classmethod
    def from_day_string(cls, day: str, time: str) -> "Slot":
        """Converts a WEEKDAY_STRINGS and TIMESLOT_STRINGS pair to a slot."""
        return cls.from_slot_number(
            SLOTS_PER_DAY * _index_of(WEEKDAY_STRINGS, day)
            + _index_of(TIMESLOT_STRINGS, time)
        )

    def add(self, slots: int) -> "Slot":
        """The slot `slots` slots after this one. No wraparound."""
        return Slot.from_slot_number(self.index + slots)

    def on_date(self, day: Union[date, datetime]) -> datetime:
        """The local datetime this slot starts at on the day of `day`.

        Assumes `day` already falls on the right weekday.
        """
        hour = (self.index % SLOTS_PER_DAY) // 2 + FIRST_HOUR
        minute = (self.index % 2) * 30
        return datetime(day.year, day.month, day.day, hour, minute)

    @property
    def start_date(self) -> datetime:
        """The datetime in the week of 2001-01-01 that this slot starts at."""
        return self.on_date(REFERENCE_MONDAY + timedelta(days=self.weekday - 1))

    @property
    def end_date(self) -> datetime:
        """The datetime in the week of 2001-01-01 that this slot ends at."""
        return self.add(1).start_date

    @property
    def weekday(self) -> int:
        """Day of the week, 1 (Monday) to 5 (Friday)."""
        return self.index // SLOTS_PER_DAY + 1

    @property
    def day_string(self) -> Optional[str]:
        if 1 <= self.weekday <= DAYS_PER_WEEK:
            return WEEKDAY_STRINGS[self.weekday - 1]
        return None

    @property
    def time_string(self) -> Optional[str]:
        if self.index < 0 or self.index % SLOTS_PER_DAY >= len(TIMESLOT_STRINGS):
            return None
        return TIMESLOT_STRINGS[self.index % SLOTS_PER_DAY]

    def __str__(self) -> str:
        return f"{self.day_string} {self.time_string}"
