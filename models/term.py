"""Data model for an academic term and its calendar projections."""

import logging
import re
from datetime import date, datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from models.slot import Slot

if TYPE_CHECKING:
    from config.schema import TermConfig

logger = logging.getLogger(__name__)

# Placeholder exclusion date; calendar feeds need at least one EXDATE.
EXDATE_SENTINEL = date(2000, 1, 1)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_SEMESTER_NAMES = {
    "f": {"catalog": "FA", "full": "fall", "full_caps": "Fall"},
    "s": {"catalog": "SP", "full": "spring", "full_caps": "Spring"},
    "i": {"catalog": "JA", "full": "iap", "full_caps": "IAP"},
}


class Semester(str, Enum):
    FALL = "f"
    SPRING = "s"
    IAP = "i"

    @property
    def catalog(self) -> str:
        """e.g. "FA" """
        return _SEMESTER_NAMES[self.value]["catalog"]

    @property
    def full(self) -> str:
        """e.g. "fall" """
        return _SEMESTER_NAMES[self.value]["full"]

    @property
    def full_caps(self) -> str:
        """e.g. "Fall" """
        return _SEMESTER_NAMES[self.value]["full_caps"]


def parse_url_name(url_name: str) -> tuple[str, Semester]:
    """Parse a url name like "f22" into ("22", Semester.FALL)."""
    if not url_name:
        raise ValueError("Empty term url name")
    return url_name[1:], Semester(url_name[0])


def parse_date(value: str) -> date:
    """Parse a strict "YYYY-MM-DD" date; ValueError otherwise."""
    if not _ISO_DATE.match(value):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def _midnight(value: Optional[str]) -> Optional[date]:
    """An empty or missing value means no date."""
    if not value:
        return None
    return parse_date(value)


def day_of_week(day: date) -> int:
    """Weekday with Sunday = 0, Monday = 1 ... Saturday = 6."""
    return day.isoweekday() % 7


class Term:
    """All non-class, term-specific calendar information.

    Boundary dates are inclusive. A missing boundary is None, and the
    projections anchored on it return None as well.
    """

    def __init__(
        self,
        url_name: str,
        start_date: str = "",
        h1_end_date: str = "",
        h2_start_date: str = "",
        end_date: str = "",
        monday_schedule_date: Optional[str] = None,
        holiday_dates: Iterable[str] = (),
    ):
        self.year, self.semester = parse_url_name(url_name)
        # First day of classes
        self.start = _midnight(start_date)
        # Last day of H1 classes
        self.h1_end = _midnight(h1_end_date)
        # First day of H2 classes
        self.h2_start = _midnight(h2_start_date)
        # Last day of classes
        self.end = _midnight(end_date)
        # A non-Monday which runs on Monday schedule, if any
        self.monday_schedule = _midnight(monday_schedule_date)
        self.holidays: list[date] = [_midnight(d) for d in holiday_dates if d]
        logger.debug(
            f"Term {self.url_name}: {self.start} – {self.end}, "
            f"{len(self.holidays)} holidays"
        )

    @classmethod
    def from_config(cls, config: "TermConfig") -> "Term":
        return cls(
            url_name=config.url_name,
            start_date=config.start_date,
            h1_end_date=config.h1_end_date,
            h2_start_date=config.h2_start_date,
            end_date=config.end_date,
            monday_schedule_date=config.monday_schedule_date,
            holiday_dates=config.holiday_dates,
        )

    # ─── Names ───

    @property
    def full_real_year(self) -> str:
        """e.g. "2022" """
        return f"20{self.year}"

    @property
    def full_school_year(self) -> str:
        """The year the school year ends in, e.g. "2023" for fall 2022."""
        if self.semester is Semester.FALL:
            return str(int(self.full_real_year) + 1)
        return self.full_real_year

    @property
    def semester_catalog(self) -> str:
        return self.semester.catalog

    @property
    def semester_full(self) -> str:
        return self.semester.full

    @property
    def semester_full_caps(self) -> str:
        return self.semester.full_caps

    @property
    def catalog_name(self) -> str:
        """e.g. "2023FA" """
        return f"{self.full_school_year}{self.semester_catalog}"

    @property
    def nice_name(self) -> str:
        """e.g. "Fall 2022" """
        return f"{self.semester_full_caps} {self.full_real_year}"

    @property
    def url_name(self) -> str:
        """e.g. "f22" """
        return f"{self.semester.value}{self.year}"

    def __str__(self) -> str:
        return self.url_name

    def __repr__(self) -> str:
        return f"Term({self.url_name!r})"

    # ─── Calendar checks ───

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays

    def in_first_half(self, day: date) -> bool:
        if self.start is None or self.h1_end is None:
            return False
        return self.start <= day <= self.h1_end

    def in_second_half(self, day: date) -> bool:
        if self.h2_start is None or self.end is None:
            return False
        return self.h2_start <= day <= self.end

    # ─── Slot projections ───

    def start_date_for(self, slot: Slot, second_half: bool = False) -> Optional[datetime]:
        """The datetime a slot first runs at."""
        day = self.h2_start if second_half else self.start
        if day is None or not 0 <= slot.weekday <= 6:
            return None
        while day_of_week(day) != slot.weekday:
            day += timedelta(days=1)
        return slot.on_date(day)

    def end_date_for(self, slot: Slot, first_half: bool = False) -> Optional[datetime]:
        """The datetime a slot last runs at, plus one day.

        The extra day makes the result an exclusive bound for a recurrence
        that still includes the last occurrence.
        """
        day = self.h1_end if first_half else self.end
        if day is None or not 0 <= slot.weekday <= 6:
            return None
        while day_of_week(day) != slot.weekday:
            day -= timedelta(days=1)
        return slot.on_date(day + timedelta(days=1))

    def ex_dates_for(self, slot: Slot) -> list[datetime]:
        """Datetimes a slot does *not* run at. Never empty."""
        res = [d for d in self.holidays if day_of_week(d) == slot.weekday]
        res.append(EXDATE_SENTINEL)
        return [slot.on_date(d) for d in res]

    def r_date_for(self, slot: Slot) -> Optional[datetime]:
        """An extra datetime a Monday slot runs at, if the term has one."""
        if slot.weekday == 1 and self.monday_schedule is not None:
            return slot.on_date(self.monday_schedule)
        return None

    def occurrences_for(
        self, slot: Slot, first_half: bool = False, second_half: bool = False
    ) -> list[datetime]:
        """Every datetime a weekly class in `slot` meets during the term.

        `first_half` and `second_half` restrict the range to H1 / H2.
        """
        start = self.start_date_for(slot, second_half=second_half)
        end = self.end_date_for(slot, first_half=first_half)
        if start is None or end is None:
            return []
        excluded = set(self.ex_dates_for(slot))
        res = []
        current = start
        while current < end:
            if current not in excluded:
                res.append(current)
            current += timedelta(weeks=1)
        extra = self.r_date_for(slot)
        if extra is not None and start <= extra < end and extra not in res:
            res.append(extra)
        return sorted(res)
