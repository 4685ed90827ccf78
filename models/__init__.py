from models.slot import Slot, WEEKDAY_STRINGS, TIMESLOT_STRINGS
from models.term import Term, Semester, parse_url_name

__all__ = [
    "Slot",
    "WEEKDAY_STRINGS",
    "TIMESLOT_STRINGS",
    "Term",
    "Semester",
    "parse_url_name",
]
