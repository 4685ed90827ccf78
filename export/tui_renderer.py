"""Row builders for the terminal views of the slot grid and term calendars.

Used by the rich tables in main.py.
"""

from datetime import datetime
from typing import Iterable, Optional

from models.slot import DAYS_PER_WEEK, SLOTS_PER_DAY, TIMESLOT_STRINGS, Slot
from models.term import Term


def fmt_datetime(value: Optional[datetime]) -> str:
    """e.g. "Mon 2022-09-12 09:00"; "—" if there is no value."""
    if value is None:
        return "—"
    return value.strftime("%a %Y-%m-%d %H:%M")


def render_grid_rows(highlight: Iterable[Slot] = ()) -> list[list[str]]:
    """Table rows for the weekly slot grid.

    One row per start time, 8:00 AM to 9:30 PM. Each row:
    [time_label, Mon, Tue, Wed, Thu, Fri] with the slot number in each
    cell; highlighted slots are wrapped in rich markup.
    """
    marked = set(highlight)
    rows: list[list[str]] = []
    for time_idx in range(len(TIMESLOT_STRINGS) - 1):
        cells = [TIMESLOT_STRINGS[time_idx]]
        for day_idx in range(DAYS_PER_WEEK):
            slot = Slot.from_slot_number(day_idx * SLOTS_PER_DAY + time_idx)
            if slot in marked:
                cells.append(f"[bold reverse]{slot.index}[/bold reverse]")
            else:
                cells.append(str(slot.index))
        rows.append(cells)
    return rows


def render_term_rows(term: Term) -> list[list[str]]:
    """Key/value rows describing a term's names and boundaries."""
    def _d(value) -> str:
        return value.isoformat() if value is not None else "—"

    return [
        ["Name", term.nice_name],
        ["Catalog", term.catalog_name],
        ["School year", term.full_school_year],
        ["Start", _d(term.start)],
        ["H1 end", _d(term.h1_end)],
        ["H2 start", _d(term.h2_start)],
        ["End", _d(term.end)],
        ["Monday schedule", _d(term.monday_schedule)],
        ["Holidays", ", ".join(d.isoformat() for d in term.holidays) or "—"],
    ]


def render_slot_date_rows(
    term: Term, slot: Slot, half: Optional[str] = None
) -> list[list[str]]:
    """Rows with the projected dates of `slot` within `term`.

    `half` is None, "first" or "second".
    """
    first_half = half == "first"
    second_half = half == "second"
    ex_dates = term.ex_dates_for(slot)
    occurrences = term.occurrences_for(
        slot, first_half=first_half, second_half=second_half)
    return [
        ["Slot", f"{slot.index} ({slot})"],
        ["First", fmt_datetime(term.start_date_for(slot, second_half=second_half))],
        ["Until (exclusive)", fmt_datetime(term.end_date_for(slot, first_half=first_half))],
        ["Excluded", "\n".join(fmt_datetime(d) for d in ex_dates)],
        ["Extra", fmt_datetime(term.r_date_for(slot))],
        ["Meetings", str(len(occurrences))],
    ]
