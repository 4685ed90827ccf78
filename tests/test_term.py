"""Tests for terms: names, slot projections and the weekly recurrence."""

from datetime import date, datetime, timedelta

import pytest

from config.defaults import default_terms
from models.slot import Slot
from models.term import (
    EXDATE_SENTINEL, Semester, Term, day_of_week, parse_date, parse_url_name,
)


# ─── Test data ────────────────────────────────────────────────────────────────

@pytest.fixture
def fall22() -> Term:
    """Fall 2022 with a Monday-schedule Tuesday and a handful of holidays."""
    return Term(
        url_name="f22",
        start_date="2022-09-07",
        h1_end_date="2022-10-28",
        h2_start_date="2022-10-31",
        end_date="2022-12-14",
        monday_schedule_date="2022-10-11",
        holiday_dates=[
            "2022-09-26",   # Mon
            "2022-10-10",   # Mon
            "2022-10-11",   # Tue
            "2022-11-11",   # Fri
            "2022-11-24",   # Thu
            "2022-11-25",   # Fri
        ],
    )


@pytest.fixture
def plain_fall22() -> Term:
    return Term(
        url_name="f22",
        start_date="2022-09-07",
        end_date="2022-12-14",
        h1_end_date="2022-10-28",
        h2_start_date="2022-10-31",
    )


MON_9 = Slot.from_day_string("Mon", "9:00 AM")
TUE_1 = Slot.from_day_string("Tue", "1:00 PM")
WED_10 = Slot.from_day_string("Wed", "10:00 AM")
THU_3 = Slot.from_day_string("Thu", "3:30 PM")
FRI_11 = Slot.from_day_string("Fri", "11:00 AM")


# ─── NAMES ────────────────────────────────────────────────────────────────────

class TestNames:
    def test_parse_url_name(self):
        assert parse_url_name("f22") == ("22", Semester.FALL)
        assert parse_url_name("i23") == ("23", Semester.IAP)

    def test_fall_names(self, plain_fall22):
        assert plain_fall22.year == "22"
        assert plain_fall22.semester is Semester.FALL
        assert plain_fall22.full_real_year == "2022"
        assert plain_fall22.full_school_year == "2023"
        assert plain_fall22.semester_catalog == "FA"
        assert plain_fall22.semester_full == "fall"
        assert plain_fall22.semester_full_caps == "Fall"
        assert plain_fall22.catalog_name == "2023FA"
        assert plain_fall22.nice_name == "Fall 2022"
        assert plain_fall22.url_name == "f22"
        assert str(plain_fall22) == "f22"

    def test_spring_uses_same_year(self):
        term = Term(url_name="s23")
        assert term.full_school_year == "2023"
        assert term.catalog_name == "2023SP"
        assert term.nice_name == "Spring 2023"

    def test_iap_names(self):
        term = Term(url_name="i23")
        assert term.catalog_name == "2023JA"
        assert term.semester_full == "iap"
        assert term.nice_name == "IAP 2023"

    def test_unknown_semester_raises(self):
        with pytest.raises(ValueError):
            Term(url_name="x22")

    def test_empty_url_name_raises(self):
        with pytest.raises(ValueError):
            Term(url_name="")


# ─── CONSTRUCTION ─────────────────────────────────────────────────────────────

class TestConstruction:
    def test_dates_parsed(self, fall22):
        assert fall22.start == date(2022, 9, 7)
        assert fall22.h1_end == date(2022, 10, 28)
        assert fall22.h2_start == date(2022, 10, 31)
        assert fall22.end == date(2022, 12, 14)
        assert fall22.monday_schedule == date(2022, 10, 11)
        assert len(fall22.holidays) == 6

    def test_missing_dates_are_none(self):
        term = Term(url_name="f22")
        assert term.start is None
        assert term.end is None
        assert term.monday_schedule is None
        assert term.holidays == []

    def test_malformed_date_raises(self):
        with pytest.raises(ValueError):
            Term(url_name="f22", start_date="2022-13-01")

    @pytest.mark.parametrize("value", ["20220907", "2022-W36-3", "2022-09-07T00:00"])
    def test_non_calendar_date_formats_raise(self, value):
        with pytest.raises(ValueError):
            Term(url_name="f22", start_date=value)

    def test_parse_date(self):
        assert parse_date("2022-09-07") == date(2022, 9, 7)
        with pytest.raises(ValueError):
            parse_date("2022-9-7")

    def test_from_config(self):
        term = Term.from_config(default_terms().get("f22"))
        assert term.start == date(2022, 9, 7)
        assert term.monday_schedule == date(2022, 10, 11)

    def test_halves(self, fall22):
        assert fall22.in_first_half(date(2022, 10, 28))
        assert not fall22.in_first_half(date(2022, 10, 31))
        assert fall22.in_second_half(date(2022, 10, 31))
        assert fall22.in_second_half(date(2022, 12, 14))
        assert not Term(url_name="f22").in_first_half(date(2022, 10, 1))

    def test_is_holiday(self, fall22):
        assert fall22.is_holiday(date(2022, 11, 24))
        assert not fall22.is_holiday(date(2022, 11, 23))


# ─── START / END ──────────────────────────────────────────────────────────────

class TestStartEnd:
    def test_start_date_searches_forward(self, fall22):
        # 2022-09-07 is a Wednesday
        assert fall22.start_date_for(MON_9) == datetime(2022, 9, 12, 9, 0)
        assert fall22.start_date_for(THU_3) == datetime(2022, 9, 8, 15, 30)

    def test_start_date_on_start_day(self, fall22):
        assert fall22.start_date_for(WED_10) == datetime(2022, 9, 7, 10, 0)

    def test_start_date_second_half(self, fall22):
        assert fall22.start_date_for(MON_9, second_half=True) == \
            datetime(2022, 10, 31, 9, 0)
        assert fall22.start_date_for(THU_3, second_half=True) == \
            datetime(2022, 11, 3, 15, 30)

    def test_end_date_adds_one_day(self, fall22):
        # 2022-12-14 is a Wednesday; last Monday is 12-12
        assert fall22.end_date_for(MON_9) == datetime(2022, 12, 13, 9, 0)
        assert fall22.end_date_for(WED_10) == datetime(2022, 12, 15, 10, 0)

    def test_end_date_first_half(self, fall22):
        # 2022-10-28 is a Friday
        assert fall22.end_date_for(FRI_11, first_half=True) == \
            datetime(2022, 10, 29, 11, 0)
        assert fall22.end_date_for(THU_3, first_half=True) == \
            datetime(2022, 10, 28, 15, 30)

    def test_end_date_bounds_for_all_slots(self, fall22):
        for index in range(150):
            slot = Slot.from_slot_number(index)
            day = fall22.end_date_for(slot).date()
            last = day - timedelta(days=1)
            assert last.isoweekday() == slot.weekday
            assert last <= fall22.end
            assert fall22.end - last < timedelta(days=7)

    def test_missing_boundary_gives_none(self):
        term = Term(url_name="f22", start_date="2022-09-07")
        assert term.start_date_for(MON_9) is not None
        assert term.start_date_for(MON_9, second_half=True) is None
        assert term.end_date_for(MON_9) is None


# ─── WEEKEND SLOTS ────────────────────────────────────────────────────────────

class TestWeekendSlots:
    """Slots before Monday fall on Sunday (day 0); past Saturday there is no day."""

    def test_day_of_week_sunday_first(self):
        assert day_of_week(date(2022, 9, 11)) == 0   # Sun
        assert day_of_week(date(2022, 9, 12)) == 1   # Mon
        assert day_of_week(date(2022, 9, 17)) == 6   # Sat

    def test_sunday_slot_projections(self):
        term = Term(
            url_name="f22",
            start_date="2022-09-07",
            end_date="2022-12-14",
            holiday_dates=["2022-09-11"],   # Sun
        )
        sunday = Slot.from_day_string("Sat", "9:00 AM")
        assert sunday.weekday == 0
        assert term.start_date_for(sunday) == datetime(2022, 9, 11, 9, 0)
        # last Sunday is 12-11
        assert term.end_date_for(sunday) == datetime(2022, 12, 12, 9, 0)
        assert term.ex_dates_for(sunday) == [
            datetime(2022, 9, 11, 9, 0),
            datetime(2000, 1, 1, 9, 0),
        ]

    def test_saturday_slot_projections(self, plain_fall22):
        saturday = Slot.from_slot_number(150)
        assert saturday.weekday == 6
        assert plain_fall22.start_date_for(saturday) == datetime(2022, 9, 10, 8, 0)
        assert plain_fall22.end_date_for(saturday) == datetime(2022, 12, 11, 8, 0)

    @pytest.mark.parametrize("index", [180, 200, -31, -60])
    def test_no_weekday_gives_none(self, plain_fall22, index):
        slot = Slot.from_slot_number(index)
        assert plain_fall22.start_date_for(slot) is None
        assert plain_fall22.end_date_for(slot) is None
        assert plain_fall22.occurrences_for(slot) == []


# ─── EXCLUSIONS / EXTRA DATES ─────────────────────────────────────────────────

class TestExRDates:
    def test_ex_dates_match_weekday(self, fall22):
        assert fall22.ex_dates_for(MON_9) == [
            datetime(2022, 9, 26, 9, 0),
            datetime(2022, 10, 10, 9, 0),
            datetime(2000, 1, 1, 9, 0),
        ]
        assert fall22.ex_dates_for(FRI_11) == [
            datetime(2022, 11, 11, 11, 0),
            datetime(2022, 11, 25, 11, 0),
            datetime(2000, 1, 1, 11, 0),
        ]

    def test_ex_dates_sentinel_only(self, fall22):
        assert fall22.ex_dates_for(WED_10) == [datetime(2000, 1, 1, 10, 0)]

    def test_ex_dates_never_empty(self, fall22, plain_fall22):
        for term in (fall22, plain_fall22, Term(url_name="s23")):
            for index in range(150):
                slot = Slot.from_slot_number(index)
                ex = term.ex_dates_for(slot)
                assert ex
                assert ex[-1] == slot.on_date(EXDATE_SENTINEL)

    def test_r_date_monday(self, fall22):
        assert fall22.r_date_for(MON_9) == datetime(2022, 10, 11, 9, 0)

    def test_r_date_iff_monday_and_configured(self, fall22, plain_fall22):
        for index in range(150):
            slot = Slot.from_slot_number(index)
            assert (fall22.r_date_for(slot) is not None) == (slot.weekday == 1)
            assert plain_fall22.r_date_for(slot) is None


# ─── OCCURRENCES ──────────────────────────────────────────────────────────────

class TestOccurrences:
    def test_monday_full_term(self, fall22):
        occurrences = fall22.occurrences_for(MON_9)
        # 14 Mondays, 2 holidays, 1 Monday-schedule Tuesday
        assert len(occurrences) == 13
        assert occurrences[0] == datetime(2022, 9, 12, 9, 0)
        assert occurrences[-1] == datetime(2022, 12, 12, 9, 0)
        assert datetime(2022, 10, 11, 9, 0) in occurrences
        assert datetime(2022, 9, 26, 9, 0) not in occurrences
        assert occurrences == sorted(occurrences)

    def test_tuesday_skips_monday_schedule_day(self, fall22):
        occurrences = fall22.occurrences_for(TUE_1)
        assert len(occurrences) == 13
        assert datetime(2022, 10, 11, 13, 0) not in occurrences

    def test_first_half(self, fall22):
        occurrences = fall22.occurrences_for(MON_9, first_half=True)
        assert len(occurrences) == 6
        assert occurrences[-1] == datetime(2022, 10, 24, 9, 0)

    def test_second_half_excludes_earlier_extra_date(self, fall22):
        occurrences = fall22.occurrences_for(MON_9, second_half=True)
        assert len(occurrences) == 7
        assert occurrences[0] == datetime(2022, 10, 31, 9, 0)

    def test_missing_dates_no_occurrences(self):
        assert Term(url_name="f22").occurrences_for(MON_9) == []


# ─── BUILT-IN CALENDARS ───────────────────────────────────────────────────────

class TestDefaultTerms:
    def test_all_default_terms_build(self):
        for tc in default_terms().terms:
            term = Term.from_config(tc)
            assert term.url_name == tc.url_name
            assert term.start <= term.h1_end < term.h2_start <= term.end

    def test_monday_schedule_dates_are_holidays(self):
        for tc in default_terms().terms:
            term = Term.from_config(tc)
            if term.monday_schedule is not None:
                assert term.monday_schedule.isoweekday() != 1
                assert term.is_holiday(term.monday_schedule)
