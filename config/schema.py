import logging
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.term import parse_date

logger = logging.getLogger(__name__)


# ─── TERM ───

class TermConfig(BaseModel):
    """Calendar record of a single academic term.

    Dates are "YYYY-MM-DD" strings; an empty string means "not set".
    Accepts both camelCase keys (as stored in YAML) and snake_case names.
    """
    model_config = ConfigDict(populate_by_name=True)

    # Semester code + two-digit year, e.g. "f22"
    url_name: str = Field(alias="urlName", pattern=r"^[fsi]\d{2}$",
        description="Semester code (f/s/i) + two-digit year")
    # First day of classes, inclusive
    start_date: str = Field("", alias="startDate")
    # Last day of first-half classes, inclusive
    h1_end_date: str = Field("", alias="h1EndDate")
    # First day of second-half classes, inclusive
    h2_start_date: str = Field("", alias="h2StartDate")
    # Last day of classes, inclusive
    end_date: str = Field("", alias="endDate")
    # A non-Monday that runs on Monday schedule
    monday_schedule_date: Optional[str] = Field(None, alias="mondayScheduleDate")
    # Days with no class
    holiday_dates: list[str] = Field(default_factory=list, alias="holidayDates")

    @field_validator("start_date", "h1_end_date", "h2_start_date", "end_date",
                     "monday_schedule_date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        """Unquoted dates in YAML are loaded as date objects."""
        if isinstance(v, date):
            return v.isoformat()
        return v

    @field_validator("holiday_dates", mode="before")
    @classmethod
    def coerce_dates(cls, v):
        if isinstance(v, (list, tuple)):
            return [d.isoformat() if isinstance(d, date) else d for d in v]
        return v

    @field_validator("start_date", "h1_end_date", "h2_start_date", "end_date",
                     "monday_schedule_date")
    @classmethod
    def check_iso_date(cls, v: Optional[str]) -> Optional[str]:
        if v:
            parse_date(v)
        return v

    @field_validator("holiday_dates")
    @classmethod
    def check_iso_dates(cls, v: list[str]) -> list[str]:
        for d in v:
            parse_date(d)
        return v

    @model_validator(mode='after')
    def check_boundary_order(self):
        """Boundaries should satisfy start <= h1_end < h2_start <= end.

        Only reported, never enforced.
        """
        bounds = [self.start_date, self.h1_end_date,
                  self.h2_start_date, self.end_date]
        if not all(bounds):
            missing = [name for name, v in zip(
                ["start_date", "h1_end_date", "h2_start_date", "end_date"],
                bounds) if not v]
            logger.warning(f"Term {self.url_name}: missing {', '.join(missing)}")
            return self
        start, h1_end, h2_start, end = (parse_date(b) for b in bounds)
        if not (start <= h1_end < h2_start <= end):
            logger.warning(
                f"Term {self.url_name}: boundaries out of order "
                f"({start} / {h1_end} / {h2_start} / {end})"
            )
        return self


# ─── CATALOG ───

class TermCatalogConfig(BaseModel):
    """All configured terms plus the one shown by default."""
    # url name of the default term
    current: str = Field(description="url name of the default term")
    # Every known term
    terms: list[TermConfig] = Field(description="Every known term")

    @model_validator(mode='after')
    def check_current_exists(self):
        if self.current not in {t.url_name for t in self.terms}:
            raise ValueError(
                f"Current term '{self.current}' is not among the configured terms")
        return self

    @property
    def url_names(self) -> list[str]:
        return [t.url_name for t in self.terms]

    def get(self, url_name: str) -> TermConfig:
        """The record for `url_name`; KeyError if it is not configured."""
        for t in self.terms:
            if t.url_name == url_name:
                return t
        raise KeyError(
            f"Term '{url_name}' not configured. Available: {self.url_names}")
