"""Day-count to proleptic Gregorian date conversion.

Uses Howard Hinnant's ``civil_from_days`` algorithm. Years are split into
400-year eras of 146097 days, counted from March 1 so the leap day falls at
the end of each computed year.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SECONDS_PER_DAY = 86_400
DAYS_PER_ERA = 146_097
# Days from 0000-03-01 to 1970-01-01.
EPOCH_SHIFT_DAYS = 719_468

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class MonthStyle(Enum):
    NUMERIC = "numeric"
    FULL = "full"
    SHORT = "short"


class InvalidMonthError(ValueError):
    """Month index outside ``[1, 12]``."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Invalid month {month}. Range is [1,12]")
        self.month = month


def month_name(month: int, style: MonthStyle = MonthStyle.FULL) -> str:
    """Return the English month name, or its three-letter abbreviation.

    ``MonthStyle.NUMERIC`` returns the month number as text. Any ``month``
    outside ``[1, 12]`` raises :class:`InvalidMonthError`.
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(month)
    if style is MonthStyle.NUMERIC:
        return str(month)
    name = MONTH_NAMES[month - 1]
    if style is MonthStyle.SHORT:
        return name[:3]
    return name


@dataclass(frozen=True)
class CivilDate:
    year: int
    month: int
    day: int

    def month_display(self, style: MonthStyle = MonthStyle.SHORT) -> str:
        return month_name(self.month, style)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def from_day_count(days: int) -> CivilDate:
    """Convert days since 1970-01-01 into a :class:`CivilDate`.

    Floor division keeps the arithmetic valid for negative counts too.
    """
    shifted = days + EPOCH_SHIFT_DAYS
    era = shifted // DAYS_PER_ERA
    day_of_era = shifted - era * DAYS_PER_ERA
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    year = year_of_era + era * 400
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    month_group = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_group + 2) // 5 + 1
    month = month_group + 3 if month_group < 10 else month_group - 9
    if month <= 2:
        year += 1
    return CivilDate(year=year, month=month, day=day)


def from_timestamp(seconds: float) -> CivilDate:
    """Convert POSIX timestamp seconds into the UTC calendar date."""
    return from_day_count(int(seconds // SECONDS_PER_DAY))


__all__ = [
    "CivilDate",
    "InvalidMonthError",
    "MONTH_NAMES",
    "MonthStyle",
    "from_day_count",
    "from_timestamp",
    "month_name",
]
