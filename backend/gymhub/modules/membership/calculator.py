"""
Membership window arithmetic.

A fee package carries its length as text, "<integer> <unit>", for example
"1 Month", "3 Months" or "1 Year". The end of a membership is the start date
shifted by that amount on the calendar:

    >>> compute_end_date("2024-01-15", "3 Months")
    datetime.date(2024, 4, 15)

Month and year steps use dateutil's relativedelta, which clamps to the last
day of the target month instead of rolling over:

    >>> compute_end_date("2024-01-31", "1 Month")
    datetime.date(2024, 2, 29)
    >>> compute_end_date("2024-02-29", "1 Year")
    datetime.date(2025, 2, 28)
"""
import enum
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from gymhub.core.exceptions import (
    InvalidDurationError,
    InvalidStartDateError,
    UnrecognizedDurationUnitError,
)


class DurationUnit(str, enum.Enum):
    DAY = "days"
    MONTH = "months"
    YEAR = "years"


# Accepted spellings, matched case-insensitively
UNIT_TABLE = {
    "day": DurationUnit.DAY,
    "days": DurationUnit.DAY,
    "month": DurationUnit.MONTH,
    "months": DurationUnit.MONTH,
    "year": DurationUnit.YEAR,
    "years": DurationUnit.YEAR,
}

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([A-Za-z]+)\s*$")


@dataclass(frozen=True)
class Duration:
    amount: int
    unit: DurationUnit

    def as_relativedelta(self) -> relativedelta:
        return relativedelta(**{self.unit.value: self.amount})

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.value}"


def parse_duration(text: str) -> Duration:
    """Parse "<integer> <unit>" into a Duration"""
    match = _DURATION_RE.match(text or "")
    if not match:
        raise InvalidDurationError(text)

    amount, unit_text = match.groups()
    unit = UNIT_TABLE.get(unit_text.lower())
    if unit is None:
        raise UnrecognizedDurationUnitError(text, unit_text)

    return Duration(amount=int(amount), unit=unit)


def parse_start_date(value: Union[date, datetime, str]) -> date:
    """Coerce a date, datetime or ISO 8601 string into a date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            pass
    raise InvalidStartDateError(value)


def compute_end_date(start_date: Union[date, datetime, str], duration_spec: str) -> date:
    """Membership end date for a package of length duration_spec starting at start_date"""
    start = parse_start_date(start_date)
    duration = parse_duration(duration_spec)
    try:
        return start + duration.as_relativedelta()
    except (ValueError, OverflowError):
        # Result falls outside the calendar (past year 9999)
        raise InvalidDurationError(duration_spec)
