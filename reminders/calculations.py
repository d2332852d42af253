"""Helper functions for deadline date calculations."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Optional, Union

from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from .vehicle import Vehicle

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25

FUEL_HEAVY = "heavy"  # diesel / LPG
FUEL_LIGHT = "light"  # petrol / electric
FUEL_OTHER = "other"

HEAVY_FUEL_KEYWORDS = ("diesel", "lpg")
LIGHT_FUEL_KEYWORDS = ("petrol", "benzine", "electric")

HEAVY_FIRST_INSPECTION_YEARS = 3
LIGHT_FIRST_INSPECTION_YEARS = 4
LIGHT_BIENNIAL_UNTIL_YEARS = 8


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse an ISO-8601 calendar date.

    Accepts date objects, datetimes (time part dropped) and 'YYYY-MM-DD'
    strings, optionally followed by a 'T' or space and a time component.
    Anything else is treated as absent.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug("Ignoring non-string date value %r", value)
        return None
    text = value.strip()
    if not text:
        return None
    rest = text[10:]
    if rest and rest[0] not in "T ":
        logger.debug("Ignoring malformed date %r", value)
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        logger.debug("Ignoring malformed date %r", value)
        return None


def classify_fuel(fuel_type: Optional[str]) -> str:
    """Classify a free-text fuel type into the inspection interval family."""
    fuel = (fuel_type or "").lower()
    if any(keyword in fuel for keyword in HEAVY_FUEL_KEYWORDS):
        return FUEL_HEAVY
    if any(keyword in fuel for keyword in LIGHT_FUEL_KEYWORDS):
        return FUEL_LIGHT
    return FUEL_OTHER


def vehicle_age_years(production_date: Optional[date], on_date: date) -> float:
    """Vehicle age in fractional years on a given date (0 when unknown)."""
    if production_date is None:
        return 0
    return (on_date - production_date).days / DAYS_PER_YEAR


def calc_next_apk_date(vehicle: "Vehicle", completion_date: date) -> date:
    """
    Calculate the next APK inspection date after an inspection on completion_date.

    - No production date and no APK date: one year after completion
    - Diesel/LPG: first inspection at 3 years, then annually
    - Petrol/electric: first inspection at 4 years, every 2 years until
      8 years, then annually
    - Other fuels: annually
    """
    if vehicle.production_date is None and vehicle.apk_date is None:
        return completion_date + relativedelta(years=1)

    age = vehicle_age_years(vehicle.production_date, completion_date)
    fuel = classify_fuel(vehicle.fuel_type)

    first_inspection_years = None
    years_to_add = 1
    if fuel == FUEL_HEAVY:
        if age < HEAVY_FIRST_INSPECTION_YEARS:
            first_inspection_years = HEAVY_FIRST_INSPECTION_YEARS
    elif fuel == FUEL_LIGHT:
        if age < LIGHT_FIRST_INSPECTION_YEARS:
            first_inspection_years = LIGHT_FIRST_INSPECTION_YEARS
        elif age < LIGHT_BIENNIAL_UNTIL_YEARS:
            years_to_add = 2

    if first_inspection_years is not None:
        if vehicle.production_date is None:
            # Unknown age counts as new
            years_to_add = first_inspection_years
        else:
            first_due = vehicle.production_date + relativedelta(
                years=first_inspection_years
            )
            if first_due > completion_date:
                return first_due
            # Leap-day rounding can put the anniversary on the completion date
            years_to_add = 1

    return completion_date + relativedelta(years=years_to_add)


@dataclass(frozen=True)
class WeekendShift:
    """Result of moving a date off the weekend."""

    shifted_date: date
    was_shifted: bool


def shift_weekend(day: date) -> WeekendShift:
    """Move Saturday and Sunday to the following Monday."""
    weekday = day.weekday()  # Monday = 0, Sunday = 6
    if weekday == 6:
        return WeekendShift(day + timedelta(days=1), True)
    if weekday == 5:
        return WeekendShift(day + timedelta(days=2), True)
    return WeekendShift(day, False)
