"""Rental conflict detection for inspection due dates."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from dateutil.relativedelta import relativedelta

from .reservation import Reservation

UPCOMING_RENTAL_WINDOW = relativedelta(weeks=3)


@dataclass(frozen=True)
class RentalConflict:
    """How a due date relates to the vehicle's rentals."""

    needs_spare_vehicle: bool = False
    has_upcoming_rentals: bool = False


def detect_rental_conflict(
    due_date: date, reservations: Iterable[Reservation]
) -> RentalConflict:
    """
    Compare a (weekend-shifted) due date against one vehicle's reservations.

    - Spare vehicle needed: a non-cancelled reservation is running on the
      due date (inclusive bounds, open-ended ones count as ongoing)
    - Upcoming rentals: no spare needed, but a reservation of any status
      starts within 3 weeks after the due date
    """
    dated = [r for r in reservations if r.start_date is not None]

    if any(r.covers(due_date) for r in dated if not r.is_cancelled):
        return RentalConflict(needs_spare_vehicle=True)

    window_end = due_date + UPCOMING_RENTAL_WINDOW
    upcoming = any(due_date < r.start_date <= window_end for r in dated)
    return RentalConflict(has_upcoming_rentals=upcoming)
