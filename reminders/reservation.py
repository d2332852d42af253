"""Reservation class for rentals and maintenance blocks."""

from datetime import date
from typing import Optional, Union

from .calculations import parse_date

STATUS_PENDING = "pending"
STATUS_CONFIRMED = "confirmed"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"

TYPE_STANDARD = "standard"
TYPE_MAINTENANCE_BLOCK = "maintenance_block"
TYPE_REPLACEMENT = "replacement"


class Reservation:
    """A vehicle reservation. Maintenance blocks hold a vehicle out of service."""

    def __init__(
        self,
        id: int,
        vehicle_id: int,
        start_date: Union[str, date, None],
        end_date: Union[str, date, None] = None,
        status: str = STATUS_PENDING,
        type: str = TYPE_STANDARD,
        notes: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.start_date = parse_date(start_date)
        self.end_date = parse_date(end_date)
        self.status = status
        self.type = type
        self.notes = notes

    @property
    def is_cancelled(self) -> bool:
        return self.status == STATUS_CANCELLED

    @property
    def is_maintenance_block(self) -> bool:
        return self.type == TYPE_MAINTENANCE_BLOCK

    @property
    def is_open_ended(self) -> bool:
        return self.end_date is None

    def covers(self, day: date) -> bool:
        """Check if day falls inside the reservation window (inclusive)."""
        if self.start_date is None or self.start_date > day:
            return False
        return self.is_open_ended or self.end_date >= day

    def __repr__(self) -> str:
        return (
            f"Reservation(id={self.id!r}, vehicle_id={self.vehicle_id!r}, "
            f"type={self.type!r})"
        )
