"""Vehicle class - a read-only snapshot of one fleet vehicle."""

from datetime import date
from typing import Optional, Union

from .calculations import parse_date
from .event_type import DeadlineType

DateInput = Union[str, date, None]


class Vehicle:
    """Vehicle identification and deadline dates."""

    def __init__(
        self,
        id: int,
        license_plate: str,
        brand: str,
        model: str,
        fuel_type: Optional[str] = None,
        production_date: DateInput = None,
        apk_date: DateInput = None,
        warranty_end_date: DateInput = None,
        vehicle_type: Optional[str] = None,
    ):
        self.id = id
        self.license_plate = license_plate
        self.brand = brand
        self.model = model
        self.fuel_type = fuel_type
        self.production_date = parse_date(production_date)
        self.apk_date = parse_date(apk_date)
        self.warranty_end_date = parse_date(warranty_end_date)
        self.vehicle_type = vehicle_type

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.brand} {self.model}"

    def deadline(self, deadline_type: DeadlineType) -> Optional[date]:
        """The raw deadline date for a reminder category."""
        if deadline_type == DeadlineType.APK_INSPECTION:
            return self.apk_date
        return self.warranty_end_date

    def __repr__(self) -> str:
        return f"Vehicle(id={self.id!r}, license_plate={self.license_plate!r})"
