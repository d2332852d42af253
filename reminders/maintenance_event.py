"""MaintenanceEvent dataclass for calculated calendar events."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, TYPE_CHECKING

from .event_type import EventType
from .priority import Priority

if TYPE_CHECKING:
    from .reservation import Reservation
    from .vehicle import Vehicle


@dataclass
class MaintenanceEvent:
    """A reminder or scheduled maintenance entry on the calendar."""

    id: str
    vehicle_id: int
    vehicle: "Vehicle"
    type: EventType
    date: date
    title: str
    description: str
    priority: Priority
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    needs_spare_vehicle: bool = False
    has_upcoming_rentals: bool = False
    current_reservations: List["Reservation"] = field(default_factory=list)
    was_shifted: bool = False
    due_date: Optional[date] = None

    @property
    def is_multi_day(self) -> bool:
        return self.type == EventType.SCHEDULED_MAINTENANCE

    def is_overdue(self, today: date) -> bool:
        """Whether the underlying deadline is already past."""
        return self.due_date is not None and self.due_date < today

    def occurs_on(self, day: date) -> bool:
        """
        Check if the event shows on a calendar day.

        Scheduled maintenance only shows on its start and end days, other
        events on their (weekend-shifted) date.
        """
        if self.is_multi_day:
            if self.start_date is None:
                return False
            return day == self.start_date or (
                self.end_date is not None and day == self.end_date
            )
        return day == self.date
