"""
Fleet maintenance reminder engine.

This package derives a calendar of inspection and warranty deadlines from
vehicle and reservation snapshots:
- Vehicle / Reservation: Read-only input records
- calculations: Date parsing, APK interval rules, weekend shifting
- suppression: Skip reminders once maintenance is on the books
- conflicts: Spare vehicle / upcoming rental flags
- generator: 2-month, 1-month and due-date reminder events
- calendar: Public entry points (generate_events, events_for_date)
- loader: YAML snapshot files
"""

from .priority import Priority
from .event_type import DeadlineType, EventType
from .vehicle import Vehicle
from .reservation import Reservation
from .maintenance_event import MaintenanceEvent
from .maintenance_type import MaintenanceType, MaintenanceNote, parse_maintenance_note
from .calculations import (
    WeekendShift,
    calc_next_apk_date,
    classify_fuel,
    parse_date,
    shift_weekend,
)
from .suppression import is_maintenance_scheduled
from .conflicts import RentalConflict, detect_rental_conflict
from .generator import generate_deadline_events
from .calendar import (
    EventFilters,
    events_for_date,
    events_in_range,
    expiring_soon,
    generate_events,
)
from .loader import Fleet, load_fleet, save_apk_completion, save_warranty_end_date

__all__ = [
    "Priority",
    "DeadlineType",
    "EventType",
    "Vehicle",
    "Reservation",
    "MaintenanceEvent",
    "MaintenanceType",
    "MaintenanceNote",
    "parse_maintenance_note",
    "WeekendShift",
    "calc_next_apk_date",
    "classify_fuel",
    "parse_date",
    "shift_weekend",
    "is_maintenance_scheduled",
    "RentalConflict",
    "detect_rental_conflict",
    "generate_deadline_events",
    "EventFilters",
    "events_for_date",
    "events_in_range",
    "expiring_soon",
    "generate_events",
    "Fleet",
    "load_fleet",
    "save_apk_completion",
    "save_warranty_end_date",
]
