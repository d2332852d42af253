"""Maintenance calendar - combines reminders and scheduled maintenance."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from .event_type import DeadlineType, EventType
from .generator import generate_deadline_events
from .maintenance_event import MaintenanceEvent
from .maintenance_type import parse_maintenance_note
from .priority import Priority
from .reservation import Reservation
from .suppression import is_maintenance_scheduled
from .vehicle import Vehicle

logger = logging.getLogger(__name__)

EXPIRING_SOON_MONTHS = 2


@dataclass(frozen=True)
class EventFilters:
    """Calendar filters. Unset fields match everything."""

    search: Optional[str] = None
    vehicle_type: Optional[str] = None
    event_type: Optional[EventType] = None

    def matches(self, event: MaintenanceEvent) -> bool:
        vehicle = event.vehicle
        if vehicle is None:
            return False
        if self.search:
            needle = self.search.lower()
            haystack = (
                vehicle.license_plate,
                vehicle.brand,
                vehicle.model,
                event.title,
            )
            if not any(needle in (text or "").lower() for text in haystack):
                return False
        if self.vehicle_type and vehicle.vehicle_type != self.vehicle_type:
            return False
        if self.event_type and event.type != self.event_type:
            return False
        return True


def scheduled_maintenance_event(
    block: Reservation, vehicle: Vehicle
) -> MaintenanceEvent:
    """Calendar event for a maintenance block, titled from its notes prefix."""
    note = parse_maintenance_note(block.notes)
    if not note.recognized:
        logger.debug(
            "Unrecognized maintenance type %r on reservation %s", note.token, block.id
        )
    title = note.title
    return MaintenanceEvent(
        id=f"{EventType.SCHEDULED_MAINTENANCE.value}_{block.id}",
        vehicle_id=block.vehicle_id,
        vehicle=vehicle,
        type=EventType.SCHEDULED_MAINTENANCE,
        date=block.start_date,
        start_date=block.start_date,
        end_date=block.end_date,
        title=title,
        description=note.description or f"{title} for {vehicle.name}",
        priority=Priority.HIGH,
    )


def generate_events(
    vehicles: Iterable[Vehicle],
    reservations: Iterable[Reservation],
    maintenance_blocks: Iterable[Reservation],
    today: Optional[date] = None,
) -> List[MaintenanceEvent]:
    """
    Build every calendar event for a snapshot of the fleet.

    - APK and warranty reminder triads for each vehicle with the matching
      date, unless a maintenance block already covers that deadline
    - One scheduled maintenance event per maintenance block of a known
      vehicle with a valid start date

    Args:
        today: Reference date for overdue classification (default: today)
    """
    today = today or date.today()
    vehicles = list(vehicles)
    reservations = list(reservations)
    maintenance_blocks = list(maintenance_blocks)

    events: List[MaintenanceEvent] = []
    for vehicle in vehicles:
        for deadline_type in DeadlineType:
            if vehicle.deadline(deadline_type) is None:
                continue
            if is_maintenance_scheduled(vehicle.id, deadline_type, maintenance_blocks):
                continue
            events.extend(
                generate_deadline_events(vehicle, deadline_type, reservations, today)
            )

    by_id: Dict[int, Vehicle] = {v.id: v for v in vehicles}
    for block in maintenance_blocks:
        if not block.is_maintenance_block:
            continue
        vehicle = by_id.get(block.vehicle_id)
        if vehicle is None:
            logger.debug(
                "Skipping maintenance block %s for unknown vehicle %s",
                block.id,
                block.vehicle_id,
            )
            continue
        if block.start_date is None:
            logger.debug("Skipping maintenance block %s without start date", block.id)
            continue
        events.append(scheduled_maintenance_event(block, vehicle))

    return events


def events_for_date(
    events: Iterable[MaintenanceEvent],
    day: date,
    filters: Optional[EventFilters] = None,
) -> List[MaintenanceEvent]:
    """
    Get events that show on a calendar day.

    Multi-day scheduled maintenance only shows on its start and end days.
    """
    filters = filters or EventFilters()
    return [e for e in events if e.occurs_on(day) and filters.matches(e)]


def events_in_range(
    events: Iterable[MaintenanceEvent],
    start: date,
    end: date,
    filters: Optional[EventFilters] = None,
) -> List[MaintenanceEvent]:
    """Get events showing on any day from start to end (inclusive), by date."""
    events = list(events)
    found: Dict[str, MaintenanceEvent] = {}
    day = start
    while day <= end:
        for event in events_for_date(events, day, filters):
            found.setdefault(event.id, event)
        day += timedelta(days=1)
    return sorted(found.values(), key=lambda e: (e.date, e.id))


def expiring_soon(
    vehicles: Iterable[Vehicle],
    deadline_type: DeadlineType,
    today: Optional[date] = None,
    months: int = EXPIRING_SOON_MONTHS,
) -> List[Vehicle]:
    """Vehicles whose deadline falls after today and within the next N months."""
    today = today or date.today()
    horizon = today + relativedelta(months=months)
    result = []
    for vehicle in vehicles:
        deadline = vehicle.deadline(deadline_type)
        if deadline is not None and today < deadline <= horizon:
            result.append(vehicle)
    return sorted(result, key=lambda v: v.deadline(deadline_type))
