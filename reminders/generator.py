"""Reminder event generation for one vehicle deadline."""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

from dateutil.relativedelta import relativedelta

from .calculations import shift_weekend
from .conflicts import detect_rental_conflict
from .event_type import DeadlineType, EventType
from .maintenance_event import MaintenanceEvent
from .priority import Priority
from .reservation import Reservation
from .vehicle import Vehicle

MOVED_TITLE = " (Moved from weekend)"
MOVED_DESCRIPTION = " (Moved from weekend to Monday)"
MOVED_PASSED_DESCRIPTION = " (Reminder was moved from weekend to Monday)"
MOVED_OVERDUE_DESCRIPTION = " (Reminder originally scheduled for weekend)"


@dataclass(frozen=True)
class ReminderTier:
    """An advance reminder stage, N months before the deadline."""

    months: int
    label: str
    priority: Priority


@dataclass(frozen=True)
class DeadlineWording:
    """Event types and phrasing for one deadline type."""

    due_type: EventType
    tier_types: Dict[int, EventType]
    due_priority: Priority
    reminder_title: str
    due_title: str
    overdue_text: str
    soon_text: str
    future_text: str
    due_text: str


TIERS = (
    ReminderTier(months=2, label="2 months", priority=Priority.LOW),
    ReminderTier(months=1, label="1 month", priority=Priority.MEDIUM),
)

WORDING = {
    DeadlineType.APK_INSPECTION: DeadlineWording(
        due_type=EventType.APK_DUE,
        tier_types={2: EventType.APK_REMINDER_2M, 1: EventType.APK_REMINDER_1M},
        due_priority=Priority.URGENT,
        reminder_title="APK Reminder",
        due_title="APK Inspection Due",
        overdue_text="APK inspection is now overdue for",
        soon_text="APK inspection due soon for",
        future_text="APK inspection due in {label} for",
        due_text="APK inspection required for",
    ),
    DeadlineType.WARRANTY_SERVICE: DeadlineWording(
        due_type=EventType.WARRANTY_EXPIRING,
        tier_types={
            2: EventType.WARRANTY_REMINDER_2M,
            1: EventType.WARRANTY_REMINDER_1M,
        },
        due_priority=Priority.HIGH,
        reminder_title="Warranty Reminder",
        due_title="Warranty Expiring",
        overdue_text="Warranty has expired for",
        soon_text="Warranty expiring soon for",
        future_text="Warranty expires in {label} for",
        due_text="Warranty expires for",
    ),
}


def event_id(event_type: EventType, vehicle_id: int) -> str:
    """Stable event id per vehicle, type and tier."""
    return f"{event_type.value}_{vehicle_id}"


def _reminder_event(
    vehicle: Vehicle,
    wording: DeadlineWording,
    tier: ReminderTier,
    due_date: date,
    today: date,
    reservations: List[Reservation],
) -> MaintenanceEvent:
    shift = shift_weekend(due_date - relativedelta(months=tier.months))
    is_overdue = due_date < today
    reminder_passed = shift.shifted_date < today
    base_title = f"{wording.reminder_title} ({tier.label})"
    subject = vehicle.name

    if is_overdue:
        title = f"{base_title} - OVERDUE"
        description = f"{wording.overdue_text} {subject}"
        if shift.was_shifted:
            description += MOVED_OVERDUE_DESCRIPTION
    else:
        title = base_title + (MOVED_TITLE if shift.was_shifted else "")
        if reminder_passed:
            description = f"{wording.soon_text} {subject}"
            if shift.was_shifted:
                description += MOVED_PASSED_DESCRIPTION
        else:
            description = f"{wording.future_text.format(label=tier.label)} {subject}"
            if shift.was_shifted:
                description += MOVED_DESCRIPTION

    event_type = wording.tier_types[tier.months]
    return MaintenanceEvent(
        id=event_id(event_type, vehicle.id),
        vehicle_id=vehicle.id,
        vehicle=vehicle,
        type=event_type,
        date=shift.shifted_date,
        title=title,
        description=description,
        priority=Priority.URGENT if is_overdue else tier.priority,
        needs_spare_vehicle=False,
        current_reservations=list(reservations),
        was_shifted=shift.was_shifted,
        due_date=due_date,
    )


def _due_event(
    vehicle: Vehicle,
    deadline_type: DeadlineType,
    wording: DeadlineWording,
    due_date: date,
    reservations: List[Reservation],
) -> MaintenanceEvent:
    shift = shift_weekend(due_date)
    title = wording.due_title
    description = f"{wording.due_text} {vehicle.name}"
    if shift.was_shifted:
        title += MOVED_TITLE
        description += MOVED_DESCRIPTION

    needs_spare = False
    upcoming = False
    # Only APK inspections take the vehicle off the road
    if deadline_type == DeadlineType.APK_INSPECTION:
        conflict = detect_rental_conflict(shift.shifted_date, reservations)
        needs_spare = conflict.needs_spare_vehicle
        upcoming = conflict.has_upcoming_rentals

    return MaintenanceEvent(
        id=event_id(wording.due_type, vehicle.id),
        vehicle_id=vehicle.id,
        vehicle=vehicle,
        type=wording.due_type,
        date=shift.shifted_date,
        title=title,
        description=description,
        priority=wording.due_priority,
        needs_spare_vehicle=needs_spare,
        has_upcoming_rentals=upcoming,
        current_reservations=list(reservations),
        was_shifted=shift.was_shifted,
        due_date=due_date,
    )


def generate_deadline_events(
    vehicle: Vehicle,
    deadline_type: DeadlineType,
    reservations: Iterable[Reservation],
    today: date,
) -> List[MaintenanceEvent]:
    """
    Build the 2-month, 1-month and due-date events for one vehicle deadline.

    Logic:
    - Reminder dates are the deadline minus 2 and 1 months, moved off weekends
    - Reminders are urgent once the deadline itself has passed, otherwise
      low (2 months) and medium (1 month)
    - The due event is urgent for APK and high for warranty; APK due events
      also carry rental conflict flags

    Args:
        reservations: All reservations; only this vehicle's are used
        today: Reference date for overdue classification

    Returns an empty list when the vehicle has no date for the deadline.
    """
    due_date = vehicle.deadline(deadline_type)
    if due_date is None:
        return []

    wording = WORDING[deadline_type]
    vehicle_reservations = [r for r in reservations if r.vehicle_id == vehicle.id]

    events = [
        _reminder_event(vehicle, wording, tier, due_date, today, vehicle_reservations)
        for tier in TIERS
    ]
    events.append(
        _due_event(vehicle, deadline_type, wording, due_date, vehicle_reservations)
    )
    return events
