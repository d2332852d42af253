#!/usr/bin/env python3
"""
CLI for the fleet maintenance calendar.

Commands:
  events       - List reminder and maintenance events in a date range
  day          - Show events for a single calendar day
  expiring     - List vehicles whose APK or warranty expires soon
  next-apk     - Calculate the next APK date for a vehicle
  complete-apk - Record a completed APK inspection
"""

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from reminders import (
    DeadlineType,
    EventFilters,
    EventType,
    MaintenanceEvent,
    calc_next_apk_date,
    events_for_date,
    events_in_range,
    expiring_soon,
    generate_events,
    load_fleet,
    save_apk_completion,
)

DATA_FILE_ENV = "FLEET_DATA_FILE"

# =============================================================================
# Formatting helpers
# =============================================================================


def format_date(value: Optional[date]) -> str:
    """Format a date for display."""
    return value.isoformat() if value is not None else "-"


def format_flags(event: MaintenanceEvent) -> str:
    """Short rental conflict marker for an event."""
    if event.needs_spare_vehicle:
        return "SPARE NEEDED"
    if event.has_upcoming_rentals:
        return "rental soon"
    return ""


def format_overdue(event: MaintenanceEvent, today: date) -> str:
    """Marker for events whose deadline has already passed."""
    if event.is_overdue(today):
        return f"overdue since {format_date(event.due_date)}"
    return ""


def format_period(event: MaintenanceEvent) -> str:
    """Date column: single date, or start..end for scheduled maintenance."""
    if event.start_date is not None and event.end_date is not None:
        return f"{format_date(event.start_date)}..{format_date(event.end_date)}"
    return format_date(event.date)


def truncate(text: Optional[str], max_len: int = 40) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def make_event_table(events: List[MaintenanceEvent]) -> List[List[str]]:
    """Convert events to table rows."""
    rows = []
    for event in events:
        rows.append(
            [
                format_period(event),
                event.vehicle.license_plate,
                event.vehicle.name,
                event.title,
                event.priority.value,
                format_flags(event),
            ]
        )
    return rows


def build_filters(args) -> EventFilters:
    event_type = EventType(args.event_type) if args.event_type else None
    return EventFilters(
        search=args.search,
        vehicle_type=args.vehicle_type,
        event_type=event_type,
    )


def parse_day(text: str) -> date:
    """argparse type for YYYY-MM-DD arguments."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date: {text} (use YYYY-MM-DD)")


EVENT_HEADERS = ["Date", "Plate", "Vehicle", "Event", "Priority", "Rentals"]

# =============================================================================
# Commands
# =============================================================================


def cmd_events(args):
    """List events in a date range."""
    fleet = load_fleet(args.data_file)
    today = args.today or date.today()
    start = args.start or today
    end = args.end or start + relativedelta(months=3)
    if end < start:
        print("Error: --to must not be before --from")
        return 1

    events = generate_events(
        fleet.vehicles, fleet.reservations, fleet.maintenance_blocks, today
    )
    selected = events_in_range(events, start, end, build_filters(args))

    print(f"Vehicles: {len(fleet.vehicles)}")
    print(f"Period: {start.isoformat()} to {end.isoformat()} (today {today.isoformat()})")
    print()
    if not selected:
        print("No events found.")
        return 0
    print(tabulate(make_event_table(selected), headers=EVENT_HEADERS, tablefmt="simple"))
    return 0


def cmd_day(args):
    """Show events for one day, with descriptions."""
    fleet = load_fleet(args.data_file)
    today = args.today or date.today()
    events = generate_events(
        fleet.vehicles, fleet.reservations, fleet.maintenance_blocks, today
    )
    selected = events_for_date(events, args.day, build_filters(args))

    print(f"{args.day.isoformat()} ({args.day.strftime('%A')})")
    print()
    if not selected:
        print("No events found.")
        return 0
    for event in sorted(selected, key=lambda e: (-e.priority.rank, e.id)):
        print(f"[{event.priority.value.upper()}] {event.title}")
        print(f"  {event.vehicle.license_plate} - {event.description}")
        markers = [
            m for m in (format_flags(event), format_overdue(event, today)) if m
        ]
        if markers:
            print(f"  {', '.join(markers)}")
    return 0


def cmd_expiring(args):
    """List vehicles with a deadline in the next months."""
    fleet = load_fleet(args.data_file)
    deadline_type = (
        DeadlineType.APK_INSPECTION
        if args.kind == "apk"
        else DeadlineType.WARRANTY_SERVICE
    )
    vehicles = expiring_soon(fleet.vehicles, deadline_type, args.today, args.months)
    if not vehicles:
        print("No vehicles found.")
        return 0
    rows = [
        [v.license_plate, v.name, format_date(v.deadline(deadline_type))]
        for v in vehicles
    ]
    print(tabulate(rows, headers=["Plate", "Vehicle", "Expires"], tablefmt="simple"))
    return 0


def cmd_next_apk(args):
    """Calculate the next APK date without saving."""
    fleet = load_fleet(args.data_file)
    try:
        vehicle = fleet.get_vehicle(args.vehicle_id)
    except KeyError:
        print(f"Error: Vehicle not found: {args.vehicle_id}")
        return 1
    completed = args.date or date.today()
    next_date = calc_next_apk_date(vehicle, completed)
    print(f"Vehicle: {vehicle.license_plate} ({vehicle.name})")
    print(f"Completed: {completed.isoformat()}")
    print(f"Next APK: {next_date.isoformat()}")
    return 0


def cmd_complete_apk(args):
    """Record a completed APK inspection and store the next due date."""
    fleet = load_fleet(args.data_file)
    try:
        vehicle = fleet.get_vehicle(args.vehicle_id)
    except KeyError:
        print(f"Error: Vehicle not found: {args.vehicle_id}")
        return 1
    completed = args.date or date.today()

    if args.dry_run:
        next_date = calc_next_apk_date(vehicle, completed)
        print("DRY RUN - would update:")
        print(f"  {vehicle.license_plate}: apkDate {format_date(vehicle.apk_date)} -> {next_date.isoformat()}")
        return 0

    next_date = save_apk_completion(args.data_file, vehicle.id, completed)
    print(f"Updated {vehicle.license_plate}: next APK {next_date.isoformat()}")
    return 0


# =============================================================================
# Main
# =============================================================================


def add_filter_arguments(parser):
    parser.add_argument(
        "--search",
        type=str,
        help="Filter on plate, brand, model or title (case-insensitive)",
    )
    parser.add_argument(
        "--vehicle-type",
        type=str,
        help="Only vehicles of this type",
    )
    parser.add_argument(
        "--event-type",
        choices=[t.value for t in EventType],
        help="Only events of this type",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Fleet maintenance calendar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -f fleet.yaml events
  %(prog)s -f fleet.yaml events --from 2025-01-01 --to 2025-03-31 --event-type apk_due
  %(prog)s -f fleet.yaml day 2025-02-03 --search golf
  %(prog)s -f fleet.yaml expiring apk
  %(prog)s -f fleet.yaml next-apk 12 --date 2025-02-03
  %(prog)s -f fleet.yaml complete-apk 12 --dry-run
""",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="data_file",
        type=Path,
        default=os.environ.get(DATA_FILE_ENV),
        help=f"Path to fleet YAML file (default: ${DATA_FILE_ENV})",
    )
    parser.add_argument(
        "--today",
        type=parse_day,
        help="Reference date for overdue checks (default: today)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped records and suppressed reminders",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    events_parser = subparsers.add_parser("events", help="List events in a date range")
    events_parser.add_argument(
        "--from",
        dest="start",
        type=parse_day,
        help="First day (default: today)",
    )
    events_parser.add_argument(
        "--to",
        dest="end",
        type=parse_day,
        help="Last day (default: 3 months after --from)",
    )
    add_filter_arguments(events_parser)

    day_parser = subparsers.add_parser("day", help="Show events for a single day")
    day_parser.add_argument("day", type=parse_day, help="Day (YYYY-MM-DD)")
    add_filter_arguments(day_parser)

    expiring_parser = subparsers.add_parser(
        "expiring", help="List vehicles whose APK or warranty expires soon"
    )
    expiring_parser.add_argument("kind", choices=["apk", "warranty"])
    expiring_parser.add_argument(
        "--months",
        type=int,
        default=2,
        help="Look-ahead in months (default: 2)",
    )

    next_apk_parser = subparsers.add_parser(
        "next-apk", help="Calculate the next APK date for a vehicle"
    )
    next_apk_parser.add_argument("vehicle_id", type=int)
    next_apk_parser.add_argument(
        "--date",
        type=parse_day,
        help="Inspection completion date (default: today)",
    )

    complete_parser = subparsers.add_parser(
        "complete-apk", help="Record a completed APK inspection"
    )
    complete_parser.add_argument("vehicle_id", type=int)
    complete_parser.add_argument(
        "--date",
        type=parse_day,
        help="Inspection completion date (default: today)",
    )
    complete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without saving",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.data_file is None:
        print(f"Error: No data file given and ${DATA_FILE_ENV} is not set")
        return 1
    data_file = Path(args.data_file)
    if not data_file.exists():
        print(f"Error: File not found: {data_file}")
        return 1
    args.data_file = data_file

    # Dispatch to command handler
    if args.command == "events":
        return cmd_events(args)
    elif args.command == "day":
        return cmd_day(args)
    elif args.command == "expiring":
        return cmd_expiring(args)
    elif args.command == "next-apk":
        return cmd_next_apk(args)
    elif args.command == "complete-apk":
        return cmd_complete_apk(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
