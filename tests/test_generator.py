#!/usr/bin/env python3
"""
Tests for reminder event generation.

Covers the 2-month / 1-month / due-date triad:
1. Dates and ids per tier
2. Priority escalation once the deadline itself has passed
3. Wording for overdue, passed and future reminders
4. Weekend shifting of every tier
5. Rental conflict flags on the APK due event only
"""
from datetime import date

import pytest

from reminders import (
    DeadlineType,
    EventType,
    Priority,
    Reservation,
    Vehicle,
    generate_deadline_events,
)


@pytest.fixture
def vehicle():
    return Vehicle(
        1,
        "AB-123-C",
        "Volkswagen",
        "Golf",
        fuel_type="petrol",
        apk_date="2024-05-01",
        warranty_end_date="2024-05-01",
    )


def by_type(events):
    return {e.type: e for e in events}


class TestApkTriad:
    """APK reminders for a deadline in the future."""

    def test_three_events(self, vehicle):
        events = generate_deadline_events(
            vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 15)
        )
        assert [e.type for e in events] == [
            EventType.APK_REMINDER_2M,
            EventType.APK_REMINDER_1M,
            EventType.APK_DUE,
        ]

    def test_dates_ids_and_priorities(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 15)
            )
        )
        two = events[EventType.APK_REMINDER_2M]
        one = events[EventType.APK_REMINDER_1M]
        due = events[EventType.APK_DUE]

        assert two.date == date(2024, 3, 1)
        assert one.date == date(2024, 4, 1)
        assert due.date == date(2024, 5, 1)
        assert two.id == "apk_reminder_2m_1"
        assert one.id == "apk_reminder_1m_1"
        assert due.id == "apk_due_1"
        assert two.priority == Priority.LOW
        assert one.priority == Priority.MEDIUM
        assert due.priority == Priority.URGENT
        assert all(e.due_date == date(2024, 5, 1) for e in events.values())

    def test_future_wording(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 15)
            )
        )
        assert events[EventType.APK_REMINDER_2M].title == "APK Reminder (2 months)"
        assert (
            events[EventType.APK_REMINDER_2M].description
            == "APK inspection due in 2 months for Volkswagen Golf"
        )
        assert (
            events[EventType.APK_REMINDER_1M].description
            == "APK inspection due in 1 month for Volkswagen Golf"
        )
        assert events[EventType.APK_DUE].title == "APK Inspection Due"
        assert (
            events[EventType.APK_DUE].description
            == "APK inspection required for Volkswagen Golf"
        )

    def test_reminder_passed_but_not_overdue(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 3, 15)
            )
        )
        two = events[EventType.APK_REMINDER_2M]
        one = events[EventType.APK_REMINDER_1M]
        assert two.description == "APK inspection due soon for Volkswagen Golf"
        assert two.priority == Priority.LOW
        assert one.description == "APK inspection due in 1 month for Volkswagen Golf"
        assert one.priority == Priority.MEDIUM

    def test_overdue_escalates_both_tiers(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 6, 1)
            )
        )
        for event_type, label in [
            (EventType.APK_REMINDER_2M, "2 months"),
            (EventType.APK_REMINDER_1M, "1 month"),
        ]:
            event = events[event_type]
            assert event.priority == Priority.URGENT
            assert event.title == f"APK Reminder ({label}) - OVERDUE"
            assert event.description == "APK inspection is now overdue for Volkswagen Golf"
        assert events[EventType.APK_DUE].priority == Priority.URGENT

    def test_due_today_is_not_overdue(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 5, 1)
            )
        )
        assert events[EventType.APK_REMINDER_2M].priority == Priority.LOW

    def test_no_deadline_no_events(self):
        bare = Vehicle(2, "XY-999-Z", "Fiat", "Panda")
        assert generate_deadline_events(bare, DeadlineType.APK_INSPECTION, [], date(2024, 1, 1)) == []


class TestWeekendShifting:
    """Deadline on a Sunday with a 1-month reminder on a Saturday."""

    @pytest.fixture
    def weekend_vehicle(self):
        return Vehicle(3, "GH-456-J", "Toyota", "Yaris", apk_date="2024-03-10")

    def test_due_moves_to_monday(self, weekend_vehicle):
        events = by_type(
            generate_deadline_events(
                weekend_vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 1)
            )
        )
        due = events[EventType.APK_DUE]
        assert due.date == date(2024, 3, 11)
        assert due.was_shifted
        assert due.due_date == date(2024, 3, 10)
        assert due.title == "APK Inspection Due (Moved from weekend)"
        assert due.description == (
            "APK inspection required for Toyota Yaris (Moved from weekend to Monday)"
        )

    def test_reminder_moves_to_monday(self, weekend_vehicle):
        events = by_type(
            generate_deadline_events(
                weekend_vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 1)
            )
        )
        two = events[EventType.APK_REMINDER_2M]
        one = events[EventType.APK_REMINDER_1M]
        assert two.date == date(2024, 1, 10)
        assert not two.was_shifted
        assert one.date == date(2024, 2, 12)
        assert one.title == "APK Reminder (1 month) (Moved from weekend)"
        assert one.description == (
            "APK inspection due in 1 month for Toyota Yaris (Moved from weekend to Monday)"
        )

    def test_shifted_reminder_already_passed(self, weekend_vehicle):
        events = by_type(
            generate_deadline_events(
                weekend_vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 3, 1)
            )
        )
        assert events[EventType.APK_REMINDER_1M].description == (
            "APK inspection due soon for Toyota Yaris "
            "(Reminder was moved from weekend to Monday)"
        )

    def test_shifted_reminder_overdue(self, weekend_vehicle):
        events = by_type(
            generate_deadline_events(
                weekend_vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 4, 1)
            )
        )
        one = events[EventType.APK_REMINDER_1M]
        assert one.title == "APK Reminder (1 month) - OVERDUE"
        assert one.description == (
            "APK inspection is now overdue for Toyota Yaris "
            "(Reminder originally scheduled for weekend)"
        )

    def test_no_event_on_weekend_all_year(self):
        """Every deadline date of a year produces weekday events in order."""
        day = date(2024, 1, 1)
        for offset in range(366):
            apk = date.fromordinal(day.toordinal() + offset)
            vehicle = Vehicle(4, "P", "B", "M", apk_date=apk)
            events = generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, [], date(2024, 1, 1)
            )
            assert len(events) == 3
            assert all(e.date.weekday() < 5 for e in events)
            two, one, due = events
            assert two.date < one.date <= due.date


class TestWarrantyTriad:
    """Warranty reminders."""

    def test_ids_titles_and_priorities(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.WARRANTY_SERVICE, [], date(2024, 1, 15)
            )
        )
        due = events[EventType.WARRANTY_EXPIRING]
        assert due.id == "warranty_expiring_1"
        assert due.title == "Warranty Expiring"
        assert due.description == "Warranty expires for Volkswagen Golf"
        assert due.priority == Priority.HIGH
        two = events[EventType.WARRANTY_REMINDER_2M]
        assert two.id == "warranty_reminder_2m_1"
        assert two.description == "Warranty expires in 2 months for Volkswagen Golf"
        assert two.priority == Priority.LOW

    def test_overdue_wording(self, vehicle):
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.WARRANTY_SERVICE, [], date(2024, 6, 1)
            )
        )
        one = events[EventType.WARRANTY_REMINDER_1M]
        assert one.title == "Warranty Reminder (1 month) - OVERDUE"
        assert one.description == "Warranty has expired for Volkswagen Golf"
        assert one.priority == Priority.URGENT

    def test_never_needs_spare_vehicle(self, vehicle):
        rentals = [Reservation(1, 1, "2024-04-01", "2024-06-01", status="active")]
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.WARRANTY_SERVICE, rentals, date(2024, 1, 15)
            )
        )
        assert not events[EventType.WARRANTY_EXPIRING].needs_spare_vehicle
        assert not events[EventType.WARRANTY_EXPIRING].has_upcoming_rentals


class TestApkRentalConflicts:
    """Conflict flags and reservation snapshots on the APK due event."""

    def test_active_rental_needs_spare(self, vehicle):
        rentals = [Reservation(1, 1, "2024-04-01", "2024-06-01", status="active")]
        events = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, rentals, date(2024, 1, 15)
            )
        )
        assert events[EventType.APK_DUE].needs_spare_vehicle
        assert not events[EventType.APK_REMINDER_1M].needs_spare_vehicle

    def test_upcoming_rental(self, vehicle):
        rentals = [Reservation(1, 1, "2024-05-10", "2024-05-20", status="confirmed")]
        due = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, rentals, date(2024, 1, 15)
            )
        )[EventType.APK_DUE]
        assert due.has_upcoming_rentals
        assert not due.needs_spare_vehicle

    def test_conflicts_use_shifted_due_date(self):
        """A rental starting on the Monday after a Sunday deadline overlaps."""
        vehicle = Vehicle(3, "GH-456-J", "Toyota", "Yaris", apk_date="2024-03-10")
        rentals = [Reservation(1, 3, "2024-03-11", "2024-03-15", status="confirmed")]
        due = by_type(
            generate_deadline_events(
                vehicle, DeadlineType.APK_INSPECTION, rentals, date(2024, 1, 1)
            )
        )[EventType.APK_DUE]
        assert due.needs_spare_vehicle

    def test_current_reservations_only_for_vehicle(self, vehicle):
        mine = Reservation(1, 1, "2023-01-01", "2023-01-05")
        other = Reservation(2, 99, "2024-04-01", "2024-06-01")
        events = generate_deadline_events(
            vehicle, DeadlineType.APK_INSPECTION, [mine, other], date(2024, 1, 15)
        )
        for event in events:
            assert event.current_reservations == [mine]
        assert not by_type(events)[EventType.APK_DUE].needs_spare_vehicle
