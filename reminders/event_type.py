"""Event and deadline type enums."""

from enum import Enum


class DeadlineType(Enum):
    """The two reminder categories derived from vehicle deadline fields."""

    APK_INSPECTION = "apk_inspection"
    WARRANTY_SERVICE = "warranty_service"


class EventType(Enum):
    """Kinds of events shown on the maintenance calendar."""

    APK_DUE = "apk_due"
    APK_REMINDER_2M = "apk_reminder_2m"
    APK_REMINDER_1M = "apk_reminder_1m"
    WARRANTY_EXPIRING = "warranty_expiring"
    WARRANTY_REMINDER_2M = "warranty_reminder_2m"
    WARRANTY_REMINDER_1M = "warranty_reminder_1m"
    SCHEDULED_MAINTENANCE = "scheduled_maintenance"
    IN_SERVICE = "in_service"  # Reserved; not produced by the generator
