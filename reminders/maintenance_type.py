"""
Maintenance type classification for maintenance block notes.

Maintenance blocks carry their type as a free-text prefix in the notes
field, formatted as "{maintenance_type}: {description}\\n{more notes}".
This module turns that text into a typed MaintenanceNote.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_TITLE = "Scheduled Maintenance"


class MaintenanceType(Enum):
    """Known maintenance type tokens and their display labels."""

    BREAKDOWN = ("breakdown", "Vehicle Breakdown")
    TIRE_REPLACEMENT = ("tire_replacement", "Tire Replacement")
    BRAKE_SERVICE = ("brake_service", "Brake Service")
    ENGINE_REPAIR = ("engine_repair", "Engine Repair")
    TRANSMISSION_REPAIR = ("transmission_repair", "Transmission Repair")
    ELECTRICAL_ISSUE = ("electrical_issue", "Electrical Issue")
    AIR_CONDITIONING = ("air_conditioning", "Air Conditioning")
    BATTERY_REPLACEMENT = ("battery_replacement", "Battery Replacement")
    OIL_CHANGE = ("oil_change", "Oil Change")
    REGULAR_MAINTENANCE = ("regular_maintenance", "Regular Maintenance")
    APK_INSPECTION = ("apk_inspection", "APK Inspection")
    WARRANTY_SERVICE = ("warranty_service", "Warranty Service")
    ACCIDENT_DAMAGE = ("accident_damage", "Accident Damage")
    OTHER = ("other", "Other Maintenance")

    def __init__(self, token: str, label: str):
        self.token = token
        self.label = label

    @classmethod
    def from_token(cls, token: str) -> Optional["MaintenanceType"]:
        for member in cls:
            if member.token == token:
                return member
        return None


@dataclass(frozen=True)
class MaintenanceNote:
    """Parsed maintenance block notes."""

    kind: Optional[MaintenanceType]
    token: str
    description: str

    @property
    def recognized(self) -> bool:
        return self.kind is not None

    @property
    def title(self) -> str:
        return self.kind.label if self.kind else DEFAULT_TITLE


def parse_maintenance_note(notes: Optional[str]) -> MaintenanceNote:
    """
    Split notes into the leading type token and the first description line.

    Missing notes default to regular maintenance. An unknown token is kept
    as-is with kind=None so callers fall back to the generic title.
    """
    parts = (notes or "").split(":")
    token = parts[0].strip() or MaintenanceType.REGULAR_MAINTENANCE.token
    description = ""
    if len(parts) > 1:
        description = parts[1].split("\n")[0].strip()
    return MaintenanceNote(
        kind=MaintenanceType.from_token(token),
        token=token,
        description=description,
    )
