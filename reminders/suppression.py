"""Reminder suppression once maintenance has been scheduled or done."""

import logging
from typing import Dict, Iterable, Tuple

from .event_type import DeadlineType
from .reservation import Reservation

logger = logging.getLogger(__name__)

# Plain substring matches, so "apk" also hits words that merely contain it.
SUPPRESSION_KEYWORDS: Dict[DeadlineType, Tuple[str, ...]] = {
    DeadlineType.APK_INSPECTION: ("apk_inspection", "apk", "keuring", "rdw"),
    DeadlineType.WARRANTY_SERVICE: (
        "warranty_service",
        "warranty",
        "garantie",
        "garanti",
        "recall",
    ),
}


def matches_deadline(notes, deadline_type: DeadlineType) -> bool:
    """Check if maintenance notes mention the given deadline type."""
    text = (notes or "").strip().lower()
    if not text:
        return False
    return any(keyword in text for keyword in SUPPRESSION_KEYWORDS[deadline_type])


def is_maintenance_scheduled(
    vehicle_id: int,
    deadline_type: DeadlineType,
    maintenance_blocks: Iterable[Reservation],
) -> bool:
    """
    Check if any maintenance block for the vehicle covers the deadline type.

    Block status is ignored: scheduled, in-progress and completed blocks
    all suppress reminders.
    """
    for block in maintenance_blocks:
        if block.vehicle_id != vehicle_id:
            continue
        if matches_deadline(block.notes, deadline_type):
            logger.debug(
                "Suppressing %s reminders for vehicle %s (block %s)",
                deadline_type.value,
                vehicle_id,
                block.id,
            )
            return True
    return False
