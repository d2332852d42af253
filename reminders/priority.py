"""Priority enum for maintenance event urgency."""

from enum import Enum


class Priority(Enum):
    """Event priority levels. Higher rank = more urgent."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return list(Priority).index(self)
