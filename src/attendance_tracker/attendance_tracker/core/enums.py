from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Closed set of statuses that can be marked for a student on a day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class JobState(str, Enum):
    """Lifecycle of a background text-generation job."""

    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    CANCELLED = "cancelled"
