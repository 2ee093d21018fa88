from __future__ import annotations

import re

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: str, field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid address")
    return value


def parse_status(value) -> AttendanceStatus:
    """Accept an AttendanceStatus or its string value (case-insensitive)."""
    if isinstance(value, AttendanceStatus):
        return value
    if isinstance(value, str):
        for status in AttendanceStatus:
            if status.value.lower() == value.strip().lower():
                return status
    raise ValidationError(f"Unknown attendance status: {value!r}")


def require_json_object(value) -> dict:
    """Request body as a dict; a missing body counts as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("Request body must be a JSON object")
    return value
