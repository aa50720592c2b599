from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one proof-of-presence event for a user on a calendar day."""

    attendance_id: int
    user_id: int
    marked_at: datetime
    attendance_day: date


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read model for exports: a record joined with its owner's identity."""

    attendance_id: int
    user_id: int
    name: str
    email: str
    phone: str
    department: str
    marked_at: datetime


@dataclass(frozen=True)
class MarkResult:
    created: bool
