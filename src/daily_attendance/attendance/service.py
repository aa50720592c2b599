from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import now_local, start_of_day
from .model import MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceRecorder:
    """Use case: record at most one attendance event per user per calendar day."""

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        self._attendance = attendance
        self._clock = clock

    def mark_attendance(self, user_id: int, *, now: datetime | None = None) -> MarkResult:
        # Stored in a whole-second DATETIME column; must not round into the next day.
        now = (now or self._clock()).replace(microsecond=0)

        existing = self._attendance.get_for_user_since(user_id, start_of_day(now))
        if existing:
            logger.debug("User %s already marked at %s", user_id, existing.marked_at)
            return MarkResult(created=False)

        created = self._attendance.insert_if_absent(user_id=user_id, marked_at=now)
        if created:
            logger.info("Attendance marked for user %s", user_id)
        else:
            logger.info("Concurrent attendance insert ignored for user %s", user_id)
        return MarkResult(created=created)
