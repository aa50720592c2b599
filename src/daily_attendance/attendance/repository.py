from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert_if_absent(self, *, user_id: int, marked_at: datetime) -> bool:
        """Insert a record for ``marked_at``'s calendar day.

        Returns False (and writes nothing) when the user already has a record
        for that day.
        """
        raise NotImplementedError

    def get_report_rows_since(self, since: datetime) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
