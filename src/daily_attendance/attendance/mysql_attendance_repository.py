from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, marked_at, attendance_day
                FROM attendance
                WHERE user_id=%s AND marked_at >= %s
                ORDER BY attendance_id ASC
                LIMIT 1
                """,
                (user_id, since),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["attendance_id"]),
                user_id=int(r["user_id"]),
                marked_at=r["marked_at"],
                attendance_day=r["attendance_day"],
            )

    def insert_if_absent(self, *, user_id: int, marked_at: datetime) -> bool:
        # uq_attendance_user_day turns a concurrent duplicate into a no-op.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance(user_id, marked_at, attendance_day)
                VALUES(%s,%s,%s)
                """,
                (user_id, marked_at, marked_at.date()),
            )
            return cur.rowcount == 1

    def get_report_rows_since(self, since: datetime) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attendance_id, a.marked_at,
                       u.user_id, u.name, u.email, u.phone, u.department
                FROM attendance a
                JOIN users u ON u.user_id = a.user_id
                WHERE a.marked_at >= %s
                ORDER BY a.attendance_id ASC
                """,
                (since,),
            )
            rows = fetchall(cur)

            return [
                AttendanceReportRow(
                    attendance_id=int(r["attendance_id"]),
                    user_id=int(r["user_id"]),
                    name=r["name"],
                    email=r["email"],
                    phone=str(r["phone"]),
                    department=r["department"],
                    marked_at=r["marked_at"],
                )
                for r in rows
            ]
