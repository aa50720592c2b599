from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceRecorder
from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportExporter
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    attendance_recorder: AttendanceRecorder
    auth_service: AuthService
    report_exporter: ReportExporter

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    attendance_recorder = AttendanceRecorder(attendance_repo)
    auth_service = AuthService(users_repo, attendance_recorder)
    report_exporter = ReportExporter(attendance_repo)

    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        attendance_recorder=attendance_recorder,
        auth_service=auth_service,
        report_exporter=report_exporter,
        conn=conn,
    )


def build_container(*, db_config: dict, pool_size: int = DEFAULT_POOL_SIZE) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
