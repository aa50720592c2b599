from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from daily_attendance import create_app
from daily_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from daily_attendance.attendance.service import AttendanceRecorder
from daily_attendance.container import wire_services
from daily_attendance.core.exceptions import DuplicateEmailError
from daily_attendance.reports.service import ReportExporter
from daily_attendance.users.model import User
from daily_attendance.users.service import AuthService


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def __len__(self) -> int:
        return len(self._by_id)

    def stored(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._by_id.values():
            if user.email == email:
                return user
        return None

    def create_user(self, *, name, email, phone, department, pin_hash) -> int:
        if self.get_by_email(email):
            raise DuplicateEmailError("duplicate")
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            name=name,
            email=email,
            phone=phone,
            department=department,
            pin_hash=pin_hash,
        )
        return self._id


class InMemoryAttendance:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self.records: list[AttendanceRecord] = []

    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        for r in self.records:
            if r.user_id == user_id and r.marked_at >= since:
                return r
        return None

    def insert_if_absent(self, *, user_id: int, marked_at: datetime) -> bool:
        day = marked_at.date()
        if any(r.user_id == user_id and r.attendance_day == day for r in self.records):
            return False
        self.records.append(
            AttendanceRecord(
                attendance_id=len(self.records) + 1,
                user_id=user_id,
                marked_at=marked_at,
                attendance_day=day,
            )
        )
        return True

    def get_report_rows_since(self, since: datetime):
        out = []
        for r in self.records:
            if r.marked_at < since:
                continue
            u = self._users.stored(r.user_id)
            out.append(
                AttendanceReportRow(
                    attendance_id=r.attendance_id,
                    user_id=r.user_id,
                    name=u.name,
                    email=u.email,
                    phone=u.phone,
                    department=u.department,
                    marked_at=r.marked_at,
                )
            )
        return out


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 15, 30)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance_repo(users_repo) -> InMemoryAttendance:
    return InMemoryAttendance(users_repo)


@pytest.fixture
def recorder(attendance_repo, fixed_now) -> AttendanceRecorder:
    return AttendanceRecorder(attendance_repo, clock=lambda: fixed_now)


@pytest.fixture
def auth_service(users_repo, recorder) -> AuthService:
    return AuthService(users_repo, recorder)


@pytest.fixture
def exporter(attendance_repo, fixed_now) -> ReportExporter:
    return ReportExporter(attendance_repo, clock=lambda: fixed_now)


@pytest.fixture
def make_user(users_repo):
    def _make(name="Ann", email="a@x.com", phone="555", department="Eng") -> int:
        return users_repo.create_user(
            name=name, email=email, phone=phone, department=department, pin_hash="unused"
        )

    return _make


@pytest.fixture
def client(users_repo, attendance_repo):
    container = wire_services(users_repo=users_repo, attendance_repo=attendance_repo)
    app = create_app(container, settings_module="daily_attendance.config.testing")
    return app.test_client()
