from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from daily_attendance.core.exceptions import InternalError, NoDataError, UnsupportedFormatError
from daily_attendance.reports import service as report_service
from daily_attendance.reports.service import to_export_rows


@pytest.fixture
def three_marked(attendance_repo, make_user, fixed_now):
    for i, (name, email) in enumerate([("Ann", "a@x.com"), ("Bob", "b@x.com"), ("Cy", "c@x.com")]):
        user_id = make_user(name=name, email=email)
        attendance_repo.insert_if_absent(user_id=user_id, marked_at=fixed_now + timedelta(minutes=i))


def test_no_records_today_ignores_history(exporter, attendance_repo, make_user, fixed_now):
    user_id = make_user()
    attendance_repo.insert_if_absent(user_id=user_id, marked_at=fixed_now - timedelta(days=1))

    with pytest.raises(NoDataError):
        exporter.export_attendance("csv")


def test_no_records_wins_over_bad_format(exporter):
    with pytest.raises(NoDataError):
        exporter.export_attendance("xml")


@pytest.mark.parametrize("fmt", ["xml", None, "", "CSV"])
def test_unsupported_format_with_records(exporter, three_marked, fmt):
    with pytest.raises(UnsupportedFormatError):
        exporter.export_attendance(fmt)


def test_csv_has_header_plus_one_line_per_record(exporter, three_marked):
    export = exporter.export_attendance("csv")

    lines = export.content.decode("utf-8-sig").splitlines()
    assert len(lines) == 4
    assert lines[0] == '"sn","name","email","phone","department","date","time"'
    assert lines[1] == '1,"Ann","a@x.com","555","Eng","2026-02-02","09:15:30 AM"'
    assert [line.split(",")[0] for line in lines[1:]] == ["1", "2", "3"]
    assert [line.split(",")[1] for line in lines[1:]] == ['"Ann"', '"Bob"', '"Cy"']


def test_csv_file_metadata(exporter, three_marked):
    export = exporter.export_attendance("csv")

    assert export.filename == "attendance-2026-02-02.csv"
    assert export.mimetype == "text/csv"


def test_pdf_export(exporter, three_marked):
    export = exporter.export_attendance("pdf")

    assert export.content.startswith(b"%PDF")
    assert export.filename == "attendance-2026-02-02.pdf"
    assert export.mimetype == "application/pdf"


def test_export_rows_format_date_and_12h_time(attendance_repo, make_user):
    user_id = make_user(phone="0123")
    attendance_repo.insert_if_absent(user_id=user_id, marked_at=datetime(2026, 2, 2, 15, 4, 5))

    rows = to_export_rows(attendance_repo.get_report_rows_since(datetime(2026, 2, 2)))

    assert rows[0].sn == 1
    assert rows[0].phone == "0123"
    assert rows[0].date == "2026-02-02"
    assert rows[0].time == "03:04:05 PM"


def test_render_failure_becomes_internal_error(exporter, three_marked, monkeypatch):
    def broken(rows):
        raise RuntimeError("font missing")

    monkeypatch.setattr(report_service, "render_pdf", broken)

    with pytest.raises(InternalError):
        exporter.export_attendance("pdf")
