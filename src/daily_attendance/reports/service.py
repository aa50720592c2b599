from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_clock_12h, format_iso_date, now_local, start_of_day
from ..core.constants import MSG_BAD_FORMAT, MSG_NO_DATA, SUPPORTED_EXPORT_FORMATS
from ..core.exceptions import InternalError, NoDataError, UnsupportedFormatError
from .model import ExportFile, ExportRow
from .renderers import render_csv, render_pdf

logger = logging.getLogger(__name__)

_MIMETYPES = {
    "csv": "text/csv",
    "pdf": "application/pdf",
}


def to_export_rows(records: Sequence[AttendanceReportRow]) -> list[ExportRow]:
    return [
        ExportRow(
            sn=index,
            name=r.name,
            email=r.email,
            phone=str(r.phone),
            department=r.department,
            date=format_iso_date(r.marked_at.date()),
            time=format_clock_12h(r.marked_at),
        )
        for index, r in enumerate(records, start=1)
    ]


class ReportExporter:
    """Use case: export today's attendance as a downloadable CSV or PDF."""

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        self._attendance = attendance
        self._clock = clock

    def export_attendance(self, export_format: Optional[str], *, now: datetime | None = None) -> ExportFile:
        now = now or self._clock()

        records = self._attendance.get_report_rows_since(start_of_day(now))
        if not records:
            raise NoDataError(MSG_NO_DATA)

        if export_format not in SUPPORTED_EXPORT_FORMATS:
            raise UnsupportedFormatError(MSG_BAD_FORMAT)

        rows = to_export_rows(records)
        try:
            content = render_csv(rows) if export_format == "csv" else render_pdf(rows)
        except Exception as exc:
            raise InternalError(f"Failed to render {export_format} export") from exc

        logger.info("Exported %d attendance rows as %s", len(rows), export_format)
        return ExportFile(
            filename=f"attendance-{format_iso_date(now.date())}.{export_format}",
            mimetype=_MIMETYPES[export_format],
            content=content,
        )
