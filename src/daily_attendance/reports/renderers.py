"""File renderers for the daily attendance export."""
from __future__ import annotations

import csv
import io
from dataclasses import astuple, fields
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..core.constants import REPORT_TITLE
from .model import ExportRow

PDF_MARGIN = 50
PDF_TITLE_FONT = ("Helvetica-Bold", 18)
PDF_BODY_FONT = ("Helvetica", 12)
PDF_LINE_HEIGHT = 18
PDF_TEXT_WIDTH = A4[0] - 2 * PDF_MARGIN


def export_header() -> list[str]:
    return [f.name for f in fields(ExportRow)]


def render_csv(rows: Sequence[ExportRow]) -> bytes:
    """Comma-separated text with a fixed header; strings quoted, numbers bare."""
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow(export_header())
    for row in rows:
        writer.writerow(astuple(row))
    return out.getvalue().encode("utf-8-sig")


def format_pdf_line(row: ExportRow) -> str:
    return f"{row.sn}. {row.name} | {row.email} | {row.phone} | {row.department} | {row.date} {row.time}"


def wrap_pdf_line(text: str) -> list[str]:
    """Split a report line so each piece fits between the page margins."""
    return simpleSplit(text, PDF_BODY_FONT[0], PDF_BODY_FONT[1], PDF_TEXT_WIDTH) or [""]


def render_pdf(rows: Sequence[ExportRow]) -> bytes:
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle(REPORT_TITLE)
    width, height = A4

    y = height - PDF_MARGIN
    c.setFont(*PDF_TITLE_FONT)
    c.drawCentredString(width / 2, y, REPORT_TITLE)
    y -= PDF_LINE_HEIGHT * 2

    c.setFont(*PDF_BODY_FONT)
    for row in rows:
        for line in wrap_pdf_line(format_pdf_line(row)):
            if y < PDF_MARGIN:
                c.showPage()
                c.setFont(*PDF_BODY_FONT)
                y = height - PDF_MARGIN
            c.drawString(PDF_MARGIN, y, line)
            y -= PDF_LINE_HEIGHT

    c.save()
    return buffer.getvalue()
