from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportRow:
    """One line of the daily export.

    Field order is the column order of the CSV header.
    """

    sn: int
    name: str
    email: str
    phone: str
    department: str
    date: str
    time: str


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes
