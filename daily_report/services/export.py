# daily_report/services/export.py
# Renders already-authorized report rows into an .xlsx workbook. No business rules here.
import io
from datetime import datetime
from typing import Iterable
from zoneinfo import ZoneInfo

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from daily_report.core.clock import as_utc
from daily_report.core.config import settings
from daily_report.db import models

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MISSING = "-"

# (header, width)
COLUMNS = [
    ("Employee Name", 20),
    ("Employee ID", 12),
    ("Date", 14),
    ("Morning Report", 45),
    ("Afternoon Report", 45),
    ("Daily Summary", 45),
    ("Remarks", 25),
    ("Submission Time", 20),
]


def format_submitted_at(value: datetime, tz_name: str | None = None) -> str:
    return as_utc(value).astimezone(ZoneInfo(tz_name or settings.EXPORT_TIMEZONE)).strftime("%d %b %Y, %I:%M %p")


def report_row(report: models.Report) -> list:
    return [
        report.owner.name,
        report.owner.employee_id,
        report.date,
        report.morning_report or MISSING,
        report.afternoon_report or MISSING,
        report.daily_summary or MISSING,
        report.remarks or MISSING,
        format_submitted_at(report.submitted_at),
    ]


def build_workbook(reports: Iterable[models.Report]) -> Workbook:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Employee Reports"
    sheet.page_setup.orientation = "landscape"

    sheet.append([header for header, _ in COLUMNS])
    header_fill = PatternFill(fill_type="solid", fgColor="FF1E3A5F")
    for index, (_, width) in enumerate(COLUMNS, start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width
        cell = sheet.cell(row=1, column=index)
        cell.font = Font(bold=True, color="FFFFFFFF", size=11)
        cell.fill = header_fill
        cell.alignment = Alignment(vertical="center", horizontal="center", wrap_text=True)

    for report in reports:
        sheet.append(report_row(report))
        for cell in sheet[sheet.max_row]:
            cell.alignment = Alignment(vertical="top", wrap_text=True)

    sheet.freeze_panes = "A2"
    sheet.auto_filter.ref = f"A1:{get_column_letter(len(COLUMNS))}{max(sheet.max_row, 1)}"
    return workbook


def render_xlsx(reports: Iterable[models.Report]) -> io.BytesIO:
    output = io.BytesIO()
    build_workbook(reports).save(output)
    output.seek(0)
    return output


def export_filename(today: str) -> str:
    return f"employee-reports-{today}.xlsx"
