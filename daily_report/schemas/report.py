# daily_report/schemas/report.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from daily_report.core.clock import is_report_date
from daily_report.core.enums import ReportStatus

NARRATIVE_FIELDS = ("morning_report", "afternoon_report", "daily_summary")
CONTENT_FIELDS = NARRATIVE_FIELDS + ("remarks",)


class ReportFields(BaseModel):
    """
    Partial report content. Only fields present in the request body are applied;
    an explicit empty string overwrites, an omitted field is left alone.
    """
    morning_report: Optional[str] = None
    afternoon_report: Optional[str] = None
    daily_summary: Optional[str] = None
    remarks: Optional[str] = None

    def provided(self) -> dict:
        return {name: getattr(self, name) for name in CONTENT_FIELDS if name in self.model_fields_set}


class ReportSubmit(ReportFields):
    date: str

    @field_validator("date")
    @classmethod
    def valid_date(cls, value: str) -> str:
        if not is_report_date(value):
            raise ValueError("date must be YYYY-MM-DD")
        return value


class ReportFilters(BaseModel):
    employee: Optional[str] = None
    date: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None


class Report(BaseModel):
    id: str
    user_id: str
    date: str
    morning_report: Optional[str] = None
    afternoon_report: Optional[str] = None
    daily_summary: Optional[str] = None
    remarks: Optional[str] = None
    submitted_at: datetime
    updated_at: datetime
    status: ReportStatus
    employee_name: str
    employee_id: str

    model_config = ConfigDict(from_attributes=True)


class WorkforceStats(BaseModel):
    total_employees: int
    total_reports: int
    today_reports: int
    month_reports: int


class PersonalSummary(BaseModel):
    employee_id: str
    total_reports: int
    month_reports: int
    today_status: str
