# daily_report/api/v1/endpoints/reports.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from daily_report.core import security
from daily_report.core.clock import get_today
from daily_report.db import session
from daily_report.schemas import report as report_schema
from daily_report.schemas.token import SessionClaims
from daily_report.services import ledger

router = APIRouter()


def get_filters(
    employee: Optional[str] = None,
    date: Optional[str] = None,
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
) -> report_schema.ReportFilters:
    return report_schema.ReportFilters(employee=employee, date=date, date_from=date_from, date_to=date_to)


@router.get("", response_model=List[report_schema.Report])
def list_reports(
    filters: report_schema.ReportFilters = Depends(get_filters),
    db: Session = Depends(session.get_db),
    current: SessionClaims = Depends(security.get_current_session)
):
    """ Own reports for employees, everyone's for the admin. """
    return [ledger.to_schema(r) for r in ledger.list_reports(db, current, filters)]


@router.post("", response_model=report_schema.Report, status_code=status.HTTP_201_CREATED)
def submit_report(
    report_in: report_schema.ReportSubmit,
    db: Session = Depends(session.get_db),
    current: SessionClaims = Depends(security.get_current_session),
    today: str = Depends(get_today)
):
    """ Creates today's report or merges the sent fields into it. """
    report = ledger.submit(db, current, report_in.date, report_in.provided(), today)
    return ledger.to_schema(report)


@router.get("/summary", response_model=report_schema.PersonalSummary)
def read_summary(
    db: Session = Depends(session.get_db),
    current: SessionClaims = Depends(security.get_current_employee),
    today: str = Depends(get_today)
):
    return ledger.personal_summary(db, current, today)


@router.get("/{report_id}", response_model=report_schema.Report)
def read_report(
    report_id: str,
    db: Session = Depends(session.get_db),
    current: SessionClaims = Depends(security.get_current_session)
):
    return ledger.to_schema(ledger.get_report(db, current, report_id))


@router.put("/{report_id}", response_model=report_schema.Report)
def update_report(
    report_id: str,
    fields: report_schema.ReportFields,
    db: Session = Depends(session.get_db),
    current: SessionClaims = Depends(security.get_current_session),
    today: str = Depends(get_today)
):
    """ Edits a report; only the owner, only on the report's own day. """
    report = ledger.update_report(db, current, report_id, fields.provided(), today)
    return ledger.to_schema(report)
