# daily_report/services/ledger.py
"""
Daily reports, one row per (employee, date).

A report moves absent -> partial/complete and back and forth between partial and
complete as fields are filled or cleared. Writes are merges: a field missing from
the request keeps its stored value.
"""
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query, joinedload, contains_eager

from daily_report.core import policy
from daily_report.core.clock import utcnow, month_prefix, is_report_date, as_utc
from daily_report.core.enums import Role, ReportStatus
from daily_report.core.errors import Conflict, EmptySubmission, Forbidden, InvalidFilter, NotFound
from daily_report.core.logger import logger
from daily_report.db import models
from daily_report.schemas import report as report_schema
from daily_report.schemas.report import NARRATIVE_FIELDS
from daily_report.schemas.token import SessionClaims


def _filled(value: str | None) -> bool:
    # any non-empty text counts, whitespace included
    return bool(value)


def report_status(report) -> ReportStatus:
    filled = sum(1 for name in NARRATIVE_FIELDS if _filled(getattr(report, name)))
    if filled == len(NARRATIVE_FIELDS):
        return ReportStatus.COMPLETE
    if filled:
        return ReportStatus.PARTIAL
    return ReportStatus.EMPTY


def to_schema(report: models.Report) -> report_schema.Report:
    return report_schema.Report(
        id=report.id, user_id=report.user_id, date=report.date,
        morning_report=report.morning_report, afternoon_report=report.afternoon_report,
        daily_summary=report.daily_summary, remarks=report.remarks,
        submitted_at=as_utc(report.submitted_at), updated_at=as_utc(report.updated_at),
        status=report_status(report),
        employee_name=report.owner.name, employee_id=report.owner.employee_id,
    )


def _find(db: Session, owner_id: str, date: str) -> models.Report | None:
    return db.query(models.Report).filter(models.Report.user_id == owner_id, models.Report.date == date).first()


def _owner_exists(db: Session, owner_id: str) -> bool:
    return db.query(models.Principal.id).filter(models.Principal.id == owner_id).first() is not None


def _row_exists(db: Session, owner_id: str, date: str) -> bool:
    return db.query(models.Report.id).filter(models.Report.user_id == owner_id, models.Report.date == date).first() is not None


def _merge(report: models.Report, fields: dict) -> None:
    for name, value in fields.items():
        setattr(report, name, value)


def submit(db: Session, current: SessionClaims, date: str, fields: dict, today: str) -> models.Report:
    """
    Create or update the caller's report for `date`.

    `fields` holds only what the request actually sent. If a concurrent request
    inserts the same (owner, date) first, the unique constraint rejects our insert
    and the write is retried once as an update.
    """
    owner_id = current.principal_id
    policy.check_write_report(current.role, current.principal_id, owner_id, date, today)
    if not any(_filled(fields.get(name)) for name in NARRATIVE_FIELDS):
        raise EmptySubmission()

    for attempt in range(2):
        now = utcnow()
        report = _find(db, owner_id, date)
        if report is None:
            report = models.Report(user_id=owner_id, date=date, submitted_at=now, updated_at=now, **fields)
            db.add(report)
            created = True
        else:
            _merge(report, fields)
            report.updated_at = now
            created = False
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if not _owner_exists(db, owner_id):
                # account deleted while its token is still valid
                raise NotFound("Employee not found")
            if not _row_exists(db, owner_id, date):
                raise
            logger.warning("Concurrent submission for %s on %s, retrying as update", current.employee_id, date)
            continue
        db.refresh(report)
        logger.info("%s report %s for %s on %s", "Created" if created else "Updated", report.id, current.employee_id, date)
        return report

    raise Conflict("Report was modified concurrently, please retry.")


def get_report(db: Session, current: SessionClaims, report_id: str) -> models.Report:
    report = db.query(models.Report).options(joinedload(models.Report.owner)).filter(models.Report.id == report_id).first()
    if report is None:
        raise NotFound("Report not found")
    if not policy.can_read_report(current.role, current.principal_id, report.user_id):
        raise Forbidden()
    return report


def update_report(db: Session, current: SessionClaims, report_id: str, fields: dict, today: str) -> models.Report:
    report = db.query(models.Report).filter(models.Report.id == report_id).first()
    if report is None:
        raise NotFound("Report not found")
    policy.check_write_report(current.role, current.principal_id, report.user_id, report.date, today)

    merged = {name: fields.get(name, getattr(report, name)) for name in NARRATIVE_FIELDS}
    if not any(_filled(value) for value in merged.values()):
        raise EmptySubmission()

    _merge(report, fields)
    report.updated_at = utcnow()
    db.commit()
    db.refresh(report)
    logger.info("Updated report %s for %s", report.id, current.employee_id)
    return report


def _validate_filters(filters: report_schema.ReportFilters) -> None:
    if filters.date and (filters.date_from or filters.date_to):
        raise InvalidFilter()
    for value in (filters.date, filters.date_from, filters.date_to):
        if value and not is_report_date(value):
            raise InvalidFilter("Dates must be YYYY-MM-DD")


def _scoped_query(db: Session, current: SessionClaims, filters: report_schema.ReportFilters) -> Query:
    """
    Reports the caller may see, narrowed by the filters.

    A single `date` and a `date_from`/`date_to` range are mutually exclusive;
    asking for both is rejected instead of silently preferring one.
    """
    _validate_filters(filters)
    query = db.query(models.Report).join(models.Report.owner).options(contains_eager(models.Report.owner))

    if current.role == Role.EMPLOYEE:
        # employees only ever see their own rows; the name filter does not apply
        query = query.filter(models.Report.user_id == current.principal_id)
    elif current.role == Role.ADMIN:
        if filters.employee:
            query = query.filter(func.lower(models.Principal.name).contains(filters.employee.lower(), autoescape=True))
    else:
        raise Forbidden()

    if filters.date:
        query = query.filter(models.Report.date == filters.date)
    else:
        if filters.date_from:
            query = query.filter(models.Report.date >= filters.date_from)
        if filters.date_to:
            query = query.filter(models.Report.date <= filters.date_to)
    return query


def list_reports(db: Session, current: SessionClaims, filters: report_schema.ReportFilters) -> List[models.Report]:
    return _scoped_query(db, current, filters).order_by(models.Report.submitted_at.desc()).all()


def export_rows(db: Session, current: SessionClaims, filters: report_schema.ReportFilters) -> List[models.Report]:
    """Rows for the spreadsheet export: admin only, newest date first, then by name."""
    policy.check_manage_workforce(current.role)
    return (
        _scoped_query(db, current, filters)
        .order_by(models.Report.date.desc(), models.Principal.name.asc())
        .all()
    )


def workforce_stats(db: Session, today: str) -> report_schema.WorkforceStats:
    return report_schema.WorkforceStats(
        total_employees=db.query(models.Principal).filter(models.Principal.role == Role.EMPLOYEE.value).count(),
        total_reports=db.query(models.Report).count(),
        today_reports=db.query(models.Report).filter(models.Report.date == today).count(),
        month_reports=db.query(models.Report).filter(models.Report.date.like(f"{month_prefix(today)}-%")).count(),
    )


def personal_summary(db: Session, current: SessionClaims, today: str) -> report_schema.PersonalSummary:
    own = db.query(models.Report).filter(models.Report.user_id == current.principal_id)
    done_today = own.filter(models.Report.date == today).first() is not None
    return report_schema.PersonalSummary(
        employee_id=current.employee_id,
        total_reports=own.count(),
        month_reports=own.filter(models.Report.date.like(f"{month_prefix(today)}-%")).count(),
        today_status="Done" if done_today else "Pending",
    )
