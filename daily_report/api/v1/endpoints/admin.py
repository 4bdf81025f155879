# daily_report/api/v1/endpoints/admin.py
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from daily_report.api.v1.endpoints.reports import get_filters
from daily_report.core import security
from daily_report.core.clock import get_today
from daily_report.db import session
from daily_report.schemas import report as report_schema
from daily_report.schemas import user as user_schema
from daily_report.schemas.token import SessionClaims
from daily_report.services import export, ledger, workforce

router = APIRouter()

# --- Employees ---

@router.get("/employees", response_model=List[user_schema.Employee])
def get_all_employees(
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin)
):
    """ Lists every employee, by employee ID. """
    return workforce.list_employees(db)

@router.post("/employees", response_model=user_schema.Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: user_schema.EmployeeCreate,
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin)
):
    """ Creates an employee and assigns the next EMPxxx ID. """
    return workforce.create_employee(
        db, name=employee_in.name, email=employee_in.email,
        password=employee_in.password, date_of_birth=employee_in.date_of_birth
    )

@router.patch("/employees/{employee_id}", response_model=user_schema.Employee)
def update_employee(
    employee_id: str,
    updates: user_schema.EmployeeUpdate,
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin)
):
    """ Updates name, date of birth, password or active flag. """
    return workforce.update_employee(db, employee_id, updates.model_dump(exclude_unset=True))

@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_employee(
    employee_id: str,
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin)
):
    """ Deletes an employee together with all of their reports. """
    workforce.delete_employee(db, employee_id)
    return

# --- Reports ---

@router.get("/stats", response_model=report_schema.WorkforceStats)
def read_stats(
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin),
    today: str = Depends(get_today)
):
    return ledger.workforce_stats(db, today)

@router.get("/reports/export")
def export_reports(
    filters: report_schema.ReportFilters = Depends(get_filters),
    db: Session = Depends(session.get_db),
    admin: SessionClaims = Depends(security.get_current_admin),
    today: str = Depends(get_today)
):
    """ Downloads the filtered reports as an Excel workbook. """
    rows = ledger.export_rows(db, admin, filters)
    return StreamingResponse(
        export.render_xlsx(rows),
        media_type=export.XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export.export_filename(today)}"'}
    )
