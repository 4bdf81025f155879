# daily_report/services/identifiers.py
"""Sequential human-facing identifiers for employees (EMP001, EMP002, ...)."""
from sqlalchemy.orm import Session

from daily_report.core.enums import Role
from daily_report.db import models

EMPLOYEE_ID_PREFIX = "EMP"


def format_employee_id(counter: int) -> str:
    return f"{EMPLOYEE_ID_PREFIX}{counter:03d}"


def allocate_employee_id(db: Session) -> str:
    """
    Start from the employee count + 1 and step forward past any taken value.

    Optimistic only: two concurrent callers can get the same answer. The unique
    constraint on users.employee_id decides the winner and the loser re-allocates
    (see workforce.create_employee).
    """
    counter = db.query(models.Principal).filter(models.Principal.role == Role.EMPLOYEE.value).count() + 1
    candidate = format_employee_id(counter)
    while db.query(models.Principal.id).filter(models.Principal.employee_id == candidate).first() is not None:
        counter += 1
        candidate = format_employee_id(counter)
    return candidate
