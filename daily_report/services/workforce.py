# daily_report/services/workforce.py
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from daily_report.core import security
from daily_report.core.config import settings
from daily_report.core.enums import Role
from daily_report.core.errors import Conflict, NotFound
from daily_report.core.logger import logger
from daily_report.db import models
from daily_report.services import identifiers

HINT_GENERIC = "If an employee account exists for this email, please contact your administrator to reset your password."
HINT_DOB = (
    "You can log in using your Date of Birth in DD/MM/YYYY format. "
    "Please contact admin if you need further help."
)


def _email_taken(db: Session, email: str) -> bool:
    return db.query(models.Principal.id).filter(models.Principal.email == email).first() is not None


def _get_employee(db: Session, principal_id: str) -> models.Principal:
    principal = db.query(models.Principal).filter(
        models.Principal.id == principal_id,
        models.Principal.role == Role.EMPLOYEE.value,
    ).first()
    if principal is None:
        raise NotFound("Employee not found")
    return principal


def list_employees(db: Session) -> List[models.Principal]:
    return (
        db.query(models.Principal)
        .filter(models.Principal.role == Role.EMPLOYEE.value)
        .order_by(models.Principal.employee_id, models.Principal.created_at)
        .all()
    )


def create_employee(
    db: Session,
    name: str,
    email: str,
    password: str,
    date_of_birth: str | None = None,
) -> models.Principal:
    """
    Create an EMPLOYEE with the next free EMPxxx identifier.

    If the insert loses a race on employee_id, allocate again once from the
    now-committed state; a second failure is reported as Conflict.
    """
    if _email_taken(db, email):
        raise Conflict("An employee with this email already exists.")

    hashed = security.get_password_hash(password)
    for attempt in range(2):
        employee_id = identifiers.allocate_employee_id(db)
        principal = models.Principal(
            name=name, email=email, hashed_password=hashed,
            role=Role.EMPLOYEE.value, employee_id=employee_id,
            date_of_birth=date_of_birth or None,
        )
        db.add(principal)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if _email_taken(db, email):
                raise Conflict("An employee with this email already exists.")
            logger.warning("Employee id %s already taken (attempt %d), re-allocating", employee_id, attempt + 1)
            continue
        db.refresh(principal)
        logger.info("Created employee %s (%s)", principal.employee_id, principal.email)
        return principal

    raise Conflict("Could not allocate a unique employee ID, please retry.")


def update_employee(db: Session, principal_id: str, fields: dict) -> models.Principal:
    """Apply name / date_of_birth / password / is_active in one commit."""
    principal = _get_employee(db, principal_id)

    if "name" in fields and fields["name"] is not None:
        principal.name = fields["name"]
    if "date_of_birth" in fields:
        principal.date_of_birth = fields["date_of_birth"] or None
    if fields.get("password"):
        principal.hashed_password = security.get_password_hash(fields["password"])
    if "is_active" in fields and fields["is_active"] is not None:
        principal.is_active = fields["is_active"]

    db.commit()
    db.refresh(principal)
    logger.info("Updated employee %s (fields: %s)", principal.employee_id, ", ".join(sorted(fields)))
    return principal


def delete_employee(db: Session, principal_id: str) -> None:
    """Removes the employee and, by cascade, every report they own."""
    principal = _get_employee(db, principal_id)
    employee_id = principal.employee_id
    db.delete(principal)
    db.commit()
    logger.info("Deleted employee %s and their reports", employee_id)


def password_hint(db: Session, email: str) -> str:
    """
    Forgot-password helper. Never returns the stored date of birth, and answers
    unknown emails and admin accounts with the same generic text.
    """
    principal = db.query(models.Principal).filter(models.Principal.email == email).first()
    if (
        principal is not None
        and principal.role == Role.EMPLOYEE
        and principal.is_active
        and principal.date_of_birth
    ):
        return HINT_DOB
    return HINT_GENERIC


def seed(
    db: Session,
    admin_email: str,
    admin_password: str,
    employees: list[dict] | None = None,
) -> models.Principal:
    """
    Idempotently create the administrator and, optionally, a set of employees.
    Existing emails are left untouched.
    """
    admin = db.query(models.Principal).filter(models.Principal.role == Role.ADMIN.value).first()
    if admin is None:
        admin = models.Principal(
            name="Admin User", email=admin_email,
            hashed_password=security.get_password_hash(admin_password),
            role=Role.ADMIN.value, employee_id=settings.ADMIN_EMPLOYEE_ID,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info("Seeded administrator %s", admin.email)

    for entry in employees or []:
        if _email_taken(db, entry["email"]):
            continue
        create_employee(db, entry["name"], entry["email"], entry["password"], entry.get("date_of_birth"))
    return admin
