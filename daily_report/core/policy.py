# daily_report/core/policy.py
# Access decisions. Pure functions: everything they need (role, owner, dates) is passed in.
from daily_report.core.enums import Role
from daily_report.core.errors import Forbidden, Locked


def can_manage_workforce(role: Role) -> bool:
    return role == Role.ADMIN


def can_read_report(role: Role, requester_id: str, owner_id: str) -> bool:
    if role == Role.ADMIN:
        return True
    return role == Role.EMPLOYEE and requester_id == owner_id


def can_write_report(role: Role, requester_id: str, owner_id: str, report_date: str, today: str) -> bool:
    """
    Only the owning employee, and only on the report's own calendar day.
    Admins read and export but never write.
    """
    return role == Role.EMPLOYEE and requester_id == owner_id and report_date == today


def check_write_report(role: Role, requester_id: str, owner_id: str, report_date: str, today: str) -> None:
    """Raise Forbidden (wrong role or owner) or Locked (not today) when writing is denied."""
    if can_write_report(role, requester_id, owner_id, report_date, today):
        return
    if role != Role.EMPLOYEE or requester_id != owner_id:
        raise Forbidden()
    raise Locked("You can only submit or edit reports for today.")


def check_manage_workforce(role: Role) -> None:
    if not can_manage_workforce(role):
        raise Forbidden()
