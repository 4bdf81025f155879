# daily_report/core/enums.py
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class ProofMethod(str, Enum):
    """Which secret satisfied a login."""
    PASSWORD = "PASSWORD"
    FALLBACK_SECRET = "FALLBACK_SECRET"


class ReportStatus(str, Enum):
    """Derived from the narrative fields, never stored."""
    COMPLETE = "complete"
    PARTIAL = "partial"
    EMPTY = "empty"
