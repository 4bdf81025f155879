# daily_report/schemas/token.py
from pydantic import BaseModel

from daily_report.core.enums import Role


class Token(BaseModel):
    access_token: str
    token_type: str


class SessionClaims(BaseModel):
    """What a validated token tells us about the caller. Fixed at issuance."""
    principal_id: str
    role: Role
    employee_id: str
    name: str | None = None
