# daily_report/schemas/user.py
import re
from datetime import datetime, date as date_type
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from daily_report.core.enums import Role

DOB_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def _check_dob(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        # empty clears the fallback secret
        return ""
    if not DOB_PATTERN.match(value):
        raise ValueError("date_of_birth must be DD/MM/YYYY")
    day, month, year = (int(part) for part in value.split("/"))
    date_type(year, month, day)  # raises ValueError for 31/02/...
    return value


class EmployeeBase(BaseModel):
    name: str
    email: str

    @field_validator("email")
    @classmethod
    def email_has_at(cls, value: str) -> str:
        # Stored exactly as given: the login match is case-sensitive
        if "@" not in value or value != value.strip():
            raise ValueError("email must be an address without surrounding spaces")
        return value


class EmployeeCreate(EmployeeBase):
    password: str
    date_of_birth: Optional[str] = None

    @field_validator("name", "password")
    @classmethod
    def required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Name, Email, and Password are required.")
        return value

    @field_validator("date_of_birth")
    @classmethod
    def valid_dob(cls, value: Optional[str]) -> Optional[str]:
        return _check_dob(value)


class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    date_of_birth: Optional[str] = None
    password: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("date_of_birth")
    @classmethod
    def valid_dob(cls, value: Optional[str]) -> Optional[str]:
        return _check_dob(value)


class Employee(EmployeeBase):
    id: str
    employee_id: str
    role: Role
    date_of_birth: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PasswordHintRequest(BaseModel):
    email: str


class PasswordHint(BaseModel):
    message: str
