# daily_report/core/security.py
# Handles password hashing, JWT sessions, and the role-checking dependencies.
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone

from daily_report.core.config import settings
from daily_report.core.enums import Role
from daily_report.core.errors import InvalidToken, Forbidden
from daily_report.core import policy
from daily_report.db import models
from daily_report.schemas.token import SessionClaims

# --- Password Hashing ---
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")
def verify_password(plain: str, hashed: str) -> bool: return pwd_context.verify(plain, hashed)
def get_password_hash(pwd: str) -> str: return pwd_context.hash(pwd)

# --- JWT Creation ---
def create_access_token(principal: models.Principal, expires_delta: timedelta | None = None) -> str:
    """Sign every claim authorization needs, so requests never go back to the store for them."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": principal.id,
        "role": Role(principal.role).value,
        "employee_id": principal.employee_id,
        "name": principal.name,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> SessionClaims:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise InvalidToken()

    principal_id = payload.get("sub")
    role = payload.get("role")
    employee_id = payload.get("employee_id")
    if not principal_id or not employee_id or role not in (Role.ADMIN.value, Role.EMPLOYEE.value):
        raise InvalidToken()
    return SessionClaims(principal_id=principal_id, role=Role(role), employee_id=employee_id, name=payload.get("name"))

# --- Role-Checking Dependencies ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

def get_current_session(token: str = Depends(oauth2_scheme)) -> SessionClaims:
    return decode_access_token(token)

def get_current_admin(current: SessionClaims = Depends(get_current_session)) -> SessionClaims:
    policy.check_manage_workforce(current.role)
    return current

def get_current_employee(current: SessionClaims = Depends(get_current_session)) -> SessionClaims:
    if current.role != Role.EMPLOYEE:
        raise Forbidden("Requires employee role")
    return current
