# daily_report/api/v1/endpoints/users.py
from fastapi import APIRouter, Depends

from daily_report.core import security
from daily_report.schemas.token import SessionClaims

router = APIRouter()

@router.get("/me", response_model=SessionClaims)
def read_user_me(current: SessionClaims = Depends(security.get_current_session)):
    """
    Claims carried by the caller's token. These are fixed when the token is
    issued, so they can lag behind later admin changes until it expires.
    """
    return current
