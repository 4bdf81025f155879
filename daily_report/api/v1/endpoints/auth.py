# daily_report/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from daily_report.db import session
from daily_report.core import security
from daily_report.core.logger import logger
from daily_report.schemas import token as token_schema
from daily_report.schemas import user as user_schema
from daily_report.services import credentials, workforce

router = APIRouter()

@router.post("/token", response_model=token_schema.Token)
def login(db: Session = Depends(session.get_db), form_data: OAuth2PasswordRequestForm = Depends()):
    # AuthFailure subclasses all render as the same 401 (see main.py)
    resolution = credentials.resolve(db, form_data.username, form_data.password)
    logger.info("Login %s (%s) via %s", resolution.principal.employee_id, resolution.role.value, resolution.proof.value)
    access_token = security.create_access_token(resolution.principal)
    return {"access_token": access_token, "token_type": "bearer"}

@router.post("/forgot-password", response_model=user_schema.PasswordHint)
def forgot_password(request: user_schema.PasswordHintRequest, db: Session = Depends(session.get_db)):
    """ Tells an employee how they can still sign in. Same answer shape for every email. """
    return {"message": workforce.password_hint(db, request.email)}
