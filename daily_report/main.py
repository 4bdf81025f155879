# daily_report/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from daily_report.api.v1.api import api_router
from daily_report.api.v1.endpoints import auth
from daily_report.core.errors import DomainError
from daily_report.core.logger import logger
from daily_report.db.session import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(title="Daily Report API", lifespan=lifespan)

# Everything except login lives under /api/v1
app.include_router(api_router, prefix="/api/v1")
app.include_router(auth.router, prefix="/auth", tags=["Auth"])


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    logger.warning("%s %s -> %d %s: %s", request.method, request.url.path, exc.status_code, exc.reason, exc.message)
    if exc.status_code == 401:
        # one answer for unknown email, wrong secret, deactivated account or bad token
        return JSONResponse(
            status_code=401,
            content={"detail": exc.detail, "code": "unauthorized"},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.reason})


@app.get("/")
def read_root():
    return {"message": "Welcome to the Daily Report API"}
