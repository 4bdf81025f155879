# daily_report/core/config.py
from pydantic_settings import BaseSettings; from dotenv import load_dotenv
load_dotenv()
class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./daily_reports.db"
    JWT_SECRET_KEY: str; JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    # "today" for the edit lock is always taken in this zone
    REPORT_TIMEZONE: str = "UTC"
    EXPORT_TIMEZONE: str = "Asia/Kolkata"
    ADMIN_EMPLOYEE_ID: str = "ADM001"
    LOG_LEVEL: str = "INFO"; LOG_FILE: str | None = None
settings = Settings()
