# daily_report/db/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import ( Column, String, ForeignKey, DateTime, Text, Boolean, CheckConstraint, UniqueConstraint )
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Principal(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=_new_id)
    employee_id = Column(String(20), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="EMPLOYEE")
    # DD/MM/YYYY, only consulted for EMPLOYEE logins
    date_of_birth = Column(String(10), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    __table_args__ = ( CheckConstraint("role IN ('ADMIN', 'EMPLOYEE')", name="ck_users_role"), )
    reports = relationship("Report", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)


class Report(Base):
    __tablename__ = "reports"
    id = Column(String(32), primary_key=True, default=_new_id)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # YYYY-MM-DD, compared as a string
    date = Column(String(10), nullable=False, index=True)
    morning_report = Column(Text, nullable=True)
    afternoon_report = Column(Text, nullable=True)
    daily_summary = Column(Text, nullable=True)
    remarks = Column(Text, nullable=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    __table_args__ = ( UniqueConstraint("user_id", "date", name="uq_reports_user_date"), )
    owner = relationship("Principal", back_populates="reports")
