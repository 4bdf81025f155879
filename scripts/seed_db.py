#!/usr/bin/env python3
"""
Seed the database with the administrator and a few sample employees.
Safe to run repeatedly: existing emails are skipped.
"""
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from daily_report.db.session import SessionLocal, init_db
from daily_report.services import workforce

SAMPLE_EMPLOYEES = [
    {"name": "John Smith", "email": "john@company.com", "password": "emp123"},
    {"name": "Sarah Johnson", "email": "sarah@company.com", "password": "emp123"},
    {"name": "Mike Davis", "email": "mike@company.com", "password": "emp123"},
]


def main():
    init_db()
    admin_email = os.environ.get("SEED_ADMIN_EMAIL", "admin@company.com")
    admin_password = os.environ.get("SEED_ADMIN_PASSWORD", "admin123")

    print("Seeding database...")
    with SessionLocal() as db:
        admin = workforce.seed(db, admin_email, admin_password, SAMPLE_EMPLOYEES)
        print(f"  Admin: {admin.email} ({admin.employee_id})")
        for employee in workforce.list_employees(db):
            print(f"  Employee: {employee.email} ({employee.employee_id})")
    print("Seed complete.")


if __name__ == "__main__":
    main()
