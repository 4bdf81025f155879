from __future__ import annotations

import pytest

from daily_report.core import security
from daily_report.core.errors import Conflict, NotFound
from daily_report.db import models
from daily_report.services import identifiers, workforce


def _make(db, n):
    return workforce.create_employee(db, f"Employee {n}", f"emp{n}@co", "pw")


def test_sequential_ids_without_gaps(db, admin):
    created = [_make(db, n).employee_id for n in range(1, 4)]
    assert created == ["EMP001", "EMP002", "EMP003"]
    assert admin.employee_id == "ADM001"


def test_allocator_skips_taken_values(db):
    first = _make(db, 1)
    _make(db, 2)
    workforce.delete_employee(db, first.id)

    # one employee left, count+1 = 2 is still taken by the survivor
    assert identifiers.allocate_employee_id(db) == "EMP003"
    assert _make(db, 3).employee_id == "EMP003"


def test_racing_allocation_retries_with_fresh_value(db, monkeypatch):
    _make(db, 1)
    real_allocate = identifiers.allocate_employee_id
    calls = []

    def racing_allocate(session):
        # the first answer was computed before another request committed EMP001
        calls.append(1)
        return "EMP001" if len(calls) == 1 else real_allocate(session)

    monkeypatch.setattr(identifiers, "allocate_employee_id", racing_allocate)
    second = _make(db, 2)

    assert len(calls) == 2
    assert second.employee_id == "EMP002"
    ids = [e.employee_id for e in workforce.list_employees(db)]
    assert ids == ["EMP001", "EMP002"]


def test_repeated_collision_surfaces_conflict(db, monkeypatch):
    _make(db, 1)
    monkeypatch.setattr(identifiers, "allocate_employee_id", lambda session: "EMP001")

    with pytest.raises(Conflict):
        _make(db, 2)


def test_duplicate_email_is_conflict(db, alice):
    with pytest.raises(Conflict):
        workforce.create_employee(db, "Other Alice", "alice@co", "pw")


def test_format_employee_id():
    assert identifiers.format_employee_id(7) == "EMP007"
    assert identifiers.format_employee_id(1234) == "EMP1234"


def test_update_employee_fields(db, alice):
    old_hash = alice.hashed_password
    updated = workforce.update_employee(db, alice.id, {
        "name": "Alice C.", "date_of_birth": "", "password": "new-pass", "is_active": False,
    })

    assert updated.name == "Alice C."
    assert updated.date_of_birth is None
    assert updated.is_active is False
    assert updated.hashed_password != old_hash
    assert security.verify_password("new-pass", updated.hashed_password)


def test_blank_password_keeps_existing_hash(db, alice):
    old_hash = alice.hashed_password
    updated = workforce.update_employee(db, alice.id, {"password": ""})
    assert updated.hashed_password == old_hash


def test_admin_is_not_a_workforce_target(db, admin):
    with pytest.raises(NotFound):
        workforce.update_employee(db, admin.id, {"name": "x"})
    with pytest.raises(NotFound):
        workforce.delete_employee(db, admin.id)


def test_password_hint_does_not_leak(db, admin, alice, bob):
    dob_hint = workforce.password_hint(db, "alice@co")
    assert dob_hint == workforce.HINT_DOB
    assert "01/01/1990" not in dob_hint

    assert workforce.password_hint(db, "bob@co") == workforce.HINT_GENERIC
    assert workforce.password_hint(db, "admin@company.com") == workforce.HINT_GENERIC
    assert workforce.password_hint(db, "ghost@co") == workforce.HINT_GENERIC


def test_seed_is_idempotent(db):
    employees = [{"name": "John Smith", "email": "john@company.com", "password": "emp123"}]
    workforce.seed(db, "admin@company.com", "admin123", employees)
    workforce.seed(db, "admin@company.com", "admin123", employees)

    assert db.query(models.Principal).count() == 2
    assert [e.employee_id for e in workforce.list_employees(db)] == ["EMP001"]
