from __future__ import annotations

import pytest

from daily_report.core import policy
from daily_report.core.enums import Role
from daily_report.core.errors import Forbidden, Locked

TODAY = "2026-03-10"


def test_only_admin_manages_workforce():
    assert policy.can_manage_workforce(Role.ADMIN)
    assert not policy.can_manage_workforce(Role.EMPLOYEE)


def test_read_rules():
    assert policy.can_read_report(Role.ADMIN, "admin", "u1")
    assert policy.can_read_report(Role.EMPLOYEE, "u1", "u1")
    assert not policy.can_read_report(Role.EMPLOYEE, "u2", "u1")


def test_owner_can_write_only_today():
    assert policy.can_write_report(Role.EMPLOYEE, "u1", "u1", TODAY, TODAY)
    for other_day in ("2026-03-09", "2026-03-11", "2025-03-10"):
        assert not policy.can_write_report(Role.EMPLOYEE, "u1", "u1", other_day, TODAY)


def test_admin_never_writes():
    assert not policy.can_write_report(Role.ADMIN, "admin", "admin", TODAY, TODAY)
    with pytest.raises(Forbidden):
        policy.check_write_report(Role.ADMIN, "admin", "u1", TODAY, TODAY)


def test_check_write_distinguishes_forbidden_and_locked():
    with pytest.raises(Forbidden):
        policy.check_write_report(Role.EMPLOYEE, "u2", "u1", TODAY, TODAY)
    with pytest.raises(Locked):
        policy.check_write_report(Role.EMPLOYEE, "u1", "u1", "2026-03-09", TODAY)
    policy.check_write_report(Role.EMPLOYEE, "u1", "u1", TODAY, TODAY)
