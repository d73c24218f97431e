"""Tests for the SQL-backed user directory consulted during dispatch."""

from __future__ import annotations

from datetime import date

from notifier.infrastructure.directory import UserDirectory


def test_role_lookup_is_case_insensitive_and_skips_inactive(session, make_user):
    make_user("m1", roles=("Manager",))
    make_user("m2", roles=("Manager", "Executive"))
    make_user("m3", roles=("Manager",), is_active=False)

    directory = UserDirectory(session)

    assert sorted(directory.list_active_users_by_role("manager")) == ["m1", "m2"]
    assert directory.list_active_users_by_role("Executive") == ["m2"]
    assert directory.list_active_users_by_role("Client") == []


def test_supervisor_and_employee_lookups(session, make_user, make_employee):
    make_user("tech")
    make_user("boss")
    make_user("retired")
    employee = make_employee("tech", reports_to="boss")
    make_employee("retired", termination_date=date(2021, 5, 1))

    directory = UserDirectory(session)

    assert directory.get_direct_supervisor("tech") == "boss"
    assert directory.get_direct_supervisor("boss") is None
    assert directory.get_employee_by_id(str(employee.id)).user_id == "tech"
    assert directory.get_employee_by_id("not-a-number") is None
    assert [e.user_id for e in directory.list_active_employees()] == ["tech"]


def test_department_manager_and_batch_users(session, make_user, make_department):
    make_user("head", email="head@example.com")
    make_user("idle", is_active=False)
    department = make_department("Service", manager_id="head")

    directory = UserDirectory(session)

    assert directory.get_department_manager(department.id) == "head"
    assert directory.get_department_manager(9999) is None
    users = directory.get_users_by_ids(["head", "idle", "ghost"])
    assert sorted(users) == ["head", "idle"]
    assert users["head"].email == "head@example.com"
