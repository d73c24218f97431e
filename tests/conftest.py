"""Shared fixtures: an in-memory SQLite database and directory factories."""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

import pytest

from notifier.config import Settings, reset_settings_cache
from notifier.domain.entities import Department, Employee, NotificationRule, User
from notifier.infrastructure import database
from notifier.infrastructure.email import EmailResult
from notifier.infrastructure.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    NotificationRuleRepository,
    RoleRepository,
    UserRepository,
)


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table so each test starts from an empty database."""

    reset_settings_cache()
    database.initialize_database()
    yield
    database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret-key",
        email_send_delay_ms=0,
        client_url="https://app.example.com",
    )


@pytest.fixture()
def make_user(session):
    def _make_user(
        user_id: str,
        *,
        email: str | None = None,
        full_name: str | None = None,
        roles: tuple[str, ...] = (),
        is_active: bool = True,
    ) -> User:
        role_repository = RoleRepository(session)
        role_entities = [role_repository.get_or_create(name) for name in roles]
        return UserRepository(session).create(
            User(
                id=user_id,
                email=email if email is not None else f"{user_id}@example.com",
                phone=None,
                full_name=full_name or user_id.upper(),
                is_active=is_active,
                roles=role_entities,
            )
        )

    return _make_user


@pytest.fixture()
def make_employee(session):
    def _make_employee(
        user_id: str | None,
        *,
        reports_to: str | None = None,
        department_id: int | None = None,
        termination_date=None,
    ) -> Employee:
        return EmployeeRepository(session).create(
            Employee(
                id=0,
                user_id=user_id,
                reports_to=reports_to,
                department_id=department_id,
                termination_date=termination_date,
            )
        )

    return _make_employee


@pytest.fixture()
def make_department(session):
    def _make_department(name: str, manager_id: str | None = None) -> Department:
        return DepartmentRepository(session).create(
            Department(id=0, name=name, manager_id=manager_id)
        )

    return _make_department


@pytest.fixture()
def make_rule(session):
    def _make_rule(
        event_type: str,
        roles: list[str],
        *,
        channels: list[str] | None = None,
        category: str = "job",
        priority: str = "high",
        conditions=None,
        enabled: bool = True,
    ) -> NotificationRule:
        return NotificationRuleRepository(session).create(
            NotificationRule(
                id=None,
                event_type=event_type,
                category=category,
                priority=priority,
                recipient_roles=roles,
                channels=channels if channels is not None else ["in_app"],
                conditions=conditions,
                enabled=enabled,
            )
        )

    return _make_rule


class RecordingEmailSender:
    """Email sender double remembering every call."""

    def __init__(self, result: EmailResult | None = None):
        self.result = result or EmailResult(success=True, message_id="msg-1")
        self.calls: list[tuple[str, str, str]] = []

    def __call__(self, to: str, subject: str, html_body: str) -> EmailResult:
        self.calls.append((to, subject, html_body))
        return self.result


@pytest.fixture()
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    from notifier.infrastructure.security import create_access_token

    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}

    return _headers
