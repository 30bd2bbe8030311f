"""Employee repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest

from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthentication,
    GetEmployeeForAuthenticationHandler,
)
from backoffice.domain.exceptions import ValidationException
from backoffice.infrastructure.persistence.repositories import EmployeeRepository
from backoffice.infrastructure.security.password import verify_password


@pytest.mark.requires_db
async def test_create_and_get_by_email_case_insensitive(db_session) -> None:
    repo = EmployeeRepository(db_session)
    created = await repo.create_employee(
        "Repo.Test@Shop.Example",
        "initial-pass",
        firstname="Repo",
        lastname="Test",
        roles=["ROLE_MOD_TAB_ADMINORDERS_READ"],
        default_tab="orders",
    )
    assert created.id
    assert created.email == "repo.test@shop.example"
    assert created.is_active is True

    found = await repo.get_by_email("REPO.TEST@shop.example")
    assert found is not None
    assert found.id == created.id
    assert found.roles == ("ROLE_MOD_TAB_ADMINORDERS_READ",)
    assert verify_password("initial-pass", found.hashed_password)


@pytest.mark.requires_db
async def test_get_by_email_not_found_returns_none(db_session) -> None:
    repo = EmployeeRepository(db_session)
    assert await repo.get_by_email("nobody-xyz@shop.example") is None


@pytest.mark.requires_db
async def test_create_employee_rejects_invalid_email(db_session) -> None:
    repo = EmployeeRepository(db_session)
    with pytest.raises(ValidationException):
        await repo.create_employee("not-an-email", "pw")


@pytest.mark.requires_db
async def test_create_employee_rejects_duplicate_email(db_session) -> None:
    repo = EmployeeRepository(db_session)
    await repo.create_employee("dup@shop.example", "pw")
    with pytest.raises(ValidationException):
        await repo.create_employee("DUP@shop.example", "pw")


@pytest.mark.requires_db
async def test_update_password(db_session) -> None:
    repo = EmployeeRepository(db_session)
    await repo.create_employee("reset@shop.example", "old-pass")

    updated = await repo.update_password("reset@shop.example", "new-pass")

    assert updated is not None
    assert verify_password("new-pass", updated.hashed_password)
    assert not verify_password("old-pass", updated.hashed_password)
    assert await repo.update_password("missing@shop.example", "x") is None


@pytest.mark.requires_db
async def test_lookup_handler_over_repository(db_session) -> None:
    repo = EmployeeRepository(db_session)
    created = await repo.create_employee("lookup@shop.example", "pw", default_tab="orders")
    handler = GetEmployeeForAuthenticationHandler(
        repo, admin_path_prefix="/admin", default_landing_tab="dashboard"
    )

    result = await handler.handle(GetEmployeeForAuthentication.from_email("lookup@shop.example"))

    assert result is not None
    assert result.employee_id == created.id
    assert result.roles == ("ROLE_EMPLOYEE",)
    assert result.default_page_url == "/admin/orders"
