"""Pytest configuration and fixtures for storefront-admin.

Uses storefront_admin.main:app for HTTP tests. Repository and role
dependencies are overridden with in-memory fakes so API tests run without
Postgres; repository tests marked requires_db use the real engine.
"""

import os
import time
from decimal import Decimal

# Settings are validated on first get_settings(); JWT_SECRET is required.
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-storefront-admin")

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.api.v1.dependencies import (
    get_dashboard_repo,
    get_order_repo,
    get_product_repo,
    get_user_repo,
    get_user_role_repo,
)
from storefront_admin.application.dtos.records import (
    AccountRecord,
    CatalogItemRecord,
    OrderRecord,
)
from storefront_admin.core.config import get_settings
from storefront_admin.infrastructure.persistence import database
from storefront_admin.infrastructure.persistence.database import get_db
from storefront_admin.main import app

ADMIN_USER_ID = "11111111-1111-1111-1111-111111111111"
CUSTOMER_USER_ID = "22222222-2222-2222-2222-222222222222"
HOODIE_ID = "6f9a2c1e-4b7d-4e1a-9c3f-0d2b8e5a7c41"
JEANS_ID = "0b3e8d52-91c4-4f6a-a2d7-5e8c1f9b3a60"


class FakeProductRepo:
    def __init__(self, items: list[CatalogItemRecord]) -> None:
        self.items = items

    async def list_for_search(self) -> list[CatalogItemRecord]:
        return list(self.items)

    async def exists(self, entity_id: str) -> bool:
        return any(item.id == entity_id for item in self.items)


class FakeOrderRepo:
    def __init__(self, orders: list[OrderRecord]) -> None:
        self.orders = orders

    async def list_for_search(self) -> list[OrderRecord]:
        return list(self.orders)


class FakeUserRepo:
    def __init__(self, accounts: list[AccountRecord]) -> None:
        self.accounts = accounts

    async def list_for_search(self) -> list[AccountRecord]:
        return list(self.accounts)


class FakeUserRoleRepo:
    def __init__(self, grants: set[tuple[str, str]]) -> None:
        self.grants = grants

    async def has_role(self, user_id: str, role: str) -> bool:
        return (user_id, role) in self.grants


class FakeDashboardRepo:
    async def count_products(self) -> int:
        return 2

    async def count_orders(self) -> int:
        return 3

    async def count_users(self) -> int:
        return 4

    async def sum_revenue(self, status: str) -> Decimal:
        return Decimal("1499.50") if status == "delivered" else Decimal("0")


def make_token(sub: str, expires_in: int = 3600, **claims) -> str:
    """Sign a token the way the hosted auth service does (HS256, aud=authenticated)."""
    settings = get_settings()
    payload = {
        "sub": sub,
        "aud": settings.jwt_audience,
        "exp": int(time.time()) + expires_in,
        **claims,
    }
    return jwt.encode(
        payload,
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


@pytest.fixture
def catalog_items() -> list[CatalogItemRecord]:
    return [
        CatalogItemRecord(id=HOODIE_ID, title="Red Hoodie", slug="red-hoodie", brand="On3"),
        CatalogItemRecord(id=JEANS_ID, title="Blue Jeans", slug="blue-jeans", brand=None),
    ]


@pytest.fixture
def orders() -> list[OrderRecord]:
    return [
        OrderRecord(
            id="a1b2c3d4-0000-4000-8000-000000000001",
            payment_reference="order_Nx81",
            customer_email="jane@example.com",
            customer_full_name="Jane Doe",
        ),
    ]


@pytest.fixture
def accounts() -> list[AccountRecord]:
    return [
        AccountRecord(
            id="3c4d5e6f-0000-4000-8000-00000000aa01", email="a@x.com", full_name=None
        ),
        AccountRecord(
            id="3c4d5e6f-0000-4000-8000-00000000aa02",
            email="sam@example.com",
            full_name="Sam Rivers",
        ),
    ]


@pytest.fixture
def fake_repos(catalog_items, orders, accounts):
    """Override repository dependencies with in-memory fakes; admin is ADMIN_USER_ID."""
    app.dependency_overrides[get_db] = lambda: None
    app.dependency_overrides[get_product_repo] = lambda: FakeProductRepo(catalog_items)
    app.dependency_overrides[get_order_repo] = lambda: FakeOrderRepo(orders)
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepo(accounts)
    app.dependency_overrides[get_dashboard_repo] = lambda: FakeDashboardRepo()
    app.dependency_overrides[get_user_role_repo] = lambda: FakeUserRoleRepo(
        {(ADMIN_USER_ID, "admin"), (CUSTOMER_USER_ID, "user")}
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(ADMIN_USER_ID)}"}


@pytest.fixture
def customer_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(CUSTOMER_USER_ID)}"}


@pytest.fixture
def expired_admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(ADMIN_USER_ID, expires_in=-60)}"}


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after test.

    Skips (pytest.skip) when DATABASE_URL is not set. Use
    @pytest.mark.requires_db on tests that need this fixture; run without DB
    via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def non_uuid_subject_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token('service-account')}"}
