"""Shared test fixtures for sqla-admin-api tests."""

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from sqla_admin_api._admin import Admin
from sqla_admin_api.actions._registry import ActionRegistry
from sqla_admin_api.testing._resources import InMemoryResource
from tests.models import ORDER_ROWS, USER_ROWS, Base, Customer, Order

# ---------------------------------------------------------------------------
# In-memory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def registry() -> ActionRegistry:
    """Fresh registry per test to avoid cross-test pollution."""
    return ActionRegistry()


@pytest.fixture()
def users() -> InMemoryResource:
    return InMemoryResource("users", USER_ROWS)


@pytest.fixture()
def orders() -> InMemoryResource:
    return InMemoryResource("orders", ORDER_ROWS)


@pytest.fixture()
def admin(registry: ActionRegistry, users: InMemoryResource, orders: InMemoryResource) -> Admin:
    return Admin([users, orders], registry=registry)


# ---------------------------------------------------------------------------
# SQLAlchemy fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def async_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture()
async def sample_data(session_factory):
    """Seed customers and orders through an async session."""
    async with session_factory() as session:
        acme = Customer(id=1, name="Acme Corp", email="ops@acme.test")
        globex = Customer(id=2, name="Globex", email="it@globex.test")
        session.add_all([acme, globex])
        session.add_all(
            [
                Order(id=42, reference="ORD-42", status="pending", total=120, owner_id=7,
                      customer_id=1),
                Order(id=43, reference="ORD-43", status="shipped", total=80, paid=True,
                      owner_id=8, customer_id=2),
                Order(id=44, reference="ORD-44", status="pending", total=15, owner_id=7),
            ]
        )
        await session.commit()
    return {"customers": [1, 2], "orders": [42, 43, 44]}
