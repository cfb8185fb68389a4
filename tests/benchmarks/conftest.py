"""Benchmark fixtures — populated in-memory resources and admins."""

from __future__ import annotations

import pytest

from sqla_admin_api._admin import Admin
from sqla_admin_api.actions._base import Action
from sqla_admin_api.actions._predicate import has_role, is_owner
from sqla_admin_api.actions._registry import ActionRegistry
from sqla_admin_api.resource._base import BaseProperty
from sqla_admin_api.testing._actors import MockActor
from sqla_admin_api.testing._resources import InMemoryResource

N_USERS = 1_000
N_TICKETS = 5_000


def _approve(request, response, context):
    return {"record": context.record.to_json(context.current_admin)}


@pytest.fixture()
def bench_admin() -> Admin:
    users = InMemoryResource(
        "users",
        [
            {"id": i, "name": f"user-{i:05d}", "email": f"u{i}@example.com"}
            for i in range(N_USERS)
        ],
    )
    tickets = InMemoryResource(
        "tickets",
        [
            {"id": i, "subject": f"ticket {i}", "owner_id": i % N_USERS}
            for i in range(N_TICKETS)
        ],
        properties=[
            BaseProperty("id", type="number", is_id=True),
            BaseProperty("subject"),
            BaseProperty("owner_id", reference="users"),
        ],
    )
    registry = ActionRegistry()
    registry.register(
        "tickets",
        Action(
            name="approve",
            scope="record",
            handler=_approve,
            access=has_role("admin") | is_owner(),
        ),
    )
    return Admin([users, tickets], registry=registry)


@pytest.fixture()
def bench_actor() -> MockActor:
    return MockActor(id=7, role="viewer")
