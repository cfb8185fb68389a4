"""Tests for sqla_admin_api.testing._actors — MockActor and factory functions."""

from __future__ import annotations

import dataclasses

import pytest

from sqla_admin_api._types import ActorLike
from sqla_admin_api._admin import Admin
from sqla_admin_api.actions._predicate import is_owner
from sqla_admin_api.actions._registry import ActionRegistry
from sqla_admin_api.resource._base import BaseRecord
from sqla_admin_api.testing._actors import (
    MockActor,
    make_admin,
    make_anonymous,
    make_owner,
    make_user,
)
from sqla_admin_api.testing._resources import InMemoryResource
from tests.models import ORDER_ROWS


class TestMockActor:
    """MockActor satisfies ActorLike and has correct defaults."""

    def test_satisfies_actor_like_protocol(self) -> None:
        assert isinstance(MockActor(id=1), ActorLike)

    def test_default_role_is_viewer(self) -> None:
        assert MockActor(id=1).role == "viewer"

    def test_with_string_id(self) -> None:
        actor = MockActor(id="user-abc")
        assert actor.id == "user-abc"
        assert isinstance(actor, ActorLike)

    def test_is_frozen_immutable(self) -> None:
        actor = MockActor(id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            actor.id = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert MockActor(id=1, role="admin", email="admin1@example.com") == make_admin(1)


class TestFactories:
    def test_make_admin(self) -> None:
        actor = make_admin()
        assert actor.id == 1
        assert actor.role == "admin"
        assert actor.email == "admin1@example.com"

    def test_make_admin_custom_id(self) -> None:
        assert make_admin(id=42).id == 42

    def test_make_user(self) -> None:
        actor = make_user(id=3, role="editor")
        assert actor.id == 3
        assert actor.role == "editor"

    def test_make_user_defaults(self) -> None:
        assert make_user() == MockActor(id=1, role="viewer")

    def test_make_anonymous(self) -> None:
        actor = make_anonymous()
        assert actor.id == 0
        assert actor.role == "anonymous"


def _order(row: dict) -> BaseRecord:
    orders = InMemoryResource("orders", ORDER_ROWS)
    Admin([orders], registry=ActionRegistry())
    return BaseRecord(row, orders)


class TestMakeOwner:
    def test_owns_the_record(self) -> None:
        order = _order(ORDER_ROWS[0])
        owner = make_owner(order)
        assert owner == MockActor(id=7, role="viewer")
        assert is_owner()(owner, order) is True
        assert is_owner()(owner, _order(ORDER_ROWS[1])) is False

    def test_custom_field_and_role(self) -> None:
        order = _order({"id": 50, "author_id": "u9"})
        actor = make_owner(order, field="author_id", role="editor")
        assert actor.id == "u9"
        assert actor.role == "editor"

    def test_record_without_owner(self) -> None:
        with pytest.raises(KeyError, match="owner_id"):
            make_owner(_order({"id": 51}))
