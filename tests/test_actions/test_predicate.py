"""Tests for actions/_predicate.py — composable access predicates."""

from __future__ import annotations

import pytest

from sqla_admin_api._admin import Admin
from sqla_admin_api.actions._predicate import (
    AccessPredicate,
    access_predicate,
    always_allow,
    always_deny,
    has_role,
    is_owner,
)
from sqla_admin_api.actions._registry import ActionRegistry
from sqla_admin_api.exceptions import ConfigurationError
from sqla_admin_api.resource._base import BaseRecord
from sqla_admin_api.testing._actors import MockActor, make_admin
from sqla_admin_api.testing._resources import InMemoryResource


def _order(owner_id: object) -> BaseRecord:
    orders = InMemoryResource("orders", [{"id": 1, "owner_id": owner_id}])
    Admin([orders], registry=ActionRegistry())
    return BaseRecord(orders.rows["1"], orders)


class TestAccessPredicate:
    def test_wraps_callable(self) -> None:
        p = AccessPredicate(lambda actor, record: actor.id == 1, name="first")
        assert p(MockActor(id=1)) is True
        assert p(MockActor(id=2)) is False

    def test_result_is_coerced_to_bool(self) -> None:
        p = AccessPredicate(lambda actor, record: actor.id)
        assert p(MockActor(id=5)) is True
        assert p(MockActor(id=0)) is False

    def test_record_defaults_to_none(self) -> None:
        seen = []
        p = AccessPredicate(lambda actor, record: seen.append(record) or True)
        p(MockActor(id=1))
        assert seen == [None]

    def test_and_composition(self) -> None:
        combined = always_allow & always_deny
        assert combined(MockActor(id=1)) is False
        assert combined.name == "(always_allow & always_deny)"

    def test_or_composition(self) -> None:
        combined = always_deny | always_allow
        assert combined(MockActor(id=1)) is True
        assert combined.name == "(always_deny | always_allow)"

    def test_not_composition(self) -> None:
        assert (~always_allow)(MockActor(id=1)) is False
        assert (~always_allow).name == "~always_allow"

    def test_and_short_circuits(self) -> None:
        calls = []
        tracked = AccessPredicate(lambda actor, record: calls.append(1) or True)
        (always_deny & tracked)(MockActor(id=1))
        assert calls == []

    def test_name_defaults_to_function_name(self) -> None:
        def can_export(actor, record):
            return True

        assert AccessPredicate(can_export).name == "can_export"

    def test_repr(self) -> None:
        assert repr(always_allow) == "AccessPredicate('always_allow')"


    def test_coroutine_function_rejected(self) -> None:
        async def deny(actor, record):
            return False

        with pytest.raises(ValueError, match="synchronous"):
            AccessPredicate(deny)

    def test_awaitable_result_does_not_grant(self) -> None:
        async def deny(actor, record):
            return False

        p = always_allow & AccessPredicate(lambda actor, record: deny(actor, record))
        with pytest.raises(ConfigurationError) as exc_info:
            p(make_admin())
        assert exc_info.value.source == "AccessPredicate"


class TestAccessPredicateDecorator:
    def test_creates_named_predicate(self) -> None:
        @access_predicate
        def is_active(actor, record):
            return record is not None and record.params.get("active") is True

        assert isinstance(is_active, AccessPredicate)
        assert is_active.name == "is_active"
        assert is_active(make_admin(), None) is False


class TestHasRole:
    def test_matching_role(self) -> None:
        assert has_role("admin")(make_admin()) is True

    def test_any_of_several_roles(self) -> None:
        editors = has_role("admin", "editor")
        assert editors(MockActor(id=1, role="editor")) is True
        assert editors(MockActor(id=1, role="viewer")) is False

    def test_missing_actor_denied(self) -> None:
        assert has_role("admin")(None) is False

    def test_actor_without_role_denied(self) -> None:
        class Bare:
            id = 1

        assert has_role("admin")(Bare()) is False

    def test_name_lists_roles(self) -> None:
        assert has_role("editor", "admin").name == "has_role(admin, editor)"


class TestIsOwner:
    def test_owner_allowed(self) -> None:
        assert is_owner()(MockActor(id=7), _order(7)) is True

    def test_compares_as_strings(self) -> None:
        assert is_owner()(MockActor(id="7"), _order(7)) is True

    def test_other_actor_denied(self) -> None:
        assert is_owner()(MockActor(id=8), _order(7)) is False

    def test_resource_scope_denied(self) -> None:
        assert is_owner()(MockActor(id=7), None) is False

    def test_missing_owner_denied(self) -> None:
        assert is_owner()(MockActor(id=7), _order(None)) is False

    def test_custom_field(self) -> None:
        assert is_owner("author_id")(MockActor(id=7), _order(7)) is False
        assert is_owner("author_id").name == "is_owner(author_id)"


class TestBuiltinPredicates:
    def test_always_allow(self) -> None:
        assert always_allow(None) is True

    def test_always_deny(self) -> None:
        assert always_deny(make_admin()) is False
