"""Tests for sqla_admin_api.testing._fixtures — pytest fixture functions."""

from __future__ import annotations

from sqla_admin_api.actions._base import Action
from sqla_admin_api.actions._registry import ActionRegistry, get_default_registry
from sqla_admin_api.config._config import AdminConfig


def _handler(request, response, context):
    return None


class TestAdminRegistryFixture:
    """admin_registry returns isolated ActionRegistry instances."""

    def test_returns_action_registry(self, admin_registry: ActionRegistry) -> None:
        assert isinstance(admin_registry, ActionRegistry)
        assert admin_registry is not get_default_registry()

    def test_isolated_between_tests_a(self, admin_registry: ActionRegistry) -> None:
        """Register an action in one test..."""
        admin_registry.register("orders", Action(name="approve", scope="record", handler=_handler))
        assert admin_registry.has_action("orders", "approve")

    def test_isolated_between_tests_b(self, admin_registry: ActionRegistry) -> None:
        """...and verify it does not leak to another test."""
        assert not admin_registry.has_action("orders", "approve")


class TestAdminConfigFixture:
    def test_default_config(self, admin_config: AdminConfig) -> None:
        assert admin_config == AdminConfig()


class TestIsolatedRegistryStateFixture:
    def test_yields_empty_default_registry(self, isolated_registry_state: ActionRegistry) -> None:
        assert isolated_registry_state is get_default_registry()
        assert isolated_registry_state.actions_for("orders") == {}
        isolated_registry_state.register(
            "orders", Action(name="approve", scope="record", handler=_handler)
        )

    def test_registration_did_not_leak(self) -> None:
        assert not get_default_registry().has_action("orders", "approve")
