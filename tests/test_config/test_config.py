"""Tests for AdminConfig."""

from __future__ import annotations

import dataclasses

import pytest

from sqla_admin_api.config import AdminConfig


def _dashboard(request, response, context):
    return {}


class TestDefaults:
    def test_default_values(self) -> None:
        config = AdminConfig()
        assert config.root_path == "/admin"
        assert config.dashboard_handler is None
        assert config.log_action_decisions is False
        assert config.default_per_page == 10
        assert config.max_per_page == 500

    def test_frozen(self) -> None:
        config = AdminConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.root_path = "/other"  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize("root_path", ["admin", "/admin/", ""])
    def test_invalid_root_path(self, root_path: str) -> None:
        with pytest.raises(ValueError, match="root_path"):
            AdminConfig(root_path=root_path)

    def test_bare_slash_root_path(self) -> None:
        assert AdminConfig(root_path="/").root_path == "/"

    def test_dashboard_handler_must_be_callable(self) -> None:
        with pytest.raises(ValueError, match="dashboard_handler"):
            AdminConfig(dashboard_handler="not callable")  # type: ignore[arg-type]

    def test_default_per_page_positive(self) -> None:
        with pytest.raises(ValueError, match="default_per_page"):
            AdminConfig(default_per_page=0)

    def test_max_per_page_not_below_default(self) -> None:
        with pytest.raises(ValueError, match="max_per_page"):
            AdminConfig(default_per_page=20, max_per_page=10)


class TestMerge:
    def test_overrides_given_fields(self) -> None:
        merged = AdminConfig().merge(root_path="/backoffice", log_action_decisions=True)
        assert merged.root_path == "/backoffice"
        assert merged.log_action_decisions is True
        assert merged.default_per_page == 10

    def test_none_keeps_existing(self) -> None:
        base = AdminConfig(root_path="/x", dashboard_handler=_dashboard, max_per_page=50)
        merged = base.merge()
        assert merged == base
        assert merged is not base

    def test_false_is_an_override(self) -> None:
        merged = AdminConfig(log_action_decisions=True).merge(log_action_decisions=False)
        assert merged.log_action_decisions is False

    def test_merge_validates(self) -> None:
        with pytest.raises(ValueError):
            AdminConfig().merge(max_per_page=5)
