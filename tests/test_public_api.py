"""Tests for public API surface — verifies all __init__.py re-exports.

Every ``__all__`` list must be complete and match the actual module
attributes.
"""

from __future__ import annotations

import importlib

import pytest


class TestTopLevelExports:
    EXPECTED = {
        "__version__",
        "SEARCH_LIMIT",
        "AccessPredicate",
        "Action",
        "ActionContext",
        "ActionRegistry",
        "ActionRequest",
        "ActorLike",
        "Admin",
        "AdminApiError",
        "AdminConfig",
        "ApiController",
        "BaseProperty",
        "BaseRecord",
        "BaseResource",
        "ConfigurationError",
        "DashboardContext",
        "Filter",
        "ForbiddenError",
        "NotFoundError",
        "RecordActionResponse",
        "ResourceOptions",
        "SQLAlchemyResource",
        "SearchRecord",
        "SearchResponse",
        "Sort",
        "ViewHelpers",
        "action",
        "always_allow",
        "always_deny",
        "build_context",
        "builtin_action",
        "has_role",
        "is_owner",
        "populate",
    }

    def test_all_matches_expected(self) -> None:
        import sqla_admin_api

        assert set(sqla_admin_api.__all__) == self.EXPECTED

    def test_version_is_string(self) -> None:
        import sqla_admin_api

        assert isinstance(sqla_admin_api.__version__, str)

    def test_search_limit(self) -> None:
        import sqla_admin_api

        assert sqla_admin_api.SEARCH_LIMIT == 50


@pytest.mark.parametrize(
    "module_name",
    [
        "sqla_admin_api",
        "sqla_admin_api.actions",
        "sqla_admin_api.config",
        "sqla_admin_api.exceptions",
        "sqla_admin_api.resource",
        "sqla_admin_api.testing",
        "sqla_admin_api.integrations.fastapi",
        "sqla_admin_api.integrations.flask",
    ],
)
class TestAllIsComplete:
    def test_every_name_in_all_exists(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        missing = [name for name in module.__all__ if not hasattr(module, name)]
        assert missing == []

    def test_no_duplicates(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        assert len(module.__all__) == len(set(module.__all__))


class TestSubpackageExports:
    def test_actions(self) -> None:
        from sqla_admin_api import actions

        assert {"Action", "ActionRegistry", "action", "has_role", "is_owner"} <= set(
            actions.__all__
        )

    def test_resource(self) -> None:
        from sqla_admin_api import resource

        assert {"BaseResource", "SQLAlchemyResource", "Filter", "RecordJSON"} <= set(
            resource.__all__
        )

    def test_testing(self) -> None:
        from sqla_admin_api import testing

        assert {"InMemoryResource", "MockActor", "assert_can", "assert_cannot"} <= set(
            testing.__all__
        )
