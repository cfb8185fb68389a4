"""sqla-admin-api testing utilities — actors, resources, assertions, fixtures.

Provides test helpers for verifying admin actions:

- **MockActor / factories**: Lightweight actors for tests.
- **InMemoryResource**: A dict-backed resource that records store calls.
- **Assertion helpers**: ``assert_can``, ``assert_cannot``.
- **Fixtures**: ``admin_registry``, ``admin_config``,
  ``isolated_registry_state``.

Example::

    from sqla_admin_api.testing import InMemoryResource, assert_cannot, make_anonymous

    def test_anonymous_cannot_list(admin_registry):
        admin = Admin([InMemoryResource("users", rows)], registry=admin_registry)
        assert_cannot(admin, make_anonymous(), "users", "list")
"""

from sqla_admin_api.testing._actors import (
    MockActor,
    make_admin,
    make_anonymous,
    make_owner,
    make_user,
)
from sqla_admin_api.testing._assertions import assert_can, assert_cannot
from sqla_admin_api.testing._fixtures import admin_config, admin_registry, isolated_registry_state
from sqla_admin_api.testing._isolation import isolated_registry
from sqla_admin_api.testing._resources import InMemoryResource

__all__ = [
    "InMemoryResource",
    "MockActor",
    "admin_config",
    "admin_registry",
    "assert_can",
    "assert_cannot",
    "isolated_registry",
    "isolated_registry_state",
    "make_admin",
    "make_anonymous",
    "make_owner",
    "make_user",
]
