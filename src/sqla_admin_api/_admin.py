"""Admin — the registry of resources an API controller serves."""

from __future__ import annotations

from collections.abc import Iterable

from sqla_admin_api.actions._base import Action
from sqla_admin_api.actions._builtin import default_actions
from sqla_admin_api.actions._registry import ActionRegistry, get_default_registry
from sqla_admin_api.config._config import AdminConfig
from sqla_admin_api.exceptions import ConfigurationError, NotFoundError
from sqla_admin_api.resource._base import BaseResource
from sqla_admin_api.resource._decorator import ResourceDecorator, ResourceOptions

__all__ = ["Admin"]


class Admin:
    """Holds registered resources, the action registry and configuration.

    Resources are registered once at startup and only read while
    requests are dispatched.

    Args:
        resources: Resources to register with default options.
        config: Admin configuration. Defaults to ``AdminConfig()``.
        registry: Action registry. Defaults to the global registry.

    Example::

        admin = Admin(config=AdminConfig(root_path="/backoffice"))
        admin.register(users, ResourceOptions(title_property="email"))
        controller = ApiController(admin, current_admin=current_user)
    """

    def __init__(
        self,
        resources: Iterable[BaseResource] = (),
        *,
        config: AdminConfig | None = None,
        registry: ActionRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else AdminConfig()
        self.registry = registry if registry is not None else get_default_registry()
        self.builtin_actions: dict[str, Action] = default_actions()
        self._resources: dict[str, BaseResource] = {}
        for resource in resources:
            self.register(resource)

    def register(
        self,
        resource: BaseResource,
        options: ResourceOptions | None = None,
    ) -> BaseResource:
        """Register *resource* and assign its decorator.

        Raises:
            ConfigurationError: If a resource with the same id is
                already registered.
        """
        resource_id = resource.id()
        if resource_id in self._resources:
            raise ConfigurationError(
                f"resource {resource_id!r} is already registered", "Admin.register"
            )
        resource.assign_decorator(
            ResourceDecorator(resource, self, options if options is not None else ResourceOptions())
        )
        self._resources[resource_id] = resource
        return resource

    @property
    def resources(self) -> list[BaseResource]:
        return list(self._resources.values())

    def get_resource(self, resource_id: str) -> BaseResource | None:
        return self._resources.get(resource_id)

    def find_resource(self, resource_id: str) -> BaseResource:
        """Return the resource registered under *resource_id*.

        Raises:
            NotFoundError: If no such resource is registered.
        """
        resource = self._resources.get(resource_id)
        if resource is None:
            raise NotFoundError(
                f"Resource {resource_id!r} does not exist", resource_id=resource_id
            )
        return resource
