"""ResourceDecorator — admin-level metadata layered over a resource."""

from __future__ import annotations

import inspect
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqla_admin_api._types import AccessCheck, ActorLike
from sqla_admin_api.actions._base import Action, evaluate_access
from sqla_admin_api.exceptions import ConfigurationError
from sqla_admin_api.resource._base import BaseProperty, BaseRecord, BaseResource

if TYPE_CHECKING:
    from sqla_admin_api._admin import Admin

__all__ = ["ResourceDecorator", "ResourceOptions"]

# Property names picked as title, in order, when none is configured.
_TITLE_CANDIDATES: tuple[str, ...] = ("name", "title", "email", "subject", "label")


@dataclass(frozen=True, slots=True)
class ResourceOptions:
    """Per-resource admin options.

    Attributes:
        title_property: Name of the property shown as the record title
            and matched by search.
        property_visibility: Property name -> access check deciding
            whether an actor may see that property in serialized records.
        actions: Actions that override both built-ins and the registry.

    Example::

        ResourceOptions(
            title_property="email",
            property_visibility={"salary": has_role("hr")},
        )
    """

    title_property: str | None = None
    property_visibility: Mapping[str, AccessCheck] = field(default_factory=dict)
    actions: tuple[Action, ...] = ()

    def __post_init__(self) -> None:
        for path, check in self.property_visibility.items():
            if inspect.iscoroutinefunction(check):
                raise ValueError(f"visibility check of property {path!r} must be synchronous")


class ResourceDecorator:
    """Decoration of a registered resource: actions, title and visibility.

    Action precedence, lowest to highest: built-in actions, actions from
    the admin's ``ActionRegistry``, ``ResourceOptions.actions``.
    """

    def __init__(self, resource: BaseResource, admin: Admin, options: ResourceOptions) -> None:
        self.resource = resource
        self.admin = admin
        self.options = options
        if options.title_property is not None and resource.property(options.title_property) is None:
            raise ConfigurationError(
                f"title property {options.title_property!r} does not exist "
                f"on resource {resource.id()!r}",
                "ResourceOptions.title_property",
            )

    @property
    def actions(self) -> dict[str, Action]:
        merged = dict(self.admin.builtin_actions)
        merged.update(self.admin.registry.actions_for(self.resource.id()))
        merged.update({a.name: a for a in self.options.actions})
        return merged

    def title_property(self) -> BaseProperty:
        """Return the property used as record title.

        Uses ``ResourceOptions.title_property`` when set; otherwise the
        first of ``name``/``title``/``email``/``subject``/``label`` that
        exists, then the first non-id string property, then the id.
        """
        if self.options.title_property is not None:
            prop = self.resource.property(self.options.title_property)
            if prop is not None:
                return prop
        for candidate in _TITLE_CANDIDATES:
            prop = self.resource.property(candidate)
            if prop is not None:
                return prop
        for prop in self.resource.properties():
            if prop.type() == "string" and not prop.is_id():
                return prop
        return self.resource.id_property()

    def is_visible(self, path: str, actor: ActorLike | None) -> bool:
        check = self.options.property_visibility.get(path, True)
        return evaluate_access(check, actor, None, source="ResourceOptions.property_visibility")

    def record_actions(
        self,
        record: BaseRecord,
        actor: ActorLike | None,
        *,
        granted: Collection[str] = (),
    ) -> list[str]:
        """Names of record-scope actions *actor* may run on *record*.

        Actions named in *granted* were already authorized for this actor
        and record, and are listed without running their checks again.
        """
        return [
            name
            for name, action in self.actions.items()
            if action.scope == "record"
            and (name in granted or action.is_accessible(actor, record))
        ]

    def resource_actions(self, actor: ActorLike | None) -> list[str]:
        """Names of resource-scope actions *actor* may run."""
        return [
            name
            for name, action in self.actions.items()
            if action.scope == "resource" and action.is_accessible(actor, None)
        ]
