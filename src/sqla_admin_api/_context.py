"""Request and context objects threaded through action handlers."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqla_admin_api._types import ActionScope, ActorLike
from sqla_admin_api._view_helpers import ViewHelpers
from sqla_admin_api.actions._base import Action
from sqla_admin_api.exceptions import NotFoundError
from sqla_admin_api.resource._base import BaseRecord, BaseResource, RecordJSON

if TYPE_CHECKING:
    from sqla_admin_api._admin import Admin

__all__ = ["ActionContext", "ActionRequest", "DashboardContext", "build_context"]


@dataclass(frozen=True, slots=True)
class ActionRequest:
    """Framework-neutral view of an incoming API request.

    Attributes:
        params: Route params: ``resource_id``, ``action``, ``record_id``
            and ``query``, depending on the route.
        query: Query-string parameters.
        payload: Parsed request body (empty for GET requests).
        method: Upper-case HTTP method.
    """

    params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    payload: Mapping[str, Any] = field(default_factory=dict)
    method: str = "GET"


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Everything an action handler gets to know about the current request.

    Attributes:
        resource: The resolved resource.
        action: The resolved action.
        h: View helpers bound to the admin.
        current_admin: The actor performing the action.
        admin: The admin the resource is registered on.
        record: The target record of a record action (``None`` otherwise,
            or when the record does not exist).
    """

    resource: BaseResource
    action: Action
    h: ViewHelpers
    current_admin: ActorLike | None
    admin: Admin
    record: BaseRecord | None = None

    def with_record(self, record: BaseRecord | None) -> ActionContext:
        return dataclasses.replace(self, record=record)

    def record_json(self, record: BaseRecord) -> RecordJSON:
        """Serialize *record* for the current admin.

        A record action was authorized before its handler ran, so its
        own name is listed in ``recordActions`` without a second check.
        """
        granted = (self.action.name,) if self.action.scope == "record" else ()
        return record.to_json(self.current_admin, granted=granted)


@dataclass(frozen=True, slots=True)
class DashboardContext:
    """Context passed to the dashboard handler."""

    h: ViewHelpers
    current_admin: ActorLike | None
    admin: Admin


def build_context(
    admin: Admin,
    resource_id: str,
    action_name: str,
    actor: ActorLike | None,
    *,
    scope: ActionScope | None = None,
) -> ActionContext:
    """Resolve the resource and action of a request into an ``ActionContext``.

    Performs no authorization.

    Args:
        admin: The admin holding the resources.
        resource_id: Id of the requested resource.
        action_name: Name of the requested action.
        actor: The current admin.
        scope: When given, only actions of this scope resolve.

    Raises:
        NotFoundError: If the resource, or an action with that name (and
            scope), is not registered.
    """
    resource = admin.find_resource(resource_id)
    action = resource.decorate().actions.get(action_name)
    if action is None or (scope is not None and action.scope != scope):
        raise NotFoundError(
            f"Action {action_name!r} does not exist on resource {resource_id!r}",
            resource_id=resource_id,
            action_name=action_name,
        )
    return ActionContext(
        resource=resource,
        action=action,
        h=ViewHelpers(admin),
        current_admin=actor,
        admin=admin,
    )
