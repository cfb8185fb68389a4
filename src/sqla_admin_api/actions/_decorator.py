"""@action decorator — register custom action handlers."""

from __future__ import annotations

from typing import TypeVar

from sqla_admin_api._types import AccessCheck, ActionHandler, ActionScope
from sqla_admin_api.actions._base import Action
from sqla_admin_api.actions._registry import ActionRegistry, get_default_registry

__all__ = ["action"]

F = TypeVar("F", bound=ActionHandler)


def action(
    resource_id: str,
    name: str,
    *,
    scope: ActionScope = "resource",
    is_accessible: AccessCheck = True,
    label: str | None = None,
    registry: ActionRegistry | None = None,
):
    """Decorator that registers a handler as an action on *resource_id*.

    The decorated function receives ``(request, response, context)``
    and may be a coroutine function.

    Args:
        resource_id: The id of the resource the action belongs to.
        name: The action name used in routes.
        scope: ``"resource"`` or ``"record"``.
        is_accessible: ``True``/``False`` or an access predicate.
        label: Optional human-readable label. Defaults to the name.
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Example::

        @action("orders", "approve", scope="record", is_accessible=has_role("manager"))
        async def approve(request, response, context):
            record = await context.resource.update(context.record.id(), {"status": "approved"})
            return {"record": context.record_json(record)}
    """

    def decorator(fn: F) -> F:
        target = registry if registry is not None else get_default_registry()
        target.register(
            resource_id,
            Action(
                name=name,
                scope=scope,
                handler=fn,
                access=is_accessible,
                label=label or "",
            ),
        )
        return fn

    return decorator
