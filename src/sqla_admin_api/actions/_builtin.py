"""Built-in actions available on every registered resource.

``list`` and ``new`` work on the whole resource; ``show``, ``edit`` and
``delete`` target one record. Each can be replaced per resource by
registering an action with the same name, e.g. to restrict access::

    registry.register("users", builtin_action("list", access=has_role("admin")))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqla_admin_api._populate import populate
from sqla_admin_api._types import AccessCheck
from sqla_admin_api.actions._base import Action
from sqla_admin_api.exceptions import NotFoundError
from sqla_admin_api.resource._base import Sort
from sqla_admin_api.resource._filter import Filter

if TYPE_CHECKING:
    from sqla_admin_api._context import ActionContext, ActionRequest
    from sqla_admin_api.resource._base import BaseRecord

__all__ = ["BUILTIN_ACTION_NAMES", "builtin_action", "default_actions"]


def _positive_int(raw: Any, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _require_record(request: ActionRequest, context: ActionContext) -> BaseRecord:
    if context.record is None:
        record_id = request.params.get("record_id")
        raise NotFoundError(
            f"Record {record_id!r} of resource {context.resource.id()!r} was not found",
            resource_id=context.resource.id(),
            action_name=context.action.name,
        )
    return context.record


def _notice(message: str) -> dict[str, str]:
    return {"message": message, "type": "success"}


async def list_handler(request: ActionRequest, response: Any, context: ActionContext) -> dict:
    resource = context.resource
    config = context.admin.config
    query = request.query

    page = _positive_int(query.get("page"), 1)
    per_page = min(_positive_int(query.get("perPage"), config.default_per_page), config.max_per_page)
    title_name = resource.decorate().title_property().name()
    sort_by = query.get("sortBy") or title_name
    sort_prop = resource.property(sort_by)
    if sort_prop is None or not sort_prop.is_sortable():
        sort_by = title_name
    direction = "desc" if query.get("direction") == "desc" else "asc"

    flt = Filter.from_query(query, resource)
    records = await resource.find(
        flt,
        limit=per_page,
        offset=(page - 1) * per_page,
        sort=Sort(sort_by=sort_by, direction=direction),
    )
    populated = await populate(records)
    total = await resource.count(flt)

    return {
        "records": [r.to_json(context.current_admin) for r in populated if r is not None],
        "meta": {
            "total": total,
            "page": page,
            "perPage": per_page,
            "sortBy": sort_by,
            "direction": direction,
        },
    }


async def new_handler(request: ActionRequest, response: Any, context: ActionContext) -> dict:
    if request.method != "POST":
        return {}
    record = await context.resource.create(request.payload)
    [record] = await populate([record])
    return {
        "record": context.record_json(record),
        "notice": _notice("Successfully created a new record"),
        "redirectUrl": context.h.record_action_url(context.resource.id(), record.id(), "show"),
    }


async def show_handler(request: ActionRequest, response: Any, context: ActionContext) -> dict:
    record = _require_record(request, context)
    return {"record": context.record_json(record)}


async def edit_handler(request: ActionRequest, response: Any, context: ActionContext) -> dict:
    record = _require_record(request, context)
    if request.method != "POST":
        return {"record": context.record_json(record)}
    updated = await context.resource.update(record.id(), request.payload)
    [updated] = await populate([updated])
    return {
        "record": context.record_json(updated),
        "notice": _notice("Successfully updated the record"),
        "redirectUrl": context.h.record_action_url(context.resource.id(), updated.id(), "show"),
    }


async def delete_handler(request: ActionRequest, response: Any, context: ActionContext) -> dict:
    record = _require_record(request, context)
    # Serialize first: recordActions must reflect the record as it existed.
    record_json = context.record_json(record)
    await context.resource.delete(record.id())
    return {
        "record": record_json,
        "notice": _notice("Successfully deleted the record"),
        "redirectUrl": context.h.resource_action_url(context.resource.id(), "list"),
    }


_BUILTINS: dict[str, tuple[str, Any]] = {
    "list": ("resource", list_handler),
    "new": ("resource", new_handler),
    "show": ("record", show_handler),
    "edit": ("record", edit_handler),
    "delete": ("record", delete_handler),
}

BUILTIN_ACTION_NAMES: tuple[str, ...] = tuple(_BUILTINS)


def builtin_action(name: str, *, access: AccessCheck = True) -> Action:
    """Return built-in action *name* with a custom access check.

    Raises:
        KeyError: If *name* is not a built-in action.
    """
    scope, handler = _BUILTINS[name]
    return Action(name=name, scope=scope, handler=handler, access=access)


def default_actions() -> dict[str, Action]:
    """Return a fresh mapping of all built-in actions, accessible to everyone."""
    return {name: builtin_action(name) for name in _BUILTINS}
