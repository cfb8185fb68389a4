"""Shared protocols and type aliases for sqla-admin-api."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Literal, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from sqla_admin_api._context import ActionContext, ActionRequest, DashboardContext
    from sqla_admin_api.resource._base import BaseRecord

__all__ = [
    "AccessCheck",
    "ActionHandler",
    "ActionScope",
    "ActorLike",
    "DashboardHandler",
    "PropertyType",
    "SortDirection",
]

# Valid values for Action.scope.
ActionScope = Literal["resource", "record"]

# Valid values for Sort.direction.
SortDirection = Literal["asc", "desc"]

# Property types reported by BaseProperty.type().
PropertyType = Literal["string", "number", "boolean", "datetime", "reference", "mixed"]


@runtime_checkable
class ActorLike(Protocol):
    """Structural type for the current admin.

    Any object with an ``id`` attribute satisfies this protocol.
    Works with SQLAlchemy models, dataclasses, Pydantic models,
    named tuples; no inheritance required.

    Example::

        @dataclass
        class User:
            id: int
            role: str

        user = User(id=1, role="admin")
        assert isinstance(user, ActorLike)
    """

    @property
    def id(self) -> int | str: ...


# Authorization input accepted by Action and ResourceOptions: either a
# constant or a callable ``(actor, record | None) -> bool``.
AccessCheck = Union[bool, Callable[["ActorLike | None", "BaseRecord | None"], bool]]

# ``handler(request, response, context)``; may be sync or async.
ActionHandler = Callable[["ActionRequest", Any, "ActionContext"], Union[Any, Awaitable[Any]]]

# ``handler(request, response, dashboard_context)``; may be sync or async.
DashboardHandler = Callable[["ActionRequest", Any, "DashboardContext"], Union[Any, Awaitable[Any]]]
