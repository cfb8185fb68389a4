"""Action dataclass — a named, authorized operation on a resource."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqla_admin_api._types import AccessCheck, ActionHandler, ActionScope, ActorLike
from sqla_admin_api.exceptions import ConfigurationError

if TYPE_CHECKING:
    from sqla_admin_api.resource._base import BaseRecord

__all__ = ["Action", "evaluate_access"]

_VALID_SCOPES: set[str] = {"resource", "record"}


@dataclass(frozen=True, slots=True)
class Action:
    """A single registered action with its access check and handler.

    Attributes:
        name: The action name used in routes (e.g. ``"approve"``).
        scope: ``"resource"`` for collection-level actions, ``"record"``
            for actions that target one record.
        handler: ``handler(request, response, context)``; sync or async.
        access: ``True``/``False`` or a callable ``(actor, record) -> bool``.
        label: Human-readable label. Defaults to the name.

    Example::

        publish = Action(
            name="publish",
            scope="record",
            handler=publish_handler,
            access=has_role("editor"),
        )
        publish.is_accessible(current_admin, record)
    """

    name: str
    scope: ActionScope
    handler: ActionHandler
    access: AccessCheck = True
    label: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Action name must be a non-empty string")
        if self.scope not in _VALID_SCOPES:
            raise ValueError(f"scope must be one of {_VALID_SCOPES!r}, got {self.scope!r}")
        if not callable(self.handler):
            raise ValueError(f"handler of action {self.name!r} must be callable")
        if not isinstance(self.access, bool) and not callable(self.access):
            raise ValueError(
                f"access of action {self.name!r} must be a bool or a callable, "
                f"got {type(self.access).__name__}"
            )
        if inspect.iscoroutinefunction(self.access):
            raise ValueError(
                f"access of action {self.name!r} must be synchronous; "
                "load what the check needs before dispatch"
            )
        if not self.label:
            object.__setattr__(self, "label", self.name)

    def is_accessible(self, actor: ActorLike | None, record: BaseRecord | None = None) -> bool:
        """Return whether *actor* may run this action against *record*.

        ``record`` is ``None`` for resource-scope actions, and may be
        ``None`` for record-scope actions whose target was not found.
        """
        return evaluate_access(self.access, actor, record, source="Action.isAccessible")


def evaluate_access(
    check: AccessCheck,
    actor: ActorLike | None,
    record: BaseRecord | None,
    *,
    source: str,
) -> bool:
    """Evaluate an access check to a plain ``bool``.

    Checks run synchronously. A check returning an awaitable would be
    truthy without ever running, so it is rejected rather than coerced.

    Raises:
        ConfigurationError: If *check* returns an awaitable.
    """
    if isinstance(check, bool):
        return check
    result = check(actor, record)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise ConfigurationError("access check must return a bool, not an awaitable", source)
    return bool(result)
