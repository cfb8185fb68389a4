"""Composable access predicates for actions."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from sqla_admin_api._types import ActorLike
from sqla_admin_api.actions._base import evaluate_access

if TYPE_CHECKING:
    from sqla_admin_api.resource._base import BaseRecord

__all__ = [
    "AccessPredicate",
    "access_predicate",
    "always_allow",
    "always_deny",
    "has_role",
    "is_owner",
]


class AccessPredicate:
    """A composable access check.

    Wraps a callable ``(actor, record | None) -> bool``. Supports ``&``
    (AND), ``|`` (OR), and ``~`` (NOT) composition. Instances can be
    passed anywhere an action's ``is_accessible`` is expected.

    Example::

        editors = has_role("admin", "editor")
        owner = is_owner("author_id")

        approve = Action(
            name="approve",
            scope="record",
            handler=approve_handler,
            access=editors | owner,
        )
    """

    def __init__(self, fn: Callable[..., bool], *, name: str = "") -> None:
        self._name = name or getattr(fn, "__name__", "<anonymous>")
        if inspect.iscoroutinefunction(fn):
            raise ValueError(f"access predicate {self._name!r} must be synchronous")
        self._fn = fn

    def __call__(self, actor: ActorLike | None, record: BaseRecord | None = None) -> bool:
        return evaluate_access(self._fn, actor, record, source="AccessPredicate")

    def __and__(self, other: AccessPredicate) -> AccessPredicate:
        def _and(actor: ActorLike | None, record: BaseRecord | None) -> bool:
            return self(actor, record) and other(actor, record)

        return AccessPredicate(_and, name=f"({self._name} & {other._name})")

    def __or__(self, other: AccessPredicate) -> AccessPredicate:
        def _or(actor: ActorLike | None, record: BaseRecord | None) -> bool:
            return self(actor, record) or other(actor, record)

        return AccessPredicate(_or, name=f"({self._name} | {other._name})")

    def __invert__(self) -> AccessPredicate:
        def _not(actor: ActorLike | None, record: BaseRecord | None) -> bool:
            return not self(actor, record)

        return AccessPredicate(_not, name=f"~{self._name}")

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"AccessPredicate({self._name!r})"


def access_predicate(fn: Callable[..., bool]) -> AccessPredicate:
    """Decorator/factory that creates an AccessPredicate from a callable.

    Example::

        @access_predicate
        def is_active(actor, record):
            return record is not None and record.params.get("active") is True
    """
    return AccessPredicate(fn, name=getattr(fn, "__name__", "<lambda>"))


def has_role(*roles: str) -> AccessPredicate:
    """Grant access when ``actor.role`` is one of *roles*.

    Actors without a ``role`` attribute, and a missing actor, are denied.
    """
    allowed = frozenset(roles)

    def _has_role(actor: ActorLike | None, record: BaseRecord | None) -> bool:
        return actor is not None and getattr(actor, "role", None) in allowed

    return AccessPredicate(_has_role, name=f"has_role({', '.join(sorted(allowed))})")


def is_owner(field: str = "owner_id") -> AccessPredicate:
    """Grant access when ``record.params[field]`` equals ``actor.id``.

    Resource-scope checks (no record) are denied. Ids are compared as
    strings because route params always arrive as text.
    """

    def _is_owner(actor: ActorLike | None, record: BaseRecord | None) -> bool:
        if actor is None or record is None:
            return False
        value: Any = record.params.get(field)
        return value is not None and str(value) == str(actor.id)

    return AccessPredicate(_is_owner, name=f"is_owner({field})")


# Built-in predicates


def _always_allow(actor: ActorLike | None, record: BaseRecord | None) -> bool:
    return True


def _always_deny(actor: ActorLike | None, record: BaseRecord | None) -> bool:
    return False


always_allow: AccessPredicate = AccessPredicate(_always_allow, name="always_allow")
always_deny: AccessPredicate = AccessPredicate(_always_deny, name="always_deny")
