"""Actions — registration, access checks and built-in handlers."""

from sqla_admin_api.actions._base import Action
from sqla_admin_api.actions._predicate import (
    AccessPredicate,
    access_predicate,
    always_allow,
    always_deny,
    has_role,
    is_owner,
)
from sqla_admin_api.actions._registry import ActionRegistry, get_default_registry
from sqla_admin_api.actions._decorator import action
from sqla_admin_api.actions._builtin import BUILTIN_ACTION_NAMES, builtin_action, default_actions

__all__ = [
    "AccessPredicate",
    "Action",
    "ActionRegistry",
    "BUILTIN_ACTION_NAMES",
    "access_predicate",
    "action",
    "always_allow",
    "always_deny",
    "builtin_action",
    "default_actions",
    "get_default_registry",
    "has_role",
    "is_owner",
]
