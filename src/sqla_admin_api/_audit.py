"""Audit logging for action authorization decisions."""

from __future__ import annotations

import logging

from sqla_admin_api._types import ActorLike

__all__ = ["log_action_decision", "log_configuration_error"]

logger = logging.getLogger("sqla_admin_api")


def _actor_id(actor: ActorLike | None) -> object:
    return getattr(actor, "id", None)


def log_action_decision(
    *,
    resource_id: str,
    action_name: str,
    actor: ActorLike | None,
    allowed: bool,
    record_id: str | None = None,
    verbose: bool = False,
) -> None:
    """Log an authorization decision for one action invocation.

    Only the actor's ``id`` is written, never the actor object itself.

    Logging levels:
    - WARNING: Access denied (always logged)
    - INFO: Access granted, when ``verbose`` is set
    - DEBUG: Access granted otherwise

    Example::

        log_action_decision(
            resource_id="orders",
            action_name="approve",
            actor=current_admin,
            allowed=False,
            record_id="42",
        )
    """
    target = resource_id if record_id is None else f"{resource_id}/{record_id}"

    if not allowed:
        logger.warning(
            "Action denied: %s.%s on %s for actor id=%r",
            resource_id,
            action_name,
            target,
            _actor_id(actor),
        )
        return

    level = logging.INFO if verbose else logging.DEBUG
    if logger.isEnabledFor(level):
        logger.log(
            level,
            "Action granted: %s.%s on %s for actor id=%r",
            resource_id,
            action_name,
            target,
            _actor_id(actor),
        )


def log_configuration_error(*, resource_id: str, action_name: str, source: str) -> None:
    """Log a handler contract violation detected by the API controller."""
    logger.error(
        "Misconfigured action %s.%s: %s returned an invalid payload",
        resource_id,
        action_name,
        source,
    )
