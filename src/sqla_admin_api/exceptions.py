"""Exception hierarchy for sqla-admin-api."""

from __future__ import annotations

__all__ = [
    "AdminApiError",
    "ConfigurationError",
    "ForbiddenError",
    "NotFoundError",
]


class AdminApiError(Exception):
    """Base exception for all sqla-admin-api errors."""


class NotFoundError(AdminApiError):
    """A resource, action or record could not be resolved.

    Attributes:
        resource_id: The resource id from the request, if known.
        action_name: The action name from the request, if known.

    Example::

        try:
            admin.find_resource("ghosts")
        except NotFoundError as exc:
            print(exc.resource_id)  # "ghosts"
    """

    def __init__(
        self,
        message: str,
        *,
        resource_id: str | None = None,
        action_name: str | None = None,
    ) -> None:
        self.resource_id = resource_id
        self.action_name = action_name
        super().__init__(message)


class ForbiddenError(AdminApiError):
    """The current admin may not perform the requested action.

    Only the action and resource are kept so the error can be written
    to audit logs without leaking anything about the actor.

    Attributes:
        action_name: The action that was attempted.
        resource_id: The resource the action belongs to.

    Example::

        try:
            await controller.search(request)
        except ForbiddenError as exc:
            print(f"cannot {exc.action_name} on {exc.resource_id}")
    """

    def __init__(
        self,
        *,
        action_name: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        self.action_name = action_name
        self.resource_id = resource_id
        if message is None:
            message = f"You cannot perform action {action_name!r} on resource {resource_id!r}"
        super().__init__(message)


class ConfigurationError(AdminApiError):
    """An action or resource was registered incorrectly.

    Raised for programmer errors, e.g. a record action handler that
    does not return a ``RecordJSON`` payload. Not retryable.

    Attributes:
        message: Description of the violation.
        source: Where the misconfiguration lives (e.g. ``"Action.handler"``).
    """

    def __init__(self, message: str, source: str) -> None:
        self.message = message
        self.source = source
        super().__init__(f"{message} (see: {source})")
