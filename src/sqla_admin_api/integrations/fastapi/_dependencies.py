"""FastAPI dependencies for sqla-admin-api."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import Request

from sqla_admin_api._context import ActionRequest
from sqla_admin_api._types import ActorLike

__all__ = ["get_actor", "get_action_request"]

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def get_actor(request: Request) -> ActorLike | None:
    """Sentinel dependency; override via ``app.dependency_overrides[get_actor]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their actor provider before mounting the admin API.

    Example::

        from sqla_admin_api.integrations.fastapi import get_actor

        app.dependency_overrides[get_actor] = my_get_current_user
    """
    raise NotImplementedError(
        "Override get_actor via app.dependency_overrides[get_actor]. "
        "See sqla-admin-api docs for configuration guide."
    )


async def get_action_request(request: Request) -> ActionRequest:
    """Convert a Starlette request into a framework-neutral ``ActionRequest``.

    JSON bodies of POST/PUT/PATCH requests become the payload; any other
    body is ignored.
    """
    payload: Mapping[str, Any] = {}
    if request.method in _BODY_METHODS:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/json") and await request.body():
            body = await request.json()
            if isinstance(body, Mapping):
                payload = body
    return ActionRequest(
        params=dict(request.path_params),
        query=dict(request.query_params),
        payload=payload,
        method=request.method,
    )
