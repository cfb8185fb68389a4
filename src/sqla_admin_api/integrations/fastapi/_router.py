"""APIRouter exposing the admin API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from sqla_admin_api._admin import Admin
from sqla_admin_api._context import ActionRequest
from sqla_admin_api._controller import ApiController
from sqla_admin_api._types import ActorLike
from sqla_admin_api.integrations.fastapi._dependencies import get_action_request, get_actor

__all__ = ["create_api_router"]


def create_api_router(admin: Admin, *, prefix: str = "") -> APIRouter:
    """Build an ``APIRouter`` serving the admin API for *admin*.

    The actor comes from the :func:`get_actor` dependency, which must
    be overridden by the application.

    Args:
        admin: The admin whose resources are served.
        prefix: Optional router prefix, e.g. ``"/admin/api"``.

    Returns:
        A router with the search, resource action, record action and
        dashboard endpoints.

    Example::

        app = FastAPI()
        app.include_router(create_api_router(admin, prefix="/admin/api"))
        app.dependency_overrides[get_actor] = current_user
        install_error_handlers(app)
    """
    router = APIRouter(prefix=prefix)

    @router.get("/resources/{resource_id}/search")
    @router.get("/resources/{resource_id}/search/{query:path}")
    async def search(  # pyright: ignore[reportUnusedFunction]
        action_request: ActionRequest = Depends(get_action_request),
        actor: ActorLike | None = Depends(get_actor),
    ) -> Any:
        return await ApiController(admin, actor).search(action_request)

    @router.api_route("/resources/{resource_id}/actions/{action}", methods=["GET", "POST"])
    async def resource_action(  # pyright: ignore[reportUnusedFunction]
        response: Response,
        action_request: ActionRequest = Depends(get_action_request),
        actor: ActorLike | None = Depends(get_actor),
    ) -> Any:
        return await ApiController(admin, actor).resource_action(action_request, response)

    @router.api_route(
        "/resources/{resource_id}/records/{record_id}/{action}", methods=["GET", "POST"]
    )
    async def record_action(  # pyright: ignore[reportUnusedFunction]
        response: Response,
        action_request: ActionRequest = Depends(get_action_request),
        actor: ActorLike | None = Depends(get_actor),
    ) -> Any:
        return await ApiController(admin, actor).record_action(action_request, response)

    @router.get("/dashboard")
    async def dashboard(  # pyright: ignore[reportUnusedFunction]
        response: Response,
        action_request: ActionRequest = Depends(get_action_request),
        actor: ActorLike | None = Depends(get_actor),
    ) -> Any:
        return await ApiController(admin, actor).dashboard(action_request, response)

    return router
