"""Flask extension serving the sqla-admin-api endpoints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from sqla_admin_api._admin import Admin
from sqla_admin_api._context import ActionRequest
from sqla_admin_api._controller import ApiController
from sqla_admin_api._types import ActorLike
from sqla_admin_api.exceptions import ConfigurationError, ForbiddenError, NotFoundError

__all__ = ["AdminApiExtension"]


def _action_request() -> ActionRequest:
    body = request.get_json(silent=True) if request.method in ("POST", "PUT", "PATCH") else None
    return ActionRequest(
        params=dict(request.view_args or {}),
        query=request.args.to_dict(),
        payload=body if isinstance(body, Mapping) else {},
        method=request.method,
    )


def _to_response(result: Any) -> Any:
    if isinstance(result, Response):
        return result
    return jsonify(result)


class AdminApiExtension:
    """Flask extension that mounts the admin API on an application.

    Registers a blueprint with the search, resource action, record
    action and dashboard endpoints, plus error handlers mapping
    ``NotFoundError``/``ForbiddenError``/``ConfigurationError`` to
    404/403/500 JSON responses. Views are ``async`` and need Flask's
    async extra (``pip install flask[async]``).

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        admin: The admin whose resources are served.
        actor_provider: A callable ``() -> ActorLike`` that returns the
            current admin. Called within request context.
        url_prefix: Where the API is mounted. Defaults to ``"/admin/api"``.

    Example::

        app = Flask(__name__)
        AdminApiExtension(app, admin=admin, actor_provider=lambda: g.user)
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        admin: Admin,
        actor_provider: Callable[[], ActorLike | None],
        url_prefix: str = "/admin/api",
    ) -> None:
        self._admin = admin
        self._actor_provider = actor_provider
        self._url_prefix = url_prefix

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores state on ``app.extensions["sqla_admin_api"]``, registers
        the API blueprint and the error handlers.

        Args:
            app: The Flask application instance.
        """
        app.extensions["sqla_admin_api"] = {
            "admin": self._admin,
            "actor_provider": self._actor_provider,
        }
        app.register_blueprint(self._blueprint(), url_prefix=self._url_prefix)

        @app.errorhandler(NotFoundError)
        def handle_not_found(exc: NotFoundError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 404

        @app.errorhandler(ForbiddenError)
        def handle_forbidden(exc: ForbiddenError):  # pyright: ignore[reportUnusedFunction]
            return jsonify(
                {"detail": str(exc), "action": exc.action_name, "resource": exc.resource_id}
            ), 403

        @app.errorhandler(ConfigurationError)
        def handle_configuration_error(  # pyright: ignore[reportUnusedFunction]
            exc: ConfigurationError,
        ):
            return jsonify({"detail": str(exc)}), 500

    def controller(self) -> ApiController:
        """Return an ``ApiController`` for the current request's actor.

        Must be called within a Flask request context.
        """
        ext_state: dict[str, Any] = current_app.extensions["sqla_admin_api"]
        actor_provider: Callable[[], ActorLike | None] = ext_state["actor_provider"]
        return ApiController(ext_state["admin"], current_admin=actor_provider())

    def _blueprint(self) -> Blueprint:
        bp = Blueprint("sqla_admin_api", __name__)

        async def search(resource_id: str, query: str = ""):
            return _to_response(await self.controller().search(_action_request()))

        async def resource_action(resource_id: str, action: str):
            return _to_response(await self.controller().resource_action(_action_request()))

        async def record_action(resource_id: str, record_id: str, action: str):
            return _to_response(await self.controller().record_action(_action_request()))

        async def dashboard():
            return _to_response(await self.controller().dashboard(_action_request()))

        bp.add_url_rule("/resources/<resource_id>/search", "search", search)
        bp.add_url_rule("/resources/<resource_id>/search/<path:query>", "search_query", search)
        bp.add_url_rule(
            "/resources/<resource_id>/actions/<action>",
            "resource_action",
            resource_action,
            methods=["GET", "POST"],
        )
        bp.add_url_rule(
            "/resources/<resource_id>/records/<record_id>/<action>",
            "record_action",
            record_action,
            methods=["GET", "POST"],
        )
        bp.add_url_rule("/dashboard", "dashboard", dashboard)
        return bp
