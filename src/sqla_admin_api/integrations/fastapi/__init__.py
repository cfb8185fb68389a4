"""FastAPI integration for sqla-admin-api."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install sqla-admin-api[fastapi]"
    ) from exc

from sqla_admin_api.integrations.fastapi._dependencies import get_action_request, get_actor
from sqla_admin_api.integrations.fastapi._errors import install_error_handlers
from sqla_admin_api.integrations.fastapi._router import create_api_router

__all__ = [
    "create_api_router",
    "get_action_request",
    "get_actor",
    "install_error_handlers",
]
