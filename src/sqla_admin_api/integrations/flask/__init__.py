"""Flask integration for sqla-admin-api."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install sqla-admin-api[flask]"
    ) from exc

from sqla_admin_api.integrations.flask._extension import AdminApiExtension

__all__ = ["AdminApiExtension"]
