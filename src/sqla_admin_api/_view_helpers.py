"""ViewHelpers — URL builders for admin pages and API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from sqla_admin_api._admin import Admin

__all__ = ["ViewHelpers"]


class ViewHelpers:
    """Build links relative to the admin's ``root_path``.

    Every path segment is URL-quoted, so record ids and search terms
    containing ``/`` or spaces are safe to pass in.

    Example::

        h = ViewHelpers(admin)
        h.record_action_url("orders", "42", "show")
        # "/admin/resources/orders/records/42/show"
    """

    def __init__(self, admin: Admin) -> None:
        self._root = admin.config.root_path.rstrip("/")

    def _url(self, *segments: str) -> str:
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self._root}/{path}" if path else (self._root or "/")

    def dashboard_url(self) -> str:
        return self._url()

    def resource_url(self, resource_id: str) -> str:
        return self._url("resources", resource_id)

    def resource_action_url(self, resource_id: str, action_name: str) -> str:
        return self._url("resources", resource_id, "actions", action_name)

    def record_action_url(self, resource_id: str, record_id: str, action_name: str) -> str:
        return self._url("resources", resource_id, "records", record_id, action_name)

    def search_api_url(self, resource_id: str, query: str = "") -> str:
        if not query:
            return self._url("api", "resources", resource_id, "search")
        return self._url("api", "resources", resource_id, "search", query)

    def resource_action_api_url(self, resource_id: str, action_name: str) -> str:
        return self._url("api", "resources", resource_id, "actions", action_name)

    def record_action_api_url(self, resource_id: str, record_id: str, action_name: str) -> str:
        return self._url("api", "resources", resource_id, "records", record_id, action_name)

    def dashboard_api_url(self) -> str:
        return self._url("api", "dashboard")
