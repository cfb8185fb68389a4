"""sqla-admin-api — Authorized action dispatch for admin APIs.

Resolves a resource and action from an API route, checks whether the
current admin may run it (optionally against a concrete record), invokes
the action's handler and validates what it returns.

Example::

    from sqla_admin_api import Admin, ApiController, ActionRequest, action, has_role

    @action("orders", "approve", scope="record", is_accessible=has_role("manager"))
    async def approve(request, response, context):
        record = await context.resource.update(context.record.id(), {"status": "approved"})
        return {"record": context.record_json(record)}

    admin = Admin([SQLAlchemyResource(Order, session_factory)])
    controller = ApiController(admin, current_admin=current_user)
    result = await controller.record_action(
        ActionRequest(params={"resource_id": "orders", "record_id": "42", "action": "approve"})
    )
"""

from importlib.metadata import PackageNotFoundError, version

from sqla_admin_api._admin import Admin
from sqla_admin_api._context import ActionContext, ActionRequest, DashboardContext, build_context
from sqla_admin_api._controller import (
    SEARCH_LIMIT,
    ApiController,
    RecordActionResponse,
    SearchRecord,
    SearchResponse,
)
from sqla_admin_api._populate import populate
from sqla_admin_api._types import ActorLike
from sqla_admin_api._view_helpers import ViewHelpers
from sqla_admin_api.actions import (
    AccessPredicate,
    Action,
    ActionRegistry,
    action,
    always_allow,
    always_deny,
    builtin_action,
    has_role,
    is_owner,
)
from sqla_admin_api.config._config import AdminConfig
from sqla_admin_api.exceptions import (
    AdminApiError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
)
from sqla_admin_api.resource import (
    BaseProperty,
    BaseRecord,
    BaseResource,
    Filter,
    ResourceOptions,
    Sort,
    SQLAlchemyResource,
)

try:
    __version__ = version("sqla-admin-api")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "SEARCH_LIMIT",
    "AccessPredicate",
    "Action",
    "ActionContext",
    "ActionRegistry",
    "ActionRequest",
    "ActorLike",
    "Admin",
    "AdminApiError",
    "AdminConfig",
    "ApiController",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "ConfigurationError",
    "DashboardContext",
    "Filter",
    "ForbiddenError",
    "NotFoundError",
    "RecordActionResponse",
    "ResourceOptions",
    "SQLAlchemyResource",
    "SearchRecord",
    "SearchResponse",
    "Sort",
    "ViewHelpers",
    "action",
    "always_allow",
    "always_deny",
    "build_context",
    "builtin_action",
    "has_role",
    "is_owner",
    "populate",
]
