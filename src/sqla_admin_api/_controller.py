"""ApiController — dispatch and authorization of admin API requests.

Handles the four API endpoints, relative to ``{root_path}/api``:

| Endpoint                                         | Method              |
|--------------------------------------------------|---------------------|
| ``resources/{resource_id}/search/{query}``       | ``search``          |
| ``resources/{resource_id}/actions/{action}``     | ``resource_action`` |
| ``resources/{resource_id}/records/{record_id}/{action}`` | ``record_action`` |
| ``dashboard``                                    | ``dashboard``       |

Every action is checked with ``Action.is_accessible`` exactly once,
before its handler runs, and against the same record the handler
receives.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypedDict

from sqla_admin_api._audit import log_action_decision, log_configuration_error
from sqla_admin_api._context import ActionRequest, DashboardContext, build_context
from sqla_admin_api._populate import populate
from sqla_admin_api._types import ActorLike
from sqla_admin_api._view_helpers import ViewHelpers
from sqla_admin_api.exceptions import ConfigurationError, ForbiddenError, NotFoundError
from sqla_admin_api.resource._base import RecordJSON, Sort
from sqla_admin_api.resource._filter import Filter

if TYPE_CHECKING:
    from sqla_admin_api._admin import Admin
    from sqla_admin_api.actions._base import Action
    from sqla_admin_api.resource._base import BaseRecord, BaseResource

__all__ = [
    "DASHBOARD_FALLBACK_MESSAGE",
    "RECORD_ACTION_CONTRACT_MESSAGE",
    "SEARCH_LIMIT",
    "ApiController",
    "RecordActionResponse",
    "SearchRecord",
    "SearchResponse",
]

# Fixed ceiling on the number of records one search call returns.
SEARCH_LIMIT = 50

DASHBOARD_FALLBACK_MESSAGE = (
    "You can override this method by setting up dashboard.handler function in options"
)

RECORD_ACTION_CONTRACT_MESSAGE = "handler of a recordAction should return a RecordJSON object"


class SearchRecord(TypedDict):
    id: str
    title: str


class SearchResponse(TypedDict):
    records: list[SearchRecord]


class _RecordActionResponseBase(TypedDict):
    record: RecordJSON


class RecordActionResponse(_RecordActionResponseBase, total=False):
    """What a record action handler must return.

    ``record`` is mandatory and must carry ``recordActions``; the other
    keys are optional hints for the client.
    """

    notice: dict[str, str]
    redirectUrl: str


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _is_record_action_response(result: Any) -> bool:
    if not isinstance(result, Mapping):
        return False
    record = result.get("record")
    return isinstance(record, Mapping) and record.get("recordActions") is not None


class ApiController:
    """Serves the admin API for one request on behalf of *current_admin*.

    Args:
        admin: The admin holding resources and configuration.
        current_admin: The actor making the request. Passed unchanged to
            every access check and handler.

    Example::

        controller = ApiController(admin, current_admin=user)
        request = ActionRequest(params={"resource_id": "users", "query": "ann"})
        found = await controller.search(request)
    """

    def __init__(self, admin: Admin, current_admin: ActorLike | None = None) -> None:
        self._admin = admin
        self.current_admin = current_admin

    def _authorize(
        self,
        action: Action,
        resource: BaseResource,
        record: BaseRecord | None,
        *,
        record_id: str | None = None,
    ) -> None:
        allowed = action.is_accessible(self.current_admin, record)
        log_action_decision(
            resource_id=resource.id(),
            action_name=action.name,
            actor=self.current_admin,
            allowed=allowed,
            record_id=record_id,
            verbose=self._admin.config.log_action_decisions,
        )
        if not allowed:
            raise ForbiddenError(action_name=action.name, resource_id=resource.id())

    async def search(self, request: ActionRequest) -> SearchResponse:
        """Find up to ``SEARCH_LIMIT`` records whose title matches the query.

        An empty query matches every record. Results are sorted by the
        title property, ascending. Requires access to the resource's
        ``list`` action.

        Raises:
            NotFoundError: If the resource does not exist.
            ForbiddenError: If the current admin may not ``list`` the resource.
        """
        resource_id = request.params.get("resource_id", "")
        query = request.params.get("query") or ""
        resource = self._admin.find_resource(resource_id)
        decorated = resource.decorate()

        list_action = decorated.actions.get("list")
        if list_action is None:
            raise NotFoundError(
                f"Action 'list' does not exist on resource {resource_id!r}",
                resource_id=resource_id,
                action_name="list",
            )
        self._authorize(list_action, resource, None)

        title_name = decorated.title_property().name()
        flt = Filter({title_name: query} if query else {}, resource)
        records = await resource.find(
            flt,
            limit=SEARCH_LIMIT,
            sort=Sort(sort_by=title_name, direction="asc"),
        )

        return {
            "records": [
                {"id": record.id(), "title": record.to_json(self.current_admin)["title"]}
                for record in records[:SEARCH_LIMIT]
            ]
        }

    async def resource_action(self, request: ActionRequest, response: Any = None) -> Any:
        """Run a resource-scope action and return the handler's result as is.

        Raises:
            NotFoundError: If the resource or action does not exist.
            ForbiddenError: If the current admin may not run the action.
        """
        context = build_context(
            self._admin,
            request.params.get("resource_id", ""),
            request.params.get("action", ""),
            self.current_admin,
            scope="resource",
        )
        self._authorize(context.action, context.resource, None)
        return await _resolve(context.action.handler(request, response, context))

    async def record_action(
        self, request: ActionRequest, response: Any = None
    ) -> RecordActionResponse:
        """Run a record-scope action against the record from the route.

        The record is loaded and populated before the access check, and
        may be ``None`` when it does not exist; the access check and the
        handler then both receive ``None``.

        Raises:
            NotFoundError: If the resource or action does not exist.
            ForbiddenError: If the current admin may not run the action.
            ConfigurationError: If the handler does not return a
                ``RecordActionResponse``.
        """
        record_id = request.params.get("record_id", "")
        context = build_context(
            self._admin,
            request.params.get("resource_id", ""),
            request.params.get("action", ""),
            self.current_admin,
            scope="record",
        )

        record = await context.resource.find_one(record_id)
        [record] = await populate([record])

        self._authorize(context.action, context.resource, record, record_id=record_id)
        result = await _resolve(
            context.action.handler(request, response, context.with_record(record))
        )

        if _is_record_action_response(result):
            return result
        log_configuration_error(
            resource_id=context.resource.id(),
            action_name=context.action.name,
            source="Action.handler",
        )
        raise ConfigurationError(RECORD_ACTION_CONTRACT_MESSAGE, "Action.handler")

    async def dashboard(self, request: ActionRequest, response: Any = None) -> Any:
        """Return the configured dashboard handler's data, or a hint message.

        No access check is made here; dashboard visibility is decided by
        whatever mounts the route.
        """
        handler = self._admin.config.dashboard_handler
        if handler is None:
            return {"message": DASHBOARD_FALLBACK_MESSAGE}
        context = DashboardContext(
            h=ViewHelpers(self._admin),
            current_admin=self.current_admin,
            admin=self._admin,
        )
        return await _resolve(handler(request, response, context))
