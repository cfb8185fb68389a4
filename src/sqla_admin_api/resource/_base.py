"""Base classes for resources, records and properties.

A *resource* is an addressable collection of records backed by some
store. Adapters (see :class:`~sqla_admin_api.resource.SQLAlchemyResource`)
subclass :class:`BaseResource`; the API controller only talks to this
interface.
"""

from __future__ import annotations

import abc
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypedDict

from sqla_admin_api._types import ActorLike, PropertyType, SortDirection
from sqla_admin_api.exceptions import ConfigurationError

if TYPE_CHECKING:
    from sqla_admin_api.resource._decorator import ResourceDecorator
    from sqla_admin_api.resource._filter import Filter

__all__ = ["BaseProperty", "BaseRecord", "BaseResource", "RecordJSON", "Sort"]


class RecordJSON(TypedDict):
    """Serialized form of a record, as sent to API clients."""

    id: str
    title: str
    params: dict[str, Any]
    populated: dict[str, RecordJSON | None]
    recordActions: list[str]
    errors: dict[str, Any]


@dataclass(frozen=True, slots=True)
class Sort:
    """Sort order passed to :meth:`BaseResource.find`."""

    sort_by: str
    direction: SortDirection = "asc"

    def __post_init__(self) -> None:
        if self.direction not in ("asc", "desc"):
            raise ValueError(f"direction must be 'asc' or 'desc', got {self.direction!r}")


class BaseProperty:
    """A single field of a resource.

    Args:
        path: The field name.
        type: One of the ``PropertyType`` values.
        is_id: Whether this property holds the record id.
        reference: Id of the resource this property points to, if any.
        is_sortable: Whether records can be ordered by this property.
    """

    def __init__(
        self,
        path: str,
        *,
        type: PropertyType = "string",
        is_id: bool = False,
        reference: str | None = None,
        is_sortable: bool = True,
    ) -> None:
        self._path = path
        self._type: PropertyType = "reference" if reference is not None else type
        self._is_id = is_id
        self._reference = reference
        self._is_sortable = is_sortable

    def name(self) -> str:
        return self._path

    def type(self) -> PropertyType:
        return self._type

    def is_id(self) -> bool:
        return self._is_id

    def reference(self) -> str | None:
        return self._reference

    def is_sortable(self) -> bool:
        return self._is_sortable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r}, type={self._type!r})"


class BaseRecord:
    """One record of a resource.

    Attributes:
        params: Flat mapping of property name to value.
        populated: Referenced records resolved by ``populate()``, keyed by
            the reference property name.
        errors: Validation errors keyed by property name.
    """

    def __init__(self, params: Mapping[str, Any], resource: BaseResource) -> None:
        self.params: dict[str, Any] = dict(params)
        self.resource = resource
        self.populated: dict[str, BaseRecord | None] = {}
        self.errors: dict[str, Any] = {}

    def id(self) -> str:
        """Return the record id as a string (``""`` when unset)."""
        value = self.params.get(self.resource.id_property().name())
        return "" if value is None else str(value)

    def param(self, path: str) -> Any:
        return self.params.get(path)

    def title(self) -> str:
        """Return the raw value of the title property, ignoring visibility."""
        value = self.params.get(self.resource.decorate().title_property().name())
        return "" if value is None else str(value)

    def to_json(
        self, actor: ActorLike | None = None, *, granted: Collection[str] = ()
    ) -> RecordJSON:
        """Serialize the record for *actor*.

        Properties the actor is not allowed to see are left out of
        ``params`` and ``populated``; the title is blank when the title
        property itself is hidden. ``recordActions`` lists the
        record-scope actions *actor* may run on this record; names in
        *granted* are taken as already authorized.
        """
        decorator = self.resource.decorate()
        params = {
            path: value for path, value in self.params.items() if decorator.is_visible(path, actor)
        }
        title_value = params.get(decorator.title_property().name())
        populated: dict[str, RecordJSON | None] = {
            path: (ref.to_json(actor) if ref is not None else None)
            for path, ref in self.populated.items()
            if decorator.is_visible(path, actor)
        }
        return {
            "id": self.id(),
            "title": "" if title_value is None else str(title_value),
            "params": params,
            "populated": populated,
            "recordActions": decorator.record_actions(self, actor, granted=granted),
            "errors": dict(self.errors),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.resource.id()!r}, id={self.id()!r})"


class BaseResource(abc.ABC):
    """Abstract store-backed collection of records.

    Subclasses implement the query methods. ``decorate()`` becomes
    available once the resource has been registered on an ``Admin``.
    """

    _decorator: ResourceDecorator | None = None

    @abc.abstractmethod
    def id(self) -> str:
        """Unique id of the resource, used in routes."""

    @abc.abstractmethod
    def properties(self) -> Sequence[BaseProperty]:
        """All properties of the resource."""

    def property(self, path: str) -> BaseProperty | None:
        for prop in self.properties():
            if prop.name() == path:
                return prop
        return None

    def id_property(self) -> BaseProperty:
        for prop in self.properties():
            if prop.is_id():
                return prop
        raise ConfigurationError(
            f"resource {self.id()!r} has no id property", f"{type(self).__name__}.properties"
        )

    @abc.abstractmethod
    async def find(
        self,
        filter: Filter,
        *,
        limit: int = 20,
        offset: int = 0,
        sort: Sort | None = None,
    ) -> list[BaseRecord]:
        """Return records matching *filter*, ordered by *sort*."""

    @abc.abstractmethod
    async def count(self, filter: Filter) -> int:
        """Return the number of records matching *filter*."""

    @abc.abstractmethod
    async def find_one(self, record_id: str) -> BaseRecord | None:
        """Return the record with *record_id*, or ``None``."""

    @abc.abstractmethod
    async def find_many(self, record_ids: Iterable[str]) -> list[BaseRecord]:
        """Return the records whose ids are in *record_ids* (missing ids are skipped)."""

    @abc.abstractmethod
    async def create(self, params: Mapping[str, Any]) -> BaseRecord:
        """Persist a new record and return it."""

    @abc.abstractmethod
    async def update(self, record_id: str, params: Mapping[str, Any]) -> BaseRecord:
        """Update an existing record and return it."""

    @abc.abstractmethod
    async def delete(self, record_id: str) -> None:
        """Delete the record with *record_id*."""

    def assign_decorator(self, decorator: ResourceDecorator) -> None:
        self._decorator = decorator

    def decorate(self) -> ResourceDecorator:
        """Return the decorator assigned when the resource was registered."""
        if self._decorator is None:
            raise ConfigurationError(
                f"resource {self.id()!r} is not registered on an Admin", "Admin.register"
            )
        return self._decorator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id()!r})"
