"""Filter — property/value constraints applied to resource queries."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqla_admin_api.resource._base import BaseProperty, BaseResource

__all__ = ["Filter", "FilterElement"]

FILTER_QUERY_PREFIX = "filters."


@dataclass(frozen=True, slots=True)
class FilterElement:
    """A single constraint: *property* must match *value*."""

    path: str
    property: BaseProperty
    value: Any


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Filter:
    """A set of constraints on a resource's properties.

    Unknown property names and empty values (``None`` or ``""``) are
    dropped, so an empty mapping matches every record.

    Example::

        flt = Filter({"name": "ann"}, users)
        records = await users.find(flt, limit=10)
    """

    def __init__(self, filters: Mapping[str, Any] | None, resource: BaseResource) -> None:
        self.resource = resource
        self._elements: dict[str, FilterElement] = {}
        for path, value in (filters or {}).items():
            if value is None or value == "":
                continue
            prop = resource.property(path)
            if prop is None:
                continue
            self._elements[path] = FilterElement(path=path, property=prop, value=value)

    @classmethod
    def from_query(cls, query: Mapping[str, Any], resource: BaseResource) -> Filter:
        """Build a filter from ``filters.<property>`` query-string keys."""
        return cls(
            {
                key[len(FILTER_QUERY_PREFIX) :]: value
                for key, value in query.items()
                if key.startswith(FILTER_QUERY_PREFIX)
            },
            resource,
        )

    def get(self, path: str) -> FilterElement | None:
        return self._elements.get(path)

    def is_empty(self) -> bool:
        return not self._elements

    def to_dict(self) -> dict[str, Any]:
        return {path: element.value for path, element in self._elements.items()}

    def matches(self, params: Mapping[str, Any]) -> bool:
        """Evaluate the filter against a record's params in memory.

        String properties match case-insensitively by substring; all
        other properties compare by their string form.
        """
        for element in self._elements.values():
            value = params.get(element.path)
            if value is None:
                return False
            if element.property.type() == "string":
                if str(element.value).casefold() not in str(value).casefold():
                    return False
            elif _as_text(value) != _as_text(element.value):
                return False
        return True

    def __iter__(self) -> Iterator[FilterElement]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Filter({self.to_dict()!r})"
