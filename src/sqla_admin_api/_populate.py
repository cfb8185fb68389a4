"""Population of reference properties on loaded records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqla_admin_api.resource._base import BaseRecord, BaseResource

__all__ = ["populate"]

logger = logging.getLogger("sqla_admin_api.populate")


async def populate(records: Sequence[BaseRecord | None]) -> list[BaseRecord | None]:
    """Resolve reference properties of *records* in place.

    For every reference property, the referenced records are loaded with
    a single ``find_many`` call on the target resource and stored in
    ``record.populated[property_name]``. The returned list has the same
    length and order as *records*, holds the same record objects, and
    keeps ``None`` entries untouched.

    References to resources that are not registered on the admin are
    skipped.

    Example::

        record = await orders.find_one("42")
        [record] = await populate([record])
        customer = record.populated.get("customer_id")
    """
    result = list(records)

    groups: dict[int, tuple[BaseResource, list[BaseRecord]]] = {}
    for record in result:
        if record is None:
            continue
        entry = groups.setdefault(id(record.resource), (record.resource, []))
        entry[1].append(record)

    for resource, group in groups.values():
        admin = resource.decorate().admin
        for prop in resource.properties():
            target_id = prop.reference()
            if target_id is None:
                continue
            target = admin.get_resource(target_id)
            if target is None:
                logger.debug(
                    "Skipping reference %s.%s: resource %r is not registered",
                    resource.id(),
                    prop.name(),
                    target_id,
                )
                continue

            path = prop.name()
            ids = {str(r.params[path]) for r in group if r.params.get(path) is not None}
            if not ids:
                continue
            referenced = {ref.id(): ref for ref in await target.find_many(sorted(ids))}
            for record in group:
                value = record.params.get(path)
                if value is not None:
                    record.populated[path] = referenced.get(str(value))

    return result
