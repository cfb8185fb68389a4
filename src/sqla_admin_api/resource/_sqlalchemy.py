"""SQLAlchemyResource — async adapter over a declarative model."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    ColumnElement,
    Date,
    DateTime,
    Enum,
    Float,
    Integer,
    Numeric,
    String,
    Uuid,
    false,
    func,
    select,
)
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sqla_admin_api._types import PropertyType
from sqla_admin_api.exceptions import ConfigurationError, NotFoundError
from sqla_admin_api.resource._base import BaseProperty, BaseRecord, BaseResource, Sort
from sqla_admin_api.resource._filter import Filter

__all__ = ["SQLAlchemyProperty", "SQLAlchemyResource"]


def _property_type(column: Column[Any]) -> PropertyType:
    col_type = column.type
    if isinstance(col_type, Boolean):
        return "boolean"
    if isinstance(col_type, (Integer, Numeric, Float)):
        return "number"
    if isinstance(col_type, (DateTime, Date)):
        return "datetime"
    if isinstance(col_type, Uuid):
        # Matched by equality, never by substring.
        return "mixed"
    if isinstance(col_type, (String, Enum)):
        return "string"
    return "mixed"


def _coerce(column: Column[Any], value: Any) -> Any:
    """Convert a route/query/payload value to the column's Python type.

    Raises:
        ValueError: If *value* cannot be converted.
    """
    if value is None:
        return None
    col_type = column.type
    if isinstance(col_type, Boolean):
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if isinstance(col_type, Integer):
        return int(value)
    if isinstance(col_type, (Numeric, Float)):
        return float(value)
    if isinstance(col_type, DateTime) and isinstance(value, str):
        return datetime.fromisoformat(value)
    if isinstance(col_type, Date) and isinstance(value, str):
        return date.fromisoformat(value)
    if isinstance(col_type, Uuid):
        parsed = value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
        return parsed if col_type.as_uuid else str(parsed)
    if isinstance(col_type, String):
        return str(value)
    return value


class SQLAlchemyProperty(BaseProperty):
    """A property backed by a mapped column."""

    def __init__(self, key: str, column: Column[Any], *, reference: str | None = None) -> None:
        super().__init__(
            key,
            type=_property_type(column),
            is_id=bool(column.primary_key),
            reference=reference,
        )
        self.column = column


class SQLAlchemyResource(BaseResource):
    """Resource backed by a SQLAlchemy declarative model.

    Every call opens a short-lived ``AsyncSession`` from
    *session_factory* and commits writes before returning. The model
    must have a single-column primary key. Foreign-key columns become
    reference properties pointing at the referenced table's name, which
    is also the default resource id.

    Args:
        model: The mapped model class.
        session_factory: An ``async_sessionmaker`` producing ``AsyncSession``.
        resource_id: Optional id override. Defaults to the table name.

    Example::

        engine = create_async_engine("sqlite+aiosqlite:///app.db")
        factory = async_sessionmaker(engine, expire_on_commit=False)

        admin = Admin()
        admin.register(SQLAlchemyResource(User, factory))
    """

    def __init__(
        self,
        model: type,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        resource_id: str | None = None,
    ) -> None:
        self.model = model
        self._session_factory = session_factory
        mapper = sa_inspect(model)
        if len(mapper.primary_key) != 1:
            raise ConfigurationError(
                f"model {model.__name__} must have exactly one primary key column",
                "SQLAlchemyResource",
            )
        self._id = resource_id or mapper.local_table.name
        self._properties: list[SQLAlchemyProperty] = []
        for attr in mapper.column_attrs:
            column = attr.columns[0]
            reference = None
            foreign_keys = list(column.foreign_keys)
            if foreign_keys:
                reference = foreign_keys[0].column.table.name
            self._properties.append(SQLAlchemyProperty(attr.key, column, reference=reference))
        self._pk = next(p for p in self._properties if p.is_id())

    def id(self) -> str:
        return self._id

    def properties(self) -> Sequence[SQLAlchemyProperty]:
        return list(self._properties)

    def _attribute(self, prop: SQLAlchemyProperty) -> Any:
        return getattr(self.model, prop.name())

    def _where(self, filter: Filter) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        for element in filter:
            prop = self._sa_property(element.path)
            attr = self._attribute(prop)
            if prop.type() == "string":
                clauses.append(attr.icontains(str(element.value), autoescape=True))
            else:
                try:
                    clauses.append(attr == _coerce(prop.column, element.value))
                except ValueError:
                    clauses.append(false())
        return clauses

    def _sa_property(self, path: str) -> SQLAlchemyProperty:
        for prop in self._properties:
            if prop.name() == path:
                return prop
        raise NotFoundError(
            f"Property {path!r} does not exist on {self._id!r}", resource_id=self._id
        )

    def _pk_value(self, record_id: str) -> Any | None:
        try:
            return _coerce(self._pk.column, record_id)
        except ValueError:
            return None

    def _to_record(self, instance: Any) -> BaseRecord:
        return BaseRecord(
            {prop.name(): getattr(instance, prop.name()) for prop in self._properties},
            self,
        )

    def _values(self, params: Mapping[str, Any], *, include_pk: bool) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for prop in self._properties:
            if prop.name() not in params:
                continue
            if prop.is_id() and not include_pk:
                continue
            values[prop.name()] = _coerce(prop.column, params[prop.name()])
        return values

    async def find(
        self,
        filter: Filter,
        *,
        limit: int = 20,
        offset: int = 0,
        sort: Sort | None = None,
    ) -> list[BaseRecord]:
        stmt = select(self.model).where(*self._where(filter)).limit(limit).offset(offset)
        if sort is not None:
            attr = self._attribute(self._sa_property(sort.sort_by))
            stmt = stmt.order_by(attr.asc() if sort.direction == "asc" else attr.desc())
        async with self._session_factory() as session:
            instances = (await session.execute(stmt)).scalars().all()
            return [self._to_record(instance) for instance in instances]

    async def count(self, filter: Filter) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._where(filter))
        async with self._session_factory() as session:
            return int((await session.execute(stmt)).scalar_one())

    async def find_one(self, record_id: str) -> BaseRecord | None:
        pk_value = self._pk_value(record_id)
        if pk_value is None:
            return None
        async with self._session_factory() as session:
            instance = await session.get(self.model, pk_value)
            return None if instance is None else self._to_record(instance)

    async def find_many(self, record_ids: Iterable[str]) -> list[BaseRecord]:
        pk_values = [v for v in (self._pk_value(rid) for rid in record_ids) if v is not None]
        if not pk_values:
            return []
        stmt = select(self.model).where(self._attribute(self._pk).in_(pk_values))
        async with self._session_factory() as session:
            instances = (await session.execute(stmt)).scalars().all()
            return [self._to_record(instance) for instance in instances]

    async def create(self, params: Mapping[str, Any]) -> BaseRecord:
        instance = self.model(**self._values(params, include_pk=True))
        async with self._session_factory() as session:
            session.add(instance)
            await session.commit()
            await session.refresh(instance)
            return self._to_record(instance)

    async def update(self, record_id: str, params: Mapping[str, Any]) -> BaseRecord:
        async with self._session_factory() as session:
            instance = await self._get_or_raise(session, record_id)
            for key, value in self._values(params, include_pk=False).items():
                setattr(instance, key, value)
            await session.commit()
            await session.refresh(instance)
            return self._to_record(instance)

    async def delete(self, record_id: str) -> None:
        async with self._session_factory() as session:
            instance = await self._get_or_raise(session, record_id)
            await session.delete(instance)
            await session.commit()

    async def _get_or_raise(self, session: AsyncSession, record_id: str) -> Any:
        pk_value = self._pk_value(record_id)
        instance = None if pk_value is None else await session.get(self.model, pk_value)
        if instance is None:
            raise NotFoundError(
                f"Record {record_id!r} of resource {self._id!r} was not found",
                resource_id=self._id,
            )
        return instance
