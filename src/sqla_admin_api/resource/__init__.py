"""Resources — store-backed record collections and their admin decoration."""

from sqla_admin_api.resource._base import BaseProperty, BaseRecord, BaseResource, RecordJSON, Sort
from sqla_admin_api.resource._filter import Filter, FilterElement
from sqla_admin_api.resource._decorator import ResourceDecorator, ResourceOptions
from sqla_admin_api.resource._sqlalchemy import SQLAlchemyProperty, SQLAlchemyResource

__all__ = [
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "Filter",
    "FilterElement",
    "RecordJSON",
    "ResourceDecorator",
    "ResourceOptions",
    "SQLAlchemyProperty",
    "SQLAlchemyResource",
    "Sort",
]
