"""Configuration module for sqla-admin-api."""

from __future__ import annotations

from sqla_admin_api.config._config import AdminConfig

__all__ = ["AdminConfig"]
