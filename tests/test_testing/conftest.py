"""Import fixtures from sqla_admin_api.testing for test discovery."""

from sqla_admin_api.testing._fixtures import admin_config, admin_registry, isolated_registry_state

__all__ = ["admin_registry", "admin_config", "isolated_registry_state"]
