"""Admin configuration for sqla-admin-api."""

from __future__ import annotations

from dataclasses import dataclass

from sqla_admin_api._types import DashboardHandler

__all__ = ["AdminConfig"]


@dataclass(frozen=True, slots=True)
class AdminConfig:
    """Immutable configuration held by an :class:`~sqla_admin_api.Admin`.

    Attributes:
        root_path: URL prefix the admin is mounted under. Used by
            ``ViewHelpers`` to build links.
        dashboard_handler: Optional handler for the dashboard endpoint.
            When unset the endpoint returns an informational message.
        log_action_decisions: Log every granted action at INFO level
            (denials are always logged).
        default_per_page: Page size of the built-in ``list`` action.
        max_per_page: Upper bound for a client-requested ``perPage``.

    Example::

        config = AdminConfig(root_path="/backoffice")
        verbose = config.merge(log_action_decisions=True)
    """

    root_path: str = "/admin"
    dashboard_handler: DashboardHandler | None = None
    log_action_decisions: bool = False
    default_per_page: int = 10
    max_per_page: int = 500

    def __post_init__(self) -> None:
        if not self.root_path.startswith("/"):
            raise ValueError(f"root_path must start with '/', got {self.root_path!r}")
        if self.root_path != "/" and self.root_path.endswith("/"):
            raise ValueError(f"root_path must not end with '/', got {self.root_path!r}")
        if self.dashboard_handler is not None and not callable(self.dashboard_handler):
            raise ValueError(
                f"dashboard_handler must be callable, got {type(self.dashboard_handler).__name__}"
            )
        if self.default_per_page < 1:
            raise ValueError(f"default_per_page must be positive, got {self.default_per_page!r}")
        if self.max_per_page < self.default_per_page:
            raise ValueError(
                f"max_per_page must be >= default_per_page ({self.default_per_page}), "
                f"got {self.max_per_page!r}"
            )

    def merge(
        self,
        *,
        root_path: str | None = None,
        dashboard_handler: DashboardHandler | None = None,
        log_action_decisions: bool | None = None,
        default_per_page: int | None = None,
        max_per_page: int | None = None,
    ) -> AdminConfig:
        """Return a new config with non-None overrides applied.

        Args:
            root_path: Override for root_path (ignored if None).
            dashboard_handler: Override for dashboard_handler (ignored if None).
            log_action_decisions: Override for log_action_decisions (ignored if None).
            default_per_page: Override for default_per_page (ignored if None).
            max_per_page: Override for max_per_page (ignored if None).

        Returns:
            A new ``AdminConfig`` with overrides merged.
        """
        return AdminConfig(
            root_path=root_path if root_path is not None else self.root_path,
            dashboard_handler=(
                dashboard_handler if dashboard_handler is not None else self.dashboard_handler
            ),
            log_action_decisions=(
                log_action_decisions
                if log_action_decisions is not None
                else self.log_action_decisions
            ),
            default_per_page=(
                default_per_page if default_per_page is not None else self.default_per_page
            ),
            max_per_page=max_per_page if max_per_page is not None else self.max_per_page,
        )
