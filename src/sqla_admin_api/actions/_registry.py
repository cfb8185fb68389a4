"""ActionRegistry — stores and retrieves custom actions per resource."""

from __future__ import annotations

from sqla_admin_api.actions._base import Action

__all__ = ["ActionRegistry", "get_default_registry"]


class ActionRegistry:
    """Registry that maps (resource_id, action_name) pairs to actions.

    Safe for reads after startup. Registration is expected to happen
    before the admin starts serving requests.

    Example::

        registry = ActionRegistry()
        registry.register("orders", Action(name="approve", scope="record", handler=fn))
        action = registry.lookup("orders", "approve")
    """

    def __init__(self) -> None:
        self._actions: dict[tuple[str, str], Action] = {}

    def register(self, resource_id: str, action: Action) -> None:
        """Register *action* for the resource identified by *resource_id*.

        A later registration under the same name replaces the earlier one,
        which is how built-in actions are overridden.

        Args:
            resource_id: The id of the resource the action belongs to.
            action: The action to register.

        Example::

            registry.register(
                "users",
                Action(name="list", scope="resource", handler=list_handler,
                       access=has_role("admin")),
            )
        """
        self._actions[(resource_id, action.name)] = action

    def lookup(self, resource_id: str, action_name: str) -> Action | None:
        """Return the action registered for (resource_id, action_name), if any.

        Args:
            resource_id: The resource id to look up.
            action_name: The action name to look up.

        Returns:
            The registered ``Action`` or ``None``.
        """
        return self._actions.get((resource_id, action_name))

    def has_action(self, resource_id: str, action_name: str) -> bool:
        """Check whether an action is registered for (resource_id, action_name)."""
        return (resource_id, action_name) in self._actions

    def actions_for(self, resource_id: str) -> dict[str, Action]:
        """Return a copy of all actions registered for *resource_id*, keyed by name.

        Example::

            for name, action in registry.actions_for("orders").items():
                print(name, action.scope)
        """
        return {
            name: action for (rid, name), action in self._actions.items() if rid == resource_id
        }

    def clear(self) -> None:
        """Remove all registered actions.

        Primarily useful in test teardown to reset the registry state
        between tests.
        """
        self._actions.clear()


# Module-level default registry (singleton).
_default_registry = ActionRegistry()


def get_default_registry() -> ActionRegistry:
    """Return the global default (singleton) action registry.

    This is the registry used by ``@action`` and by ``Admin`` when no
    explicit registry is provided.
    """
    return _default_registry
