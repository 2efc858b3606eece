"""Environment slice: deployment stages such as test and prod."""
from __future__ import annotations

from dbcontract.codec import State, StateField
from dbcontract.store.base import EntityStore, WireModel


class Environment(WireModel):
    """``environments/{id}`` resource."""

    name: str
    title: str = ""
    order: int = 0
    state: StateField = State.STATE_UNSPECIFIED


class EnvironmentStore(EntityStore[Environment]):
    entity_type = Environment

    def list_ordered(self, *, show_deleted: bool = False) -> list[Environment]:
        """Environments in pipeline order (``order`` ascending, then name)."""

        return sorted(self.list_all(show_deleted=show_deleted), key=lambda env: (env.order, env.name))


environment_store = EnvironmentStore()

__all__ = ["Environment", "EnvironmentStore", "environment_store"]
