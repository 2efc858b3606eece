"""Instance slice: database servers registered with the platform."""
from __future__ import annotations

from typing import Any

from dbcontract.codec import Engine, EngineField, State, StateField
from dbcontract.store.base import EntityStore, WireModel


class Instance(WireModel):
    """``instances/{id}`` resource."""

    name: str
    title: str = ""
    engine: EngineField = Engine.ENGINE_UNSPECIFIED
    engine_version: str = ""
    environment: str = ""
    external_link: str = ""
    state: StateField = State.STATE_UNSPECIFIED


class InstanceStore(EntityStore[Instance]):
    entity_type = Instance

    def list_by_engine(self, engine: Any, *, show_deleted: bool = False) -> list[Instance]:
        """Instances running ``engine`` (a member, ordinal or wire name).

        An unknown engine decodes to ``UNRECOGNIZED`` and therefore matches
        only instances whose own engine was unrecognized on decode.
        """

        wanted = Engine.from_json(engine)
        return [item for item in self.list_all(show_deleted=show_deleted) if item.engine is wanted]

    def list_in_environment(self, environment: str, *, show_deleted: bool = False) -> list[Instance]:
        return [item for item in self.list_all(show_deleted=show_deleted) if item.environment == environment]


instance_store = InstanceStore()

__all__ = ["Instance", "InstanceStore", "instance_store"]
