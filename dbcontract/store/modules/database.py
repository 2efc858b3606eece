"""Database slice: logical databases living on registered instances.

Lookups compose the owning instance from the instance slice. A ``find``
without an instance filter hides databases whose instance is unknown or
deleted, the same way archived instances are hidden from listings.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from dbcontract.codec import State, StateField
from dbcontract.store.base import EntityStore, WireModel
from dbcontract.store.modules.instance import Instance, InstanceStore, instance_store

logger = logging.getLogger("dbcontract.store")

# Pseudo-database standing for every database on an instance.
ALL_DATABASE_NAME = "*"


class Database(WireModel):
    """``instances/{instance}/databases/{database}`` resource."""

    name: str
    instance: str = ""
    project: str = ""
    environment: str = ""
    character_set: str = ""
    collation: str = ""
    schema_version: str = ""
    sync_state: StateField = State.STATE_UNSPECIFIED
    successful_sync_time: Optional[datetime] = None
    labels: Dict[str, str] = Field(default_factory=dict)


class DatabaseFind(BaseModel):
    """Filter for :meth:`DatabaseStore.find`; unset fields match everything."""

    instance: Optional[str] = None
    project: Optional[str] = None
    database_name: Optional[str] = None
    sync_state: Optional[StateField] = None
    include_all_database: bool = False


class DatabasePatch(BaseModel):
    """Partial update for :meth:`DatabaseStore.patch`; ``None`` leaves a field as is."""

    model_config = ConfigDict(frozen=True)

    name: str
    project: Optional[str] = None
    schema_version: Optional[str] = None
    sync_state: Optional[StateField] = None
    successful_sync_time: Optional[datetime] = None
    labels: Optional[Dict[str, str]] = None


class DatabaseStore(EntityStore[Database]):
    entity_type = Database

    def __init__(self, instances: InstanceStore | None = None) -> None:
        super().__init__()
        self._instances = instances if instances is not None else instance_store

    def instance_of(self, database: Database) -> Instance | None:
        return self._instances.get(database.instance)

    def find(self, find: DatabaseFind) -> list[Database]:
        """Return databases matching ``find``, sorted by name."""

        matches = []
        for database in self.list_all(show_deleted=True):
            if find.instance is not None and database.instance != find.instance:
                continue
            if find.project is not None and database.project != find.project:
                continue
            short_name = database.name.rsplit("/", 1)[-1]
            if find.database_name is not None and short_name != find.database_name:
                continue
            if find.sync_state is not None and database.sync_state is not find.sync_state:
                continue
            if not find.include_all_database and short_name == ALL_DATABASE_NAME:
                continue
            matches.append(database)

        if find.instance is None:
            filtered = []
            for database in matches:
                instance = self.instance_of(database)
                if instance is None or instance.state is State.DELETED:
                    continue
                filtered.append(database)
            matches = filtered
        return matches

    def patch(self, patch: DatabasePatch) -> Database:
        """Apply the set fields of ``patch`` to an existing database."""

        changes = patch.model_dump(exclude={"name"}, exclude_none=True)
        if not changes:
            return self.require(patch.name)
        logger.info(
            "Patching database",
            extra={"database": patch.name, "fields": sorted(changes)},
        )
        return self.update(patch.name, **changes)


database_store = DatabaseStore()

__all__ = ["ALL_DATABASE_NAME", "Database", "DatabaseFind", "DatabasePatch", "DatabaseStore", "database_store"]
