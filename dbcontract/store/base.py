"""Building blocks shared by store slices: wire models and keyed entity stores."""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dbcontract.codec import State
from dbcontract.core.errors import EntityNotFoundError, SliceError

logger = logging.getLogger("dbcontract.store")

M = TypeVar("M", bound="WireModel")


class WireModel(BaseModel):
    """Entity exchanged with the service as camelCase JSON.

    Enum fields use the codec field types, so unknown values validate to the
    sentinel and dump back as ``"UNRECOGNIZED"``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def from_json(cls: type[M], payload: Mapping[str, Any]) -> M:
        return cls.model_validate(payload)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class EntityStore(Generic[M]):
    """Thread-safe map of entities keyed by resource ``name``.

    Entities are frozen; every mutation swaps the stored instance under a
    single lock, so readers always see a whole entity.
    """

    entity_type: type[M]

    def __init__(self) -> None:
        self._entities: Dict[str, M] = {}
        self._lock = threading.Lock()

    def _coerce(self, entity: M | Mapping[str, Any]) -> M:
        if isinstance(entity, self.entity_type):
            return entity
        if isinstance(entity, Mapping):
            return self.entity_type.from_json(entity)
        raise SliceError(f"{type(self).__name__} cannot store {type(entity).__name__}")

    def upsert(self, entity: M | Mapping[str, Any]) -> M:
        """Insert or replace an entity given as a model or a wire payload."""

        item = self._coerce(entity)
        with self._lock:
            self._entities[item.name] = item  # type: ignore[attr-defined]
        return item

    def upsert_many(self, entities: Iterable[M | Mapping[str, Any]]) -> list[M]:
        items = [self._coerce(entity) for entity in entities]
        with self._lock:
            for item in items:
                self._entities[item.name] = item  # type: ignore[attr-defined]
        return items

    def get(self, name: str) -> M | None:
        return self._entities.get(name)

    def require(self, name: str) -> M:
        item = self._entities.get(name)
        if item is None:
            raise EntityNotFoundError(f"{self.entity_type.__name__} {name} not found")
        return item

    def list_all(self, *, show_deleted: bool = False) -> list[M]:
        """Return entities sorted by name, hiding DELETED ones unless asked."""

        with self._lock:
            snapshot = list(self._entities.values())
        items = sorted(snapshot, key=lambda item: item.name)  # type: ignore[attr-defined]
        if show_deleted:
            return items
        return [item for item in items if getattr(item, "state", None) is not State.DELETED]

    def select(self, predicate: Callable[[M], bool]) -> list[M]:
        return [item for item in self.list_all(show_deleted=True) if predicate(item)]

    def update(self, name: str, /, **changes: Any) -> M:
        """Replace fields of an existing entity; unknown fields are rejected."""

        fields = self.entity_type.model_fields
        for key in changes:
            if key not in fields:
                raise SliceError(f"Unknown {self.entity_type.__name__} field: {key}")
        if changes.get("name", name) != name:
            raise SliceError("Entity name is the store key and cannot be changed")
        with self._lock:
            current = self._entities.get(name)
            if current is None:
                raise EntityNotFoundError(f"{self.entity_type.__name__} {name} not found")
            merged = {**current.model_dump(), **changes}
            updated = self.entity_type.model_validate(merged)
            self._entities[name] = updated
        logger.debug(
            "Updated entity",
            extra={"entity_type": self.entity_type.__name__, "entity_name": name, "fields": sorted(changes)},
        )
        return updated

    def remove(self, name: str) -> M:
        with self._lock:
            item = self._entities.pop(name, None)
        if item is None:
            raise EntityNotFoundError(f"{self.entity_type.__name__} {name} not found")
        logger.debug(
            "Removed entity",
            extra={"entity_type": self.entity_type.__name__, "entity_name": name},
        )
        return item

    def clear(self) -> None:
        with self._lock:
            self._entities.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __len__(self) -> int:
        return len(self._entities)


__all__ = ["EntityStore", "WireModel"]
