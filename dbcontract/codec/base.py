"""Generic wire codec for closed integer vocabularies.

Every enumerated type shared with the service is an ``IntEnum`` with three
representations: the in-memory ordinal, the JSON name and the
``UNRECOGNIZED`` sentinel (ordinal ``-1``) used for anything this build does
not know. Decoding and encoding are total: no input raises.

Unknown integers collapse to the sentinel for every vocabulary, the same way
unknown names do. Callers that need to tell "not set" from "set to something
newer than us" compare against the zero value and the sentinel separately.
"""
from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

SENTINEL_NAME = "UNRECOGNIZED"
SENTINEL_ORDINAL = -1
ZERO_SUFFIX = "_UNSPECIFIED"

E = TypeVar("E", bound="ProtoEnum")


class ProtoEnum(IntEnum):
    """Base class for wire vocabularies.

    Subclasses declare their members (including ``UNRECOGNIZED = -1``) and are
    decorated with :func:`vocabulary`, which validates the table once at
    import time.
    """

    @classmethod
    def _tables(cls) -> tuple[Mapping[int, ProtoEnum], Mapping[str, ProtoEnum]]:
        tables = cls.__dict__.get("_wire_tables")
        if tables is None:
            by_ordinal = MappingProxyType({member.value: member for member in cls})
            by_name = MappingProxyType({member.name: member for member in cls})
            tables = (by_ordinal, by_name)
            type.__setattr__(cls, "_wire_tables", tables)
        return tables

    @classmethod
    def from_json(cls: type[E], value: Any) -> E:
        """Decode a wire value (name or ordinal) into a member, never raising."""

        by_ordinal, by_name = cls._tables()
        if isinstance(value, str):
            member = by_name.get(value)
        else:
            ordinal = _as_ordinal(value)
            member = by_ordinal.get(ordinal) if ordinal is not None else None
        if member is None:
            return cls.unrecognized()
        return member  # type: ignore[return-value]

    @classmethod
    def to_json(cls, value: Any) -> str:
        """Encode an ordinal into its canonical wire name, never raising."""

        by_ordinal, _ = cls._tables()
        ordinal = _as_ordinal(value)
        member = by_ordinal.get(ordinal) if ordinal is not None else None
        if member is None:
            return SENTINEL_NAME
        return member.name

    @classmethod
    def unrecognized(cls: type[E]) -> E:
        return cls._tables()[0][SENTINEL_ORDINAL]  # type: ignore[return-value]

    @classmethod
    def unspecified(cls: type[E]) -> E:
        return cls._tables()[0][0]  # type: ignore[return-value]

    @classmethod
    def known_names(cls) -> tuple[str, ...]:
        """Canonical names in ordinal order, sentinel excluded."""

        return tuple(member.name for member in sorted(cls) if member.value != SENTINEL_ORDINAL)

    @property
    def recognized(self) -> bool:
        return self.value != SENTINEL_ORDINAL

    @classmethod
    def _missing_(cls, value: object) -> ProtoEnum:
        # Engine("MYSQL") and Engine(42) follow the same rules as from_json.
        return cls.from_json(value)


def _as_ordinal(value: Any) -> int | None:
    """Return ``value`` as an int ordinal, or None if it is not a JSON integer.

    ``bool`` is rejected even though it subclasses ``int``; integral floats are
    accepted because JSON does not distinguish ``2`` from ``2.0``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def vocabulary(cls: type[E]) -> type[E]:
    """Class decorator validating a :class:`ProtoEnum` table at definition time.

    Mirrors :func:`enum.unique`: raises ``ValueError`` for aliases, a missing
    or misnamed zero value, a missing sentinel or any other negative ordinal.
    """

    if not issubclass(cls, ProtoEnum):
        raise TypeError(f"{cls.__name__} must subclass ProtoEnum")
    aliases = [name for name, member in cls.__members__.items() if name != member.name]
    if aliases:
        raise ValueError(f"{cls.__name__} reuses ordinals under names {aliases}")
    by_ordinal, by_name = cls._tables()
    sentinel = by_name.get(SENTINEL_NAME)
    if sentinel is None or sentinel.value != SENTINEL_ORDINAL:
        raise ValueError(f"{cls.__name__} must define {SENTINEL_NAME} = {SENTINEL_ORDINAL}")
    zero = by_ordinal.get(0)
    if zero is None or not zero.name.endswith(ZERO_SUFFIX):
        raise ValueError(f"{cls.__name__} must define a zero value named *{ZERO_SUFFIX}")
    negatives = [member.name for member in cls if member.value < 0 and member is not sentinel]
    if negatives:
        raise ValueError(f"{cls.__name__} has negative ordinals {negatives}")
    return cls


__all__ = [
    "ProtoEnum",
    "SENTINEL_NAME",
    "SENTINEL_ORDINAL",
    "vocabulary",
]
