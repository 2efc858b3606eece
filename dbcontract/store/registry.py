"""Explicit registry composing store slices into one flat namespace.

Each slice is a module declaring its public surface in ``__all__``. The
registry enumerates those names, records which slice contributed each one and
refuses to start when two slices bind one name to different objects. It holds
references only: entity state stays inside the slice that owns it.
"""
from __future__ import annotations

import importlib
import logging
from types import MappingProxyType, ModuleType
from typing import Any, Dict, Iterable, Iterator, Mapping

from dbcontract.core.errors import NameCollisionError, SliceDefinitionError

logger = logging.getLogger("dbcontract.store")


def slice_exports(module: ModuleType) -> Dict[str, Any]:
    """Return ``{name: object}`` for every name in ``module.__all__``."""

    public = getattr(module, "__all__", None)
    if public is None:
        raise SliceDefinitionError(f"Slice {module.__name__} does not declare __all__")
    if isinstance(public, str) or not isinstance(public, Iterable):
        raise SliceDefinitionError(f"Slice {module.__name__} __all__ must be a list of names")
    exports: Dict[str, Any] = {}
    for name in public:
        if not isinstance(name, str) or not name:
            raise SliceDefinitionError(f"Slice {module.__name__} exports invalid name {name!r}")
        try:
            exports[name] = getattr(module, name)
        except AttributeError as exc:
            raise SliceDefinitionError(
                f"Slice {module.__name__} lists {name!r} in __all__ but does not define it"
            ) from exc
    return exports


class ModuleRegistry:
    """Flat namespace of names contributed by registered slices.

    Re-exporting the very same object under one name from several slices is
    allowed (e.g. a shared codec type); binding the name to a different object
    raises :class:`NameCollisionError`.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Any] = {}
        self._origins: Dict[str, str] = {}
        self._slices: list[str] = []

    # Registration ------------------------------------------------------
    def register(self, module: ModuleType | str, exports: Mapping[str, Any] | None = None) -> list[str]:
        """Register a slice module (or an import path) and return its exported names.

        ``exports`` overrides the names taken from ``__all__``; it is meant for
        slices assembled at runtime and for tests.
        """

        if isinstance(module, str):
            module = importlib.import_module(module)
        slice_name = module.__name__
        if slice_name in self._slices:
            raise SliceDefinitionError(f"Slice {slice_name} is already registered")
        contributed = dict(exports) if exports is not None else slice_exports(module)

        # Validate the whole slice before binding anything so a failure leaves
        # the registry unchanged.
        for name, obj in contributed.items():
            if name.startswith("_"):
                raise SliceDefinitionError(f"Slice {slice_name} exports private name {name!r}")
            if name in RESERVED_NAMES:
                raise NameCollisionError(name, f"{__name__}.ModuleRegistry", slice_name)
            if name in self._bindings and self._bindings[name] is not obj:
                raise NameCollisionError(name, self._origins[name], slice_name)

        for name, obj in contributed.items():
            if name not in self._bindings:
                self._bindings[name] = obj
                self._origins[name] = slice_name
        self._slices.append(slice_name)
        logger.debug(
            "Registered store slice",
            extra={"slice": slice_name, "n_names": len(contributed)},
        )
        return sorted(contributed)

    # Lookup ------------------------------------------------------------
    def resolve(self, name: str) -> Any:
        try:
            return self._bindings[name]
        except KeyError as exc:
            raise KeyError(f"Name {name} is not exported by any registered slice") from exc

    def origin(self, name: str) -> str:
        """Return the slice that first contributed ``name``."""

        try:
            return self._origins[name]
        except KeyError as exc:
            raise KeyError(f"Name {name} is not exported by any registered slice") from exc

    def names(self) -> list[str]:
        return sorted(self._bindings)

    @property
    def slices(self) -> tuple[str, ...]:
        return tuple(self._slices)

    def as_mapping(self) -> Mapping[str, Any]:
        return MappingProxyType(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._bindings)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._bindings[name]
        except KeyError as exc:
            raise AttributeError(f"Registry has no name {name!r}") from exc


# Public registry attributes would hide slice names from attribute access.
RESERVED_NAMES = frozenset(name for name in dir(ModuleRegistry) if not name.startswith("_"))


def build_registry(modules: Iterable[ModuleType | str]) -> ModuleRegistry:
    """Register ``modules`` in order and return the composed registry."""

    registry = ModuleRegistry()
    for module in modules:
        registry.register(module)
    logger.info(
        "Built store registry",
        extra={"n_slices": len(registry.slices), "n_names": len(registry), "slices": list(registry.slices)},
    )
    return registry


__all__ = ["RESERVED_NAMES", "ModuleRegistry", "build_registry", "slice_exports"]
