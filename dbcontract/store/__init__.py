"""Store layer: every slice's public names reachable from one namespace.

The slice list is closed, so the default registry is composed at import time
and any name collision aborts the import. Names are served through module
``__getattr__``::

    from dbcontract.store import Database, database_store
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from dbcontract.config.models import ClientConfig
from dbcontract.core.errors import NameCollisionError

from .registry import ModuleRegistry, build_registry, slice_exports

logger = logging.getLogger("dbcontract.store")

SLICE_MODULES: tuple[str, ...] = (
    "dbcontract.store.modules.environment",
    "dbcontract.store.modules.instance",
    "dbcontract.store.modules.database",
    "dbcontract.store.modules.project",
    "dbcontract.store.modules.vcs",
    "dbcontract.store.modules.policy",
    "dbcontract.store.modules.sql",
)

_OWN_NAMES = (
    "SLICE_MODULES",
    "ModuleRegistry",
    "build_registry",
    "build_registry_from_config",
    "default_registry",
    "slice_exports",
)

# Submodules become package attributes once imported.
_SUBMODULES = ("base", "modules", "registry")


def _reserved_names() -> set[str]:
    """Names a slice export could never be reached under, because the package binds them."""

    own = {name for name in globals() if not name.startswith("_")}
    return own | set(_OWN_NAMES) | set(_SUBMODULES)


def _compose(modules: Iterable[str]) -> ModuleRegistry:
    composed = build_registry(modules)
    for name in sorted(_reserved_names()):
        if name in composed:
            raise NameCollisionError(name, __name__, composed.origin(name))
    return composed


def build_registry_from_config(config: ClientConfig) -> ModuleRegistry:
    """Compose the built-in slices plus ``config.store.extra_modules``."""

    modules = [*SLICE_MODULES, *config.store.extra_modules]
    logger.debug("Composing store registry from config", extra={"slices": modules})
    return _compose(modules)


default_registry = _compose(SLICE_MODULES)


def __getattr__(name: str) -> Any:
    if name in default_registry:
        return default_registry.resolve(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *default_registry.names()})


__all__ = [*_OWN_NAMES, *default_registry.names()]
