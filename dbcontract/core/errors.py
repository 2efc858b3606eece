"""Error hierarchy shared by the client subsystems.

The enum codec deliberately has no entry here: decoding and encoding never
fail. Everything else raises the most specific error available so callers can
tell a misconfigured deployment (registry, config) from a missing entity.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the package."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class RegistryError(CoreError):
    """Raised when the store registry cannot be composed."""


class NameCollisionError(RegistryError):
    """Raised when two slices export different objects under one name."""

    def __init__(self, name: str, existing_origin: str, new_origin: str) -> None:
        self.name = name
        self.existing_origin = existing_origin
        self.new_origin = new_origin
        super().__init__(
            f"Name {name!r} exported by slice {new_origin!r} is already "
            f"registered by slice {existing_origin!r}"
        )


class SliceDefinitionError(RegistryError):
    """Raised when a slice module does not declare a usable public surface."""


class SliceError(CoreError):
    """Raised by slice stores when a mutation or lookup cannot proceed."""


class EntityNotFoundError(SliceError):
    """Raised when a slice store has no entity under the requested name."""
