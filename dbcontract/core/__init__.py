"""Core primitives shared across all subsystems.

Higher level packages (codec, store, config) import the error hierarchy from
here to avoid circular dependencies.
"""

from . import errors

__all__ = ["errors"]
