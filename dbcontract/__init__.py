"""Client-side contract layer for the database-management platform.

This package exposes the enum codec shared with the remote service, the
configuration and telemetry helpers, and the store registry that composes the
per-domain slices into one namespace. Subpackages are import-safe: importing
``dbcontract.codec`` never pulls in the store layer.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
