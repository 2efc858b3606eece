"""Per-domain store slices.

Each module owns one domain's entities and mutations and declares its public
surface in ``__all__``. The slices are composed by ``dbcontract.store``; nothing
here should be imported through this package directly.
"""

__all__: list[str] = []
