"""Base exceptions shared by every feature module."""


class ShopError(Exception):
    """Base class for errors surfaced to callers of the shop services."""


class StoreError(ShopError):
    """Raised when the underlying database fails; the operation left no partial effects."""
