"""Shared abstractions used across feature modules."""

from .exceptions import ShopError, StoreError
from .transaction import atomic, store_errors

__all__ = ["ShopError", "StoreError", "atomic", "store_errors"]
