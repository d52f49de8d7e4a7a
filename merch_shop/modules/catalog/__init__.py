"""Static merch catalog."""

from .items import CatalogItem, UnknownItemError, get_price, is_known_item, list_items

__all__ = [
    "CatalogItem",
    "UnknownItemError",
    "get_price",
    "is_known_item",
    "list_items",
]
