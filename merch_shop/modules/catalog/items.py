"""Merch items available in the shop and their prices in coins."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from merch_shop.modules.common.exceptions import ShopError


class UnknownItemError(ShopError):
    """Raised when an item name is not part of the catalog."""


@dataclass(slots=True, frozen=True)
class CatalogItem:
    name: str
    price: int


MERCH_ITEMS = MappingProxyType(
    {
        "t-shirt": 80,
        "cup": 20,
        "book": 50,
        "pen": 10,
        "powerbank": 200,
        "hoody": 300,
        "umbrella": 200,
        "socks": 10,
        "wallet": 50,
        "pink-hoody": 500,
    }
)


def is_known_item(name: str) -> bool:
    return name in MERCH_ITEMS


def get_price(name: str) -> int:
    try:
        return MERCH_ITEMS[name]
    except KeyError:
        raise UnknownItemError(f"unknown item {name}") from None


def list_items() -> list[CatalogItem]:
    return [CatalogItem(name=name, price=price) for name, price in sorted(MERCH_ITEMS.items())]
