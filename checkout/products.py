from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping, TypedDict

from .models import SKU, Product
from .money import Money, to_money


class ProductRow(TypedDict):
    sku: SKU
    name: str
    price: Money


def build_catalogue(rows: Iterable[ProductRow]) -> Mapping[str, Product]:
    """
    Build a read-only catalogue keyed by SKU.

    Raises ValueError on a duplicate SKU or a negative price.
    """
    catalogue: dict[str, Product] = {}
    for row in rows:
        sku = row['sku']
        if sku in catalogue:
            raise ValueError(f"duplicate sku in catalogue: {sku!r}")
        price = to_money(row['price'])
        if price < 0:
            raise ValueError(f"negative price for {sku!r}: {price}")
        catalogue[sku] = Product(sku=sku, name=row['name'], price=price)
    return MappingProxyType(catalogue)


PRODUCT_ROWS: list[ProductRow] = [
    {"sku": "ipd", "name": "Super iPad", "price": "549.99"},
    {"sku": "mbp", "name": "MacBook Pro", "price": "1399.99"},
    {"sku": "atv", "name": "Apple TV", "price": "109.50"},
    {"sku": "vga", "name": "VGA adapter", "price": "30.00"},
]

PRODUCTS: Mapping[str, Product] = build_catalogue(PRODUCT_ROWS)
