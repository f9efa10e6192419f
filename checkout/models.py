from __future__ import annotations
from decimal import Decimal
from typing import Literal, NamedTuple, Protocol, TypedDict


SKU = Literal['ipd', 'mbp', 'atv', 'vga']


class Product(NamedTuple):
    """A catalogue entry."""
    sku: SKU
    name: str
    price: Decimal               # unit price, >= 0


class CartItem(TypedDict):
    """One line of the cart snapshot (all scanned units of one SKU)."""
    sku: SKU
    quantity: int                # >= 1
    unit_price: Decimal          # copied from the product at snapshot time
    total_price: Decimal         # quantity * unit_price until a promotion rewrites it


class Promotion(Protocol):
    def apply(self, cart_items: list[CartItem]) -> None:
        """Rewrite total_price of the line(s) this rule owns. Never touches quantity or unit_price."""
        ...
