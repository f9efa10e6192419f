from __future__ import annotations
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping

from .models import CartItem, Product, Promotion
from .money import round_money
from .products import PRODUCTS

log = logging.getLogger(__name__)


class Checkout:
    """
    Scan loop accumulator.

    Counts scanned SKUs and prices them on demand against the catalogue and
    the promotions given at construction. Unknown SKUs are accepted by
    scan() and left out of the total.
    """

    def __init__(self, promotions: Iterable[Promotion], catalogue: Mapping[str, Product] = PRODUCTS):
        self._promotions = tuple(promotions)
        self._catalogue = catalogue
        self._scanned: dict[str, int] = defaultdict(int)

    @property
    def promotions(self) -> tuple[Promotion, ...]:
        return self._promotions

    def scan(self, sku: str) -> None:
        self._scanned[sku] += 1

    def line_items(self) -> list[CartItem]:
        """Cart snapshot with every promotion applied, in first-scan order."""
        cart_items: list[CartItem] = []
        for sku, quantity in self._scanned.items():
            product = self._catalogue.get(sku)
            if product is None:
                log.debug("sku %r not in catalogue, skipping %d unit(s)", sku, quantity)
                continue
            cart_items.append({
                'sku': product.sku,
                'quantity': quantity,
                'unit_price': product.price,
                'total_price': quantity * product.price,
            })

        for promotion in self._promotions:
            promotion.apply(cart_items)
        return cart_items

    def total(self) -> Decimal:
        """
        Final price, rounded to cents once after summing every line.

        An empty cart totals Decimal('0.00').
        """
        subtotal = sum((item['total_price'] for item in self.line_items()), Decimal(0))
        return round_money(subtotal)
