from __future__ import annotations
import logging
from decimal import Decimal
from typing import Optional

from .models import CartItem
from .money import Money, to_money

log = logging.getLogger(__name__)


def _find_item(cart_items: list[CartItem], sku: str) -> Optional[CartItem]:
    for item in cart_items:
        if item['sku'] == sku:
            return item
    return None


def _rewrite(item: CartItem, total_price: Decimal, rule: object) -> None:
    log.debug("%r: %s total %s -> %s", rule, item['sku'], item['total_price'], total_price)
    item['total_price'] = total_price


class XForYDealPromotion:
    """
    Buy x, pay for y: every complete group of x units is charged as y units,
    leftover units are charged at unit price.

    XForYDealPromotion('atv', 3, 2) is "3 for the price of 2" on Apple TVs.
    """

    def __init__(self, sku: str, x: int, y: int):
        if x < 1:
            raise ValueError(f"x must be at least 1, got {x}")
        if y < 0 or y > x:
            raise ValueError(f"y must be between 0 and x ({x}), got {y}")
        self.sku = sku
        self.x = x
        self.y = y

    def __repr__(self):
        return f"XForYDealPromotion({self.sku!r}, {self.x}, {self.y})"

    def apply(self, cart_items: list[CartItem]) -> None:
        item = _find_item(cart_items, self.sku)
        if item is None or item['quantity'] < self.x:
            return
        groups, remainder = divmod(item['quantity'], self.x)
        unit_price = item['unit_price']
        _rewrite(item, groups * self.y * unit_price + remainder * unit_price, self)


class BulkDiscountPromotion:
    """
    Once more than `threshold` units are bought, every unit costs
    `discounted_price` (not just the ones past the threshold).
    """

    def __init__(self, sku: str, threshold: int, discounted_price: Money):
        price = to_money(discounted_price)
        if threshold < 0:
            raise ValueError(f"threshold must not be negative, got {threshold}")
        if price < 0:
            raise ValueError(f"discounted price must not be negative, got {price}")
        self.sku = sku
        self.threshold = threshold
        self.discounted_price = price

    def __repr__(self):
        return f"BulkDiscountPromotion({self.sku!r}, {self.threshold}, {self.discounted_price})"

    def apply(self, cart_items: list[CartItem]) -> None:
        item = _find_item(cart_items, self.sku)
        # strictly more than the threshold
        if item is None or item['quantity'] <= self.threshold:
            return
        _rewrite(item, item['quantity'] * self.discounted_price, self)
