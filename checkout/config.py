"""
Promotion rules as plain data.

The store declares its offers as a list of rule dicts; build_promotions()
turns them into the promotion objects a Checkout is constructed with.
"""
from __future__ import annotations
from typing import Iterable, Literal, Optional, TypedDict, Union

from .models import SKU, Promotion
from .money import Money
from .promotions import BulkDiscountPromotion, XForYDealPromotion


class XForYRule(TypedDict):
    kind: Literal['x_for_y']
    sku: SKU
    x: int                       # units needed for one deal group
    y: int                       # units charged per deal group


class BulkDiscountRule(TypedDict):
    kind: Literal['bulk_discount']
    sku: SKU
    threshold: int               # discount applies above (not at) this quantity
    discounted_price: Money


PromotionRule = Union[XForYRule, BulkDiscountRule]


DEFAULT_RULES: list[PromotionRule] = [
    {"kind": "x_for_y", "sku": "atv", "x": 3, "y": 2},
    {"kind": "bulk_discount", "sku": "ipd", "threshold": 4, "discounted_price": "499.99"},
]


def build_promotion(rule: PromotionRule) -> Promotion:
    kind = rule.get('kind')
    try:
        if kind == 'x_for_y':
            return XForYDealPromotion(rule['sku'], rule['x'], rule['y'])
        if kind == 'bulk_discount':
            return BulkDiscountPromotion(rule['sku'], rule['threshold'], rule['discounted_price'])
    except KeyError as e:
        raise ValueError(f"{kind} rule is missing {e.args[0]!r}") from e
    raise ValueError(f"unknown promotion kind: {kind!r}")


def build_promotions(rules: Optional[Iterable[PromotionRule]] = None) -> list[Promotion]:
    """Promotions in rule order. None means DEFAULT_RULES."""
    if rules is None:
        rules = DEFAULT_RULES
    return [build_promotion(rule) for rule in rules]
