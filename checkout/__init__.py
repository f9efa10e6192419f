from .checkout import Checkout
from .config import DEFAULT_RULES, build_promotion, build_promotions
from .models import SKU, CartItem, Product, Promotion
from .money import round_money, to_money
from .products import PRODUCTS, build_catalogue
from .promotions import BulkDiscountPromotion, XForYDealPromotion

__all__ = [
    "Checkout",
    "XForYDealPromotion",
    "BulkDiscountPromotion",
    "Promotion",
    "Product",
    "CartItem",
    "SKU",
    "PRODUCTS",
    "build_catalogue",
    "DEFAULT_RULES",
    "build_promotion",
    "build_promotions",
    "to_money",
    "round_money",
]
