from decimal import Decimal

import pytest
from checkout import (
    DEFAULT_RULES,
    PRODUCTS,
    BulkDiscountPromotion,
    Checkout,
    XForYDealPromotion,
    build_catalogue,
    build_promotion,
    build_promotions,
    round_money,
    to_money,
)


class TestCatalogue:
    def test_store_products(self):
        assert {sku: p.price for sku, p in PRODUCTS.items()} == {
            "ipd": Decimal("549.99"),
            "mbp": Decimal("1399.99"),
            "atv": Decimal("109.50"),
            "vga": Decimal("30.00"),
        }
        assert PRODUCTS["atv"].name == "Apple TV"

    def test_catalogue_is_read_only(self):
        with pytest.raises(TypeError):
            PRODUCTS["atv"] = PRODUCTS["vga"]  # type: ignore[index]

    def test_duplicate_sku(self):
        rows = [{"sku": "atv", "name": "a", "price": 1}, {"sku": "atv", "name": "b", "price": 2}]
        with pytest.raises(ValueError, match="duplicate"):
            build_catalogue(rows)

    def test_negative_price(self):
        with pytest.raises(ValueError, match="negative"):
            build_catalogue([{"sku": "vga", "name": "v", "price": "-1"}])


class TestBuildPromotions:
    def test_default_rules(self):
        promotions = build_promotions()
        assert len(promotions) == len(DEFAULT_RULES) == 2
        deal, bulk = promotions
        assert isinstance(deal, XForYDealPromotion)
        assert (deal.sku, deal.x, deal.y) == ("atv", 3, 2)
        assert isinstance(bulk, BulkDiscountPromotion)
        assert (bulk.sku, bulk.threshold, bulk.discounted_price) == ("ipd", 4, Decimal("499.99"))

    def test_default_rules_price_store_scenario(self):
        co = Checkout(build_promotions())
        for sku in ["atv", "ipd", "ipd", "atv", "ipd", "ipd", "ipd"]:
            co.scan(sku)
        assert co.total() == Decimal("2718.95")

    def test_rule_order_is_kept(self):
        promotions = build_promotions([
            {"kind": "bulk_discount", "sku": "vga", "threshold": 10, "discounted_price": 25},
            {"kind": "x_for_y", "sku": "mbp", "x": 2, "y": 1},
        ])
        assert [type(p) for p in promotions] == [BulkDiscountPromotion, XForYDealPromotion]

    def test_empty_rules(self):
        assert build_promotions([]) == []

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="unknown promotion kind"):
            build_promotion({"kind": "buy_one_get_two", "sku": "atv"})  # type: ignore[arg-type]

    def test_missing_key(self):
        with pytest.raises(ValueError, match="'y'"):
            build_promotion({"kind": "x_for_y", "sku": "atv", "x": 3})  # type: ignore[typeddict-item]

    def test_invalid_values_propagate(self):
        with pytest.raises(ValueError):
            build_promotion({"kind": "x_for_y", "sku": "atv", "x": 2, "y": 3})


class TestMoney:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (549.99, Decimal("549.99")),
            ("109.50", Decimal("109.50")),
            (30, Decimal("30")),
            (Decimal("0.1"), Decimal("0.1")),
        ],
    )
    def test_to_money(self, value, expected):
        assert to_money(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", float("nan"), float("inf"), Decimal("NaN"), None])
    def test_to_money_rejects_non_prices(self, value):
        with pytest.raises(ValueError, match="not a price"):
            to_money(value)

    def test_malformed_catalogue_price(self):
        with pytest.raises(ValueError):
            build_catalogue([{"sku": "vga", "name": "v", "price": "thirty"}])

    def test_nan_discounted_price(self):
        with pytest.raises(ValueError):
            BulkDiscountPromotion("ipd", 4, float("nan"))

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2718.95", "2718.95"),
            ("0.005", "0.01"),
            ("0.0049", "0.00"),
            ("-0.005", "-0.01"),
            ("249", "249.00"),
        ],
    )
    def test_round_money(self, value, expected):
        assert str(round_money(Decimal(value))) == expected
