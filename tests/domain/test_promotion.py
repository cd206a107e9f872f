"""Unit tests for promotions and the code registry."""

from decimal import Decimal

import pytest

from farmcart.domain.exceptions import InvalidPromotion, ValidationError
from farmcart.domain.model.promotion import (
    PROMOTION_REGISTRY,
    Promotion,
    PromotionKind,
    apply_promotion,
)
from farmcart.domain.model.value_objects import Money


class TestRegistry:

    def test_contents(self):
        assert PROMOTION_REGISTRY["ORGANIC10"] == Promotion(
            "ORGANIC10", PromotionKind.PERCENTAGE, Decimal("0.10")
        )
        assert PROMOTION_REGISTRY["FIRST20"].value == Decimal("0.20")
        assert PROMOTION_REGISTRY["SAVE50"].kind is PromotionKind.FLAT_AMOUNT
        assert PROMOTION_REGISTRY["SAVE50"].value == Decimal("50")


class TestApplyPromotion:

    @pytest.mark.parametrize("code", ["ORGANIC10", "organic10", "  Organic10  "])
    def test_case_insensitive_and_trimmed(self, code):
        assert apply_promotion(code).code == "ORGANIC10"

    def test_unknown_code_rejected(self):
        with pytest.raises(InvalidPromotion, match="BOGUS"):
            apply_promotion("BOGUS")

    @pytest.mark.parametrize("code", ["", "   "])
    def test_empty_code_rejected(self, code):
        with pytest.raises(InvalidPromotion, match="enter a promo code"):
            apply_promotion(code)

    def test_custom_registry(self):
        registry = {"HARVEST5": Promotion.flat_amount("HARVEST5", 5)}
        assert apply_promotion("harvest5", registry).value == Decimal("5")
        with pytest.raises(InvalidPromotion):
            apply_promotion("ORGANIC10", registry)


class TestPromotionRules:

    def test_percentage_discount(self):
        promo = Promotion.percentage("X", "0.10")
        assert promo.discount_for(Money.of("1000")) == Money.of("100.00")

    def test_flat_discount_ignores_subtotal(self):
        promo = Promotion.flat_amount("Y", 50)
        assert promo.discount_for(Money.of("300")) == Money.of("50")

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 1"):
            Promotion.percentage("BAD", "1.5")

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Promotion.flat_amount("BAD", -5)

    def test_describe(self):
        assert PROMOTION_REGISTRY["FIRST20"].describe() == "20% off"
        assert PROMOTION_REGISTRY["SAVE50"].describe() == "₹50.00 off"
