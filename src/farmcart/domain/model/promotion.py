"""Promotion codes and the fixed registry they are looked up in.

Only one promotion is active per cart session; applying a new code
replaces the previous one, and an unknown code leaves it untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Mapping

from farmcart.domain.exceptions import InvalidPromotion, ValidationError
from farmcart.domain.model.value_objects import Money


class PromotionKind(Enum):
    PERCENTAGE = "PERCENTAGE"
    FLAT_AMOUNT = "FLAT_AMOUNT"


@dataclass(frozen=True)
class Promotion:
    """A named discount rule.

    For ``PERCENTAGE`` the value is a rate between 0 and 1; for
    ``FLAT_AMOUNT`` it is an absolute amount in the cart's currency.
    """

    code: str
    kind: PromotionKind
    value: Decimal

    def __post_init__(self) -> None:
        if not self.code:
            raise ValidationError("Promotion code is required")
        if self.value < 0:
            raise ValidationError(f"Promotion value cannot be negative, got {self.value}")
        if self.kind is PromotionKind.PERCENTAGE and self.value > 1:
            raise ValidationError(
                f"Percentage rate must be between 0 and 1, got {self.value}"
            )

    @staticmethod
    def percentage(code: str, rate: str | Decimal) -> Promotion:
        return Promotion(code, PromotionKind.PERCENTAGE, Decimal(str(rate)))

    @staticmethod
    def flat_amount(code: str, value: str | int | Decimal) -> Promotion:
        return Promotion(code, PromotionKind.FLAT_AMOUNT, Decimal(str(value)))

    def discount_for(self, subtotal: Money) -> Money:
        """Raw discount on ``subtotal``, before any clamping."""
        if self.kind is PromotionKind.PERCENTAGE:
            return subtotal.scaled(self.value)
        return Money(self.value, subtotal.currency)

    def describe(self) -> str:
        if self.kind is PromotionKind.PERCENTAGE:
            return f"{(self.value * 100).normalize():f}% off"
        return f"{Money(self.value)} off"


PROMOTION_REGISTRY: Mapping[str, Promotion] = {
    promo.code: promo
    for promo in (
        Promotion.percentage("ORGANIC10", "0.10"),
        Promotion.percentage("FIRST20", "0.20"),
        Promotion.flat_amount("SAVE50", 50),
    )
}


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


def apply_promotion(
    code: str, registry: Mapping[str, Promotion] = PROMOTION_REGISTRY
) -> Promotion:
    """Resolve a shopper-entered code against ``registry``.

    Matching ignores case and surrounding whitespace. Raises
    InvalidPromotion for empty or unknown codes.
    """
    normalized = normalize_code(code)
    if not normalized:
        raise InvalidPromotion("Please enter a promo code")
    promotion = registry.get(normalized)
    if promotion is None:
        raise InvalidPromotion(f"Invalid promo code: '{code.strip()}'")
    return promotion
