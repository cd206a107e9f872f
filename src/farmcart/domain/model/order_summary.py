"""Pricing configuration and the derived order summary."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from farmcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class PricingPolicy:
    """Delivery rules owned outside the engine.

    Delivery is free once the subtotal reaches ``free_delivery_threshold``;
    below it a flat ``delivery_charge`` applies.
    """

    free_delivery_threshold: Money = Money(Decimal("500"))
    delivery_charge: Money = Money(Decimal("40"))
    currency: str = "INR"


DEFAULT_POLICY = PricingPolicy()


@dataclass(frozen=True)
class OrderSummary:
    """Totals for a cart and its active promotion. Never persisted."""

    item_count: int
    subtotal: Money
    delivery_charge: Money
    discount: Money
    total: Money
    amount_to_free_delivery: Money
    promotion_code: str | None = None

    @property
    def is_free_delivery(self) -> bool:
        return self.delivery_charge.is_zero
