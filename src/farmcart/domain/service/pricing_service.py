"""Domain service: cart pricing.

Turns a Cart plus an optional active Promotion into an OrderSummary.
The computation is pure: the same cart, promotion and policy always
produce the same summary, and nothing is read from or written to storage.

Discount policy: the discount saturates at ``subtotal + delivery``, so a
flat-amount code on a tiny cart brings the total to zero, never below.
"""

from __future__ import annotations

from farmcart.domain.model.cart import Cart
from farmcart.domain.model.order_summary import DEFAULT_POLICY, OrderSummary, PricingPolicy
from farmcart.domain.model.promotion import Promotion
from farmcart.domain.model.value_objects import Money


def compute_summary(
    cart: Cart,
    promotion: Promotion | None = None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> OrderSummary:
    subtotal = Money.zero(policy.currency)
    for line in cart.lines:
        subtotal = subtotal + line.line_total

    if subtotal >= policy.free_delivery_threshold:
        delivery = Money.zero(policy.currency)
        to_free_delivery = Money.zero(policy.currency)
    else:
        delivery = policy.delivery_charge
        to_free_delivery = policy.free_delivery_threshold - subtotal

    gross = subtotal + delivery
    if promotion is None:
        discount = Money.zero(policy.currency)
    else:
        discount = promotion.discount_for(subtotal).min(gross)

    return OrderSummary(
        item_count=cart.item_count,
        subtotal=subtotal,
        delivery_charge=delivery,
        discount=discount,
        total=gross - discount,
        amount_to_free_delivery=to_free_delivery,
        promotion_code=promotion.code if promotion is not None else None,
    )
