"""Application service: Checkout use case.

Prices the current cart, "places" the order, then clears both the cart
and the active promotion. There is no order backend yet: placing an
order only produces a confirmation reference.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from farmcart.application.dto import OrderConfirmationDTO
from farmcart.application.show_cart import summary_to_dto
from farmcart.domain.exceptions import EmptyCartError, ValidationError
from farmcart.domain.model.order_summary import DEFAULT_POLICY, PricingPolicy
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.domain.service.pricing_service import compute_summary
from farmcart.log import get_logger

logger = get_logger(__name__)

PAYMENT_METHODS = ("cod", "upi", "card")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        promotion_repo: PromotionRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cart_repo = cart_repo
        self._promotion_repo = promotion_repo
        self._policy = policy
        self._clock = clock

    def handle(self, payment_method: str) -> OrderConfirmationDTO:
        method = (payment_method or "").strip().lower()
        if method not in PAYMENT_METHODS:
            raise ValidationError(
                f"Unknown payment method '{payment_method}' "
                f"(expected one of: {', '.join(PAYMENT_METHODS)})"
            )

        cart = self._cart_repo.load()
        if cart.is_empty:
            raise EmptyCartError("Your cart is empty")

        summary = compute_summary(cart, self._promotion_repo.get_active(), self._policy)
        placed_at = self._clock()
        order_ref = f"ORG{int(placed_at.timestamp() * 1000)}"

        self._cart_repo.save(cart.clear())
        self._promotion_repo.clear()
        logger.info("Placed order %s for %s", order_ref, summary.total)

        return OrderConfirmationDTO(
            order_ref=order_ref,
            payment_method=method,
            summary=summary_to_dto(summary),
            placed_at=placed_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
