"""Application service: Remove From Cart use case."""

from __future__ import annotations

from farmcart.application.dto import CartDTO
from farmcart.application.show_cart import cart_to_dto
from farmcart.domain.model.order_summary import DEFAULT_POLICY, PricingPolicy
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.domain.service.pricing_service import compute_summary
from farmcart.log import get_logger

logger = get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        promotion_repo: PromotionRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._promotion_repo = promotion_repo
        self._policy = policy

    def handle(self, product_id: str) -> CartDTO:
        """Remove a product's line. Unknown products are a no-op."""
        before = self._cart_repo.load()
        cart = before.remove_line(product_id)
        if cart is not before:
            self._cart_repo.save(cart)
            logger.info("Removed product %s from cart", product_id)

        summary = compute_summary(cart, self._promotion_repo.get_active(), self._policy)
        return cart_to_dto(cart, summary)
