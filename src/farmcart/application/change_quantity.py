"""Application service: Change Quantity use cases.

``set`` replaces a line's quantity outright; ``increase`` and
``decrease`` step it by one, the way the cart page's +/- buttons do.
"""

from __future__ import annotations

from farmcart.application.dto import CartChangeDTO, CartDTO
from farmcart.application.show_cart import cart_to_dto
from farmcart.domain.model.cart import Cart
from farmcart.domain.model.order_summary import DEFAULT_POLICY, PricingPolicy
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.domain.service.pricing_service import compute_summary
from farmcart.log import get_logger

logger = get_logger(__name__)


class ChangeQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        promotion_repo: PromotionRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._promotion_repo = promotion_repo
        self._policy = policy

    def set(self, product_id: str, quantity: int) -> CartDTO:
        cart = self._cart_repo.load().set_quantity(product_id, quantity)
        self._cart_repo.save(cart)
        logger.info("Set quantity of product %s to %d", product_id, quantity)
        return self._to_dto(cart)

    def increase(self, product_id: str) -> CartChangeDTO:
        update = self._cart_repo.load().increase(product_id)
        if not update.quantity_capped:
            self._cart_repo.save(update.cart)
            logger.info("Increased quantity of product %s", product_id)
        return CartChangeDTO(
            cart=self._to_dto(update.cart),
            quantity_capped=update.quantity_capped,
        )

    def decrease(self, product_id: str) -> CartDTO:
        cart = self._cart_repo.load().decrease(product_id)
        self._cart_repo.save(cart)
        logger.info("Decreased quantity of product %s", product_id)
        return self._to_dto(cart)

    def _to_dto(self, cart: Cart) -> CartDTO:
        summary = compute_summary(cart, self._promotion_repo.get_active(), self._policy)
        return cart_to_dto(cart, summary)
