"""Application service: Add To Cart use case.

Looks the product up in the catalog, snapshots it into a cart line and
adds one unit. Hitting the per-line cap is reported, not raised.
"""

from __future__ import annotations

from farmcart.application.dto import CartChangeDTO
from farmcart.application.show_cart import cart_to_dto
from farmcart.domain.exceptions import EntityNotFoundError
from farmcart.domain.model.order_summary import DEFAULT_POLICY, PricingPolicy
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.domain.repository.product_repository import ProductRepository
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.domain.service.pricing_service import compute_summary
from farmcart.log import get_logger

logger = get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        promotion_repo: PromotionRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._promotion_repo = promotion_repo
        self._policy = policy

    def handle(self, product_id: str) -> CartChangeDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        update = self._cart_repo.load().add_or_increment(product.to_cart_line())
        if update.quantity_capped:
            logger.info("Quantity cap reached for product %s", product_id)
        else:
            self._cart_repo.save(update.cart)
            logger.info("Added product %s to cart", product_id)

        summary = compute_summary(
            update.cart, self._promotion_repo.get_active(), self._policy
        )
        return CartChangeDTO(
            cart=cart_to_dto(update.cart, summary),
            quantity_capped=update.quantity_capped,
        )
