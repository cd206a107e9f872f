"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from farmcart.application.dto import CartDTO, CartLineDTO, OrderSummaryDTO
from farmcart.domain.model.cart import Cart
from farmcart.domain.model.order_summary import DEFAULT_POLICY, OrderSummary, PricingPolicy
from farmcart.domain.model.product import DEFAULT_FARMER
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.domain.service.pricing_service import compute_summary


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        promotion_repo: PromotionRepository,
        policy: PricingPolicy = DEFAULT_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._promotion_repo = promotion_repo
        self._policy = policy

    def handle(self) -> CartDTO:
        cart = self._cart_repo.load()
        summary = compute_summary(cart, self._promotion_repo.get_active(), self._policy)
        return cart_to_dto(cart, summary)


# --- Mapping ------------------------------------------------------------------


def summary_to_dto(summary: OrderSummary) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        item_count=summary.item_count,
        subtotal=str(summary.subtotal),
        delivery_charge="FREE" if summary.is_free_delivery else str(summary.delivery_charge),
        discount=str(summary.discount),
        total=str(summary.total),
        amount_to_free_delivery=(
            None if summary.is_free_delivery else str(summary.amount_to_free_delivery)
        ),
        promotion_code=summary.promotion_code,
    )


def cart_to_dto(cart: Cart, summary: OrderSummary) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product_id,
                name=line.name,
                farmer=line.farmer or DEFAULT_FARMER,
                certified=line.certified,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        summary=summary_to_dto(summary),
    )
