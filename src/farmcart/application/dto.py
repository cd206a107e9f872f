"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings, e.g. "₹120.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    farmer: str
    certified: bool
    category: str
    rating: float


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    name: str
    farmer: str
    certified: bool
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    item_count: int
    subtotal: str
    delivery_charge: str  # "FREE" when waived
    discount: str
    total: str
    amount_to_free_delivery: str | None
    promotion_code: str | None


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its totals."""

    lines: list[CartLineDTO]
    summary: OrderSummaryDTO

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CartChangeDTO:
    """Output of add / increase: the new cart plus the cap signal."""

    cart: CartDTO
    quantity_capped: bool = False


@dataclass(frozen=True)
class OrderConfirmationDTO:
    order_ref: str
    payment_method: str
    summary: OrderSummaryDTO
    placed_at: str
