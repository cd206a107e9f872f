"""Product aggregate.

Products live independently of carts. A cart line copies the fields it
needs when the product is added, so later catalog edits never reprice
what a shopper already has in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from farmcart.domain.exceptions import ValidationError
from farmcart.domain.model.cart import CartLine
from farmcart.domain.model.value_objects import Money, Quantity

DEFAULT_FARMER = "OrganicFarm"

_PAISA = Decimal("0.01")


@dataclass
class Product:
    """A product in the catalog.

    Prices are per kilogram, positive and in whole paise.
    """

    id: str
    name: str
    price: Money
    farmer: str | None = None
    certified: bool = False
    image: str = ""
    category: str = ""
    rating: float = 0.0

    def __post_init__(self) -> None:
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if self.price.amount != self.price.amount.quantize(_PAISA):
            raise ValidationError(
                f"Product price cannot have more than two decimal places, got {self.price.amount}"
            )

    @property
    def farmer_label(self) -> str:
        return self.farmer or DEFAULT_FARMER

    def to_cart_line(self) -> CartLine:
        """Snapshot this product as a single-unit cart line."""
        return CartLine(
            product_id=self.id,
            name=self.name,
            unit_price=self.price,
            quantity=Quantity(1),
            farmer=self.farmer,
            certified=self.certified,
            image=self.image,
        )
