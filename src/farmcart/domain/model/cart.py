"""Cart aggregate: the shopper's current selection.

The Cart is an immutable value. Every operation returns a new Cart and
leaves the receiver untouched, so the caller (the application layer)
decides which instance is current and persists it after each change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from farmcart.domain.exceptions import InvalidQuantity, LineNotFoundError, ValidationError
from farmcart.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """One product in the cart, with the price captured when it was added."""

    product_id: str
    name: str
    unit_price: Money
    quantity: Quantity
    farmer: str | None = None
    certified: bool = False
    image: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def with_quantity(self, value: int) -> CartLine:
        return replace(self, quantity=Quantity(value))


@dataclass(frozen=True)
class CartUpdate:
    """Result of an add or increase.

    ``quantity_capped`` is set when the line was already at the cap and
    the requested increment was dropped. The operation still succeeded;
    callers should tell the shopper the maximum has been reached.
    """

    cart: Cart
    quantity_capped: bool = False


@dataclass(frozen=True)
class Cart:
    """Ordered cart lines, unique by ``product_id``."""

    lines: tuple[CartLine, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for line in self.lines:
            if line.product_id in seen:
                raise ValidationError(
                    f"Product ID '{line.product_id}' appears on more than one cart line"
                )
            seen.add(line.product_id)

    @staticmethod
    def empty() -> Cart:
        return Cart()

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    # --- Operations -----------------------------------------------------------

    def add_or_increment(self, line: CartLine) -> CartUpdate:
        """Add one unit of ``line``'s product.

        An existing line is incremented; otherwise ``line`` is appended
        with a quantity of 1, whatever quantity it was built with.
        """
        if self.find(line.product_id) is not None:
            return self.increase(line.product_id)
        return CartUpdate(Cart(self.lines + (line.with_quantity(1),)))

    def increase(self, product_id: str) -> CartUpdate:
        line = self._get(product_id)
        if line.quantity.is_at_cap:
            return CartUpdate(self, quantity_capped=True)
        return CartUpdate(self._replace_line(line.with_quantity(line.quantity.value + 1)))

    def decrease(self, product_id: str) -> Cart:
        line = self._get(product_id)
        if line.quantity.value <= 1:
            raise InvalidQuantity("Minimum quantity is 1. Use remove to delete the item.")
        return self._replace_line(line.with_quantity(line.quantity.value - 1))

    def set_quantity(self, product_id: str, new_quantity: int) -> Cart:
        """Replace a line's quantity; must be within 1..50."""
        quantity = Quantity(new_quantity)
        line = self._get(product_id)
        return self._replace_line(replace(line, quantity=quantity))

    def remove_line(self, product_id: str) -> Cart:
        """Drop the line for ``product_id``; unknown ids leave the cart as is."""
        if self.find(product_id) is None:
            return self
        return Cart(tuple(line for line in self.lines if line.product_id != product_id))

    def clear(self) -> Cart:
        return Cart.empty()

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: str) -> CartLine:
        line = self.find(product_id)
        if line is None:
            raise LineNotFoundError(f"Product ID '{product_id}' is not in the cart")
        return line

    def _replace_line(self, updated: CartLine) -> Cart:
        return Cart(
            tuple(
                updated if line.product_id == updated.product_id else line
                for line in self.lines
            )
        )

