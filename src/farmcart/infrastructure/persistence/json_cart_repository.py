"""JSON key-value implementation of CartRepository."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from farmcart.domain.exceptions import StorageError, ValidationError
from farmcart.domain.model.cart import Cart, CartLine
from farmcart.domain.model.value_objects import Money, Quantity
from farmcart.domain.repository.cart_repository import CartRepository
from farmcart.infrastructure.persistence.json_key_value_store import JsonKeyValueStore

CART_KEY = "cart"


class JsonCartRepository(CartRepository):

    def __init__(self, store: JsonKeyValueStore, key: str = CART_KEY) -> None:
        self._store = store
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        raw = self._store.get(self._key)
        if not raw:
            return Cart.empty()
        if not isinstance(raw, list):
            raise StorageError(f"Session key '{self._key}' must hold a list of cart lines")
        lines = tuple(self._to_domain(item) for item in raw)
        try:
            return Cart(lines)
        except ValidationError as exc:
            raise StorageError(f"Invalid cart in session data: {exc}") from exc

    def save(self, cart: Cart) -> None:
        self._store.set(self._key, [self._to_raw(line) for line in cart.lines])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "id": line.product_id,
            "name": line.name,
            "price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "quantity": line.quantity.value,
            "farmer": line.farmer,
            "certified": line.certified,
            "image": line.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        try:
            return CartLine(
                # ids were numbers in older saved carts
                product_id=str(raw["id"]),
                name=raw["name"],
                unit_price=Money(Decimal(str(raw["price"])), raw.get("currency", "INR")),
                quantity=Quantity(raw["quantity"]),
                farmer=raw.get("farmer"),
                certified=bool(raw.get("certified", False)),
                image=raw.get("image", ""),
            )
        except (KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise StorageError(f"Malformed cart line in session data: {raw!r}") from exc
