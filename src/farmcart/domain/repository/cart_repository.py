"""Abstract repository for the session's Cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from farmcart.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart, or an empty one at session start."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist ``cart`` as the current cart."""
