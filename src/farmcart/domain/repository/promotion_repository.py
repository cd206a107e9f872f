"""Abstract repository for the session's active Promotion."""

from __future__ import annotations

from abc import ABC, abstractmethod

from farmcart.domain.model.promotion import Promotion


class PromotionRepository(ABC):

    @abstractmethod
    def get_active(self) -> Promotion | None:
        """Return the applied promotion, or None."""

    @abstractmethod
    def set_active(self, promotion: Promotion) -> None:
        """Make ``promotion`` the single active promotion."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the active promotion, if any."""
