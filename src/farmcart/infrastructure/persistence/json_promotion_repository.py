"""JSON key-value implementation of PromotionRepository.

The promotion is stored with its kind and value, not just its code,
so a saved session still prices the same if the registry changes.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from farmcart.domain.exceptions import StorageError, ValidationError
from farmcart.domain.model.promotion import Promotion, PromotionKind
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.infrastructure.persistence.json_key_value_store import JsonKeyValueStore

PROMOTION_KEY = "appliedPromo"


class JsonPromotionRepository(PromotionRepository):

    def __init__(self, store: JsonKeyValueStore, key: str = PROMOTION_KEY) -> None:
        self._store = store
        self._key = key

    # --- PromotionRepository interface ----------------------------------------

    def get_active(self) -> Promotion | None:
        raw = self._store.get(self._key)
        if raw is None:
            return None
        return self._to_domain(raw)

    def set_active(self, promotion: Promotion) -> None:
        self._store.set(self._key, self._to_raw(promotion))

    def clear(self) -> None:
        self._store.delete(self._key)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(promotion: Promotion) -> dict:
        return {
            "code": promotion.code,
            "kind": promotion.kind.value,
            "value": str(promotion.value),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Promotion:
        try:
            return Promotion(
                code=raw["code"],
                kind=PromotionKind(raw["kind"]),
                value=Decimal(raw["value"]),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            raise StorageError(f"Malformed promotion in session data: {raw!r}") from exc
