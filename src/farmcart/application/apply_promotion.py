"""Application service: Apply / Remove Promotion use cases.

A failed lookup raises before anything is persisted, so the previously
active promotion (if any) survives an invalid code.
"""

from __future__ import annotations

from typing import Mapping

from farmcart.domain.model.promotion import PROMOTION_REGISTRY, Promotion, apply_promotion
from farmcart.domain.repository.promotion_repository import PromotionRepository
from farmcart.log import get_logger

logger = get_logger(__name__)


class ApplyPromotionHandler:

    def __init__(
        self,
        promotion_repo: PromotionRepository,
        registry: Mapping[str, Promotion] = PROMOTION_REGISTRY,
    ) -> None:
        self._promotion_repo = promotion_repo
        self._registry = registry

    def handle(self, code: str) -> Promotion:
        promotion = apply_promotion(code, self._registry)
        self._promotion_repo.set_active(promotion)
        logger.info("Applied promotion %s", promotion.code)
        return promotion


class RemovePromotionHandler:

    def __init__(self, promotion_repo: PromotionRepository) -> None:
        self._promotion_repo = promotion_repo

    def handle(self) -> Promotion | None:
        """Clear the active promotion and return what was removed."""
        previous = self._promotion_repo.get_active()
        self._promotion_repo.clear()
        if previous is not None:
            logger.info("Removed promotion %s", previous.code)
        return previous
