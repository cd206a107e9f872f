"""Integration tests for applying and removing promotions."""

import pytest

from farmcart.application.apply_promotion import ApplyPromotionHandler, RemovePromotionHandler
from farmcart.domain.exceptions import InvalidPromotion
from farmcart.domain.model.promotion import PROMOTION_REGISTRY
from tests.fakes import FakePromotionRepository


class TestApplyPromotion:

    def test_applies_normalized_code(self):
        repo = FakePromotionRepository()
        promotion = ApplyPromotionHandler(repo).handle(" first20 ")
        assert promotion.code == "FIRST20"
        assert repo.get_active() == PROMOTION_REGISTRY["FIRST20"]

    def test_replaces_previous_promotion(self):
        repo = FakePromotionRepository(PROMOTION_REGISTRY["ORGANIC10"])
        ApplyPromotionHandler(repo).handle("SAVE50")
        assert repo.get_active().code == "SAVE50"

    def test_invalid_code_keeps_previous_promotion(self):
        repo = FakePromotionRepository(PROMOTION_REGISTRY["ORGANIC10"])
        with pytest.raises(InvalidPromotion):
            ApplyPromotionHandler(repo).handle("BOGUS")
        assert repo.get_active().code == "ORGANIC10"


class TestRemovePromotion:

    def test_removes_active(self):
        repo = FakePromotionRepository(PROMOTION_REGISTRY["SAVE50"])
        removed = RemovePromotionHandler(repo).handle()
        assert removed.code == "SAVE50"
        assert repo.get_active() is None

    def test_nothing_to_remove(self):
        assert RemovePromotionHandler(FakePromotionRepository()).handle() is None
