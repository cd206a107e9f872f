"""Tests for the JSON-backed session store and repositories."""

import json
from decimal import Decimal

import pytest

from farmcart.domain.exceptions import StorageError
from farmcart.domain.model.cart import Cart, CartLine
from farmcart.domain.model.product import Product
from farmcart.domain.model.promotion import PROMOTION_REGISTRY, Promotion
from farmcart.domain.model.value_objects import Money, Quantity
from farmcart.infrastructure.persistence.json_cart_repository import JsonCartRepository
from farmcart.infrastructure.persistence.json_key_value_store import JsonKeyValueStore
from farmcart.infrastructure.persistence.json_product_repository import (
    SEED_PRODUCTS,
    JsonProductRepository,
)
from farmcart.infrastructure.persistence.json_promotion_repository import (
    JsonPromotionRepository,
)


@pytest.fixture
def store(tmp_path):
    return JsonKeyValueStore(tmp_path / "session.json")


def _sample_cart() -> Cart:
    return Cart((
        CartLine(
            product_id="1",
            name="Organic Tomatoes",
            unit_price=Money.of("60.50"),
            quantity=Quantity(3),
            farmer="Green Valley Farm",
            certified=True,
            image="tomatoes.jpg",
        ),
        CartLine(
            product_id="p_x1y2z3",
            name="Red Apples",
            unit_price=Money.of("150"),
            quantity=Quantity(50),
        ),
    ))


class TestKeyValueStore:

    def test_creates_file(self, tmp_path):
        JsonKeyValueStore(tmp_path / "nested" / "session.json")
        assert (tmp_path / "nested" / "session.json").read_text(encoding="utf-8") == "{}"

    def test_set_get_delete(self, store):
        assert store.get("cart") is None
        store.set("cart", [1, 2])
        assert store.get("cart") == [1, 2]
        store.delete("cart")
        assert store.get("cart") is None

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError, match="Corrupt"):
            JsonKeyValueStore(path).get("cart")


class TestJsonCartRepository:

    def test_empty_when_nothing_saved(self, store):
        assert JsonCartRepository(store).load() == Cart.empty()

    def test_round_trip_preserves_every_field(self, store):
        cart = _sample_cart()
        JsonCartRepository(store).save(cart)
        assert JsonCartRepository(store).load() == cart

    def test_stored_under_cart_key(self, store, tmp_path):
        JsonCartRepository(store).save(_sample_cart())
        raw = json.loads((tmp_path / "session.json").read_text(encoding="utf-8"))
        assert raw["cart"][0]["id"] == "1"
        assert raw["cart"][0]["price"] == "60.50"
        assert raw["cart"][1]["quantity"] == 50

    def test_numeric_ids_loaded_as_strings(self, store):
        store.set("cart", [{"id": 101, "name": "Organic Honey", "price": 200, "quantity": 2}])
        line = JsonCartRepository(store).load().find("101")
        assert line.unit_price == Money.of("200")
        assert line.farmer is None
        assert not line.certified

    def test_malformed_line_raises_storage_error(self, store):
        store.set("cart", [{"id": "1", "name": "X", "price": "10", "quantity": 0}])
        with pytest.raises(StorageError, match="Malformed cart line"):
            JsonCartRepository(store).load()

    def test_duplicate_product_lines_raise_storage_error(self, store):
        line = {"id": "1", "name": "Organic Tomatoes", "price": "60", "quantity": 2}
        store.set("cart", [line, dict(line)])
        with pytest.raises(StorageError, match="more than one cart line"):
            JsonCartRepository(store).load()

    @pytest.mark.parametrize("raw", [5, "cart", {"id": "1"}])
    def test_non_list_cart_raises_storage_error(self, store, raw):
        store.set("cart", raw)
        with pytest.raises(StorageError, match="list of cart lines"):
            JsonCartRepository(store).load()


class TestJsonPromotionRepository:

    @pytest.mark.parametrize("code", ["ORGANIC10", "FIRST20", "SAVE50"])
    def test_round_trip(self, store, code):
        JsonPromotionRepository(store).set_active(PROMOTION_REGISTRY[code])
        assert JsonPromotionRepository(store).get_active() == PROMOTION_REGISTRY[code]

    def test_clear(self, store):
        repo = JsonPromotionRepository(store)
        repo.set_active(PROMOTION_REGISTRY["SAVE50"])
        repo.clear()
        assert repo.get_active() is None

    def test_shares_store_with_cart(self, store):
        JsonCartRepository(store).save(_sample_cart())
        JsonPromotionRepository(store).set_active(Promotion.flat_amount("SAVE50", 50))
        JsonPromotionRepository(store).clear()
        assert len(JsonCartRepository(store).load()) == 2

    def test_malformed_promotion_raises_storage_error(self, store):
        store.set("appliedPromo", {"code": "X", "kind": "BOGO", "value": "1"})
        with pytest.raises(StorageError, match="Malformed promotion"):
            JsonPromotionRepository(store).get_active()


class TestJsonProductRepository:

    def test_seeds_catalog(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert len(repo.list_all()) == len(SEED_PRODUCTS)
        tomatoes = repo.get_by_id("1")
        assert tomatoes.name == "Organic Tomatoes"
        assert tomatoes.price.amount == Decimal("60")
        assert tomatoes.certified

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path, seed=[]).save(
            Product(id="7", name="Fresh Basil", price=Money.of("30"), rating=4.7)
        )
        basil = JsonProductRepository(path).get_by_id("7")
        assert basil.name == "Fresh Basil"
        assert basil.rating == 4.7
        assert basil.farmer is None
