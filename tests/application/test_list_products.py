"""Tests for the catalog listing and Add Product use cases."""

import pytest

from farmcart.application.add_product import AddProductHandler
from farmcart.application.list_products import ListProductsHandler
from farmcart.domain.exceptions import ValidationError
from farmcart.domain.model.product import Product
from farmcart.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _repo():
    return FakeProductRepository([
        Product(id="1", name="Organic Tomatoes", price=Money.of("60"), category="Vegetables", rating=4.5),
        Product(id="2", name="Fresh Strawberries", price=Money.of("120"), category="Fruits", rating=4.8),
        Product(id="4", name="Brown Rice", price=Money.of("80"), category="Grains", rating=4.7),
    ])


class TestListProducts:

    def test_lists_everything(self):
        assert len(ListProductsHandler(_repo()).handle()) == 3

    def test_search_by_name_or_category(self):
        handler = ListProductsHandler(_repo())
        assert [p.id for p in handler.handle(search="straw")] == ["2"]
        assert [p.id for p in handler.handle(search="VEGETABLES")] == ["1"]

    @pytest.mark.parametrize(
        "sort, expected",
        [("price-low", ["1", "4", "2"]), ("price-high", ["2", "4", "1"]), ("rating", ["2", "4", "1"])],
    )
    def test_sort(self, sort, expected):
        assert [p.id for p in ListProductsHandler(_repo()).handle(sort=sort)] == expected

    def test_unknown_sort_rejected(self):
        with pytest.raises(ValidationError, match="Unknown sort"):
            ListProductsHandler(_repo()).handle(sort="newest")


class TestAddProduct:

    def test_assigns_next_numeric_id(self):
        repo = _repo()
        product = AddProductHandler(repo).handle(name=" Organic Carrots ", price="45", certified=True)
        assert product.id == "5"
        assert product.name == "Organic Carrots"
        assert repo.get_by_id("5").certified

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(_repo()).handle(name="brown rice", price="90")

    def test_zero_price_rejected(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(repo).handle(name="Free Lunch", price="0")
        assert len(repo.list_all()) == 3

    @pytest.mark.parametrize("price", ["Infinity", "NaN"])
    def test_non_finite_price_rejected(self, price):
        repo = _repo()
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle(name="Gold Mango", price=price)
        assert repo.get_by_id("5") is None

    def test_sub_paisa_price_rejected(self):
        with pytest.raises(ValidationError, match="two decimal places"):
            AddProductHandler(_repo()).handle(name="Organic Carrots", price="60.005")

    def test_two_decimal_price_accepted(self):
        product = AddProductHandler(_repo()).handle(name="Organic Carrots", price="60.50")
        assert product.price == Money.of("60.50")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(_repo()).handle(name="  ", price="10")
