"""Application service: List Products use case (query).

Supports the catalog page's free-text search (name or category) and
its sort options.
"""

from __future__ import annotations

from farmcart.application.dto import ProductDTO
from farmcart.domain.exceptions import ValidationError
from farmcart.domain.model.product import Product
from farmcart.domain.repository.product_repository import ProductRepository

SORT_KEYS = {
    "price-low": (lambda p: p.price.amount, False),
    "price-high": (lambda p: p.price.amount, True),
    "rating": (lambda p: p.rating, True),
}


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, search: str | None = None, sort: str | None = None) -> list[ProductDTO]:
        products = self._product_repo.list_all()

        query = (search or "").strip().lower()
        if query:
            products = [
                p for p in products
                if query in p.name.lower() or query in p.category.lower()
            ]

        if sort:
            if sort not in SORT_KEYS:
                raise ValidationError(f"Unknown sort order '{sort}'")
            key, reverse = SORT_KEYS[sort]
            products = sorted(products, key=key, reverse=reverse)

        return [self._to_dto(p) for p in products]

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            farmer=product.farmer_label,
            certified=product.certified,
            category=product.category,
            rating=product.rating,
        )
