"""JSON-file-backed implementation of ProductRepository.

A missing catalog file is created with the storefront's featured
products so a fresh install has something to add to the cart.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from farmcart.domain.model.product import Product
from farmcart.domain.model.value_objects import Money
from farmcart.domain.repository.product_repository import ProductRepository

SEED_PRODUCTS = [
    {"id": "1", "name": "Organic Tomatoes", "price": "60", "category": "Vegetables",
     "rating": 4.5, "farmer": "Green Valley Farm", "certified": True,
     "image": "https://images.unsplash.com/photo-1546470427-e26264715c8c?w=400"},
    {"id": "2", "name": "Fresh Strawberries", "price": "120", "category": "Fruits",
     "rating": 4.8, "farmer": "Berry Farms", "certified": True,
     "image": "https://images.unsplash.com/photo-1464965911861-746a04b4bca6?w=400"},
    {"id": "3", "name": "Organic Spinach", "price": "40", "category": "Vegetables",
     "rating": 4.6, "farmer": "Sunrise Organic", "certified": True,
     "image": "https://images.unsplash.com/photo-1576045057995-568f588f82fb?w=400"},
    {"id": "4", "name": "Brown Rice", "price": "80", "category": "Grains",
     "rating": 4.7, "farmer": "Golden Harvest", "certified": True,
     "image": "https://images.unsplash.com/photo-1536304993881-ff6e9eefa2a6?w=400"},
    {"id": "101", "name": "Organic Honey", "price": "200", "category": "Pantry",
     "rating": 4.9, "farmer": "Bee Happy Farms", "certified": True,
     "image": "https://images.unsplash.com/photo-1587049352846-4a222e784acc?w=300"},
    {"id": "102", "name": "Fresh Basil", "price": "30", "category": "Herbs",
     "rating": 4.7, "farmer": "Herb Garden", "certified": True,
     "image": "https://images.unsplash.com/photo-1618375569909-3c8616cf7733?w=300"},
    {"id": "103", "name": "Organic Apples", "price": "120", "category": "Fruits",
     "rating": 4.8, "farmer": "Apple Valley", "certified": True,
     "image": "https://images.unsplash.com/photo-1560806887-1e4cd0b6cbd6?w=300"},
]


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(SEED_PRODUCTS if seed is None else seed)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "INR")),
                farmer=item.get("farmer"),
                certified=item.get("certified", False),
                image=item.get("image", ""),
                category=item.get("category", ""),
                rating=item.get("rating", 0.0),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "farmer": p.farmer,
                "certified": p.certified,
                "image": p.image,
                "category": p.category,
                "rating": p.rating,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[dict]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(seed, indent=2) + "\n", encoding="utf-8"
            )
