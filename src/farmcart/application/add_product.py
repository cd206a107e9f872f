"""Application service: Add Product use case."""

from __future__ import annotations

from farmcart.domain.exceptions import ValidationError
from farmcart.domain.model.product import Product
from farmcart.domain.model.value_objects import Money
from farmcart.domain.repository.product_repository import ProductRepository
from farmcart.log import get_logger

logger = get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        farmer: str | None = None,
        certified: bool = False,
        category: str = "",
        image: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        catalog = self._product_repo.list_all()
        if any(p.name.lower() == name.strip().lower() for p in catalog):
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing numeric product IDs
        numeric_ids = [int(p.id) for p in catalog if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            farmer=farmer or None,
            certified=certified,
            category=category.strip(),
            image=image.strip(),
        )
        self._product_repo.save(product)
        logger.info("Added product %s '%s'", product.id, product.name)
        return product
