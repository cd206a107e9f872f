"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from farmcart.infrastructure.persistence.json_cart_repository import JsonCartRepository
from farmcart.infrastructure.persistence.json_key_value_store import JsonKeyValueStore
from farmcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from farmcart.infrastructure.persistence.json_promotion_repository import (
    JsonPromotionRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "FARMCART_DATA_DIR"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def session_store() -> JsonKeyValueStore:
    return JsonKeyValueStore(data_dir() / "session.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(session_store())


def promotion_repository() -> JsonPromotionRepository:
    return JsonPromotionRepository(session_store())
