"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: object, brand: object, category: object) -> Product:
        """Add a new product, with no variants, to the catalog."""
        product = Product.create(name=name, brand=brand, category=category)
        with self._product_repo.lock:
            self._product_repo.save(product)
        logger.info("Added product %s (%s / %s)", product.id, product.brand, product.name)
        return product
