"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.product import Product, ProductPatch
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, patch: ProductPatch) -> Product:
        """Change a product's name, brand or category.

        This does NOT touch existing variants: their SKUs keep the
        brand/name in effect when each variant was added.
        """
        with self._product_repo.lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            product.apply(patch)
            self._product_repo.save(product)

        logger.info("Updated product %s", product_id)
        return product
