"""Application service: Delete Variant use case."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteVariantHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, variant_id: str) -> bool:
        with self._product_repo.lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            product.remove_variant(variant_id)
            self._product_repo.save(product)

        logger.info("Deleted variant %s of product %s", variant_id, product_id)
        return True
