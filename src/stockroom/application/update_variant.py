"""Application service: Update Variant use case (stock and price)."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.product import Variant, VariantPatch
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateVariantHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, variant_id: str, patch: VariantPatch) -> Variant:
        with self._product_repo.lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            variant = product.find_variant(variant_id)
            variant.apply(patch)
            self._product_repo.save(product)

        logger.info("Updated variant %s of product %s", variant_id, product_id)
        return variant
