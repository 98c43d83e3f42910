"""Application service: Add Variant use case."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError, ValidationError
from stockroom.domain.model.product import Variant
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddVariantHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        size: object,
        color: object,
        price: object,
        stock: object,
    ) -> Variant:
        """Attach a new size/color variant to a product.

        Missing fields are reported before the product lookup, so a bad
        request against an unknown product is a ValidationError.
        """
        if not size or not color or price is None or stock is None:
            raise ValidationError("Missing required fields")

        with self._product_repo.lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            variant = product.add_variant(size=size, color=color, price=price, stock=stock)
            self._product_repo.save(product)

        logger.info("Added variant %s (%s) to product %s", variant.id, variant.sku, product_id)
        return variant
