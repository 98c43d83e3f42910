"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Remove a product together with all of its variants."""
        with self._product_repo.lock:
            if not self._product_repo.delete(product_id):
                raise NotFoundError("Product not found")
        logger.info("Deleted product %s", product_id)
