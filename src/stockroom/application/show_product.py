"""Application service: Show Product use case (query)."""

from __future__ import annotations

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        with self._product_repo.lock:
            product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product
