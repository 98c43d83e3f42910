"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON document)
live in the infrastructure layer.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):
    """Owns the product collection.

    ``lock`` serializes whole read-modify-write sequences; application
    handlers hold it around every operation that mutates the collection.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, keeping its position."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product with all its variants; False if it was absent."""
