"""Abstract repository for Order aggregate."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from stockroom.domain.model.order import Order


class OrderRepository(ABC):
    """Owns the order log.

    Order ids are minted from the creation millisecond and may repeat, so
    ``add`` always appends a record while ``save`` rewrites the first
    record carrying the order's id.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in insertion order."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return the first order with this ID, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append a newly created order, even if its id is already taken."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order, appending it if absent."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove every order with this ID; False if none was present."""
