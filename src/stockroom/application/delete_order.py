"""Application service: Delete Order use case."""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        with self._order_repo.lock:
            if not self._order_repo.delete(order_id):
                raise NotFoundError(f"Order {order_id} not found")
        logger.info("Deleted order %s", order_id)
