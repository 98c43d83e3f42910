"""Application service: Update Order Status use case.

No transition rules apply: a completed order may go back to pending,
a cancelled one may be completed, and so on.
"""

from __future__ import annotations

import logging

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.order import Order, OrderStatus
from stockroom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: object) -> Order:
        new_status = OrderStatus.parse(status)

        with self._order_repo.lock:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")

            previous = order.status
            order.set_status(new_status)
            self._order_repo.save(order)

        logger.info("Order %s: %s -> %s", order_id, previous.value, new_status.value)
        return order
