"""Application service: Create Order use case.

Items arrive as self-contained snapshots; the catalog is not consulted
and stock is left untouched.
"""

from __future__ import annotations

import logging

from stockroom.application.dto import OrderItemSpec
from stockroom.domain.model.order import Order, OrderItem
from stockroom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        item_specs: list[OrderItemSpec],
        customer_name: str | None = None,
    ) -> Order:
        """Record a new pending order.

        Steps:
        1. Turn each spec into an OrderItem snapshot (computes line totals).
        2. Let the Order aggregate validate and sum them.
        3. Append it to the order log and return it.
        """
        items = [
            OrderItem.snapshot(
                variant_id=spec.variant_id,
                product_id=spec.product_id,
                product_name=spec.product_name,
                size=spec.size,
                color=spec.color,
                quantity=spec.quantity,
                price=spec.price,
            )
            for spec in item_specs
        ]

        order = Order.create(items=items, customer_name=customer_name)
        with self._order_repo.lock:
            self._order_repo.add(order)

        logger.info("Created order %s with %d item(s), total %s", order.id, len(items), order.total)
        return order
