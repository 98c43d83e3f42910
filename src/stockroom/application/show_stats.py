"""Application service: inventory and sales statistics (queries)."""

from __future__ import annotations

from datetime import date

from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.service.statistics import (
    InventoryStats,
    SalesStats,
    inventory_stats,
    sales_stats,
)


class ShowInventoryStatsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> InventoryStats:
        with self._product_repo.lock:
            products = self._product_repo.list_all()
        return inventory_stats(products)


class ShowSalesStatsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, today: date | None = None) -> SalesStats:
        with self._order_repo.lock:
            orders = self._order_repo.list_all()
        return sales_stats(orders, today=today)
