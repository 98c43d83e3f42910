"""Domain service: inventory and sales summaries.

Pure functions over snapshots of the repositories. Nothing is cached;
every call rescans all products or orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from stockroom.domain.model.order import Order
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money


@dataclass(frozen=True)
class InventoryStats:
    total_products: int
    total_variants: int
    total_stock: int


@dataclass(frozen=True)
class SalesStats:
    total_revenue: Money
    total_orders: int
    completed_orders: int
    today_orders: int
    today_revenue: Money
    average_order_value: Money


def inventory_stats(products: Iterable[Product]) -> InventoryStats:
    total_products = 0
    total_variants = 0
    total_stock = 0
    for product in products:
        total_products += 1
        total_variants += len(product.variants)
        total_stock += product.total_stock
    return InventoryStats(
        total_products=total_products,
        total_variants=total_variants,
        total_stock=total_stock,
    )


def local_date(moment: datetime) -> date:
    """Calendar date of *moment* in the host's local timezone."""
    return moment.astimezone().date()


def sales_stats(orders: Iterable[Order], today: date | None = None) -> SalesStats:
    """Summarize orders.

    Revenue counts completed orders only. "Today" figures compare the
    local calendar date of each order, whatever its status, against
    *today* (defaults to the current local date).
    """
    today = today or datetime.now().astimezone().date()

    total_orders = 0
    completed = 0
    revenue = Money.zero()
    today_orders = 0
    today_revenue = Money.zero()

    for order in orders:
        total_orders += 1
        if order.is_completed:
            completed += 1
            revenue = revenue + order.total
        if local_date(order.created_at) == today:
            today_orders += 1
            today_revenue = today_revenue + order.total

    average = revenue / completed if completed > 0 else Money.zero()
    return SalesStats(
        total_revenue=revenue,
        total_orders=total_orders,
        completed_orders=completed,
        today_orders=today_orders,
        today_revenue=today_revenue,
        average_order_value=average,
    )
