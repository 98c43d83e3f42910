"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from stockroom.domain.model.order import Order, OrderItem, OrderStatus
from stockroom.domain.model.value_objects import Money, Quantity
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.infrastructure.persistence import json_document


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__()
        self._file_path = file_path
        json_document.ensure(file_path, "order")

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        with self.lock:
            records = self._load_raw()
        return [self._to_domain(raw) for raw in records]

    def get_by_id(self, order_id: str) -> Order | None:
        with self.lock:
            records = self._load_raw()
        for raw in records:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def add(self, order: Order) -> None:
        with self.lock:
            orders = self._load_raw()
            orders.append(self._to_raw(order))
            self._persist_raw(orders)

    def save(self, order: Order) -> None:
        with self.lock:
            orders = self._load_raw()

            # Upsert: replace the first match, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

            self._persist_raw(orders)

    def delete(self, order_id: str) -> bool:
        with self.lock:
            orders = self._load_raw()
            remaining = [raw for raw in orders if raw["id"] != order_id]
            if len(remaining) == len(orders):
                return False
            self._persist_raw(remaining)
            return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customerName": order.customer_name,
            "status": order.status.value,
            "total": str(order.total.amount),
            "createdAt": order.created_at.isoformat(),
            "items": [
                {
                    "variantId": item.variant_id,
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "size": item.size,
                    "color": item.color,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "total": str(item.total.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                variant_id=i["variantId"],
                product_id=i["productId"],
                product_name=i["productName"],
                size=i["size"],
                color=i["color"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(str(i["price"]))),
                total=Money(Decimal(str(i["total"]))),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            items=items,
            total=Money(Decimal(str(raw["total"]))),
            status=OrderStatus(raw["status"]),
            customer_name=raw.get("customerName"),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json_document.load(self._file_path)

    def _persist_raw(self, orders: list[dict]) -> None:
        json_document.replace(self._file_path, orders)
