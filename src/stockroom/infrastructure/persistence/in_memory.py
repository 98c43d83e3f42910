"""In-process implementations of the repositories.

Everything lives in containers owned by the repository instance; contents
are lost when the process exits. Products sit in a dict, which keeps
insertion order, and re-saving an existing key keeps its position. Orders
sit in a list because two of them can share an id.
"""

from __future__ import annotations

from stockroom.domain.model.order import Order
from stockroom.domain.model.product import Product
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def list_all(self) -> list[Product]:
        with self.lock:
            return list(self._store.values())

    def get_by_id(self, product_id: str) -> Product | None:
        with self.lock:
            return self._store.get(product_id)

    def save(self, product: Product) -> None:
        with self.lock:
            self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        with self.lock:
            return self._store.pop(product_id, None) is not None


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        super().__init__()
        self._orders: list[Order] = list(orders or [])

    def list_all(self) -> list[Order]:
        with self.lock:
            return list(self._orders)

    def get_by_id(self, order_id: str) -> Order | None:
        with self.lock:
            return next((o for o in self._orders if o.id == order_id), None)

    def add(self, order: Order) -> None:
        with self.lock:
            self._orders.append(order)

    def save(self, order: Order) -> None:
        with self.lock:
            for i, existing in enumerate(self._orders):
                if existing.id == order.id:
                    self._orders[i] = order
                    return
            self._orders.append(order)

    def delete(self, order_id: str) -> bool:
        with self.lock:
            remaining = [o for o in self._orders if o.id != order_id]
            if len(remaining) == len(self._orders):
                return False
            self._orders = remaining
            return True
