"""Order aggregate.

An Order is a record of a sale. Its items are snapshots copied from the
catalog at order time; they do not point back to live variants and
placing an order does not touch stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import Money, Quantity
from stockroom.domain.service.code_generator import new_order_id


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: object) -> OrderStatus:
        try:
            return OrderStatus(value)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid status {value!r}; expected one of: {allowed}"
            ) from None


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of one order line.

    ``total`` is fixed when the item is built; later catalog changes never
    reach it.
    """

    variant_id: str
    product_id: str
    product_name: str
    size: str
    color: str
    quantity: Quantity
    price: Money  # unit price at order time
    total: Money

    @staticmethod
    def snapshot(
        variant_id: str,
        product_id: str,
        product_name: str,
        size: str,
        color: str,
        quantity: int,
        price: object,
    ) -> OrderItem:
        """Build an item, computing ``total = quantity * price``."""
        qty = Quantity(quantity)
        unit_price = Money.of(price)
        return OrderItem(
            variant_id=variant_id,
            product_id=product_id,
            product_name=product_name,
            size=size,
            color=color,
            quantity=qty,
            price=unit_price,
            total=unit_price * qty.value,
        )


@dataclass
class Order:
    """Aggregate root for recorded sales.

    Use ``Order.create()`` for new orders. ``total`` is stored, not
    derived, so it stays what it was when the order was placed.
    """

    id: str
    items: list[OrderItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    customer_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(items: list[OrderItem], customer_name: str | None = None) -> Order:
        """Create a pending order from item snapshots.

        Referenced products and variants are not checked; the items are
        self-contained.
        """
        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for item in items:
            total = total + item.total

        created_at = datetime.now(timezone.utc)
        name = customer_name.strip() if customer_name else None
        return Order(
            id=new_order_id(created_at),
            items=list(items),
            total=total,
            status=OrderStatus.PENDING,
            customer_name=name or None,
            created_at=created_at,
        )

    # --- State changes --------------------------------------------------------

    def set_status(self, status: OrderStatus) -> None:
        """Overwrite the status. Any status may follow any other."""
        self.status = status

    # --- Computed properties --------------------------------------------------

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED
