"""Request and response bodies for the HTTP API.

Field names on the wire are camelCase; money goes out as a JSON number
and timestamps as ISO-8601 UTC with millisecond precision.
Request fields are optional at this layer so that missing values reach
the domain, which reports them as validation errors.
"""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stockroom.domain.model.order import Order, OrderItem
from stockroom.domain.model.product import Product, Variant
from stockroom.domain.service.statistics import InventoryStats, SalesStats


def to_iso(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Requests

class ProductIn(ApiModel):
    name: str | None = None
    brand: str | None = None
    category: str | None = None


class VariantIn(ApiModel):
    size: str | None = None
    color: str | None = None
    price: Decimal | None = None
    stock: Decimal | None = None


class VariantUpdateIn(ApiModel):
    stock: Decimal | None = None
    price: Decimal | None = None


class OrderItemIn(ApiModel):
    variant_id: str
    product_id: str
    product_name: str
    size: str
    color: str
    quantity: int
    price: Decimal


class OrderIn(ApiModel):
    items: list[OrderItemIn] = Field(default_factory=list)
    customer_name: str | None = None


class OrderStatusIn(ApiModel):
    status: str | None = None


# Responses

class VariantOut(ApiModel):
    id: str
    size: str
    color: str
    price: float
    stock: int
    sku: str
    barcode: str

    @classmethod
    def from_domain(cls, variant: Variant) -> VariantOut:
        return cls(
            id=variant.id,
            size=variant.size,
            color=variant.color,
            price=float(variant.price.amount),
            stock=variant.stock,
            sku=variant.sku,
            barcode=variant.barcode,
        )


class ProductOut(ApiModel):
    id: str
    name: str
    brand: str
    category: str
    variants: list[VariantOut]
    created_at: str

    @classmethod
    def from_domain(cls, product: Product) -> ProductOut:
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category,
            variants=[VariantOut.from_domain(v) for v in product.variants],
            created_at=to_iso(product.created_at),
        )


class OrderItemOut(ApiModel):
    variant_id: str
    product_id: str
    product_name: str
    size: str
    color: str
    quantity: int
    price: float
    total: float

    @classmethod
    def from_domain(cls, item: OrderItem) -> OrderItemOut:
        return cls(
            variant_id=item.variant_id,
            product_id=item.product_id,
            product_name=item.product_name,
            size=item.size,
            color=item.color,
            quantity=item.quantity.value,
            price=float(item.price.amount),
            total=float(item.total.amount),
        )


class OrderOut(ApiModel):
    id: str
    items: list[OrderItemOut]
    total: float
    status: str
    created_at: str
    customer_name: str | None = None

    @classmethod
    def from_domain(cls, order: Order) -> OrderOut:
        return cls(
            id=order.id,
            items=[OrderItemOut.from_domain(i) for i in order.items],
            total=float(order.total.amount),
            status=order.status.value,
            created_at=to_iso(order.created_at),
            customer_name=order.customer_name,
        )


class InventoryStatsOut(ApiModel):
    total_products: int
    total_variants: int
    total_stock: int

    @classmethod
    def from_domain(cls, stats: InventoryStats) -> InventoryStatsOut:
        return cls(
            total_products=stats.total_products,
            total_variants=stats.total_variants,
            total_stock=stats.total_stock,
        )


class SalesStatsOut(ApiModel):
    total_revenue: float
    total_orders: int
    completed_orders: int
    today_orders: int
    today_revenue: float
    average_order_value: float

    @classmethod
    def from_domain(cls, stats: SalesStats) -> SalesStatsOut:
        return cls(
            total_revenue=float(stats.total_revenue.amount),
            total_orders=stats.total_orders,
            completed_orders=stats.completed_orders,
            today_orders=stats.today_orders,
            today_revenue=float(stats.today_revenue.amount),
            average_order_value=float(stats.average_order_value.amount),
        )
