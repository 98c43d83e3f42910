"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry caller input into the application layer without exposing
domain construction details to the CLI or HTTP code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one order line as the caller copied it from the catalog."""

    variant_id: str
    product_id: str
    product_name: str
    size: str
    color: str
    quantity: int
    price: object  # parsed into Money by the domain
