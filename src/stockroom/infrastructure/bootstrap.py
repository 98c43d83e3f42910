"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Repositories are built
here and handed to the HTTP app or CLI command that uses them; nothing
keeps a module-level instance.
"""

from __future__ import annotations

import logging

from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.infrastructure.persistence.in_memory import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from stockroom.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from stockroom.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from stockroom.infrastructure.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or Settings.from_env()
    if settings.storage == "memory":
        return InMemoryProductRepository()
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: Settings | None = None) -> OrderRepository:
    settings = settings or Settings.from_env()
    if settings.storage == "memory":
        return InMemoryOrderRepository()
    return JsonOrderRepository(settings.data_dir / "orders.json")
