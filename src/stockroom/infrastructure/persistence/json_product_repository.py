"""JSON-file-backed implementation of ProductRepository.

The whole collection is one JSON document, read and rewritten on every
call, with variants nested inside their product.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from stockroom.domain.model.product import Product, Variant
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.infrastructure.persistence import json_document


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__()
        self._file_path = file_path
        json_document.ensure(file_path, "product")

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self.lock:
            records = self._load_raw()
        return [self._to_domain(raw) for raw in records]

    def get_by_id(self, product_id: str) -> Product | None:
        with self.lock:
            records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def save(self, product: Product) -> None:
        with self.lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))
            self._persist_raw(records)

    def delete(self, product_id: str) -> bool:
        with self.lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != product_id]
            if len(remaining) == len(records):
                return False
            self._persist_raw(remaining)
            return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "brand": product.brand,
            "category": product.category,
            "variants": [
                {
                    "id": v.id,
                    "size": v.size,
                    "color": v.color,
                    "price": str(v.price.amount),
                    "stock": v.stock,
                    "sku": v.sku,
                    "barcode": v.barcode,
                }
                for v in product.variants
            ],
            "createdAt": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        variants = [
            Variant(
                id=v["id"],
                size=v["size"],
                color=v["color"],
                price=Money(Decimal(str(v["price"]))),
                stock=v["stock"],
                sku=v["sku"],
                barcode=v["barcode"],
            )
            for v in raw.get("variants", [])
        ]
        return Product(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            category=raw["category"],
            variants=variants,
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json_document.load(self._file_path)

    def _persist_raw(self, records: list[dict]) -> None:
        json_document.replace(self._file_path, records)
