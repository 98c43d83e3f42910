"""Product aggregate.

A Product owns its Variants: they are created, changed and removed only
through the product, and never shared between products.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from stockroom.domain.exceptions import NotFoundError
from stockroom.domain.model.value_objects import Money, StockLevel, required_text
from stockroom.domain.service.code_generator import (
    compute_sku,
    new_barcode,
    new_id,
)


@dataclass(frozen=True)
class ProductPatch:
    """Fields of a Product that may be changed after creation.

    ``None`` means "leave as is".
    """

    name: str | None = None
    brand: str | None = None
    category: str | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.brand is None and self.category is None


@dataclass(frozen=True)
class VariantPatch:
    """Fields of a Variant that may be changed after creation.

    Values are raw input; they are parsed when the patch is applied.
    Size, color, SKU and barcode have no update path.
    """

    price: object | None = None
    stock: object | None = None


@dataclass
class Variant:
    """A purchasable size/color combination of a Product."""

    id: str
    size: str
    color: str
    price: Money
    stock: int
    sku: str
    barcode: str

    def apply(self, patch: VariantPatch) -> None:
        """Merge the present fields of *patch*, validating each one first."""
        price = Money.of(patch.price) if patch.price is not None else self.price
        stock = StockLevel.of(patch.stock).value if patch.stock is not None else self.stock
        self.price = price
        self.stock = stock


@dataclass
class Product:
    """A catalog entry; aggregate root for its variants.

    Use ``Product.create()`` for new products. The ``__init__`` stays
    plain so repositories can reconstitute stored products as-is.
    """

    id: str
    name: str
    brand: str
    category: str
    variants: list[Variant] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(name: object, brand: object, category: object) -> Product:
        """Create a new product with no variants."""
        return Product(
            id=new_id(),
            name=required_text(name, "Product name"),
            brand=required_text(brand, "Brand"),
            category=required_text(category, "Category"),
        )

    # --- Mutations ------------------------------------------------------------

    def apply(self, patch: ProductPatch) -> None:
        """Apply the present fields of *patch*.

        Every field is validated before any is written, so a bad patch
        leaves the product untouched. Existing variant SKUs keep the
        brand/name they were minted with.
        """
        name = required_text(patch.name, "Product name") if patch.name is not None else self.name
        brand = required_text(patch.brand, "Brand") if patch.brand is not None else self.brand
        category = (
            required_text(patch.category, "Category")
            if patch.category is not None
            else self.category
        )
        self.name, self.brand, self.category = name, brand, category

    def add_variant(
        self, size: object, color: object, price: object, stock: object
    ) -> Variant:
        """Mint a variant from the product's *current* brand and name."""
        size_text = required_text(size, "Size")
        color_text = required_text(color, "Color")

        variant = Variant(
            id=self._unused_variant_id(),
            size=size_text,
            color=color_text,
            price=Money.of(price),
            stock=StockLevel.of(stock).value,
            sku=compute_sku(self.brand, self.name, color_text, size_text),
            barcode=new_barcode(),
        )
        self.variants.append(variant)
        return variant

    def find_variant(self, variant_id: str) -> Variant:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        raise NotFoundError("Variant not found")

    def remove_variant(self, variant_id: str) -> None:
        variant = self.find_variant(variant_id)
        self.variants.remove(variant)

    # --- Computed properties --------------------------------------------------

    @property
    def total_stock(self) -> int:
        return sum(v.stock for v in self.variants)

    # --- Internal helpers -----------------------------------------------------

    def _unused_variant_id(self) -> str:
        taken = {v.id for v in self.variants}
        candidate = new_id()
        while candidate in taken:
            candidate = new_id()
        return candidate
