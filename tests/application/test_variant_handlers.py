"""Integration tests for the variant use cases."""

import pytest

from stockroom.application.add_product import AddProductHandler
from stockroom.application.add_variant import AddVariantHandler
from stockroom.application.delete_variant import DeleteVariantHandler
from stockroom.application.show_product import ShowProductHandler
from stockroom.application.update_product import UpdateProductHandler
from stockroom.application.update_variant import UpdateVariantHandler
from stockroom.domain.exceptions import NotFoundError, ValidationError
from stockroom.domain.model.product import Product, ProductPatch, VariantPatch
from stockroom.domain.model.value_objects import Money
from stockroom.infrastructure.persistence.in_memory import InMemoryProductRepository


def _setup() -> tuple[InMemoryProductRepository, Product]:
    repo = InMemoryProductRepository()
    product = AddProductHandler(repo).handle("Denim Jeans", "Azure", "Bottoms")
    return repo, product


class TestAddVariant:

    def test_adds_variant_with_sku(self):
        repo, product = _setup()
        variant = AddVariantHandler(repo).handle(product.id, "M", "Blue", "49.90", "5")
        assert variant.sku == "AZU-DEN-BLU-M"
        assert variant.stock == 5
        assert ShowProductHandler(repo).handle(product.id).variants == [variant]

    def test_missing_fields_rejected_before_lookup(self):
        repo, _ = _setup()
        with pytest.raises(ValidationError, match="Missing required fields"):
            AddVariantHandler(repo).handle("missing", "M", "Blue", None, 5)

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError, match="Product not found"):
            AddVariantHandler(repo).handle("missing", "M", "Blue", 10, 5)

    def test_negative_stock_rejected(self):
        repo, product = _setup()
        with pytest.raises(ValidationError):
            AddVariantHandler(repo).handle(product.id, "M", "Blue", 10, -3)
        assert ShowProductHandler(repo).handle(product.id).variants == []

    def test_sku_reflects_name_at_add_time(self):
        repo, product = _setup()
        add = AddVariantHandler(repo)
        before = add.handle(product.id, "M", "Blue", 10, 1)
        UpdateProductHandler(repo).handle(product.id, ProductPatch(brand="Zephyr"))
        after = add.handle(product.id, "L", "Blue", 10, 1)

        stored = ShowProductHandler(repo).handle(product.id)
        assert [v.sku for v in stored.variants] == ["AZU-DEN-BLU-M", "ZEP-DEN-BLU-L"]
        assert before.sku == "AZU-DEN-BLU-M"
        assert after.sku == "ZEP-DEN-BLU-L"


class TestUpdateVariant:

    def test_updates_stock(self):
        repo, product = _setup()
        variant = AddVariantHandler(repo).handle(product.id, "M", "Blue", 10, 1)
        updated = UpdateVariantHandler(repo).handle(product.id, variant.id, VariantPatch(stock=12))
        assert updated.stock == 12
        assert ShowProductHandler(repo).handle(product.id).variants[0].stock == 12

    def test_updates_price(self):
        repo, product = _setup()
        variant = AddVariantHandler(repo).handle(product.id, "M", "Blue", 10, 1)
        updated = UpdateVariantHandler(repo).handle(product.id, variant.id, VariantPatch(price="7.5"))
        assert updated.price == Money.of("7.5")
        assert updated.sku == variant.sku

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError, match="Product not found"):
            UpdateVariantHandler(repo).handle("missing", "v", VariantPatch(stock=1))

    def test_unknown_variant(self):
        repo, product = _setup()
        with pytest.raises(NotFoundError, match="Variant not found"):
            UpdateVariantHandler(repo).handle(product.id, "missing", VariantPatch(stock=1))


class TestDeleteVariant:

    def test_removes_variant(self):
        repo, product = _setup()
        add = AddVariantHandler(repo)
        keep = add.handle(product.id, "S", "Blue", 10, 1)
        drop = add.handle(product.id, "M", "Blue", 10, 1)

        assert DeleteVariantHandler(repo).handle(product.id, drop.id) is True
        assert ShowProductHandler(repo).handle(product.id).variants == [keep]

    def test_unknown_variant(self):
        repo, product = _setup()
        with pytest.raises(NotFoundError):
            DeleteVariantHandler(repo).handle(product.id, "missing")

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError):
            DeleteVariantHandler(repo).handle("missing", "v")
