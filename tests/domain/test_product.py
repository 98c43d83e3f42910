"""Unit tests for the Product aggregate and its variants."""

import re

import pytest

from stockroom.domain.exceptions import NotFoundError, ValidationError
from stockroom.domain.model.product import Product, ProductPatch, VariantPatch
from stockroom.domain.model.value_objects import Money


def _jeans() -> Product:
    return Product.create(name="Denim Jeans", brand="Azure", category="Bottoms")


class TestProductCreation:

    def test_happy_path(self):
        product = _jeans()
        assert product.name == "Denim Jeans"
        assert product.brand == "Azure"
        assert product.category == "Bottoms"
        assert product.variants == []
        assert product.created_at.tzinfo is not None

    def test_fields_are_trimmed(self):
        product = Product.create(name=" Tee ", brand=" Nord ", category=" Tops ")
        assert (product.name, product.brand, product.category) == ("Tee", "Nord", "Tops")

    @pytest.mark.parametrize("field", ["name", "brand", "category"])
    def test_blank_field_rejected(self, field):
        kwargs = {"name": "Tee", "brand": "Nord", "category": "Tops", field: "  "}
        with pytest.raises(ValidationError, match="is required"):
            Product.create(**kwargs)


class TestProductPatch:

    def test_only_present_fields_change(self):
        product = _jeans()
        product.apply(ProductPatch(category="Denim"))
        assert product.category == "Denim"
        assert product.name == "Denim Jeans"
        assert product.brand == "Azure"

    def test_blank_field_rejected_and_nothing_applied(self):
        product = _jeans()
        with pytest.raises(ValidationError):
            product.apply(ProductPatch(name="Slim Jeans", brand=""))
        assert product.name == "Denim Jeans"

    def test_is_empty(self):
        assert ProductPatch().is_empty()
        assert not ProductPatch(name="x").is_empty()


class TestAddVariant:

    def test_variant_fields(self):
        product = _jeans()
        variant = product.add_variant(size="M", color="Blue", price="49.90", stock=5)
        assert variant.sku == "AZU-DEN-BLU-M"
        assert re.fullmatch(r"\d{12}", variant.barcode)
        assert variant.price == Money.of("49.90")
        assert variant.stock == 5
        assert product.variants == [variant]

    def test_insertion_order_kept(self):
        product = _jeans()
        first = product.add_variant("S", "Blue", 10, 1)
        second = product.add_variant("M", "Blue", 10, 1)
        assert [v.id for v in product.variants] == [first.id, second.id]

    def test_variant_ids_unique_within_product(self):
        product = _jeans()
        for size in ["XS", "S", "M", "L", "XL"]:
            product.add_variant(size, "Black", 10, 0)
        assert len({v.id for v in product.variants}) == 5

    def test_sku_not_recomputed_after_rename(self):
        product = _jeans()
        variant = product.add_variant("M", "Blue", 10, 1)
        product.apply(ProductPatch(brand="Zephyr", name="Chinos"))
        assert variant.sku == "AZU-DEN-BLU-M"
        later = product.add_variant("L", "Blue", 10, 1)
        assert later.sku == "ZEP-CHI-BLU-L"

    @pytest.mark.parametrize(
        "price,stock",
        [("-1", 5), ("abc", 5), ("10", -2), ("10", "many"), ("10", "1.5")],
    )
    def test_bad_price_or_stock_rejected(self, price, stock):
        product = _jeans()
        with pytest.raises(ValidationError):
            product.add_variant("M", "Blue", price, stock)
        assert product.variants == []

    def test_zero_price_and_stock_accepted(self):
        variant = _jeans().add_variant("M", "Blue", 0, 0)
        assert variant.price == Money.zero()
        assert variant.stock == 0


class TestVariantLookupAndPatch:

    def test_find_missing_variant(self):
        with pytest.raises(NotFoundError, match="Variant not found"):
            _jeans().find_variant("nope")

    def test_patch_stock_only(self):
        product = _jeans()
        variant = product.add_variant("M", "Blue", "20", 3)
        variant.apply(VariantPatch(stock="8"))
        assert variant.stock == 8
        assert variant.price == Money.of("20")

    def test_patch_validates_before_writing(self):
        product = _jeans()
        variant = product.add_variant("M", "Blue", "20", 3)
        with pytest.raises(ValidationError):
            variant.apply(VariantPatch(price="15", stock=-1))
        assert variant.price == Money.of("20")
        assert variant.stock == 3

    def test_remove_variant(self):
        product = _jeans()
        keep = product.add_variant("S", "Blue", 10, 1)
        drop = product.add_variant("M", "Blue", 10, 1)
        product.remove_variant(drop.id)
        assert product.variants == [keep]
        with pytest.raises(NotFoundError):
            product.remove_variant(drop.id)

    def test_total_stock(self):
        product = _jeans()
        product.add_variant("S", "Blue", 10, 4)
        product.add_variant("M", "Blue", 10, 6)
        assert product.total_stock == 10
