"""CLI commands for product variants."""

from __future__ import annotations

import click

from stockroom.application.add_variant import AddVariantHandler
from stockroom.application.delete_variant import DeleteVariantHandler
from stockroom.application.update_variant import UpdateVariantHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.product import VariantPatch
from stockroom.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--size", required=True, help="Size label, used verbatim in the SKU.")
@click.option("--color", required=True, help="Color name.")
@click.option("--price", required=True, help="Unit price (e.g. 49.90).")
@click.option("--stock", required=True, help="Units on hand.")
def variant_add(product_id: str, size: str, color: str, price: str, stock: str) -> None:
    """Add a size/color variant to a product."""
    handler = AddVariantHandler(product_repo=product_repository())

    try:
        variant = handler.handle(product_id, size=size, color=color, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant.id} added: SKU {variant.sku}, barcode {variant.barcode}")


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
@click.option("--stock", default=None, help="New stock level.")
@click.option("--price", default=None, help="New unit price.")
def variant_update(
    product_id: str, variant_id: str, stock: str | None, price: str | None
) -> None:
    """Set a variant's stock and/or price."""
    if stock is None and price is None:
        raise click.ClickException("Nothing to update; pass --stock or --price")

    handler = UpdateVariantHandler(product_repo=product_repository())

    try:
        variant = handler.handle(product_id, variant_id, VariantPatch(price=price, stock=stock))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant.id} ({variant.sku}): stock {variant.stock}, price {variant.price}")


@click.command("delete")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
def variant_delete(product_id: str, variant_id: str) -> None:
    """Remove a variant from a product."""
    handler = DeleteVariantHandler(product_repo=product_repository())

    try:
        handler.handle(product_id, variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant_id} deleted.")
