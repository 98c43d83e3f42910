"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockroom.application.add_product import AddProductHandler
from stockroom.application.delete_product import DeleteProductHandler
from stockroom.application.show_product import ShowProductHandler
from stockroom.application.update_product import UpdateProductHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.product import ProductPatch
from stockroom.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--brand", required=True, help="Brand name.")
@click.option("--category", required=True, help="Category (e.g. Jeans).")
def product_add(name: str, brand: str, category: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, brand=brand, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.brand} {product.name}' added")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Brand':<15} {'Name':<20} {'Category':<15} {'Variants':>8} {'Stock':>6}")
    click.echo("-" * 79)
    for p in products:
        click.echo(
            f"{p.id:<10} {p.brand:<15} {p.name:<20} {p.category:<15} "
            f"{len(p.variants):>8} {p.total_stock:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product with its variants."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id}: {product.brand} {product.name}")
    click.echo(f"Category: {product.category}")
    click.echo(f"Created:  {product.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()

    if not product.variants:
        click.echo("  No variants.")
        return

    click.echo(f"  {'ID':<10} {'SKU':<22} {'Barcode':<13} {'Price':>10} {'Stock':>6}")
    click.echo(f"  {'-'*65}")
    for v in product.variants:
        click.echo(f"  {v.id:<10} {v.sku:<22} {v.barcode:<13} {str(v.price):>10} {v.stock:>6}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New product name.")
@click.option("--brand", default=None, help="New brand.")
@click.option("--category", default=None, help="New category.")
def product_update(
    product_id: str, name: str | None, brand: str | None, category: str | None
) -> None:
    """Rename a product or change its brand or category."""
    patch = ProductPatch(name=name, brand=brand, category=category)
    if patch.is_empty():
        raise click.ClickException("Nothing to update; pass --name, --brand or --category")

    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, patch=patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: {product.brand} {product.name} ({product.category})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product and all of its variants."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
