"""CLI commands for inventory and sales statistics."""

from __future__ import annotations

import click

from stockroom.application.show_stats import (
    ShowInventoryStatsHandler,
    ShowSalesStatsHandler,
)
from stockroom.infrastructure.bootstrap import order_repository, product_repository


@click.command("inventory")
def stats_inventory() -> None:
    """Show product, variant and stock totals."""
    stats = ShowInventoryStatsHandler(product_repo=product_repository()).handle()

    click.echo(f"{'Products':<12} {stats.total_products:>8}")
    click.echo(f"{'Variants':<12} {stats.total_variants:>8}")
    click.echo(f"{'Stock':<12} {stats.total_stock:>8}")


@click.command("sales")
def stats_sales() -> None:
    """Show revenue and order counts."""
    stats = ShowSalesStatsHandler(order_repo=order_repository()).handle()

    click.echo(f"{'Total revenue':<22} {str(stats.total_revenue):>12}")
    click.echo(f"{'Orders':<22} {stats.total_orders:>12}")
    click.echo(f"{'Completed orders':<22} {stats.completed_orders:>12}")
    click.echo(f"{'Orders today':<22} {stats.today_orders:>12}")
    click.echo(f"{'Revenue today':<22} {str(stats.today_revenue):>12}")
    click.echo(f"{'Average order value':<22} {str(stats.average_order_value):>12}")
