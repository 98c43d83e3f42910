"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from stockroom.application.create_order import CreateOrderHandler
from stockroom.application.delete_order import DeleteOrderHandler
from stockroom.application.dto import OrderItemSpec
from stockroom.application.show_order import ShowOrderHandler
from stockroom.application.show_product import ShowProductHandler
from stockroom.application.update_order_status import UpdateOrderStatusHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.order import Order, OrderStatus
from stockroom.infrastructure.bootstrap import order_repository, product_repository


def _parse_items(raw: str) -> list[tuple[str, str, int]]:
    """Parse 'PRODUCT/VARIANT:2,PRODUCT/VARIANT:1' into (product, variant, qty)."""
    parsed: list[tuple[str, str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair or "/" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID/VariantID:Quantity'."
            )
        ref, qty_str = pair.rsplit(":", 1)
        product_id, variant_id = ref.split("/", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for variant '{variant_id}'."
            )
        parsed.append((product_id.strip(), variant_id.strip(), qty))
    return parsed


def _snapshot_items(parsed: list[tuple[str, str, int]]) -> list[OrderItemSpec]:
    """Copy name, size, color and current price from the catalog."""
    products = ShowProductHandler(product_repo=product_repository())
    specs: list[OrderItemSpec] = []
    for product_id, variant_id, qty in parsed:
        product = products.handle(product_id)
        variant = product.find_variant(variant_id)
        specs.append(
            OrderItemSpec(
                variant_id=variant.id,
                product_id=product.id,
                product_name=product.name,
                size=variant.size,
                color=variant.color,
                quantity=qty,
                price=variant.price.amount,
            )
        )
    return specs


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {order.id}  (status={order.status.value})")
    click.echo(f"Customer: {order.customer_name or '-'}")
    click.echo(f"Created:  {order.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Size':<6} {'Color':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*66}")
    for item in order.items:
        click.echo(
            f"  {item.product_name:<20} {item.size:<6} {item.color:<10} "
            f"{item.quantity.value:>5} {str(item.price):>10} {str(item.total):>10}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Order Total':<46} {str(order.total):>20}")


@click.command("create")
@click.option("--customer", default=None, help="Customer name (optional).")
@click.option("--items", required=True, help="Items as 'ProductID/VariantID:Qty,...'.")
def order_create(customer: str | None, items: str) -> None:
    """Record a new order from catalog variants."""
    parsed = _parse_items(items)

    try:
        specs = _snapshot_items(parsed)
        order = CreateOrderHandler(order_repo=order_repository()).handle(
            specs, customer_name=customer
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("list")
def order_list() -> None:
    """List all orders."""
    orders = order_repository().list_all()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<18} {'Status':<10} {'Customer':<20} {'Items':>5} {'Total':>12}")
    click.echo("-" * 69)
    for o in orders:
        click.echo(
            f"{o.id:<18} {o.status.value:<10} {(o.customer_name or '-'):<20} "
            f"{len(o.items):>5} {str(o.total):>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        order = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.argument("status", type=click.Choice([s.value for s in OrderStatus]))
def order_status(order_id: str, status: str) -> None:
    """Set an order's status (pending, completed or cancelled)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        order = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order.id} is now {order.status.value}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
