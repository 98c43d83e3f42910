import click

from stockroom.infrastructure.bootstrap import (
    configure_logging,
    order_repository,
    product_repository,
)
from stockroom.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from stockroom.infrastructure.cli.stats_commands import stats_inventory, stats_sales
from stockroom.infrastructure.cli.variant_commands import (
    variant_add,
    variant_delete,
    variant_update,
)
from stockroom.infrastructure.settings import Settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Stockroom: inventory and order admin.

    Data commands read and write the JSON documents under
    $STOCKROOM_DATA_DIR. STOCKROOM_STORAGE=memory is only usable with
    `serve`, since an in-memory store does not outlive a single command.
    """
    settings = Settings.from_env()
    configure_logging(settings)
    if settings.storage == "memory" and ctx.invoked_subcommand not in (None, "serve"):
        raise click.UsageError(
            "STOCKROOM_STORAGE=memory only works with `serve`; "
            "use json storage for data commands."
        )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def variant() -> None:
    """Manage product variants."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def stats() -> None:
    """Show inventory and sales statistics."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Port (default: $PORT or 8000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from stockroom.infrastructure.http.app import create_app

    settings = Settings.from_env()
    app = create_app(
        product_repo=product_repository(settings),
        order_repo=order_repository(settings),
        ping_message=settings.ping_message,
    )
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
variant.add_command(variant_add)
variant.add_command(variant_delete)
variant.add_command(variant_update)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
stats.add_command(stats_inventory)
stats.add_command(stats_sales)
