import click

from catalog import config
from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_create,
    product_deactivate,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.logging import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help=f"Console log level (default: ${config.LOG_LEVEL_ENV} or INFO).",
)
@click.option("--color/--no-color", default=True, help="Colorize log output.")
def cli(log_level: str | None, color: bool) -> None:
    """Product Catalog"""
    configure_logging(log_level or config.get_log_level(), color=color)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: $CATALOG_HTTP_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: $CATALOG_HTTP_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from catalog.infrastructure.http.app import create_app

    try:
        port = port if port is not None else config.get_http_port()
    except config.ConfigError as exc:
        raise click.ClickException(str(exc))

    uvicorn.run(
        create_app(),
        host=host or config.get_http_host(),
        port=port,
        log_config=None,
    )


# Register subcommands
product.add_command(product_activate)
product.add_command(product_create)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
