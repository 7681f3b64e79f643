"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from catalog.application.dto import (
    CreateProductCommand,
    ProductDTO,
    UpdateProductCommand,
)
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import ProductId
from catalog.infrastructure.bootstrap import product_management_service


class DecimalType(click.ParamType):
    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid decimal number.", param, ctx)


DECIMAL = DecimalType()


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"  Name:   {dto.name}")
    click.echo(f"  Price:  ${dto.price}")
    click.echo(f"  Status: {dto.status}")


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=DECIMAL, help="Price (e.g. 15.00).")
def product_create(name: str, price: Decimal) -> None:
    """Add a new product to the catalog."""
    service = product_management_service()

    try:
        dto = service.create_product(CreateProductCommand(name=name, price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' created at ${dto.price} (status={dto.status})")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_management_service().find_all_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10}  {'Status':<8}")
    click.echo("-" * 80)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name:<20} {str(p.price):>10}  {p.status:<8}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    service = product_management_service()

    try:
        dto = service.find_product(ProductId.of(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, type=DECIMAL, help="New price (e.g. 29.99).")
def product_update(product_id: str, name: str | None, price: Decimal | None) -> None:
    """Change a product's name and/or price."""
    if name is None and price is None:
        raise click.UsageError("Nothing to update: pass --name and/or --price.")

    service = product_management_service()

    try:
        dto = service.update_product(
            ProductId.of(product_id),
            UpdateProductCommand(name=name, price=price),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    service = product_management_service()

    try:
        service.delete_product(ProductId.of(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Activate a product (refused while its price is negative)."""
    service = product_management_service()

    try:
        dto = service.activate_product(ProductId.of(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}.")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Deactivate a product."""
    service = product_management_service()

    try:
        dto = service.deactivate_product(ProductId.of(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}.")
