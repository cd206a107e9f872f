"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from farmcart.application.add_product import AddProductHandler
from farmcart.application.list_products import SORT_KEYS, ListProductsHandler
from farmcart.domain.exceptions import DomainException
from farmcart.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price per kg (e.g. 60).")
@click.option("--farmer", default=None, help="Farm selling the product.")
@click.option("--category", default="", help="Catalog category.")
@click.option("--certified/--not-certified", default=False, help="Certified organic.")
def product_add(name: str, price: str, farmer: str | None, category: str, certified: bool) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name, price=price, farmer=farmer, certified=certified, category=category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}/kg")


@click.command("list")
@click.option("--search", default=None, help="Filter by name or category.")
@click.option("--sort", type=click.Choice(sorted(SORT_KEYS)), default=None, help="Sort order.")
def product_list(search: str | None, sort: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle(search=search, sort=sort)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<22} {'Farmer':<20} {'Price/kg':>10} {'Rating':>7}")
    click.echo("-" * 69)
    for p in products:
        name = f"{p.name} *" if p.certified else p.name
        click.echo(f"{p.id:<6} {name:<22} {p.farmer:<20} {p.price:>10} {p.rating:>7.1f}")
    click.echo()
    click.echo("* Certified Organic")
