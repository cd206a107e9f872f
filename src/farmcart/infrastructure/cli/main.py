import click

from farmcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_decrease,
    cart_increase,
    cart_remove,
    cart_set,
    cart_show,
)
from farmcart.infrastructure.cli.checkout_commands import checkout
from farmcart.infrastructure.cli.product_commands import product_add, product_list
from farmcart.infrastructure.cli.promo_commands import promo_apply, promo_remove
from farmcart.log import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """farmcart — OrganicFarm storefront cart"""
    configure_logging(verbose=verbose)


@cli.group()
def product() -> None:
    """Browse and manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def promo() -> None:
    """Apply or remove promo codes."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_set)
cart.add_command(cart_increase)
cart.add_command(cart_decrease)
cart.add_command(cart_remove)
cart.add_command(cart_show)
promo.add_command(promo_apply)
promo.add_command(promo_remove)
cli.add_command(checkout)
