"""CLI command for placing an order."""

from __future__ import annotations

import click

from farmcart.application.checkout import PAYMENT_METHODS, CheckoutHandler
from farmcart.domain.exceptions import DomainException
from farmcart.infrastructure.bootstrap import cart_repository, promotion_repository


@click.command("checkout")
@click.option(
    "--payment",
    type=click.Choice(PAYMENT_METHODS, case_sensitive=False),
    default="cod",
    show_default=True,
    help="Payment method.",
)
def checkout(payment: str) -> None:
    """Place an order for everything in the cart."""
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        confirmation = handler.handle(payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    summary = confirmation.summary
    click.echo("Order Placed Successfully!")
    click.echo(f"Order ID: #{confirmation.order_ref}")
    click.echo(f"Placed:   {confirmation.placed_at}")
    click.echo(f"Payment:  {confirmation.payment_method.upper()}")
    click.echo(f"Items:    {summary.item_count}")
    click.echo(f"Total:    {summary.total}")
