"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from farmcart.application.add_to_cart import AddToCartHandler
from farmcart.application.change_quantity import ChangeQuantityHandler
from farmcart.application.dto import CartDTO
from farmcart.application.remove_from_cart import RemoveFromCartHandler
from farmcart.application.show_cart import ShowCartHandler
from farmcart.domain.exceptions import DomainException
from farmcart.infrastructure.bootstrap import (
    cart_repository,
    product_repository,
    promotion_repository,
)

QUANTITY_CAPPED_MESSAGE = "Maximum quantity reached"


def display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart and its totals."""
    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<22} {'Qty':>4} {'Price':>10} {'Total':>11}")
    click.echo(f"  {'-'*57}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<6} {line.name:<22} {line.quantity:>4} "
            f"{line.unit_price:>10} {line.line_total:>11}"
        )
        badge = "  [Certified Organic]" if line.certified else ""
        click.echo(f"  {'':<6} from {line.farmer}{badge}")
    click.echo(f"  {'-'*57}")

    summary = dto.summary
    click.echo(f"  {'Items':<30} {summary.item_count:>27}")
    click.echo(f"  {'Subtotal':<30} {summary.subtotal:>27}")
    click.echo(f"  {'Delivery':<30} {summary.delivery_charge:>27}")
    promo = f"Discount ({summary.promotion_code})" if summary.promotion_code else "Discount"
    click.echo(f"  {promo:<30} {summary.discount:>27}")
    click.echo(f"  {'Total':<30} {summary.total:>27}")

    if summary.amount_to_free_delivery is not None:
        click.echo()
        click.echo(f"Add {summary.amount_to_free_delivery} more for FREE delivery!")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        change = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if change.quantity_capped:
        click.echo(f"Warning: {QUANTITY_CAPPED_MESSAGE}")
    else:
        click.echo("Product added to cart!")
    display_cart(change.cart)


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID in the cart.")
@click.option("--quantity", required=True, type=int, help="New quantity (1-50).")
def cart_set(product_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    handler = ChangeQuantityHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        dto = handler.set(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Quantity updated")
    display_cart(dto)


@click.command("increase")
@click.option("--product", "product_id", required=True, help="Product ID in the cart.")
def cart_increase(product_id: str) -> None:
    """Increase a cart line by one unit."""
    handler = ChangeQuantityHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        change = handler.increase(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if change.quantity_capped:
        click.echo(f"Warning: {QUANTITY_CAPPED_MESSAGE}")
    else:
        click.echo("Quantity updated")
    display_cart(change.cart)


@click.command("decrease")
@click.option("--product", "product_id", required=True, help="Product ID in the cart.")
def cart_decrease(product_id: str) -> None:
    """Decrease a cart line by one unit (minimum 1)."""
    handler = ChangeQuantityHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        dto = handler.decrease(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Quantity updated")
    display_cart(dto)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Item removed from cart")
    display_cart(dto)


@click.command("show")
def cart_show() -> None:
    """Show the cart with its order summary."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
    )

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)
