"""CLI commands for promotion codes."""

from __future__ import annotations

import click

from farmcart.application.apply_promotion import (
    ApplyPromotionHandler,
    RemovePromotionHandler,
)
from farmcart.domain.exceptions import DomainException
from farmcart.infrastructure.bootstrap import promotion_repository


@click.command("apply")
@click.option("--code", required=True, help="Promo code, e.g. ORGANIC10.")
def promo_apply(code: str) -> None:
    """Apply a promo code to the cart."""
    handler = ApplyPromotionHandler(promotion_repo=promotion_repository())

    try:
        promotion = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Promo code {promotion.code} applied successfully! ({promotion.describe()})")


@click.command("remove")
def promo_remove() -> None:
    """Remove the applied promo code."""
    handler = RemovePromotionHandler(promotion_repo=promotion_repository())

    try:
        previous = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if previous is None:
        click.echo("No promo code applied.")
    else:
        click.echo(f"Promo code {previous.code} removed.")
