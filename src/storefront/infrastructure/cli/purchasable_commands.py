"""CLI commands for the Purchasable aggregate."""

from __future__ import annotations

import click

from storefront.application.add_purchasable import AddPurchasableHandler
from storefront.application.delete_purchasable import DeletePurchasableHandler
from storefront.application.dto import PurchasableChanges, PurchasableSpec
from storefront.application.list_purchasables import ListPurchasablesHandler
from storefront.application.update_purchasable import UpdatePurchasableHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    catalog_repository,
    purchasable_repository,
    settings,
    stock_gate,
)

store_option = click.option(
    "--store", "store_id", type=int, default=None, help="Store ID (defaults to the primary store)."
)


def _store(store_id: int | None) -> int | None:
    return store_id if store_id is not None else settings().default_store_id


@click.command("add")
@click.option("--sku", default="", help="SKU; leave empty for a temporary SKU.")
@click.option("--description", required=True, help="Title shown to customers.")
@click.option("--price", default=None, help="Base price (e.g. 15.00).")
@click.option("--promotional-price", default=None, help="Base promotional price.")
@click.option("--stock", type=int, default=None, help="Units in stock.")
@click.option("--unlimited", is_flag=True, default=False, help="Never run out of stock.")
@click.option("--min-qty", type=int, default=None, help="Minimum quantity per order.")
@click.option("--max-qty", type=int, default=None, help="Maximum quantity per order (0 = no cap).")
@click.option("--weight", default=None)
@click.option("--width", default=None)
@click.option("--height", default=None)
@click.option("--length", default=None)
@click.option("--tax-category", "tax_category_id", type=int, default=None, help="Tax category ID.")
@click.option("--shipping-category", "shipping_category_id", type=int, default=None, help="Shipping category ID.")
@store_option
def purchasable_add(
    sku: str,
    description: str,
    price: str | None,
    promotional_price: str | None,
    stock: int | None,
    unlimited: bool,
    min_qty: int | None,
    max_qty: int | None,
    weight: str | None,
    width: str | None,
    height: str | None,
    length: str | None,
    tax_category_id: int | None,
    shipping_category_id: int | None,
    store_id: int | None,
) -> None:
    """Add a purchasable to the catalog."""
    handler = AddPurchasableHandler(
        purchasable_repo=purchasable_repository(),
        catalog_repo=catalog_repository(),
        currency=settings().currency,
    )
    spec = PurchasableSpec(
        sku=sku,
        description=description,
        price=price,
        promotional_price=promotional_price,
        stock=stock,
        unlimited_stock=unlimited,
        min_qty=min_qty,
        max_qty=max_qty,
        weight=weight,
        width=width,
        height=height,
        length=length,
        tax_category_id=tax_category_id,
        shipping_category_id=shipping_category_id,
        store_id=_store(store_id),
    )

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchasable #{dto.id} '{dto.description}' added at {dto.price}")


@click.command("list")
@store_option
def purchasable_list(store_id: int | None) -> None:
    """List all purchasables of a store."""
    handler = ListPurchasablesHandler(
        purchasable_repo=purchasable_repository(),
        catalog_repo=catalog_repository(),
        stock_gate=stock_gate(),
    )

    try:
        rows = handler.handle(_store(store_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No purchasables found.")
        return

    click.echo(
        f"{'ID':<5} {'SKU':<12} {'Description':<20} {'Price':>10} {'Sale':>10} {'Stock':>10}  Available"
    )
    click.echo("-" * 82)
    for row in rows:
        click.echo(
            f"{row.id:<5} {row.sku:<12} {row.description:<20} {row.price:>10} "
            f"{row.sale_price:>10} {row.stock:>10}  {'yes' if row.available else 'no'}"
        )


@click.command("update")
@click.option("--id", "purchasable_id", required=True, type=int, help="Purchasable ID.")
@click.option("--sku", default=None, help="New SKU; replaces a temporary one.")
@click.option("--description", default=None)
@click.option("--price", default=None, help="New base price.")
@click.option("--promotional-price", default=None, help="New base promotional price.")
@click.option("--clear-promotion", is_flag=True, default=False, help="Remove the promotional price.")
@click.option("--stock", type=int, default=None)
@click.option("--unlimited/--limited", "unlimited", default=None)
@click.option("--min-qty", type=int, default=None)
@click.option("--max-qty", type=int, default=None)
@click.option("--enable/--disable", "enabled", default=None)
@click.option("--available/--unavailable", "available", default=None)
@click.option("--tax-category", "tax_category_id", type=int, default=None, help="Tax category ID.")
@click.option("--shipping-category", "shipping_category_id", type=int, default=None, help="Shipping category ID.")
@store_option
def purchasable_update(
    purchasable_id: int,
    sku: str | None,
    description: str | None,
    price: str | None,
    promotional_price: str | None,
    clear_promotion: bool,
    stock: int | None,
    unlimited: bool | None,
    min_qty: int | None,
    max_qty: int | None,
    enabled: bool | None,
    available: bool | None,
    tax_category_id: int | None,
    shipping_category_id: int | None,
    store_id: int | None,
) -> None:
    """Update a purchasable's SKU, price, stock, limits or categories."""
    handler = UpdatePurchasableHandler(
        purchasable_repo=purchasable_repository(),
        catalog_repo=catalog_repository(),
        currency=settings().currency,
    )
    changes = PurchasableChanges(
        sku=sku,
        description=description,
        price=price,
        promotional_price=promotional_price,
        clear_promotional_price=clear_promotion,
        stock=stock,
        unlimited_stock=unlimited,
        min_qty=min_qty,
        max_qty=max_qty,
        enabled=enabled,
        available_for_purchase=available,
        tax_category_id=tax_category_id,
        shipping_category_id=shipping_category_id,
    )

    try:
        dto = handler.handle(purchasable_id, changes, store_id=_store(store_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchasable #{dto.id} updated.")
    if not dto.available:
        click.echo("Note: not available for purchase.")


@click.command("delete")
@click.option("--id", "purchasable_id", required=True, type=int, help="Purchasable ID.")
@store_option
def purchasable_delete(purchasable_id: int, store_id: int | None) -> None:
    """Delete a purchasable from the catalog."""
    handler = DeletePurchasableHandler(
        purchasable_repo=purchasable_repository(),
        catalog_repo=catalog_repository(),
    )

    try:
        handler.handle(purchasable_id, store_id=_store(store_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchasable #{purchasable_id} deleted.")
