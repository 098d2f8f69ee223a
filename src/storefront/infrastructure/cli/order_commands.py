"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.add_line_item import AddLineItemHandler
from storefront.application.complete_order import CompleteOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import NoticeDTO, OrderDTO
from storefront.application.refresh_order import RefreshOrderHandler
from storefront.application.remove_line_item import RemoveLineItemHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_line_item import UpdateLineItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    catalog_repository,
    line_item_synchronizer,
    order_repository,
    purchasable_repository,
    settings,
    stock_gate,
)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (state={dto.state}, store={dto.store_id})")
    click.echo(f"Created:   {dto.created_at}")
    if dto.completed_at:
        click.echo(f"Completed: {dto.completed_at}")
    click.echo()

    click.echo(f"  {'#':<4} {'Item':<20} {'Qty':>5} {'Price':>10} {'Sale':>10} {'Total':>10}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.id!s:<4} {item.description:<20} {item.qty:>5} "
            f"{item.price:>10} {item.sale_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Order Total':<30} {dto.total:>34}")


def _display_notices(notices: list[NoticeDTO]) -> None:
    for notice in notices:
        click.echo(f"Notice: {notice.message}")


@click.command("create")
@click.option("--store", "store_id", type=int, default=None, help="Store ID.")
def order_create(store_id: int | None) -> None:
    """Open a new, empty order."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        catalog_repo=catalog_repository(),
    )

    try:
        dto = handler.handle(store_id if store_id is not None else settings().default_store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (state={dto.state})")


@click.command("add")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--sku", required=True, help="SKU of the purchasable.")
@click.option("--qty", required=True, type=int, help="Quantity to add.")
def order_add(order_id: int, sku: str, qty: int) -> None:
    """Add a purchasable to an order."""
    handler = AddLineItemHandler(
        order_repo=order_repository(),
        purchasable_repo=purchasable_repository(),
        synchronizer=line_item_synchronizer(),
        stock_gate=stock_gate(),
    )

    try:
        change = handler.handle(order_id, sku=sku, qty=qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_notices(change.notices)
    _display_order(change.order)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--line-item", "line_item_id", required=True, type=int, help="Line item ID.")
@click.option("--qty", required=True, type=int, help="New quantity (0 removes the line item).")
def order_update(order_id: int, line_item_id: int, qty: int) -> None:
    """Change the quantity of a line item."""
    handler = UpdateLineItemHandler(
        order_repo=order_repository(),
        purchasable_repo=purchasable_repository(),
        synchronizer=line_item_synchronizer(),
    )

    try:
        change = handler.handle(order_id, line_item_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_notices(change.notices)
    _display_order(change.order)


@click.command("remove")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--line-item", "line_item_id", required=True, type=int, help="Line item ID.")
def order_remove(order_id: int, line_item_id: int) -> None:
    """Remove a line item from an order."""
    handler = RemoveLineItemHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, line_item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("refresh")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--keep-missing", is_flag=True, default=False,
    help="Report line items whose purchasable is gone instead of dropping them.",
)
def order_refresh(order_id: int, keep_missing: bool) -> None:
    """Re-check prices and stock for every line item."""
    handler = RefreshOrderHandler(
        order_repo=order_repository(),
        purchasable_repo=purchasable_repository(),
        synchronizer=line_item_synchronizer(),
    )

    try:
        change = handler.handle(order_id, drop_missing=not keep_missing)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_notices(change.notices)
    for error in change.errors:
        click.echo(f"Error: {error}")
    _display_order(change.order)


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
def order_complete(order_id: int) -> None:
    """Complete an order (deducts stock, freezes prices)."""
    handler = CompleteOrderHandler(
        order_repo=order_repository(),
        purchasable_repo=purchasable_repository(),
        synchronizer=line_item_synchronizer(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
    if dto.notices:
        click.echo()
        _display_notices(dto.notices)
