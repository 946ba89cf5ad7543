from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional

import typer

from payments_query.application.dtos import PaymentItemView, PaymentSummary
from payments_query.application.services import PaymentQueryService
from payments_query.config import get_settings
from payments_query.domain.exceptions import InvalidYearMonthError
from payments_query.domain.value_objects import YearMonth
from payments_query.infrastructure import (
    FixedClockProvider,
    JsonFilePaymentSource,
    PaymentDataError,
    SystemClockProvider,
)
from payments_query.infrastructure.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_query.domain.entities import Payment, PaymentItem

app = typer.Typer(help="Ad-hoc queries over a payments data file.", no_args_is_help=True)

# Lets negative numbers through as arguments instead of unknown options.
_SIGNED_ARGUMENT = {"ignore_unknown_options": True}


class SortKey(str, Enum):
    date = "date"
    items = "items"


@dataclass(frozen=True)
class _Options:
    data: Optional[Path]
    now: Optional[datetime]


def _parse_now(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"not an ISO-8601 timestamp: {value}") from e
    if parsed.tzinfo is None:
        raise typer.BadParameter("timestamp must include a UTC offset, e.g. +00:00")
    return parsed


def _parse_year_month(value: Optional[str]) -> Optional[YearMonth]:
    if value is None:
        return None
    try:
        return YearMonth.parse(value)
    except InvalidYearMonthError as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def main_options(
    ctx: typer.Context,
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        "-d",
        help="Payments JSON file (default from PAYMENTS_DATA_FILE).",
    ),
    now: Optional[str] = typer.Option(
        None,
        "--now",
        help="Pin the clock to an ISO-8601 timestamp with offset.",
    ),
) -> None:
    """
    Query payments: sorting, month and day-window filters, totals and discounts.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    ctx.obj = _Options(data=data, now=_parse_now(now))


def _build_service(options: _Options) -> PaymentQueryService:
    settings = get_settings()
    data_file = options.data or settings.data_file
    if data_file is None:
        raise typer.BadParameter(
            "no payments file given; pass --data or set PAYMENTS_DATA_FILE",
            param_hint="--data",
        )
    if options.now is not None:
        clock = FixedClockProvider(options.now)
    else:
        clock = SystemClockProvider(settings.zone())
    return PaymentQueryService(JsonFilePaymentSource(data_file), clock)


def _emit(ctx: typer.Context, query: Callable[[PaymentQueryService], Any]) -> None:
    service = _build_service(ctx.obj)
    try:
        result = query(service)
    except (PaymentDataError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    typer.echo(json.dumps(result, indent=2))


def _payments(payments: Iterable[Payment]) -> list[dict[str, Any]]:
    return [asdict(PaymentSummary.from_payment(p)) for p in payments]


def _payment_set(payments: Iterable[Payment]) -> list[dict[str, Any]]:
    ordered = sorted(payments, key=lambda p: (p.payment_date, str(p.id)))
    return _payments(ordered)


def _items(items: Iterable[PaymentItem]) -> list[dict[str, Any]]:
    return [asdict(PaymentItemView.from_item(item)) for item in items]


@app.command("sorted")
def sorted_payments(
    ctx: typer.Context,
    by: SortKey = typer.Option(SortKey.date, "--by", help="Sort key."),
    desc: bool = typer.Option(False, "--desc", help="Descending order."),
) -> None:
    """
    List all payments sorted by date or by item count.
    """
    queries = {
        (SortKey.date, False): PaymentQueryService.sorted_by_date_asc,
        (SortKey.date, True): PaymentQueryService.sorted_by_date_desc,
        (SortKey.items, False): PaymentQueryService.sorted_by_item_count_asc,
        (SortKey.items, True): PaymentQueryService.sorted_by_item_count_desc,
    }
    query = queries[(by, desc)]
    _emit(ctx, lambda service: _payments(query(service)))


@app.command()
def month(
    ctx: typer.Context,
    year_month: Optional[str] = typer.Argument(None, help="YYYY-MM; current month if omitted."),
) -> None:
    """
    List payments made in a month.
    """
    target = _parse_year_month(year_month)
    if target is None:
        _emit(ctx, lambda service: _payments(service.for_current_month()))
    else:
        _emit(ctx, lambda service: _payments(service.for_given_month(target)))


@app.command("last-days", context_settings=_SIGNED_ARGUMENT)
def last_days(
    ctx: typer.Context,
    days: int = typer.Argument(..., help="Window length in days."),
) -> None:
    """
    List payments made strictly within the last DAYS days.
    """
    _emit(ctx, lambda service: _payments(service.for_last_n_days(days)))


@app.command("single-item")
def single_item(ctx: typer.Context) -> None:
    """
    List payments containing exactly one item.
    """
    _emit(ctx, lambda service: _payment_set(service.with_exactly_one_item()))


@app.command()
def products(ctx: typer.Context) -> None:
    """
    List distinct product names sold in the current month.
    """
    _emit(ctx, lambda service: sorted(service.products_sold_in_current_month()))


@app.command()
def total(
    ctx: typer.Context,
    year_month: str = typer.Argument(..., help="YYYY-MM"),
) -> None:
    """
    Sum of final prices for a month.
    """
    target = _parse_year_month(year_month)
    _emit(
        ctx,
        lambda service: {
            "year_month": str(target),
            "total": str(service.total_for_given_month(target)),
        },
    )


@app.command()
def discount(
    ctx: typer.Context,
    year_month: str = typer.Argument(..., help="YYYY-MM"),
) -> None:
    """
    Sum of discounts (regular minus final price) for a month.
    """
    target = _parse_year_month(year_month)
    _emit(
        ctx,
        lambda service: {
            "year_month": str(target),
            "discount": str(service.discount_for_given_month(target)),
        },
    )


@app.command("user-items")
def user_items(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Exact, case-sensitive email."),
) -> None:
    """
    List every item bought by the user with EMAIL.
    """
    _emit(ctx, lambda service: _items(service.items_for_user_email(email)))


@app.command(context_settings=_SIGNED_ARGUMENT)
def over(
    ctx: typer.Context,
    threshold: int = typer.Argument(..., help="Payments worth strictly more than this."),
) -> None:
    """
    List payments whose total final price exceeds THRESHOLD.
    """
    _emit(ctx, lambda service: _payment_set(service.payments_with_value_over(threshold)))


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_file={settings.data_file} | timezone={settings.timezone} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs}"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
