"""
Read-side data access for the dashboard pages and API.

Every function runs parameterized ORM queries, has no side effects and
returns plain dicts/lists so results can be cached and serialized.
"""

import logging
from functools import wraps
from math import ceil
from typing import Any, Callable, Dict, List, Optional

from django.conf import settings
from django.db import DatabaseError
from django.db.models import CharField, Count, F, IntegerField, Q, Sum, Value
from django.db.models.functions import Cast, Coalesce

from .models import Customer, Invoice, Revenue
from .utils import from_cents

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """A read query failed at the database."""


def _fetch(description: str) -> Callable:
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except DatabaseError as e:
                logger.exception(f"Database error while fetching {description}: {e}")
                raise DataAccessError(f"Failed to fetch {description}.") from e
        return wrapper
    return decorator


def invoices_per_page() -> int:
    return getattr(settings, "INVOICES_PER_PAGE", 6)


INVOICE_ROW_FIELDS = {
    "name": F("customer__name"),
    "email": F("customer__email"),
    "image_url": F("customer__image_url"),
}


def _filtered_invoices(query: str):
    invoices = Invoice.objects.all()
    if query:
        invoices = invoices.annotate(
            amount_text=Cast("amount", CharField()),
            date_text=Cast("date", CharField()),
        ).filter(
            Q(customer__name__icontains=query)
            | Q(customer__email__icontains=query)
            | Q(amount_text__icontains=query)
            | Q(date_text__icontains=query)
            | Q(status__icontains=query)
        )
    return invoices


@_fetch("revenue data")
def fetch_revenue() -> List[Dict[str, Any]]:
    return list(Revenue.objects.order_by("id").values("month", "revenue"))


@_fetch("the latest invoices")
def fetch_latest_invoices() -> List[Dict[str, Any]]:
    limit = getattr(settings, "LATEST_INVOICES_COUNT", 5)
    rows = (
        Invoice.objects.order_by("-date", "id")
        .values("id", "amount", **INVOICE_ROW_FIELDS)[:limit]
    )
    return list(rows)


@_fetch("card data")
def fetch_card_data() -> Dict[str, int]:
    zero = Value(0, output_field=IntegerField())
    invoice_totals = Invoice.objects.aggregate(
        number_of_invoices=Count("id"),
        total_paid_invoices=Coalesce(Sum("amount", filter=Q(status=Invoice.Status.PAID)), zero),
        total_pending_invoices=Coalesce(Sum("amount", filter=Q(status=Invoice.Status.PENDING)), zero),
    )
    return {
        "number_of_customers": Customer.objects.count(),
        **invoice_totals,
    }


@_fetch("invoices")
def fetch_filtered_invoices(query: str, current_page: int) -> List[Dict[str, Any]]:
    per_page = invoices_per_page()
    offset = (max(current_page, 1) - 1) * per_page

    rows = (
        _filtered_invoices(query)
        .order_by("-date", "id")
        .values("id", "amount", "date", "status", **INVOICE_ROW_FIELDS)[offset:offset + per_page]
    )
    return list(rows)


@_fetch("the total number of invoices")
def fetch_invoices_pages(query: str) -> int:
    count = _filtered_invoices(query).count()
    return ceil(count / invoices_per_page())


@_fetch("invoice")
def fetch_invoice_by_id(invoice_id: str) -> Optional[Dict[str, Any]]:
    row = (
        Invoice.objects.filter(pk=invoice_id)
        .values("id", "customer_id", "amount", "status")
        .first()
    )
    if row is None:
        return None
    # Stored in cents, edited in dollars
    row["amount"] = from_cents(row["amount"])
    return row


@_fetch("all customers")
def fetch_customers() -> List[Dict[str, Any]]:
    return list(Customer.objects.order_by("name").values("id", "name"))


@_fetch("the customer table")
def fetch_filtered_customers(query: str) -> List[Dict[str, Any]]:
    zero = Value(0, output_field=IntegerField())
    customers = Customer.objects.all()
    if query:
        customers = customers.filter(Q(name__icontains=query) | Q(email__icontains=query))

    rows = (
        customers.annotate(
            total_invoices=Count("invoices"),
            total_pending=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PENDING)), zero),
            total_paid=Coalesce(Sum("invoices__amount", filter=Q(invoices__status=Invoice.Status.PAID)), zero),
        )
        .order_by("name")
        .values("id", "name", "email", "image_url", "total_invoices", "total_pending", "total_paid")
    )
    return list(rows)
