"""JSON API over the dashboard data functions and invoice actions."""

import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.request import Request
from rest_framework.response import Response

from dashboard import data
from dashboard.actions import InvoiceActions, Redirect, extract_form_values
from dashboard.cache import DASHBOARD_PATH, INVOICES_PATH, view_cache
from dashboard.utils import parse_page
from dashboard.validation.errors import FormStateError, NotFoundError, create_success_response
from dashboard.validation.schemas import get_validation_constraints

from .response import APIResponse
from .serializers import (
    CardDataSerializer,
    CustomerOptionSerializer,
    CustomerRowSerializer,
    InvoiceFormSerializer,
    InvoiceRowSerializer,
    InvoiceSubmissionSerializer,
    RevenueSerializer,
)

logger = logging.getLogger(__name__)


def _submitted_values(request: Request) -> dict:
    serializer = InvoiceSubmissionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return extract_form_values(request.data)


def _action_response(result, success_status: int = status.HTTP_200_OK) -> Response:
    if isinstance(result, Redirect):
        return APIResponse.success(
            data={"id": result.object_id},
            message=result.message or "Success",
            status_code=success_status,
        )
    raise FormStateError(result)


@api_view(["GET", "POST"])
def invoice_collection(request: Request) -> Response:
    if request.method == "POST":
        result = InvoiceActions().create_invoice(None, _submitted_values(request))
        return _action_response(result, status.HTTP_201_CREATED)

    query = request.query_params.get("query", "")
    page = parse_page(request.query_params.get("page"))

    rows = view_cache.get_or_set(INVOICES_PATH, data.fetch_filtered_invoices, query, page)
    total_pages = view_cache.get_or_set(INVOICES_PATH, data.fetch_invoices_pages, query)

    return APIResponse.paginated(
        data=InvoiceRowSerializer(rows, many=True).data,
        page=page,
        total_pages=total_pages,
        page_size=data.invoices_per_page(),
    )


@api_view(["GET", "PUT", "DELETE"])
def invoice_item(request: Request, invoice_id: str) -> Response:
    if request.method == "PUT":
        return _action_response(InvoiceActions().update_invoice(invoice_id, _submitted_values(request)))

    if request.method == "DELETE":
        return _action_response(InvoiceActions().delete_invoice(invoice_id))

    invoice = data.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        raise NotFoundError("Invoice not found.")
    return APIResponse.success(data=InvoiceFormSerializer(invoice).data)


@api_view(["GET"])
def customer_collection(request: Request) -> Response:
    query = request.query_params.get("query")
    if query is None:
        return APIResponse.success(data=CustomerOptionSerializer(data.fetch_customers(), many=True).data)
    rows = data.fetch_filtered_customers(query)
    return APIResponse.success(data=CustomerRowSerializer(rows, many=True).data)


@api_view(["GET"])
def dashboard_cards(request: Request) -> Response:
    cards = view_cache.get_or_set(DASHBOARD_PATH, data.fetch_card_data)
    return APIResponse.success(data=CardDataSerializer(cards).data)


@api_view(["GET"])
def dashboard_revenue(request: Request) -> Response:
    revenue = view_cache.get_or_set(DASHBOARD_PATH, data.fetch_revenue)
    return APIResponse.success(data=RevenueSerializer(revenue, many=True).data)


@api_view(["GET"])
def validation_constraints(request: Request) -> Response:
    """
    Returns validation constraints for the invoice forms.

    Use this to mirror server-side validation rules on the client
    for immediate UX feedback before form submission.
    """
    return Response(create_success_response(data=get_validation_constraints()))
