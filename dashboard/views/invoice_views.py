import logging

from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_POST

from .. import data
from ..actions import InvoiceActions, Redirect
from ..cache import INVOICES_PATH, view_cache
from ..utils import generate_pagination, page_url_query, parse_page

logger = logging.getLogger(__name__)


def _follow(request, result: Redirect):
    if result.message:
        messages.success(request, result.message)
    return redirect(result.to)


@require_http_methods(["GET"])
def invoice_list(request):
    query = request.GET.get('query', '')
    current_page = parse_page(request.GET.get('page'))

    invoices = view_cache.get_or_set(INVOICES_PATH, data.fetch_filtered_invoices, query, current_page)
    total_pages = view_cache.get_or_set(INVOICES_PATH, data.fetch_invoices_pages, query)

    pages = [
        {'label': page, 'query': page_url_query(request.GET, page) if page != '...' else None}
        for page in generate_pagination(current_page, total_pages)
    ]

    context = {
        'invoices': invoices,
        'query': query,
        'current_page': current_page,
        'total_pages': total_pages,
        'pages': pages,
        'previous_query': page_url_query(request.GET, current_page - 1) if current_page > 1 else None,
        'next_query': page_url_query(request.GET, current_page + 1) if current_page < total_pages else None,
        'page_title': 'Invoices',
    }
    return render(request, "pages/invoices/list.html", context)


@require_http_methods(["GET", "POST"])
def invoice_create(request):
    customers = data.fetch_customers()
    state = None

    if request.method == 'POST':
        result = InvoiceActions().create_invoice(state, request.POST)
        if isinstance(result, Redirect):
            return _follow(request, result)
        state = result

    context = {
        'customers': customers,
        'state': state,
        'form_data': request.POST if state else {},
        'is_edit': False,
        'page_title': 'Create Invoice',
    }
    return render(request, "pages/invoices/form.html", context)


@require_http_methods(["GET", "POST"])
def invoice_edit(request, invoice_id):
    invoice = data.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        return render(request, "pages/invoices/not_found.html", {
            'message': "Could not find the requested invoice.",
            'page_title': 'Not Found',
        }, status=404)

    customers = data.fetch_customers()
    state = None

    if request.method == 'POST':
        result = InvoiceActions().update_invoice(invoice_id, request.POST)
        if isinstance(result, Redirect):
            return _follow(request, result)
        state = result

    form_data = request.POST if state else {
        'customerId': invoice['customer_id'],
        'amount': str(invoice['amount']),
        'status': invoice['status'],
    }

    context = {
        'invoice': invoice,
        'customers': customers,
        'state': state,
        'form_data': form_data,
        'is_edit': True,
        'page_title': 'Edit Invoice',
    }
    return render(request, "pages/invoices/form.html", context)


@require_POST
def invoice_delete(request, invoice_id):
    result = InvoiceActions().delete_invoice(invoice_id)
    if isinstance(result, Redirect):
        return _follow(request, result)

    messages.error(request, result.message)
    return redirect('dashboard:invoice_list')
