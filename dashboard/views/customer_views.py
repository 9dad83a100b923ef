from django.shortcuts import render
from django.views.decorators.http import require_GET

from .. import data
from ..cache import CUSTOMERS_PATH, view_cache


@require_GET
def customer_list(request):
    query = request.GET.get('query', '')
    customers = view_cache.get_or_set(CUSTOMERS_PATH, data.fetch_filtered_customers, query)

    return render(request, 'pages/customers/list.html', {
        'customers': customers,
        'query': query,
        'page_title': 'Customers',
    })
