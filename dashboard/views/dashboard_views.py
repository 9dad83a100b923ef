"""
Dashboard overview: summary cards, revenue chart and latest invoices.
"""
import logging

from django.shortcuts import render
from django.views.decorators.http import require_GET

from .. import data
from ..cache import DASHBOARD_PATH, view_cache
from ..utils import generate_y_axis

logger = logging.getLogger(__name__)

CHART_HEIGHT = 350


@require_GET
def dashboard_overview(request):
    revenue = view_cache.get_or_set(DASHBOARD_PATH, data.fetch_revenue)
    latest_invoices = view_cache.get_or_set(DASHBOARD_PATH, data.fetch_latest_invoices)
    cards = view_cache.get_or_set(DASHBOARD_PATH, data.fetch_card_data)

    y_axis = generate_y_axis(revenue)
    top_label = y_axis['top_label']
    chart_bars = [
        {
            'month': row['month'],
            'revenue': row['revenue'],
            'height': round(CHART_HEIGHT / top_label * row['revenue']) if top_label else 0,
        }
        for row in revenue
    ]

    return render(request, 'pages/dashboard/overview.html', {
        'cards': [
            {'title': 'Collected', 'value': cards['total_paid_invoices'], 'type': 'collected', 'money': True},
            {'title': 'Pending', 'value': cards['total_pending_invoices'], 'type': 'pending', 'money': True},
            {'title': 'Total Invoices', 'value': cards['number_of_invoices'], 'type': 'invoices', 'money': False},
            {'title': 'Total Customers', 'value': cards['number_of_customers'], 'type': 'customers', 'money': False},
        ],
        'chart_bars': chart_bars,
        'y_axis_labels': y_axis['y_axis_labels'],
        'chart_height': CHART_HEIGHT,
        'latest_invoices': latest_invoices,
        'page_title': 'Dashboard',
    })
