"""API URL routing for Payboard."""
from django.urls import path

from . import views

urlpatterns = [
    path('invoices/', views.invoice_collection, name='api-invoices'),
    path('invoices/<str:invoice_id>/', views.invoice_item, name='api-invoice-detail'),
    path('customers/', views.customer_collection, name='api-customers'),
    path('dashboard/cards/', views.dashboard_cards, name='api-dashboard-cards'),
    path('dashboard/revenue/', views.dashboard_revenue, name='api-dashboard-revenue'),
    path('validation/constraints/', views.validation_constraints, name='validation-constraints'),
]
