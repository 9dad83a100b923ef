from django.urls import path
from .views import main_views
from .views import dashboard_views
from .views import invoice_views
from .views import customer_views

app_name = "dashboard"

urlpatterns = [
    path('', main_views.landing_view, name='home'),
    path('dashboard/', dashboard_views.dashboard_overview, name='overview'),
    path('dashboard/invoices/', invoice_views.invoice_list, name='invoice_list'),
    path('dashboard/invoices/create/', invoice_views.invoice_create, name='invoice_create'),
    path('dashboard/invoices/<str:invoice_id>/edit/', invoice_views.invoice_edit, name='invoice_edit'),
    path('dashboard/invoices/<str:invoice_id>/delete/', invoice_views.invoice_delete, name='invoice_delete'),
    path('dashboard/customers/', customer_views.customer_list, name='customer_list'),
]
