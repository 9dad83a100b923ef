from django.contrib import admin
from .models import Customer, Invoice, Revenue


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'customer', 'status', 'amount', 'date')
    list_filter = ('status',)
    search_fields = ('id', 'customer__name', 'customer__email')


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('name', 'email')
    search_fields = ('name', 'email')


@admin.register(Revenue)
class RevenueAdmin(admin.ModelAdmin):
    list_display = ('month', 'revenue')
