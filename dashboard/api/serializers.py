from rest_framework import serializers

from dashboard.models import Invoice


class InvoiceRowSerializer(serializers.Serializer):
    id = serializers.CharField()
    amount = serializers.IntegerField(help_text="Amount in cents")
    date = serializers.DateField()
    status = serializers.ChoiceField(choices=Invoice.Status.choices)
    name = serializers.CharField()
    email = serializers.EmailField()
    image_url = serializers.CharField(allow_blank=True)


class InvoiceFormSerializer(serializers.Serializer):
    id = serializers.CharField()
    customer_id = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, help_text="Amount in dollars")
    status = serializers.ChoiceField(choices=Invoice.Status.choices)


class CustomerOptionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()


class CustomerRowSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()
    image_url = serializers.CharField(allow_blank=True)
    total_invoices = serializers.IntegerField()
    total_pending = serializers.IntegerField()
    total_paid = serializers.IntegerField()


class CardDataSerializer(serializers.Serializer):
    number_of_customers = serializers.IntegerField()
    number_of_invoices = serializers.IntegerField()
    total_paid_invoices = serializers.IntegerField()
    total_pending_invoices = serializers.IntegerField()


class RevenueSerializer(serializers.Serializer):
    month = serializers.CharField()
    revenue = serializers.IntegerField()


class RawValueField(serializers.Field):
    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


class InvoiceSubmissionSerializer(serializers.Serializer):
    """
    Shape check only: rejects a body that is not an object (a JSON array or
    scalar). Field values pass through untouched so the action's own schema
    produces the user-facing messages.
    """

    customerId = RawValueField(required=False, allow_null=True)
    amount = RawValueField(required=False, allow_null=True)
    status = RawValueField(required=False, allow_null=True)
