from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from dashboard import data
from dashboard.models import Invoice
from tests.factories import CustomerFactory, InvoiceFactory, RevenueFactory


@pytest.mark.django_db
class TestDashboardData:
    def test_card_data_on_empty_database(self):
        assert data.fetch_card_data() == {
            "number_of_customers": 0,
            "number_of_invoices": 0,
            "total_paid_invoices": 0,
            "total_pending_invoices": 0,
        }

    def test_card_data_totals(self, customer):
        InvoiceFactory(customer=customer, amount=1000, status="paid")
        InvoiceFactory(customer=customer, amount=250, status="paid")
        InvoiceFactory(customer=customer, amount=700, status="pending")
        CustomerFactory()

        cards = data.fetch_card_data()
        assert cards["number_of_customers"] == 2
        assert cards["number_of_invoices"] == 3
        assert cards["total_paid_invoices"] == 1250
        assert cards["total_pending_invoices"] == 700

    def test_revenue_in_insertion_order(self):
        RevenueFactory(month="Jan", revenue=2000)
        RevenueFactory(month="Feb", revenue=1800)
        assert data.fetch_revenue() == [
            {"month": "Jan", "revenue": 2000},
            {"month": "Feb", "revenue": 1800},
        ]

    def test_latest_invoices_newest_first_and_limited(self, customer, settings):
        settings.LATEST_INVOICES_COUNT = 5
        for day in range(1, 8):
            InvoiceFactory(customer=customer, date=date(2023, 6, day))

        latest = data.fetch_latest_invoices()
        assert len(latest) == 5
        assert latest[0]["name"] == "Evil Rabbit"
        assert set(latest[0]) == {"id", "amount", "name", "email", "image_url"}

        newest = Invoice.objects.get(date=date(2023, 6, 7))
        assert latest[0]["id"] == newest.id

    def test_database_failure_becomes_data_access_error(self):
        with patch.object(Invoice.objects, "aggregate", side_effect=DatabaseError("down")):
            with pytest.raises(data.DataAccessError, match="Failed to fetch card data."):
                data.fetch_card_data()


@pytest.mark.django_db
class TestInvoiceData:
    @pytest.fixture
    def invoices(self, customer):
        other = CustomerFactory(name="Lee Robinson", email="lee@robinson.com")
        rows = [
            InvoiceFactory(customer=customer, amount=15795, status="pending", date=date(2022, 12, 6)),
            InvoiceFactory(customer=customer, amount=666, status="pending", date=date(2023, 6, 27)),
            InvoiceFactory(customer=other, amount=54246, status="paid", date=date(2023, 7, 16)),
        ]
        for day in range(1, 8):
            rows.append(InvoiceFactory(customer=other, amount=100 * day, status="paid", date=date(2021, 1, day)))
        return rows

    def test_pages_count(self, invoices, settings):
        settings.INVOICES_PER_PAGE = 6
        assert data.fetch_invoices_pages("") == 2
        assert data.fetch_invoices_pages("evil") == 1
        assert data.fetch_invoices_pages("nobody-matches-this") == 0

    def test_pages_are_disjoint_and_complete(self, invoices, settings):
        settings.INVOICES_PER_PAGE = 6
        first = data.fetch_filtered_invoices("", 1)
        second = data.fetch_filtered_invoices("", 2)

        assert len(first) == 6
        assert len(second) == 4
        ids = [row["id"] for row in first + second]
        assert len(set(ids)) == 10
        assert first[0]["date"] == date(2023, 7, 16)

    def test_search_matches_name_email_amount_date_and_status(self, invoices):
        assert {r["name"] for r in data.fetch_filtered_invoices("RABBIT", 1)} == {"Evil Rabbit"}
        assert data.fetch_invoices_pages("lee@robinson") == 2
        assert [r["amount"] for r in data.fetch_filtered_invoices("54246", 1)] == [54246]
        assert [r["amount"] for r in data.fetch_filtered_invoices("2022-12", 1)] == [15795]
        assert len(data.fetch_filtered_invoices("pending", 1)) == 2

    def test_search_is_idempotent(self, invoices):
        assert data.fetch_filtered_invoices("paid", 1) == data.fetch_filtered_invoices("paid", 1)

    def test_page_past_the_end_is_empty(self, invoices):
        assert data.fetch_filtered_invoices("", 50) == []

    def test_invoice_by_id_in_dollars(self, customer):
        invoice = InvoiceFactory(customer=customer, amount=15795, status="paid")
        assert data.fetch_invoice_by_id(invoice.id) == {
            "id": invoice.id,
            "customer_id": customer.id,
            "amount": Decimal("157.95"),
            "status": "paid",
        }

    def test_unknown_invoice_is_none(self):
        assert data.fetch_invoice_by_id("does-not-exist") is None


@pytest.mark.django_db
class TestCustomerData:
    def test_customers_sorted_by_name(self):
        CustomerFactory(name="Michael Novotny")
        CustomerFactory(name="Amy Burns")
        assert [c["name"] for c in data.fetch_customers()] == ["Amy Burns", "Michael Novotny"]

    def test_filtered_customers_with_totals(self, customer):
        InvoiceFactory(customer=customer, amount=500, status="paid")
        InvoiceFactory(customer=customer, amount=300, status="pending")
        CustomerFactory(name="Amy Burns", email="amy@burns.com")

        rows = data.fetch_filtered_customers("rabbit")
        assert len(rows) == 1
        assert rows[0]["total_invoices"] == 2
        assert rows[0]["total_paid"] == 500
        assert rows[0]["total_pending"] == 300

        amy = data.fetch_filtered_customers("amy")[0]
        assert (amy["total_invoices"], amy["total_paid"], amy["total_pending"]) == (0, 0, 0)
