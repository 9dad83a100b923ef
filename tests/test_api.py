import json
from datetime import date

import pytest
from django.test import Client

from dashboard.models import Invoice
from dashboard.validation.schemas import AMOUNT_MESSAGE
from tests.factories import CustomerFactory, InvoiceFactory, RevenueFactory


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


@pytest.mark.django_db
class TestInvoiceAPI:
    url = "/api/v1/invoices/"

    def test_list_is_paginated(self, client, customer, settings):
        settings.INVOICES_PER_PAGE = 6
        for day in range(1, 9):
            InvoiceFactory(customer=customer, date=date(2023, 1, day))

        response = client.get(self.url, {"page": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 2
        assert body["meta"]["pagination"] == {
            "page": 2,
            "page_size": 6,
            "total_pages": 2,
            "has_next": False,
            "has_prev": True,
        }
        assert body["data"][0]["name"] == "Evil Rabbit"

    def test_search(self, client, customer):
        InvoiceFactory(customer=customer, status="paid")
        InvoiceFactory(customer=CustomerFactory(), status="pending")

        body = client.get(self.url, {"query": "paid"}).json()
        assert [row["status"] for row in body["data"]] == ["paid"]

    def test_create(self, client, valid_form):
        response = post_json(client, self.url, valid_form)

        assert response.status_code == 201
        invoice = Invoice.objects.get(pk=response.json()["data"]["id"])
        assert invoice.amount == 15795

    def test_create_with_invalid_fields(self, client, valid_form):
        response = post_json(client, self.url, {**valid_form, "amount": 0})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Missing Fields. Failed to Create Invoice."
        assert error["fields"] == [{"field": "amount", "code": "FIELD_INVALID", "message": AMOUNT_MESSAGE}]
        assert Invoice.objects.count() == 0

    def test_malformed_json(self, client):
        response = client.post(self.url, data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_body_must_be_an_object(self, client, valid_form):
        response = post_json(client, self.url, [valid_form])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert Invoice.objects.count() == 0

    def test_create_amount_too_large(self, client, valid_form):
        response = post_json(client, self.url, {**valid_form, "amount": "1e20"})

        assert response.status_code == 400
        assert response.json()["error"]["fields"][0]["field"] == "amount"

    def test_form_encoded_create(self, client, valid_form):
        response = client.post(self.url, valid_form)
        assert response.status_code == 201


@pytest.mark.django_db
class TestInvoiceItemAPI:
    def test_get_returns_dollars(self, client, customer):
        invoice = InvoiceFactory(customer=customer, amount=4210, status="paid")

        body = client.get(f"/api/v1/invoices/{invoice.id}/").json()

        assert body["data"] == {
            "id": invoice.id,
            "customer_id": customer.id,
            "amount": "42.10",
            "status": "paid",
        }

    def test_get_largest_amount(self, client, customer):
        invoice = InvoiceFactory(customer=customer, amount=2147483647)

        body = client.get(f"/api/v1/invoices/{invoice.id}/").json()

        assert body["data"]["amount"] == "21474836.47"

    def test_get_unknown(self, client):
        response = client.get("/api/v1/invoices/missing/")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    def test_update(self, client, customer):
        invoice = InvoiceFactory(customer=customer, amount=100, status="pending")

        response = client.put(
            f"/api/v1/invoices/{invoice.id}/",
            data=json.dumps({"customerId": customer.id, "amount": "1.50", "status": "paid"}),
            content_type="application/json",
        )

        assert response.status_code == 200
        invoice.refresh_from_db()
        assert (invoice.amount, invoice.status) == (150, "paid")

    def test_update_unknown(self, client, valid_form):
        response = client.put("/api/v1/invoices/missing/", data=json.dumps(valid_form), content_type="application/json")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "PERSISTENCE_FAILED"
        assert error["message"] == "Invoice Not Found. Failed to Update Invoice."

    def test_delete(self, client, customer):
        invoice = InvoiceFactory(customer=customer)

        response = client.delete(f"/api/v1/invoices/{invoice.id}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Deleted Invoice."
        assert not Invoice.objects.filter(pk=invoice.id).exists()

    def test_delete_unknown(self, client):
        response = client.delete("/api/v1/invoices/missing/")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invoice Not Found. Failed to Delete Invoice."

    def test_simulated_delete_failure_is_a_server_error(self, settings, customer):
        settings.SIMULATE_DELETE_FAILURE = True
        invoice = InvoiceFactory(customer=customer)

        response = Client(raise_request_exception=False).delete(f"/api/v1/invoices/{invoice.id}/")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
        assert Invoice.objects.filter(pk=invoice.id).exists()


@pytest.mark.django_db
class TestDashboardAPI:
    def test_customers_as_options(self, client, customer):
        body = client.get("/api/v1/customers/").json()
        assert body["data"] == [{"id": customer.id, "name": "Evil Rabbit"}]

    def test_customers_table(self, client, customer):
        InvoiceFactory(customer=customer, amount=500, status="paid")

        row = client.get("/api/v1/customers/", {"query": "evil"}).json()["data"][0]
        assert row["total_invoices"] == 1
        assert row["total_paid"] == 500

    def test_cards(self, client, customer):
        InvoiceFactory(customer=customer, amount=500, status="pending")
        body = client.get("/api/v1/dashboard/cards/").json()
        assert body["data"]["total_pending_invoices"] == 500
        assert body["data"]["number_of_customers"] == 1

    def test_revenue(self, client):
        RevenueFactory(month="Jan", revenue=2000)
        assert client.get("/api/v1/dashboard/revenue/").json()["data"] == [{"month": "Jan", "revenue": 2000}]

    def test_validation_constraints(self, client):
        body = client.get("/api/v1/validation/constraints/").json()
        assert body["success"] is True
        assert "invoice_create" in body["data"]


@pytest.mark.django_db
class TestHealth:
    def test_liveness(self, client):
        response = client.get("/health/live/")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness(self, client):
        response = client.get("/health/ready/")
        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "ok"


def test_request_id_header_is_echoed(client):
    response = client.get("/health/live/", HTTP_X_REQUEST_ID="abc-123")
    assert response["X-Request-ID"] == "abc-123"
