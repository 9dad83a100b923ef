import pytest
from django.core.cache import cache
from django.test import Client

from dashboard.cache import ViewInvalidator
from tests.factories import CustomerFactory


class RecordingInvalidator(ViewInvalidator):
    def __init__(self):
        self.paths = []

    def revalidate_path(self, path):
        self.paths.append(path)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def invalidator():
    return RecordingInvalidator()


@pytest.fixture
def customer(db):
    return CustomerFactory(name="Evil Rabbit", email="evil@rabbit.com")


@pytest.fixture
def valid_form(customer):
    return {"customerId": customer.id, "amount": "157.95", "status": "pending"}
