"""
Invoice Actions

The only writers of invoice data. Each action validates the submitted form,
converts it for storage, runs one statement, revalidates the cached views
and tells the caller where to go next.

Failures a user can fix (bad input, a rejected write, a missing invoice) come
back as a FormState. Anything else propagates to the page-level fallback.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from .cache import CUSTOMERS_PATH, DASHBOARD_PATH, INVOICES_PATH, ViewInvalidator, view_cache
from .models import Invoice
from .utils import to_cents
from .validation.errors import FormState
from .validation.schemas import CreateInvoiceSchema, UpdateInvoiceSchema

logger = logging.getLogger(__name__)

INVOICE_LIST_URL = "dashboard:invoice_list"
FORM_FIELDS = ("customerId", "amount", "status")


class SimulatedDeleteFailure(RuntimeError):
    """Raised by delete while the failure demo is switched on."""


@dataclass
class Redirect:
    to: str
    message: Optional[str] = None
    object_id: Optional[str] = None


ActionResult = Union[FormState, Redirect]


def extract_form_values(data: Mapping[str, Any]) -> dict:
    """Pull the invoice fields out of a POST body or JSON payload."""
    return {name: data.get(name) for name in FORM_FIELDS}


class InvoiceActions:
    def __init__(
        self,
        invalidator: Optional[ViewInvalidator] = None,
        simulate_delete_failure: Optional[bool] = None,
        revalidate_paths: Iterable[str] = (INVOICES_PATH, DASHBOARD_PATH, CUSTOMERS_PATH),
    ):
        self.invalidator = invalidator or view_cache
        if simulate_delete_failure is None:
            simulate_delete_failure = getattr(settings, "SIMULATE_DELETE_FAILURE", False)
        self.simulate_delete_failure = simulate_delete_failure
        self.revalidate_paths = tuple(revalidate_paths)

    def _revalidate(self) -> None:
        for path in self.revalidate_paths:
            self.invalidator.revalidate_path(path)

    def create_invoice(self, previous_state: Optional[FormState], form_values: Mapping[str, Any]) -> ActionResult:
        logger.debug(f"Creating invoice (previous state: {previous_state})")

        cleaned, errors = CreateInvoiceSchema.parse(extract_form_values(form_values))
        if errors:
            logger.info(f"Invoice create rejected: {[e.field for e in errors]}")
            return FormState.from_field_errors(errors, "Missing Fields. Failed to Create Invoice.")

        amount_in_cents = to_cents(cleaned["amount"])
        date = timezone.now().date()

        try:
            invoice = Invoice.objects.create(
                customer_id=cleaned["customerId"],
                amount=amount_in_cents,
                status=cleaned["status"],
                date=date,
            )
        except DatabaseError as e:
            logger.exception(f"Database error creating invoice: {e}")
            return FormState(message="Database Error: Failed to Create Invoice.")

        logger.info(f"Invoice {invoice.pk} created for customer {cleaned['customerId']}")
        self._revalidate()
        return Redirect(to=INVOICE_LIST_URL, object_id=invoice.pk)

    def update_invoice(self, invoice_id: str, form_values: Mapping[str, Any]) -> ActionResult:
        cleaned, errors = UpdateInvoiceSchema.parse(extract_form_values(form_values))
        if errors:
            logger.info(f"Invoice {invoice_id} update rejected: {[e.field for e in errors]}")
            return FormState.from_field_errors(errors, "Missing Fields. Failed to Update Invoice.")

        amount_in_cents = to_cents(cleaned["amount"])

        try:
            updated = Invoice.objects.filter(pk=invoice_id).update(
                customer_id=cleaned["customerId"],
                amount=amount_in_cents,
                status=cleaned["status"],
            )
        except DatabaseError as e:
            logger.exception(f"Database error updating invoice {invoice_id}: {e}")
            return FormState(message="Database Error: Failed to Update Invoice.")

        if not updated:
            logger.warning(f"Invoice {invoice_id} not found for update")
            return FormState(message="Invoice Not Found. Failed to Update Invoice.")

        logger.info(f"Invoice {invoice_id} updated")
        self._revalidate()
        return Redirect(to=INVOICE_LIST_URL, object_id=invoice_id)

    def delete_invoice(self, invoice_id: str) -> ActionResult:
        if self.simulate_delete_failure:
            raise SimulatedDeleteFailure("Failed to Delete Invoice")

        try:
            deleted, _ = Invoice.objects.filter(pk=invoice_id).delete()
        except DatabaseError as e:
            logger.exception(f"Database error deleting invoice {invoice_id}: {e}")
            return FormState(message="Database Error: Failed to Delete Invoice.")

        if not deleted:
            logger.warning(f"Invoice {invoice_id} not found for delete")
            return FormState(message="Invoice Not Found. Failed to Delete Invoice.")

        logger.info(f"Invoice {invoice_id} deleted")
        self._revalidate()
        return Redirect(to=INVOICE_LIST_URL, message="Deleted Invoice.", object_id=invoice_id)
