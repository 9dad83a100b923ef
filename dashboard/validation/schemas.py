"""
Invoice Validation Schemas

Server is authoritative; client mirrors constraints for UX.

Each schema provides:
- Field constraints (required, numeric coercion, lower bound, choices)
- One user-facing message per field
- parse() returning cleaned data or field errors, never raising for bad input
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from ..utils import to_cents
from .errors import FieldError, ErrorCode

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."

STATUS_CHOICES = ["pending", "paid"]

# Largest amount an integer cents column holds: 2147483647 cents
MAX_AMOUNT = Decimal("21474836.47")


@dataclass
class FieldConstraints:
    message: str
    required: bool = True
    numeric: bool = False
    greater_than: Optional[Decimal] = None
    max_value: Optional[Decimal] = None
    choices: Optional[List[str]] = None


class BaseSchema:
    FIELDS: Dict[str, FieldConstraints] = {}

    @classmethod
    def parse(cls, data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], List[FieldError]]:
        cleaned: Dict[str, Any] = {}
        errors: List[FieldError] = []

        for field_name, constraints in cls.FIELDS.items():
            value, error = cls._clean_field(field_name, data.get(field_name), constraints)
            if error:
                errors.append(error)
            else:
                cleaned[field_name] = value

        if not errors:
            errors.extend(cls.validate_business_rules(cleaned))

        if errors:
            return None, errors
        return cleaned, []

    @classmethod
    def validate(cls, data: Dict[str, Any]) -> Tuple[bool, List[FieldError]]:
        _, errors = cls.parse(data)
        return len(errors) == 0, errors

    @classmethod
    def _clean_field(
        cls,
        field_name: str,
        value: Any,
        constraints: FieldConstraints,
    ) -> Tuple[Any, Optional[FieldError]]:
        if constraints.numeric:
            return cls._clean_number(field_name, value, constraints)

        if not isinstance(value, str):
            code = ErrorCode.FIELD_REQUIRED if value is None else ErrorCode.FIELD_INVALID
            return None, FieldError(field=field_name, code=code.value, message=constraints.message)

        if constraints.required and not value.strip():
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_REQUIRED.value, message=constraints.message)

        if constraints.choices is not None and value not in constraints.choices:
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_INVALID.value, message=constraints.message)

        return value, None

    @classmethod
    def _clean_number(
        cls,
        field_name: str,
        value: Any,
        constraints: FieldConstraints,
    ) -> Tuple[Any, Optional[FieldError]]:
        # Form inputs arrive as strings; blank and missing coerce to zero
        if value is None or (isinstance(value, str) and not value.strip()):
            value = "0"

        if isinstance(value, bool):
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_INVALID.value, message=constraints.message)

        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_INVALID.value, message=constraints.message)

        if not number.is_finite():
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_INVALID.value, message=constraints.message)

        if constraints.greater_than is not None and number <= constraints.greater_than:
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_OUT_OF_RANGE.value, message=constraints.message)

        if constraints.max_value is not None and number > constraints.max_value:
            return None, FieldError(field=field_name, code=ErrorCode.FIELD_OUT_OF_RANGE.value, message=constraints.message)

        return number, None

    @classmethod
    def validate_business_rules(cls, data: Dict[str, Any]) -> List[FieldError]:
        return []


def _amount_in_cents_errors(amount: Decimal) -> List[FieldError]:
    try:
        cents = to_cents(amount)
    except ArithmeticError:
        cents = 0
    if not 1 <= cents <= to_cents(MAX_AMOUNT):
        return [FieldError(field="amount", code=ErrorCode.FIELD_OUT_OF_RANGE.value, message=AMOUNT_MESSAGE)]
    return []


class CreateInvoiceSchema(BaseSchema):
    FIELDS = {
        "customerId": FieldConstraints(message=CUSTOMER_MESSAGE),
        "amount": FieldConstraints(message=AMOUNT_MESSAGE, numeric=True, greater_than=Decimal("0"), max_value=MAX_AMOUNT),
        "status": FieldConstraints(message=STATUS_MESSAGE, choices=STATUS_CHOICES),
    }

    @classmethod
    def validate_business_rules(cls, data: Dict[str, Any]) -> List[FieldError]:
        return _amount_in_cents_errors(data["amount"])


class UpdateInvoiceSchema(BaseSchema):
    FIELDS = {
        "customerId": FieldConstraints(message=CUSTOMER_MESSAGE),
        "amount": FieldConstraints(message=AMOUNT_MESSAGE, numeric=True, greater_than=Decimal("0"), max_value=MAX_AMOUNT),
        "status": FieldConstraints(message=STATUS_MESSAGE, choices=STATUS_CHOICES),
    }

    @classmethod
    def validate_business_rules(cls, data: Dict[str, Any]) -> List[FieldError]:
        return _amount_in_cents_errors(data["amount"])


def get_validation_constraints() -> Dict[str, Any]:
    def describe(schema: type) -> Dict[str, Any]:
        fields = {}
        for name, constraints in schema.FIELDS.items():
            entry: Dict[str, Any] = {
                "required": constraints.required,
                "message": constraints.message,
            }
            if constraints.numeric:
                entry["type"] = "number"
            if constraints.greater_than is not None:
                entry["greater_than"] = str(constraints.greater_than)
            if constraints.max_value is not None:
                entry["max_value"] = str(constraints.max_value)
            if constraints.choices is not None:
                entry["choices"] = list(constraints.choices)
            fields[name] = entry
        return fields

    return {
        "invoice_create": describe(CreateInvoiceSchema),
        "invoice_update": describe(UpdateInvoiceSchema),
    }
