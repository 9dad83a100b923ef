"""
Centralized Validation Module

Invoice form schemas plus the error types shared by pages and the API.
Server is authoritative; client mirrors constraints for UX.
"""

from .schemas import (
    CreateInvoiceSchema,
    UpdateInvoiceSchema,
    get_validation_constraints,
)
from .errors import (
    APIError,
    ErrorCode,
    ErrorResponse,
    FieldError,
    FormState,
)

__all__ = [
    "CreateInvoiceSchema",
    "UpdateInvoiceSchema",
    "get_validation_constraints",
    "APIError",
    "ErrorCode",
    "ErrorResponse",
    "FieldError",
    "FormState",
]
