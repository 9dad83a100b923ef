"""
Standardized Error Handling

Provides consistent error formats:
API: { success: false, error: { code, message, fields? }, request_id }
UI: FormState with inline field errors and a summary message

HTTP Status Code Standards:
- 200: Success
- 201: Created
- 400: Bad Request (validation errors, malformed input)
- 404: Not Found
- 500: Internal Server Error
"""

from __future__ import annotations

import uuid
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_INVALID = "FIELD_INVALID"
    FIELD_OUT_OF_RANGE = "FIELD_OUT_OF_RANGE"

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class FieldError:
    field: str
    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
        }


@dataclass
class ErrorDetail:
    code: str
    message: str
    fields: Optional[List[FieldError]] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.fields:
            result["fields"] = [f.to_dict() for f in self.fields]
        return result


@dataclass
class ErrorResponse:
    success: bool = False
    error: Optional[ErrorDetail] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error.to_dict() if self.error else None,
            "request_id": self.request_id,
        }

    def to_json_response(self, status: int = 400) -> JsonResponse:
        return JsonResponse(self.to_dict(), status=status)


@dataclass
class FormState:
    """Result of a failed submission, handed back to the form for one render."""

    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: Optional[str] = None

    @classmethod
    def from_field_errors(cls, field_errors: List[FieldError], message: str) -> "FormState":
        errors: Dict[str, List[str]] = {}
        for error in field_errors:
            errors.setdefault(error.field, []).append(error.message)
        return cls(errors=errors, message=message)

    def field_errors(self) -> List[FieldError]:
        return [
            FieldError(field=name, code=ErrorCode.FIELD_INVALID.value, message=message)
            for name, messages in self.errors.items()
            for message in messages
        ]


class APIError(Exception):
    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        status: int = 400,
        fields: Optional[List[FieldError]] = None,
        request_id: Optional[str] = None,
    ):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.status = status
        self.fields = fields
        self.request_id = request_id or str(uuid.uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            success=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                fields=self.fields,
            ),
            request_id=self.request_id,
        )

    def to_json_response(self) -> JsonResponse:
        return self.to_response().to_json_response(self.status)


class FormStateError(APIError):
    """A FormState surfaced through the API as a 400."""

    def __init__(self, state: FormState, request_id: Optional[str] = None):
        self.state = state
        code = ErrorCode.VALIDATION_ERROR if state.errors else ErrorCode.PERSISTENCE_FAILED
        super().__init__(
            code=code,
            message=state.message or "Request failed",
            status=400,
            fields=state.field_errors() or None,
            request_id=request_id,
        )


class NotFoundError(APIError):
    def __init__(
        self,
        message: str = "Resource not found",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            status=404,
            request_id=request_id,
        )


def create_success_response(
    data: Any = None,
    message: Optional[str] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    response = {
        "success": True,
        "request_id": request_id or str(uuid.uuid4()),
    }
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response
