"""
Error Handling Middleware

Turns uncaught exceptions on API requests into the standard JSON error body.
Page requests are left to Django's handler404/handler500 views.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse

from .errors import APIError, ErrorCode, ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not getattr(request, "request_id", None):
            request.request_id = str(uuid.uuid4())
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exc: Exception) -> Optional[HttpResponse]:
        request_id = getattr(request, "request_id", str(uuid.uuid4()))

        if not self._is_api_request(request):
            if not isinstance(exc, Http404):
                logger.exception(f"Unhandled exception [request_id={request_id}]: {exc}")
            return None

        if isinstance(exc, APIError):
            exc.request_id = request_id
            return exc.to_json_response()

        if isinstance(exc, Http404):
            return self._create_json_error(
                ErrorCode.RESOURCE_NOT_FOUND,
                str(exc) or "Resource not found",
                404,
                request_id,
            )

        logger.exception(f"Unhandled exception [request_id={request_id}]: {exc}")

        message = "An unexpected error occurred. Please try again later."
        if settings.DEBUG:
            message = f"{type(exc).__name__}: {str(exc)}"

        return self._create_json_error(ErrorCode.INTERNAL_ERROR, message, 500, request_id)

    def _is_api_request(self, request: HttpRequest) -> bool:
        if request.path.startswith("/api/"):
            return True

        accept = request.headers.get("Accept", "")
        if "application/json" in accept:
            return True

        return request.headers.get("X-Requested-With") == "XMLHttpRequest"

    def _create_json_error(
        self,
        code: ErrorCode,
        message: str,
        status: int,
        request_id: str,
    ) -> JsonResponse:
        return ErrorResponse(
            error=ErrorDetail(code=code.value, message=message),
            request_id=request_id,
        ).to_json_response(status)
