from typing import Any, Optional
from rest_framework.response import Response

class APIResponse:
    """Standardized API response format."""

    @staticmethod
    def success(
        data: Any = None,
        message: str = "Success",
        status_code: int = 200,
        meta: Optional[dict] = None,
    ) -> Response:
        """Return a successful API response."""
        response_data = {
            "success": True,
            "message": message,
        }
        if data is not None:
            response_data["data"] = data
        if meta:
            response_data["meta"] = meta
        return Response(response_data, status=status_code)

    @staticmethod
    def paginated(
        data: Any,
        page: int,
        total_pages: int,
        page_size: int,
        message: str = "Success",
    ) -> Response:
        """Return paginated response with metadata."""
        return APIResponse.success(
            data=data,
            message=message,
            meta={
                "pagination": {
                    "page": page,
                    "page_size": page_size,
                    "total_pages": total_pages,
                    "has_next": page < total_pages,
                    "has_prev": page > 1,
                }
            },
        )
