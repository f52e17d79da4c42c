"""
Shared response helpers for the load and sync endpoints
"""
from typing import Any, Dict

from fastapi.responses import JSONResponse, Response

from habitsync.core.exceptions import HabitSyncException

# Methods answered with 405 on the adapter endpoints
UNSUPPORTED_METHODS = ["PUT", "PATCH", "DELETE", "HEAD"]


def json_response(body: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code)


def error_response(error: HabitSyncException) -> JSONResponse:
    """Turn an application error into its structured JSON response"""
    return JSONResponse(content=error.to_dict(), status_code=error.status_code)


def unexpected_error_response(label: str, error: Exception) -> JSONResponse:
    return JSONResponse(content={"error": label, "message": str(error)}, status_code=500)


def preflight_response() -> Response:
    return Response(status_code=200)


def method_not_allowed_response() -> JSONResponse:
    return JSONResponse(content={"error": "Method not allowed"}, status_code=405)
