"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)
        raise AppException("Missing required fields", "MISSING_REQUIRED_FIELDS", 400,
                           {"missing": ["name"]})

    Error Codes:
        Invalid input (400):
            - INVALID_INPUT
            - MISSING_REQUIRED_FIELDS
            - PRODUCT_ID_REQUIRED
            - INVALID_BODY

        Not found (404):
            - PRODUCT_NOT_FOUND
            - NOT_FOUND

        Method not allowed (405):
            - METHOD_NOT_ALLOWED
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "statusCode": self.status_code,
            "statusMessage": self.message,
            "code": self.code,
            "timestamp": self.timestamp,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-raised HTTP errors (unknown route, unknown verb) in the same envelope."""
    if exc.status_code == 405:
        app_exc = method_not_allowed(request.method)
    elif exc.status_code == 404:
        app_exc = AppException("Not Found", "NOT_FOUND", 404)
    else:
        app_exc = AppException(str(exc.detail), "HTTP_ERROR", exc.status_code)

    return JSONResponse(
        status_code=app_exc.status_code,
        content=app_exc.to_dict(),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as INVALID_INPUT (400)."""
    app_exc = invalid_input(
        "Invalid request",
        {"errors": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in exc.errors()
        ]}
    )
    return JSONResponse(
        status_code=app_exc.status_code,
        content=app_exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Call this in main.py after creating the FastAPI instance.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_input(message: str = "Invalid input", details: Optional[Dict[str, Any]] = None) -> AppException:
    """Create generic invalid input exception."""
    return AppException(message, "INVALID_INPUT", 400, details)


def missing_required_fields(missing: list) -> AppException:
    """Create missing required fields exception."""
    return AppException(
        "Missing required fields",
        "MISSING_REQUIRED_FIELDS",
        400,
        {"missing": missing}
    )


def product_id_required() -> AppException:
    """Create product id required exception."""
    return AppException("Product ID is required", "PRODUCT_ID_REQUIRED", 400)


def invalid_body(reason: str = "Request body must be a JSON object") -> AppException:
    """Create invalid request body exception."""
    return AppException(reason, "INVALID_BODY", 400)


def product_not_found(product_id: Optional[Any] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id is not None else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def method_not_allowed(method: Optional[str] = None) -> AppException:
    """Create method not allowed exception."""
    details = {"method": method} if method else {}
    return AppException("Method Not Allowed", "METHOD_NOT_ALLOWED", 405, details)
