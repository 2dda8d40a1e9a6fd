# storefront/core/errors.py
from fastapi import Request, status
from fastapi.responses import JSONResponse


class StorefrontError(Exception):
    """
    Base class for domain errors raised by the service layer.

    Each subclass carries the HTTP status the API layer maps it to,
    so services stay free of FastAPI imports.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ProductNotFound(StorefrontError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Product not found"


class LineNotFound(StorefrontError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Item not in cart"


class InvalidQuantity(StorefrontError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Quantity must be at least 1"


class InsufficientStock(StorefrontError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Not enough stock available"


class Conflict(StorefrontError):
    """Cart was modified concurrently; the caller may retry the same request."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Cart was modified concurrently, please retry"


class UpstreamUnavailable(StorefrontError):
    """Store or catalog I/O failed; retryable with backoff."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Storage temporarily unavailable"


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Render a domain error as `{"detail": ...}` with its mapped status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
