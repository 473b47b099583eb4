"""
Custom Exception Handler for API

Maps the named service failures to HTTP status codes and wraps every error
in the same envelope.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

from apps.core.exceptions import (
    StorefrontException,
    NotFoundError,
    InvalidTransitionError,
    InsufficientStockError,
    StockLimitError,
)

logger = logging.getLogger(__name__)


FAILURE_STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    InsufficientStockError: status.HTTP_400_BAD_REQUEST,
    StockLimitError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(error: StorefrontException) -> int:
    for error_type, status_code in FAILURE_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(error: StorefrontException) -> Response:
    """
    Build the response for a failed service operation.
    """
    status_code = status_code_for(error)
    return Response(
        {
            "error": True,
            "message": error.message,
            "details": {"code": error.code},
            "status_code": status_code
        },
        status=status_code
    )


def validation_error_response(errors) -> Response:
    return Response(
        {"error": "Invalid request", "details": errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def custom_exception_handler(exc, context):
    """
    Custom exception handler that provides consistent error responses.
    """
    if isinstance(exc, StorefrontException):
        logger.warning(f"Service failure surfaced as exception: {exc}")
        return error_response(exc)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        # Customize the response format
        response.data = {
            "error": True,
            "message": str(exc),
            "details": response.data if isinstance(response.data, dict) else {"detail": response.data},
            "status_code": response.status_code
        }
    else:
        # Handle unexpected exceptions
        logger.exception(f"Unhandled exception: {exc}")
        response = Response(
            {
                "error": True,
                "message": "An unexpected error occurred",
                "details": {"exception": str(exc)},
                "status_code": 500
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return response
