"""
Shared exceptions and custom exception handler.
Consolidates all domain exceptions for the application.
"""
import logging
from enum import Enum

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Transport-independent failure kinds."""

    VALIDATION = 'validation'
    CONFLICT = 'conflict'
    NOT_FOUND = 'not_found'
    INTERNAL = 'internal'


KIND_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# === Base Exceptions ===

class AppException(Exception):
    """Base exception for application."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def extra(self) -> dict:
        """Additional fields for the error response body."""
        return {}


class NotFoundError(AppException):
    """Entity not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_name: str, entity_id, message: str = None, code: str = None):
        super().__init__(
            message=message or f"{entity_name} with id '{entity_id}' not found",
            code=code or "ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id

    def extra(self) -> dict:
        return {'entity': self.entity_name, 'entity_id': self.entity_id}


class ValidationError(AppException):
    """Validation failed."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str = None, code: str = None):
        super().__init__(message=message, code=code or "VALIDATION_ERROR")
        self.field = field

    def extra(self) -> dict:
        return {'field': self.field}


class ConflictError(AppException):
    """Business rule violated by the requested change."""

    kind = ErrorKind.CONFLICT

    def __init__(self, message: str, rule: str = None, code: str = None):
        super().__init__(message=message, code=code or "BUSINESS_RULE_VIOLATION")
        self.rule = rule

    def extra(self) -> dict:
        return {'rule': self.rule}


class DataIntegrityError(AppException):
    """Stored data violates an invariant; the operation cannot continue."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "DATA_INTEGRITY_ERROR")


# === Exception Handler ===

def custom_exception_handler(exc, context):
    """Handle custom application exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    # Handle DRF ValidationError (from serializer.is_valid(raise_exception=True))
    from rest_framework.exceptions import ValidationError as DRFValidationError
    if isinstance(exc, DRFValidationError) and response is not None:
        if isinstance(response.data, dict) and 'detail' not in response.data:
            first_error = list(response.data.values())[0] if response.data else []
            error_message = (
                first_error[0]
                if isinstance(first_error, list) and first_error
                else "Invalid request body"
            )
            return Response(
                {
                    'status': response.status_code,
                    'message': str(error_message),
                    'errors': response.data,
                },
                status=response.status_code,
            )
        if isinstance(response.data, list) and response.data:
            return Response(
                {
                    'status': response.status_code,
                    'message': str(response.data[0]),
                    'errors': response.data,
                },
                status=response.status_code,
            )

    # Convert DRF's default error format to our format if response exists
    if response is not None and isinstance(response.data, dict) and 'detail' in response.data:
        return Response(
            {
                'status': response.status_code,
                'message': response.data['detail'],
            },
            status=response.status_code,
        )

    if isinstance(exc, AppException):
        status_code = KIND_STATUS[exc.kind]
        if exc.kind == ErrorKind.INTERNAL:
            logger.error(f"{exc.code}: {exc.message}")
        body = {
            'error': exc.message,
            'code': exc.code,
            'kind': exc.kind.value,
        }
        body.update(exc.extra())
        return Response(body, status=status_code)

    return response
