"""
Custom Exception Handler - renders API errors in the response builder format
Following SOLID principles and enterprise error handling standards

    REST_FRAMEWORK = {
        'EXCEPTION_HANDLER': 'crud_utils.exceptions.crud_exception_handler',
    }
"""

import logging
from typing import Any, Optional

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .error import Error, ErrorCodes
from .form import FormErrorAdapter
from .response import JsonResponseBuilder

logger = logging.getLogger(__name__)


def crud_exception_handler(exc: Exception, context: Any) -> Optional[Response]:
    """
    Delegate to DRF's handler, then reshape its body into {"errors": [...]}
    Unhandled exceptions (None from DRF) propagate as usual
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    request = context.get('request')
    path = getattr(request, 'path', '')
    builder = JsonResponseBuilder(request=request)

    if isinstance(exc, ValidationError):
        logger.warning(f"Validation error for {path}: {exc.detail}")
        builder.add_error_list(FormErrorAdapter(exc.detail, ErrorCodes.VALIDATION_ERROR))

    elif isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        logger.info(f"Authentication required for {path}")
        builder.add_error(create_error(response, ErrorCodes.AUTHENTICATION_REQUIRED))

    elif isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        user = getattr(request, 'user', None)
        logger.warning(f"Permission denied for user {getattr(user, 'pk', 'anonymous')} to {getattr(request, 'method', '')} {path}")
        builder.add_error(create_error(response, ErrorCodes.ACCESS_DENIED))

    elif isinstance(exc, (NotFound, Http404)):
        logger.info(f"Resource not found: {path}")
        builder.add_error(create_error(response, ErrorCodes.NOT_FOUND))

    else:
        code = ErrorCodes.INTERNAL_ERROR if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else ErrorCodes.BAD_REQUEST
        builder.add_error(create_error(response, code))

    rebuilt = builder.build(response.status_code)
    for header, value in response.items():
        rebuilt[header] = value
    return rebuilt


def create_error(response: Response, code: int) -> Error:
    """Single error from the detail DRF rendered for the exception"""
    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        detail = data['detail']
    else:
        detail = data
    return Error(message=str(detail), code=code)
