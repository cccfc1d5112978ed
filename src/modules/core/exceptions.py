"""DRF exception handler that wraps framework errors in the response envelope.

Views return validation failures themselves; this handler covers what DRF
raises before or around the view (malformed JSON, unsupported media type,
method not allowed, ...).  Exceptions DRF does not know about are left
untouched so Django reports them as server errors.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.responses import error_response, validation_error_response

logger = structlog.get_logger(__name__)

_FORWARDED_HEADERS = ("Allow", "WWW-Authenticate", "Retry-After")


def envelope_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is None:
        return None

    logger.warning(
        "api.request_rejected",
        error=exc.__class__.__name__,
        status_code=response.status_code,
    )

    if isinstance(exc, exceptions.ValidationError):
        detail = exc.detail
        if not isinstance(detail, dict):
            detail = {"non_field_errors": detail}
        wrapped = validation_error_response(detail)
    else:
        wrapped = error_response(
            str(getattr(exc, "detail", exc)),
            response.status_code or status.HTTP_400_BAD_REQUEST,
        )

    for header in _FORWARDED_HEADERS:
        if header in response:
            wrapped[header] = response[header]
    return wrapped
