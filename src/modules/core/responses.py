"""Response envelope helpers.

Every API body carries a ``success`` flag.  Successful bodies carry ``data``
(and optionally ``message``); rejected payloads carry ``errors`` keyed by
field name, each holding a list of messages.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from rest_framework import status
from rest_framework.response import Response


def success_response(
    data: Any,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    body["data"] = data
    return Response(body, status=status_code)


def validation_error_response(errors: Mapping[str, List[str]]) -> Response:
    return Response(
        {"success": False, "errors": errors},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def error_response(message: str, status_code: int) -> Response:
    return Response({"success": False, "message": message}, status=status_code)
