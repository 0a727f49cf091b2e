"""Project-wide DRF exception handler.

Every error response uses one envelope::

    {"type": "validation_error" | "client_error" | "server_error",
     "errors": [{"code": ..., "detail": ..., "attr": ...}]}

``MappingError`` subclasses and Pydantic ``ValidationError`` (raised while a
request body is validated into a DTO) become 400 ``validation_error``
responses.  Other DRF ``APIException``s keep their status code.  Anything
else is left to Django (500).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from shared.domain.errors import MappingError

logger = structlog.get_logger(__name__)

VALIDATION_ERROR = "validation_error"
CLIENT_ERROR = "client_error"
SERVER_ERROR = "server_error"


def _error(code: str, detail: str, attr: Optional[str] = None) -> Dict[str, Any]:
    return {"code": code, "detail": detail, "attr": attr}


def _envelope(error_type: str, errors: List[Dict[str, Any]], status_code: int) -> Response:
    return Response({"type": error_type, "errors": errors}, status=status_code)


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Flatten a DRF ``ErrorDetail`` tree into envelope entries."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            nested = str(key) if attr is None else f"{attr}.{key}"
            errors.extend(_flatten(value, nested))
        return errors
    if isinstance(detail, list):
        errors = []
        for value in detail:
            errors.extend(_flatten(value, attr))
        return errors
    return [_error(getattr(detail, "code", "error"), str(detail), attr)]


def _from_mapping_error(exc: MappingError, context: Dict[str, Any]) -> Response:
    view = context.get("view")
    logger.warning(
        "mapping.rejected",
        code=exc.code,
        detail=exc.detail,
        cause=repr(exc.cause),
        view=type(view).__name__ if view is not None else None,
    )
    return _envelope(
        VALIDATION_ERROR, [_error(exc.code, exc.detail)], status.HTTP_400_BAD_REQUEST
    )


def _from_pydantic_error(exc: PydanticValidationError) -> Response:
    errors = [
        _error(
            err["type"],
            err["msg"],
            ".".join(str(part) for part in err["loc"]) or None,
        )
        for err in exc.errors()
    ]
    logger.warning("request.invalid_payload", errors=len(errors))
    return _envelope(VALIDATION_ERROR, errors, status.HTTP_400_BAD_REQUEST)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Entry point registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``."""
    if isinstance(exc, MappingError):
        return _from_mapping_error(exc, context)
    if isinstance(exc, PydanticValidationError):
        return _from_pydantic_error(exc)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        error_type = VALIDATION_ERROR
        errors = _flatten(exc.detail)
    else:
        error_type = CLIENT_ERROR if response.status_code < 500 else SERVER_ERROR
        detail = exc.detail if isinstance(exc, APIException) else response.data.get("detail")
        errors = _flatten(detail)

    response.data = {"type": error_type, "errors": errors}
    return response
