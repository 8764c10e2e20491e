"""
Translation of service results and request errors into HTTP responses.

``unwrap`` returns the success value of a :class:`Result` or raises the
``HTTPException`` matching its error kind:

* ``ValidationFailedError`` -> 400 with the list of reasons
* ``NotFoundError`` and its subclasses -> 404 with the error message
* anything else -> 500 with a generic message
"""

import logging
from typing import Any, Dict, List, TypeVar

from fastapi import HTTPException, status

from ..core.errors import InternalError, NotFoundError, ServiceError, ValidationFailedError
from ..core.result import Result
from ..validators import BODY_NOT_JSON, BODY_NOT_OBJECT, BODY_REQUIRED, EMPTY_ID, id_errors

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = InternalError.default_message

VALUE_ERROR_PREFIX = "Value error, "
NOT_AN_OBJECT_TYPES = {"model_attributes_type", "model_type", "dict_type"}


def http_error_for(error: ServiceError) -> HTTPException:
    if isinstance(error, ValidationFailedError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.reasons)
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    logger.error("Unclassified service error: %r", error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )


def unwrap(result: Result[T, ServiceError]) -> T:
    if result.is_failure:
        raise http_error_for(result.error)
    return result.value


def ensure_id(value: str) -> str:
    """Reject blank path ids with HTTP 400."""
    if id_errors(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_ID)
    return value


def error_responses(*codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI ``responses`` entries for the given error status codes."""
    descriptions = {
        400: "Bad Request",
        401: "Missing or invalid API token",
        404: "Not found",
        500: "Internal Server Error",
    }
    return {code: {"description": descriptions[code]} for code in codes}


def reasons_from_request_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Turn pydantic/FastAPI request errors into readable reasons.

    Messages raised by the schema validators are passed through as is;
    other errors are prefixed with the dotted location of the field.
    """
    reasons = []
    for err in errors:
        kind = err.get("type", "")
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        message = err.get("msg", "Invalid value")
        if kind == "value_error":
            if message.startswith(VALUE_ERROR_PREFIX):
                message = message[len(VALUE_ERROR_PREFIX):]
            reasons.append(message)
        elif kind == "json_invalid":
            reasons.append(BODY_NOT_JSON)
        elif kind in NOT_AN_OBJECT_TYPES and not loc:
            reasons.append(BODY_NOT_OBJECT)
        elif kind == "missing":
            reasons.append(f"Key '{loc[-1]}' is required" if loc else BODY_REQUIRED)
        else:
            location = ".".join(loc)
            reasons.append(f"{location}: {message}" if location else message)
    return reasons


def validation_failure(errors: List[Dict[str, Any]]) -> HTTPException:
    """400 response for a request whose body failed schema validation."""
    return http_error_for(ValidationFailedError(reasons_from_request_errors(errors)))
