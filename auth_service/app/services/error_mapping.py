"""
Translate authentication errors into client-facing error values.

Every builder returns a ``ClientFacingError`` carrying the HTTP status and the
``ErrorPayload`` to send back; nothing here raises. The cause passed in only
ever reaches the logs.

Client errors (400, 406, 404) are routine and logged at debug level, and only
when debug logging is enabled. Internal errors (500) are always logged at
error level with the cause's traceback.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from ..core.constants import (
    STATUS_BAD_REQUEST_MESSAGE_DEFAULT,
    STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT,
    STATUS_NOT_ACCEPTABLE_MESSAGE_DEFAULT,
    STATUS_NOT_FOUND_MESSAGE_DEFAULT,
)
from ..exceptions import ErrorClassification
from ..schemas.error import ErrorPayload

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    BAD_REQUEST = (status.HTTP_400_BAD_REQUEST, STATUS_BAD_REQUEST_MESSAGE_DEFAULT)
    NOT_ACCEPTABLE = (status.HTTP_406_NOT_ACCEPTABLE, STATUS_NOT_ACCEPTABLE_MESSAGE_DEFAULT)
    NOT_FOUND = (status.HTTP_404_NOT_FOUND, STATUS_NOT_FOUND_MESSAGE_DEFAULT)
    INTERNAL_SERVER_ERROR = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT,
    )

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


@dataclass(frozen=True)
class ClientFacingError:
    """An error ready to be sent to the client."""

    category: ErrorCategory
    payload: ErrorPayload

    @property
    def status_code(self) -> int:
        return self.category.status_code

    def to_response(self, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code, content=self.payload.model_dump(), headers=headers
        )


def _build_payload(
    message: str, description: Any, code: Any, properties: Optional[Dict[str, str]]
) -> ErrorPayload:
    # no validation: inputs are carried into the payload exactly as given
    return ErrorPayload.model_construct(
        code=code, message=message, description=description, properties=properties
    )


def _log_debug(message: str, log: Optional[logging.Logger], cause: Optional[BaseException]) -> None:
    log = log or logger
    if log.isEnabledFor(logging.DEBUG):
        log.debug(message, exc_info=cause)


def _log_error(log: Optional[logging.Logger], cause: Optional[BaseException]) -> None:
    log = log or logger
    message = str(cause) if cause is not None else ""
    log.error(message or STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT, exc_info=cause)


def _build_client_category(
    category: ErrorCategory,
    description: Optional[str],
    code: Optional[str],
    properties: Optional[Dict[str, str]],
    log: Optional[logging.Logger],
    cause: Optional[BaseException],
) -> ClientFacingError:
    payload = _build_payload(category.message, description, code, properties)
    _log_debug(category.message, log, cause)
    return ClientFacingError(category=category, payload=payload)


def build_client_error(
    description: Optional[str],
    code: Optional[str],
    classification: Any,
    properties: Optional[Dict[str, str]] = None,
    log: Optional[logging.Logger] = None,
    cause: Optional[BaseException] = None,
) -> ClientFacingError:
    """Build the client error matching ``classification``.

    ``NOT_ACCEPTABLE`` and ``NOT_FOUND`` get their own category. Every other
    value, ``BAD_REQUEST`` included as well as ``None`` and values this
    service does not know about, is treated as a bad request.
    """
    if classification == ErrorClassification.NOT_ACCEPTABLE:
        return build_not_acceptable_error(description, code, properties, log, cause)
    if classification == ErrorClassification.NOT_FOUND:
        return build_not_found_error(description, code, properties, log, cause)
    # default arm: BAD_REQUEST and anything unrecognised
    return build_bad_request_error(description, code, properties, log, cause)


def build_bad_request_error(
    description: Optional[str],
    code: Optional[str],
    properties: Optional[Dict[str, str]] = None,
    log: Optional[logging.Logger] = None,
    cause: Optional[BaseException] = None,
) -> ClientFacingError:
    return _build_client_category(ErrorCategory.BAD_REQUEST, description, code, properties, log, cause)


def build_not_acceptable_error(
    description: Optional[str],
    code: Optional[str],
    properties: Optional[Dict[str, str]] = None,
    log: Optional[logging.Logger] = None,
    cause: Optional[BaseException] = None,
) -> ClientFacingError:
    return _build_client_category(
        ErrorCategory.NOT_ACCEPTABLE, description, code, properties, log, cause
    )


def build_not_found_error(
    description: Optional[str],
    code: Optional[str],
    properties: Optional[Dict[str, str]] = None,
    log: Optional[logging.Logger] = None,
    cause: Optional[BaseException] = None,
) -> ClientFacingError:
    return _build_client_category(ErrorCategory.NOT_FOUND, description, code, properties, log, cause)


def build_internal_server_error(
    code: Optional[str],
    log: Optional[logging.Logger] = None,
    cause: Optional[BaseException] = None,
) -> ClientFacingError:
    """Build a 500 error.

    The description is always the generic internal error summary and no
    properties are attached, so nothing about the cause leaks to the client.
    The cause is logged at error level regardless of the logger's level
    settings for debug output.
    """
    payload = _build_payload(
        STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT,
        STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT,
        code,
        None,
    )
    _log_error(log, cause)
    return ClientFacingError(category=ErrorCategory.INTERNAL_SERVER_ERROR, payload=payload)
