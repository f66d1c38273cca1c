"""
Response encoder.

Maps each outcome type to its HTTP status code and canonical JSON body.
Bodies are compact JSON with ``errors`` ahead of ``data``; ``data`` is written
as explicit ``null`` on every failure and ``errors`` is left out when there
are none.
"""

from __future__ import annotations

import json
from typing import Any

from gqltransport.core.constants import (
    APPLICATION_JSON,
    CONTENT_TYPE_HEADER,
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_422_UNPROCESSABLE_ENTITY,
    JSON_BODY_DECODE_ERROR_PREFIX,
    TRANSPORT_NOT_SUPPORTED_MESSAGE,
)
from gqltransport.core.domain.outcomes import (
    DecodeFailed,
    ErrorItem,
    ExecutionFailed,
    Outcome,
    Success,
    SyntaxFailed,
    TransportRejected,
    ValidationFailed,
    VariableFailed,
)
from gqltransport.core.domain.responses import ResponseEnvelope

STATUS_BY_OUTCOME: dict[type, int] = {
    Success: HTTP_200_OK,
    TransportRejected: HTTP_400_BAD_REQUEST,
    DecodeFailed: HTTP_400_BAD_REQUEST,
    SyntaxFailed: HTTP_422_UNPROCESSABLE_ENTITY,
    ValidationFailed: HTTP_422_UNPROCESSABLE_ENTITY,
    VariableFailed: HTTP_422_UNPROCESSABLE_ENTITY,
    ExecutionFailed: HTTP_200_OK,
}

_NULL = b"null"


def dump_json(value: Any) -> bytes:
    """Serialize ``value`` to compact UTF-8 JSON.

    Lone surrogates cannot be written as UTF-8; they only occur inside
    strings and are written as their JSON ``\\uXXXX`` escape instead.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8", "backslashreplace"
    )


def _errors_for(outcome: Outcome) -> tuple[ErrorItem, ...]:
    if isinstance(outcome, Success):
        return outcome.errors
    if isinstance(outcome, TransportRejected):
        return (ErrorItem(message=TRANSPORT_NOT_SUPPORTED_MESSAGE),)
    if isinstance(outcome, DecodeFailed):
        return (ErrorItem(message=JSON_BODY_DECODE_ERROR_PREFIX + outcome.detail),)
    if isinstance(outcome, SyntaxFailed):
        return (ErrorItem(message=outcome.message, locations=outcome.locations),)
    if isinstance(outcome, VariableFailed):
        return (ErrorItem(message=outcome.message, path=outcome.path),)
    if isinstance(outcome, (ValidationFailed, ExecutionFailed)):
        return outcome.errors
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")


def encode_body(errors: tuple[ErrorItem, ...], data: bytes) -> bytes:
    """Serialize the response object from encoded parts.

    Args:
        errors: Entries for the ``errors`` array; omitted when empty
        data: Raw JSON for the ``data`` member

    Returns:
        The UTF-8 response body
    """
    if not errors:
        return b'{"data":' + data + b"}"
    return (
        b'{"errors":'
        + dump_json([error.to_dict() for error in errors])
        + b',"data":'
        + data
        + b"}"
    )


def encode_outcome(outcome: Outcome) -> ResponseEnvelope:
    """Map an outcome to its status code, headers and JSON body."""
    status_code = STATUS_BY_OUTCOME.get(type(outcome))
    if status_code is None:
        raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")

    data = outcome.data if isinstance(outcome, Success) else _NULL
    return ResponseEnvelope(
        content=encode_body(_errors_for(outcome), data),
        status_code=status_code,
        headers={CONTENT_TYPE_HEADER: APPLICATION_JSON},
    )
