"""Line codec — one JSON-RPC envelope per line of text."""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel, ValidationError

from mcpaws.protocol.errors import ParseError, SerializationError
from mcpaws.protocol.models import JsonRpcRequest, JsonRpcResponse


def decode_request(line: str | bytes) -> JsonRpcRequest:
    """Parse one input line into a :class:`JsonRpcRequest`.

    Only strict JSON is accepted: ``NaN``/``Infinity`` tokens and numbers
    that overflow a float are rejected, since no response carrying them
    could be encoded.

    Raises:
        ParseError: If the line is not JSON, not an object, or has
            fields of the wrong type.
    """
    try:
        data: Any = json.loads(line, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


def encode_response(response: JsonRpcResponse) -> str:
    """Serialize a response to a single line (no trailing newline).

    Pydantic models nested anywhere in ``result`` are dumped by alias.

    Raises:
        SerializationError: If the result holds values JSON cannot encode
            (arbitrary objects, NaN, circular references).
    """
    try:
        return json.dumps(
            response.to_wire(),
            default=_encode_model,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(str(exc)) from exc


def _encode_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number {token} is out of range")
    return value
