"""Payloads and log lines for failures caught at the route boundary."""

from __future__ import annotations

import json
import traceback
from collections.abc import Mapping
from typing import Any

ERROR_NOT_DEFINED = "Error not defined"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def build_error_response(module_name: str, operation_name: str) -> dict:
    return {
        "module": module_name,
        "operation": operation_name,
        "message": INTERNAL_SERVER_ERROR,
    }


def _field(err: Any, name: str) -> Any:
    if isinstance(err, Mapping):
        return err.get(name)
    return getattr(err, name, None)


def build_error_log(err: Any) -> str:
    """Turn any error-like value into a single loggable string.

    Precedence: stack, then message, then the JSON form of the object.
    Exceptions use their formatted traceback as the stack and ``str(err)``
    as the message.
    """
    if err is None:
        return ERROR_NOT_DEFINED

    stack = _field(err, "stack")
    if not stack and isinstance(err, BaseException) and err.__traceback__ is not None:
        stack = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    if stack:
        return str(stack)

    message = _field(err, "message")
    if not message and isinstance(err, BaseException):
        message = str(err)
    if message:
        return str(message)

    if isinstance(err, (str, bytes, int, float, bool)):
        return str(err)

    if isinstance(err, BaseException):
        return repr(err)

    if not isinstance(err, (Mapping, list, tuple)) and hasattr(err, "__dict__"):
        err = vars(err)

    return json.dumps(err, separators=(",", ":"), default=str)
