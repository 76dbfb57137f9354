# -*- coding: utf-8 -*-
"""
Error types shared by every console operation.

Each operation converts whatever went wrong into an ``OperationError`` tagged
with one of three kinds:

* ``validation``    - rejected before any external call (missing field, no
  editing target, no file, no signed-in user)
* ``service_error`` - the external service itself reported a failure; its
  message is surfaced verbatim
* ``unexpected``    - anything else (network failure, malformed response)
"""

from enum import Enum
from typing import Any, Dict, Optional

from supabase import AuthError, PostgrestAPIError, StorageException


class ErrorKind(str, Enum):
    """Operation error classification"""
    VALIDATION = "validation"
    SERVICE_ERROR = "service_error"
    UNEXPECTED = "unexpected"


class OperationError(Exception):
    """Tagged error raised or returned by console operations"""

    def __init__(self, kind: ErrorKind, message: str, details: Optional[Dict[str, Any]] = None):
        self.kind = ErrorKind(kind)
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @classmethod
    def validation(cls, message: str, **details: Any) -> "OperationError":
        return cls(ErrorKind.VALIDATION, message, details)

    @classmethod
    def service(cls, message: str, **details: Any) -> "OperationError":
        return cls(ErrorKind.SERVICE_ERROR, message, details)

    @classmethod
    def unexpected(cls, message: str, **details: Any) -> "OperationError":
        return cls(ErrorKind.UNEXPECTED, message, details)

    def __repr__(self) -> str:
        return f"OperationError(kind={self.kind.value!r}, message={self.message!r})"


class ConfigurationError(Exception):
    """Raised when required settings are missing"""

    def __init__(self, message: str, missing: Optional[list] = None):
        self.message = message
        self.missing = missing or []
        super().__init__(self.message)


# Exceptions raised by the Supabase client when the service rejects a call
SERVICE_EXCEPTIONS = (AuthError, PostgrestAPIError, StorageException)


def error_message(exc: BaseException) -> str:
    """Extract the human readable message from a client exception."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    # storage3 may raise with the raw error payload as its only argument
    if exc.args and isinstance(exc.args[0], dict):
        payload = exc.args[0]
        for key in ("message", "error", "msg"):
            if payload.get(key):
                return str(payload[key])
    return str(exc) or exc.__class__.__name__


def to_operation_error(exc: BaseException) -> OperationError:
    """Classify any exception into an ``OperationError``."""
    if isinstance(exc, OperationError):
        return exc
    if isinstance(exc, SERVICE_EXCEPTIONS):
        error = OperationError.service(error_message(exc), exception=exc.__class__.__name__)
    else:
        error = OperationError.unexpected(error_message(exc), exception=exc.__class__.__name__)
    error.__cause__ = exc
    return error
