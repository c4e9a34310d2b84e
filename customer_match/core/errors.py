"""Error taxonomy for the transformation pipeline.

Every failure aborts the whole batch: callers either receive the fully
transformed payload or one of these exceptions, never a partial result.

Safety rule: exception messages never embed record content.
"""
from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    HASHING_ERROR = "HASHING_ERROR"
    GENERAL_ERROR = "GENERAL_ERROR"


class CustomerMatchError(Exception):
    """Base class for all pipeline failures."""

    code: ErrorCode = ErrorCode.GENERAL_ERROR


class ValidationError(CustomerMatchError, ValueError):
    """Raised when the input is malformed JSON or not a JSON array."""

    code = ErrorCode.VALIDATION_ERROR


class HashingError(CustomerMatchError, RuntimeError):
    """Raised when the SHA-256 primitive is unavailable in this runtime."""

    code = ErrorCode.HASHING_ERROR
