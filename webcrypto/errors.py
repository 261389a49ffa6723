# webcrypto/errors.py
"""
Errors raised by the SubtleCrypto provider.

Each error carries an ErrorKind so callers can decide which failures are
tolerated without matching on class names.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    DATA = "DataError"
    NOT_SUPPORTED = "NotSupportedError"
    INVALID_ACCESS = "InvalidAccessError"
    OPERATION = "OperationError"
    SYNTAX = "SyntaxError"


class CryptoError(Exception):
    kind: ErrorKind = ErrorKind.OPERATION

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{self.kind.value}: {msg}" if msg else self.kind.value


class DataError(CryptoError):
    """Key material or input data is malformed."""
    kind = ErrorKind.DATA


class NotSupportedError(CryptoError):
    """Algorithm, hash or key format is not supported."""
    kind = ErrorKind.NOT_SUPPORTED


class InvalidAccessError(CryptoError):
    """The operation is not permitted for this key or these inputs."""
    kind = ErrorKind.INVALID_ACCESS


class OperationError(CryptoError):
    kind = ErrorKind.OPERATION


class UsageError(CryptoError):
    """Requested key usages are invalid for the key type."""
    kind = ErrorKind.SYNTAX
