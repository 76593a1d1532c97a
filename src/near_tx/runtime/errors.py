"""
near-tx Error Model

This module provides the error handling framework for the near-tx package.
Every failure raised by the codec, the model builders and the signing
pipeline is a subclass of NearTxError and carries an ErrorCode.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """near-tx error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    VALUE_OUT_OF_RANGE = 101
    DECODING_ERROR = 110
    TRUNCATED_INPUT = 111
    TRAILING_BYTES = 112
    UNKNOWN_DISCRIMINANT = 113
    MALFORMED_INPUT = 114

    # Construction errors (200-299)
    INVALID_VARIANT = 200
    NESTED_DELEGATE = 201
    INVALID_KEY = 202
    INVALID_TRANSACTION = 203

    # Signing errors (300-399)
    SIGNER_ERROR = 300
    SIGNER_UNAVAILABLE = 301
    SIGNING_REJECTED = 302




class NearTxError(Exception):
    """
    Base class for all near-tx errors.

    Provides structured error information: a code, a message, optional
    details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a near-tx error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(NearTxError):
    """Binary encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ValueOutOfRange(EncodingError):
    """A value does not fit the declared wire width."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VALUE_OUT_OF_RANGE, details, cause)


class DecodeError(EncodingError):
    """Input bytes do not match the expected layout."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class TruncatedInput(DecodeError):
    """Input was exhausted before a field was fully read."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRUNCATED_INPUT, details, cause)


class TrailingBytes(DecodeError):
    """Bytes remain after a complete top-level entity was decoded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRAILING_BYTES, details, cause)


class UnknownDiscriminant(DecodeError):
    """A union tag byte is outside the declared variant range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_DISCRIMINANT, details, cause)


class MalformedInput(DecodeError):
    """Bytes are present but not a legal value (bad UTF-8, bad option flag)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_INPUT, details, cause)


class InvalidVariant(NearTxError):
    """A union was constructed with zero, several or unknown alternatives."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_VARIANT,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class NestedDelegate(InvalidVariant):
    """A delegate action was placed inside another delegate action."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NESTED_DELEGATE, details, cause)


class InvalidKey(NearTxError):
    """Malformed key string or key material."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_KEY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class TransactionError(NearTxError):
    """Invalid input to the transaction signing pipeline."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TRANSACTION,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class SignerError(NearTxError):
    """Base exception for signer capability failures."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.SIGNER_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class SignerUnavailable(SignerError):
    """The signer cannot serve the requested account or network."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNER_UNAVAILABLE, details, cause)


class SigningRejected(SignerError):
    """The signer refused to produce a signature."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNING_REJECTED, details, cause)


__all__ = [
    "ErrorCode",
    "NearTxError",
    "EncodingError",
    "ValueOutOfRange",
    "DecodeError",
    "TruncatedInput",
    "TrailingBytes",
    "UnknownDiscriminant",
    "MalformedInput",
    "InvalidVariant",
    "NestedDelegate",
    "InvalidKey",
    "TransactionError",
    "SignerError",
    "SignerUnavailable",
    "SigningRejected",
]
