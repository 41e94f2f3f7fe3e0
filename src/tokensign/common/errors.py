"""Shared error types and codes."""

from __future__ import annotations


class ErrorCode:
    KEY_INITIALIZATION = "key_initialization"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    ENCODING = "encoding"


class TokenSignError(Exception):
    """Base error for signing and verification failures."""

    code: str = "tokensign_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class KeyInitializationError(TokenSignError):
    """The secret cannot key the MAC construction, or the key was closed."""

    code = ErrorCode.KEY_INITIALIZATION


class UnsupportedAlgorithmError(TokenSignError):
    """Digest type or algorithm name outside the supported set."""

    code = ErrorCode.UNSUPPORTED_ALGORITHM


class EncodingError(TokenSignError):
    """Malformed base64url input."""

    code = ErrorCode.ENCODING
