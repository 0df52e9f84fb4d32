"""Exception classes for base64url-codec.

This module defines the error types raised when text cannot be decoded.
"""


class Base64UrlError(Exception):
    """Base exception class for all base64url-codec errors."""

    pass


class DecodeError(Base64UrlError, ValueError):
    """Exception raised when text cannot be decoded into bytes."""

    pass


class InvalidLengthError(DecodeError):
    """Exception raised when base64url text has a length of 1 modulo 4."""

    pass
