"""Encoding reference implementation package.

This package provides the default base64 primitives used by the codec:
standard base64 encoding and decoding, and base64url padding restoration.
"""

from .base64 import Base64
from .padding import Base64UrlPadding

__all__ = [
    "Base64",
    "Base64UrlPadding",
]
