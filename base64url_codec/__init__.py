"""Base64url-codec Python implementation.

This package converts between standard base64 text, URL-safe base64
("base64url") text, and raw bytes.

Main Components:
    - base64_to_base64url / base64url_to_base64: Text alphabet conversion
    - base64url_to_bytes / bytes_to_base64url: Binary conversion
    - Base64UrlCodec: Codec with injectable base64 primitives
    - Interfaces: Protocol definitions for the base64 primitives

Example:
    >>> from base64url_codec import base64url_to_bytes, bytes_to_base64url
    >>> bytes_to_base64url(b"\\xfb\\xff")
    '-_8'
    >>> base64url_to_bytes("YQ")
    b'a'
"""

from base64url_codec.codec import (
    Base64UrlCodec,
    CodecConfig,
    base64_to_base64url,
    base64url_to_base64,
    base64url_to_bytes,
    bytes_to_base64url,
)
from base64url_codec.exceptions import (
    Base64UrlError,
    DecodeError,
    InvalidLengthError,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "base64_to_base64url",
    "base64url_to_base64",
    "base64url_to_bytes",
    "bytes_to_base64url",
    "Base64UrlCodec",
    "CodecConfig",
    # Exceptions
    "Base64UrlError",
    "DecodeError",
    "InvalidLengthError",
]
