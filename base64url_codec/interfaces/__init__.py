"""Base64url-codec interfaces package.

This package provides protocol definitions for the base64 primitives
the codec is built from.
"""

from .encoding import IBase64Decoder, IBase64Encoder, IPaddingRestorer

__all__ = [
    "IBase64Decoder",
    "IBase64Encoder",
    "IPaddingRestorer",
]
