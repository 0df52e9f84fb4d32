"""Base64 primitive interfaces for base64url-codec.

This module defines protocols for the building blocks the codec composes:
standard base64 encoding, standard base64 decoding, and base64url padding
restoration.
"""

from __future__ import annotations

from typing import Protocol


class IBase64Encoder(Protocol):
    """Interface for standard base64 encoding."""

    def encode(self, data: bytes) -> str:
        """Encode bytes as standard padded base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The base64 text, padded with '=' to a length multiple of 4.
        """
        ...


class IBase64Decoder(Protocol):
    """Interface for standard base64 decoding."""

    def decode(self, base64: str) -> bytes:
        """Decode standard padded base64 text into bytes.

        Args:
            base64: The base64 text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the text is not valid base64.
        """
        ...


class IPaddingRestorer(Protocol):
    """Interface for base64url padding restoration."""

    def add_padding(self, base64url: str) -> str:
        """Pad base64url text with '=' up to a length multiple of 4.

        Args:
            base64url: Unpadded or already padded base64url text.

        Returns:
            The padded text. Text whose length is already a multiple of 4
            is returned unchanged.

        Raises:
            InvalidLengthError: When the length modulo 4 is 1.
        """
        ...
