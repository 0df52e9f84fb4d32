"""Base64url codec.

This module converts between standard base64 text, URL-safe base64
("base64url") text, and raw bytes. Base64url output is always unpadded.

The module-level functions use a codec built from the reference primitives
in ``base64url_codec.encoding``. Construct a ``Base64UrlCodec`` with a custom
``CodecConfig`` to substitute other primitives.
"""

from __future__ import annotations

from dataclasses import dataclass

from base64url_codec.encoding import Base64, Base64UrlPadding
from base64url_codec.interfaces import (
    IBase64Decoder,
    IBase64Encoder,
    IPaddingRestorer,
)


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the codec's base64 primitives.

    Attributes:
        encoder: Interface for standard base64 encoding.
        decoder: Interface for standard base64 decoding.
        padder: Interface for base64url padding restoration.
    """

    encoder: IBase64Encoder
    decoder: IBase64Decoder
    padder: IPaddingRestorer

    @classmethod
    def default(cls) -> CodecConfig:
        """Create a configuration backed by the reference primitives.

        Returns:
            A CodecConfig using Base64 and Base64UrlPadding.
        """
        base64 = Base64()
        return cls(encoder=base64, decoder=base64, padder=Base64UrlPadding())


class Base64UrlCodec:
    """Converts between base64, base64url, and bytes.

    All operations are pure; a codec holds no state beyond its configuration
    and may be shared freely.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Primitive configuration. Defaults to CodecConfig.default().
        """
        self.config = config if config is not None else CodecConfig.default()

    def base64_to_base64url(self, base64: str) -> str:
        """Convert standard base64 text to unpadded base64url text.

        Any string is accepted; malformed input yields malformed output.

        Args:
            base64: The base64 text to convert.

        Returns:
            The base64url text, without padding.

        Example:
            >>> Base64UrlCodec().base64_to_base64url("+/8=")
            '-_8'
        """
        return base64.replace("=", "").replace("+", "-").replace("/", "_")

    def base64url_to_base64(self, base64url: str) -> str:
        """Convert base64url text to standard padded base64 text.

        Args:
            base64url: The base64url text, padded or not.

        Returns:
            The standard base64 text, padded to a length multiple of 4.

        Raises:
            InvalidLengthError: If the length modulo 4 is 1.

        Example:
            >>> Base64UrlCodec().base64url_to_base64("YQ")
            'YQ=='
        """
        padded = self.config.padder.add_padding(base64url)
        return padded.replace("-", "+").replace("_", "/")

    def base64url_to_bytes(self, base64url: str) -> bytes:
        """Decode base64url text into bytes.

        Args:
            base64url: The base64url text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: If the text is not valid base64url.
        """
        return self.config.decoder.decode(self.base64url_to_base64(base64url))

    def bytes_to_base64url(self, data: bytes) -> str:
        """Encode bytes as unpadded base64url text.

        Args:
            data: The bytes to encode.

        Returns:
            The base64url text, without padding.
        """
        return self.base64_to_base64url(self.config.encoder.encode(data))


_default_codec = Base64UrlCodec()


def base64_to_base64url(base64: str) -> str:
    """Convert standard base64 text to unpadded base64url text."""
    return _default_codec.base64_to_base64url(base64)


def base64url_to_base64(base64url: str) -> str:
    """Convert base64url text to standard padded base64 text."""
    return _default_codec.base64url_to_base64(base64url)


def base64url_to_bytes(base64url: str) -> bytes:
    """Decode base64url text into bytes."""
    return _default_codec.base64url_to_bytes(base64url)


def bytes_to_base64url(data: bytes) -> str:
    """Encode bytes as unpadded base64url text."""
    return _default_codec.bytes_to_base64url(data)
