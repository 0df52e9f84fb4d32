"""Standard base64 encoding utilities.

This module provides the standard-alphabet base64 primitives the codec
composes. Decoding is strict and reports failures as DecodeError.
"""

import base64
import binascii
import logging

from base64url_codec.exceptions import DecodeError
from base64url_codec.interfaces.encoding import IBase64Decoder, IBase64Encoder

logger = logging.getLogger(__name__)


class Base64(IBase64Encoder, IBase64Decoder):
    """Base64 encoding utilities for standard padded base64 operations.

    This class encodes bytes to standard base64 text (alphabet A-Z a-z 0-9 + /,
    padded with '=') and decodes such text back to bytes.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to a standard base64 string.

        Args:
            data: The bytes to encode. Any bytes-like object is accepted.

        Returns:
            A padded base64 encoded string.
        """
        return base64.b64encode(data).decode("ascii")

    @staticmethod
    def decode(base64_str: str) -> bytes:
        """Decode a standard base64 string to bytes.

        Characters outside the base64 alphabet are rejected rather than
        discarded.

        Args:
            base64_str: The padded base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: If the string is not ASCII, contains characters
                outside the alphabet, or is incorrectly padded.
        """
        try:
            raw = base64_str.encode("ascii")
        except UnicodeEncodeError as e:
            logger.debug("rejected non-ascii base64 text of length %d", len(base64_str))
            raise DecodeError("base64 text must contain only ASCII characters") from e

        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as e:
            logger.debug("rejected base64 text of length %d: %s", len(base64_str), e)
            raise DecodeError(f"invalid base64 text: {e}") from e
